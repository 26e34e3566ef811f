"""
Export Scanner — find out which resolvers of a vf-graphql-holochain folder are implemented.

Each resolver file default-exports a function returning a map of resolver
name -> resolver. A resolver counts as implemented when it is produced by a
call (e.g. `injectTypename(...)`) or when the first statement of its body
is anything but a `throw`.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from tree_sitter import Node

from ..core.constants import COLORS, INDEX_FILE_NAME, SOURCE_SUFFIX
from ..core.errors import ResolverShapeError, ShapeFailure
from ..core.file_utils import iter_source_files
from ..schema import ReferenceSchema
from ..types import ImplementationStatus, ResolverKind, ResolverRecord, ScanResult
from .syntax import (
    FUNCTION_TYPES,
    ResolverEntry,
    find_declarator,
    find_default_export,
    line_of,
    match_entry,
    match_resolver_map,
    parse_source,
    statements,
)


def classify_implementation(implementation: Optional[Node]) -> ImplementationStatus:
    """
    Classify a resolver implementation node.

    Raises:
        ResolverShapeError: If the node is neither a call nor a function
    """
    if implementation is None:
        return ImplementationStatus.UNIMPLEMENTED

    # catches ones such as `injectTypename(...)`
    if implementation.type == "call_expression":
        return ImplementationStatus.IMPLEMENTED

    if implementation.type not in FUNCTION_TYPES and implementation.type != "method_definition":
        raise ResolverShapeError(ShapeFailure.IMPLEMENTATION_NOT_FUNCTION, line=line_of(implementation))

    body = implementation.child_by_field_name("body")
    if body.type != "statement_block":
        # concise arrow body, e.g. `() => readAll()`
        return ImplementationStatus.IMPLEMENTED

    body_statements = statements(body)
    if not body_statements:
        raise ResolverShapeError(ShapeFailure.EMPTY_IMPLEMENTATION_BODY, line=line_of(body))

    if body_statements[0].type == "throw_statement":
        return ImplementationStatus.UNIMPLEMENTED
    return ImplementationStatus.IMPLEMENTED


def resolve_implementation(
    entry: ResolverEntry,
    function_body: List[Node],
    module_body: List[Node],
) -> Optional[Node]:
    """
    Find the node that implements a resolver map entry.

    Inline values are used as they are. References are looked up among the
    exported function's variables first, then the file's top-level ones.

    Raises:
        ResolverShapeError: If the matching variable has no initializer
    """
    if entry.value is not None:
        return entry.value

    declarator = find_declarator(function_body, entry.reference)
    if declarator is None:
        declarator = find_declarator(module_body, entry.reference)
    if declarator is None:
        return None

    initializer = declarator.child_by_field_name("value")
    if initializer is None:
        raise ResolverShapeError(ShapeFailure.MISSING_INITIALIZER, line=line_of(declarator))
    return initializer


def scan_file(
    file_path: Path,
    kind: ResolverKind,
    schema: ReferenceSchema,
) -> Optional[List[ResolverRecord]]:
    """
    Scan a single resolver file.

    Returns:
        Records in declaration order, or None if the file has no default export

    Raises:
        SourceParseError: If the file does not parse
        ResolverShapeError: If the default export is not a resolver map
    """
    program = parse_source(file_path.read_text(encoding="utf-8"), file_path)

    try:
        export = find_default_export(program)
        if export is None:
            return None

        resolver_map = match_resolver_map(export)
        module_body = statements(program)

        records = []
        for prop in resolver_map.properties:
            entry = match_entry(prop)
            try:
                implementation = resolve_implementation(entry, resolver_map.body, module_body)
                status = classify_implementation(implementation)
            except ResolverShapeError as e:
                e.resolver = entry.name
                raise

            records.append(ResolverRecord(
                name=entry.name,
                description=schema.root_field_description(kind, entry.name),
                implementation_status=status,
            ))
    except ResolverShapeError as e:
        e.path = file_path
        raise

    return records


def scan_resolvers(
    directory: Path,
    kind: ResolverKind,
    schema: ReferenceSchema,
    index_file: str = INDEX_FILE_NAME,
    suffix: str = SOURCE_SUFFIX,
    verbose: bool = False,
) -> ScanResult:
    """
    Scan every resolver file in a folder.

    Args:
        directory: vf-graphql-holochain queries/ or mutations/ folder
        kind: Which of the two the folder holds
        schema: Schema to pull field descriptions from
        index_file: File name to skip
        suffix: Source file extension
        verbose: Print one line per file

    Returns:
        File base name -> records. Files without a default export are left out.
    """
    result: ScanResult = {}

    for file_path in iter_source_files(directory, suffix, index_file):
        records = scan_file(file_path, kind, schema)

        if records is None:
            if verbose:
                print(f"   {COLORS.dim(f'{file_path.name}: no default export, skipped')}")
            continue

        if verbose:
            implemented = sum(1 for r in records if r.implemented)
            print(f"   {file_path.name}: {implemented}/{len(records)} implemented")

        result[file_path.name[: -len(suffix)]] = records

    return result
