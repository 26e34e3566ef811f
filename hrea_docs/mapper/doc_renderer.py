"""
Document Renderer — write one markdown reference page per module.

Page layout:

    # Process Specification

    ## Classes

    ### `ProcessSpecification`

    <type description>

    ## Queries

    ### `processSpecification`
    <field description>
    > Status: Implemented

    ## Mutations
    ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..core.casing import capital_case, param_case, pascal_case
from ..core.constants import EXCLUDED_MODULES
from ..core.file_utils import create_file
from ..schema import ReferenceSchema
from ..types import ModuleDoc, ModuleTable, ResolverRecord


def doc_file_name(module_name: str) -> str:
    """process_specification -> process-specification.md"""
    return param_case(module_name) + ".md"


def _resolver_section(title: str, records: List[ResolverRecord]) -> str:
    text = f"## {title}\n\n"
    for record in records:
        text += f"### `{record.name}`\n"
        text += f"{record.description}\n"
        text += f"> Status: {record.implementation_status.value}\n\n"
    return text


def render_module_doc(
    module_doc: ModuleDoc,
    class_names: List[str],
    schema: ReferenceSchema,
) -> str:
    """
    Render the markdown page for one module.

    Raises:
        SchemaLookupError: If a class has no type in the schema
    """
    text = f"# {capital_case(module_doc.module_name)}\n\n"

    # key classes
    text += "## Classes\n\n"
    for class_name in class_names:
        type_name = pascal_case(class_name)
        text += f"### `{type_name}`\n\n"
        text += f"{schema.type_description(type_name)}\n\n"

    text += _resolver_section("Queries", module_doc.queries)
    text += _resolver_section("Mutations", module_doc.mutations)
    return text


def write_module_docs(
    module_docs: Iterable[ModuleDoc],
    module_table: ModuleTable,
    schema: ReferenceSchema,
    output_dir: Path,
    excluded_modules: Iterable[str] = EXCLUDED_MODULES,
    dry_run: bool = False,
    quiet: bool = False,
) -> List[Path]:
    """
    Render and write every module page, overwriting existing files.

    Args:
        module_docs: Aggregated modules
        module_table: Module -> class names, for the "Classes" section
        schema: Schema to pull type descriptions from
        output_dir: Reference docs folder, created if missing
        excluded_modules: Modules that get no page
        dry_run: Render but don't write
        quiet: Don't print a line per file

    Returns:
        Paths of the pages, in module order
    """
    excluded = set(excluded_modules)
    written = []

    for module_doc in module_docs:
        if module_doc.module_name in excluded:
            continue

        content = render_module_doc(module_doc, module_table.get(module_doc.module_name, []), schema)
        path = output_dir / doc_file_name(module_doc.module_name)

        if not dry_run:
            create_file(path, content, quiet=quiet)
        written.append(path)

    return written
