"""
Schema Builder — load the vf-graphql SDL sources into a graphql-core schema.

The schema is only read for descriptions: type descriptions for the
"Classes" section of each page and root field descriptions for queries
and mutations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLObjectType,
    GraphQLSchema,
    Source,
    build_ast_schema,
    parse,
)

from ..core.constants import SCHEMA_SUFFIXES
from ..core.errors import SchemaBuildError, SchemaLookupError
from ..types import ResolverKind


class ReferenceSchema:
    """Read-only view over a built schema."""

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    def type_description(self, type_name: str) -> str:
        """
        Description of a named type.

        Raises:
            SchemaLookupError: If the schema has no such type
        """
        named_type = self.schema.get_type(type_name)
        if named_type is None:
            raise SchemaLookupError(f"Type not found in schema: {type_name}")
        return named_type.description or ""

    def root_field_description(self, kind: ResolverKind, field_name: str) -> str:
        """Description of a Query or Mutation field, empty if missing."""
        root = self.schema.get_type(kind.root_type)
        if not isinstance(root, GraphQLObjectType):
            return ""
        field = root.fields.get(field_name)
        if field is None:
            return ""
        return field.description or ""


def collect_schema_files(paths: Iterable[Path]) -> List[Path]:
    """
    Expand schema paths into SDL files.

    Directories contribute their *.graphql / *.gql files in name order.

    Raises:
        SchemaBuildError: If a path does not exist
    """
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(
                p for p in sorted(path.iterdir())
                if p.is_file() and p.suffix in SCHEMA_SUFFIXES
            )
        elif path.is_file():
            files.append(path)
        else:
            raise SchemaBuildError(f"Schema source not found: {path}")
    return files


def build_schema(
    schema_paths: Iterable[Path],
    extension_paths: Iterable[Path] = (),
) -> ReferenceSchema:
    """
    Build the reference schema from base SDL sources and extensions.

    Base files come first so extensions can `extend type` anything they define.

    Raises:
        SchemaBuildError: If a source is missing or the SDL is invalid
    """
    files = collect_schema_files(schema_paths) + collect_schema_files(extension_paths)
    if not files:
        raise SchemaBuildError("No schema sources given")

    definitions = []
    for path in files:
        try:
            document = parse(Source(path.read_text(encoding="utf-8"), str(path)))
        except GraphQLError as e:
            raise SchemaBuildError(f"{path}: {e.message}") from e
        definitions.extend(document.definitions)

    try:
        schema = build_ast_schema(DocumentNode(definitions=tuple(definitions)))
    except (GraphQLError, TypeError) as e:
        raise SchemaBuildError(f"Invalid schema: {e}") from e

    return ReferenceSchema(schema)
