"""Schema module - GraphQL schema loading and description lookup."""

from .builder import ReferenceSchema, build_schema, collect_schema_files
