"""
Error types for hREA Docs

Every error aborts the whole run; the CLI reports the message and exits 1.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class DocgenError(Exception):
    """Base class for all generator errors."""


class ConfigError(DocgenError):
    """Config file is unreadable or has the wrong shape."""


class SchemaBuildError(DocgenError):
    """SDL sources could not be turned into a schema."""


class SchemaLookupError(DocgenError):
    """A type the module table names is missing from the schema."""


class SourceParseError(DocgenError):
    """A resolver source file does not parse."""

    def __init__(self, path: Path, line: int):
        self.path = path
        self.line = line
        super().__init__(f"{path}: syntax error near line {line}")


class ShapeFailure(Enum):
    """Ways a default-exported resolver map can deviate from the expected shape."""
    MULTIPLE_DEFAULT_EXPORTS = "file has more than one default export"
    EXPORT_NOT_FUNCTION = "default export should be an arrow function or function expression"
    EXPORT_BODY_NOT_BLOCK = "default export should have a block body"
    MISSING_RETURN = "last statement of the default export should be a return statement"
    RETURN_NOT_OBJECT = "default export should return an object literal"
    UNSUPPORTED_PROPERTY = "resolver map property has no static name"
    MISSING_INITIALIZER = "resolver variable is declared without a value"
    IMPLEMENTATION_NOT_FUNCTION = "resolver should be a function or a call expression"
    EMPTY_IMPLEMENTATION_BODY = "resolver function body is empty"


class ResolverShapeError(DocgenError):
    """A default export exists but does not look like a resolver map."""

    def __init__(
        self,
        reason: ShapeFailure,
        path: Optional[Path] = None,
        line: int = 0,
        resolver: Optional[str] = None,
    ):
        self.reason = reason
        self.path = path
        self.line = line
        self.resolver = resolver
        super().__init__(str(reason.value))

    def __str__(self) -> str:
        where = f"{self.path}:{self.line}" if self.path else f"line {self.line}"
        if self.resolver:
            return f"{where}: {self.reason.value} ('{self.resolver}')"
        return f"{where}: {self.reason.value}"
