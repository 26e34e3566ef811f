"""Core module - constants, config, errors, utilities."""

from .constants import VERSION, COLORS, TOOL_NAME, CLASSES_PER_MODULE, EXCLUDED_MODULES
from .config import Config
from .errors import (
    DocgenError,
    ConfigError,
    SchemaBuildError,
    SchemaLookupError,
    SourceParseError,
    ResolverShapeError,
    ShapeFailure,
)
from .casing import param_case, capital_case, pascal_case
from .file_utils import create_file, iter_source_files
