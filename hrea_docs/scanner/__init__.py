"""Scanner module - resolver source parsing and implementation status."""

from .export_scanner import classify_implementation, scan_file, scan_resolvers
from .syntax import find_default_export, match_resolver_map, parse_source
