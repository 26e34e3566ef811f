"""Mapper module - per-module aggregation and markdown pages."""

from .aggregator import aggregate_module, aggregate_modules
from .doc_renderer import doc_file_name, render_module_doc, write_module_docs
