"""
Module Aggregator — group per-file scan results into per-module docs.
"""

from __future__ import annotations

from typing import List

from ..types import ModuleDoc, ModuleTable, ScanResult


def aggregate_module(
    module_name: str,
    class_names: List[str],
    queries: ScanResult,
    mutations: ScanResult,
) -> ModuleDoc:
    """
    Concatenate the records of each listed file, in table order.

    Names missing from a scan result contribute nothing.
    """
    module_doc = ModuleDoc(module_name=module_name)
    for class_name in class_names:
        module_doc.queries.extend(queries.get(class_name, []))
        module_doc.mutations.extend(mutations.get(class_name, []))
    return module_doc


def aggregate_modules(
    module_table: ModuleTable,
    queries: ScanResult,
    mutations: ScanResult,
) -> List[ModuleDoc]:
    """One ModuleDoc per module, in table order."""
    return [
        aggregate_module(module_name, class_names, queries, mutations)
        for module_name, class_names in module_table.items()
    ]
