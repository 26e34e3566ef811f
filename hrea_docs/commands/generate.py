"""
hREA Docs — Generate Command

Scan resolvers, build the schema and write the reference pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..core.config import Config
from ..core.constants import COLORS
from ..mapper.aggregator import aggregate_modules
from ..mapper.doc_renderer import write_module_docs
from ..scanner.export_scanner import scan_resolvers
from ..schema import ReferenceSchema, build_schema
from ..types import ModuleDoc, ResolverKind, ScanResult


@dataclass
class ScanReport:
    """Everything one scan of vf-graphql-holochain produces."""
    schema: ReferenceSchema
    queries: ScanResult
    mutations: ScanResult
    modules: List[ModuleDoc]


def collect(config: Config, verbose: bool = False) -> ScanReport:
    """Build the schema, scan both resolver folders and aggregate per module."""
    schema = build_schema(config.schema_paths, config.extension_paths)

    scans = {}
    for kind, directory in (
        (ResolverKind.MUTATIONS, config.mutations_path),
        (ResolverKind.QUERIES, config.queries_path),
    ):
        if verbose:
            print(COLORS.info(f"Scanning {directory}"))
        scans[kind] = scan_resolvers(
            directory,
            kind,
            schema,
            index_file=config.index_file,
            suffix=config.source_suffix,
            verbose=verbose,
        )

    queries = scans[ResolverKind.QUERIES]
    mutations = scans[ResolverKind.MUTATIONS]
    return ScanReport(
        schema=schema,
        queries=queries,
        mutations=mutations,
        modules=aggregate_modules(config.modules, queries, mutations),
    )


def run_generate(
    config: Config,
    output_path: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> int:
    """Generate all reference pages."""
    output_dir = output_path or config.output_path

    report = collect(config, verbose=verbose)

    print(f"\n{COLORS.colorize('Reference docs...', COLORS.CYAN)}")
    written = write_module_docs(
        report.modules,
        config.modules,
        report.schema,
        output_dir,
        excluded_modules=config.excluded_modules,
        dry_run=dry_run,
    )

    if dry_run:
        for path in written:
            print(f"  {COLORS.dim(f'would write {path}')}")
        print(COLORS.warning(f"Dry run: {len(written)} page(s) not written"))
    else:
        print(COLORS.success(f"Wrote {len(written)} page(s) to {output_dir}"))

    return 0
