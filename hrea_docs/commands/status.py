"""
hREA Docs — Status Command

Show implementation coverage per module without writing anything.
"""

from __future__ import annotations

from ..core.config import Config
from ..core.constants import COLORS
from .generate import collect


def run_status(config: Config) -> int:
    """Show implemented/total resolvers per module."""
    report = collect(config)
    excluded = set(config.excluded_modules)

    print(f"\n📊 {COLORS.BOLD}Resolver Status{COLORS.END}")
    print(f"   Path: {config.resolvers_path}")
    print()

    total = implemented = 0
    for module_doc in report.modules:
        if module_doc.module_name in excluded:
            continue

        records = module_doc.queries + module_doc.mutations
        done = [r for r in records if r.implemented]
        total += len(records)
        implemented += len(done)

        color = COLORS.GREEN if len(done) == len(records) else COLORS.YELLOW
        print(f"   {color}{module_doc.module_name:<24}{COLORS.END} {len(done)}/{len(records)}")
        for record in records:
            if not record.implemented:
                print(f"      {COLORS.dim(f'- {record.name}')}")

    print(f"\n   Total: {implemented}/{total} implemented")
    return 0
