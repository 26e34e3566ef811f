#!/usr/bin/env python3
"""
hREA Docs — CLI

Generate the GraphQL API reference pages for hREA from vf-graphql-holochain.
"""

from __future__ import annotations

import sys
import argparse
from pathlib import Path

from .core.config import Config
from .core.constants import VERSION, COLORS, TOOL_NAME, CONFIG_FILE_NAME
from .core.errors import DocgenError


def load_config(args: argparse.Namespace) -> Config:
    """Load config from --config or the default file."""
    return Config.load(Path(args.config) if args.config else None)


def cmd_generate(args: argparse.Namespace) -> int:
    """
    Generate command — write one reference page per module.

    Options:
        --output     Override the reference docs folder
        --dry-run    Render pages without writing them
    """
    from .commands.generate import run_generate

    config = load_config(args)
    return run_generate(
        config,
        output_path=Path(args.output).resolve() if args.output else None,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )


def cmd_status(args: argparse.Namespace) -> int:
    """Show resolver implementation status."""
    from .commands.status import run_status

    return run_status(load_config(args))


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--config",
        default=None,
        help=f"Config file (default: ./{CONFIG_FILE_NAME})",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="hrea-docs",
        description=f"{TOOL_NAME} v{VERSION} — GraphQL API reference generator for hREA",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"{TOOL_NAME} v{VERSION}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ═══════════════════════════════════════════════════════════
    # GENERATE - Main command
    # ═══════════════════════════════════════════════════════════
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write reference pages",
        description="Generate one markdown reference page per ValueFlows module",
    )
    _add_config_argument(generate_parser)
    generate_parser.add_argument(
        "-o", "--output",
        default=None,
        help="Reference docs folder (overrides config)",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render pages without writing them",
    )
    generate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # ═══════════════════════════════════════════════════════════
    # STATUS - Implementation coverage
    # ═══════════════════════════════════════════════════════════
    status_parser = subparsers.add_parser(
        "status",
        help="Show resolver implementation status",
        description="Show implemented/total resolvers per module",
    )
    _add_config_argument(status_parser)
    status_parser.set_defaults(func=cmd_status)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(f"{TOOL_NAME} v{VERSION}")
        print(f"\nUsage: hrea-docs <command> [options]")
        print(f"\nCommands:")
        print(f"  {COLORS.CYAN}generate{COLORS.END}  Write reference pages")
        print(f"  {COLORS.CYAN}status{COLORS.END}    Show resolver implementation status")
        print(f"\nExamples:")
        print(f"  hrea-docs generate")
        print(f"  hrea-docs generate --config docs.yaml --dry-run")
        print(f"\nRun 'hrea-docs <command> --help' for more info.")
        return 0

    # Run command
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print(f"\n{COLORS.warning('Cancelled by user')}")
        return 130
    except (DocgenError, OSError) as e:
        print(COLORS.error(f"Error: {e}"))
        return 1


if __name__ == "__main__":
    sys.exit(main())
