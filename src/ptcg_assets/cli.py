"""Command-line interface for ptcg-assets."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ptcg_assets.catalog import load_catalog
from ptcg_assets.clients.sets_client import DEFAULT_SETS_BASE_URL
from ptcg_assets.pipeline.orchestrator import Orchestrator

DEFAULT_ROOT = Path(".")
DEFAULT_CATALOG_DIR = Path("./data")
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "ptcg-assets/1.0"

COMMANDS = {
    "card-sources": (
        "Download card source images",
        "Resolve every card in the catalog to its canonical source image, write "
        "sources/card/manifest.json and download any source not yet present.",
    ),
    "expansion-sources": (
        "Download expansion symbol and logo images",
        "Look up symbol and logo artwork for every expansion in the sets API and "
        "download any source not yet present.",
    ),
    "card-process": (
        "Generate card assets in every size",
        "Resize and compress card sources into assets/card/{size}/{expansion}.",
    ),
    "expansion-process": (
        "Generate expansion logo, symbol and pack assets",
        "Resize and compress expansion sources and external pack images into "
        "assets/expansion.",
    ),
    "sources": (
        "Download all source images",
        "Run card-sources and expansion-sources concurrently.",
    ),
    "process": (
        "Generate all assets from existing sources",
        "Run card-process and expansion-process concurrently.",
    ),
    "assets": (
        "Download sources and generate all assets",
        "Run card-sources then card-process, concurrently with expansion-sources "
        "then expansion-process.",
    ),
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def run_step(args: argparse.Namespace) -> int:
    """Execute a pipeline step command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    root = args.root.resolve()
    if not root.exists():
        logger.error(f"Project root not found: {root}")
        return 1

    client_config = {
        "base_url": args.sets_url,
        "timeout": args.timeout,
        "headers": {"User-Agent": USER_AGENT},
    }

    try:
        catalog = load_catalog(args.catalog)
        orchestrator = Orchestrator(
            root,
            catalog,
            client_config=client_config,
            download_timeout=args.timeout,
        )
        asyncio.run(orchestrator.run(args.command))

        logger.info(f"Completed {args.command}")
        return 0

    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="ptcg-assets",
        description="Download card and expansion artwork and build the static asset tree",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT,
        help="Project root holding sources/, external/ and assets/ (default: current directory)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=DEFAULT_CATALOG_DIR,
        help=f"Directory with expansions.json, items.json and ptcgo-set-map.json (default: {DEFAULT_CATALOG_DIR})",
    )
    parser.add_argument(
        "--sets-url",
        type=str,
        default=DEFAULT_SETS_BASE_URL,
        help=f"Sets API base URL (default: {DEFAULT_SETS_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    for name, (help_text, description) in COMMANDS.items():
        command_parser = subparsers.add_parser(name, help=help_text, description=description)
        command_parser.set_defaults(func=run_step)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
