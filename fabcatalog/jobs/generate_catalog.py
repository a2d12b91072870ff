"""
Generate the card catalog CSV.

Refreshes the cached card datasets (unless run offline) and writes the
sorted catalog.

Usage:
    python -m fabcatalog.jobs.generate_catalog            # update, then generate
    python -m fabcatalog.jobs.generate_catalog -u=false   # offline, use cache
    python -m fabcatalog.jobs.generate_catalog -b main    # dataset branch/tag
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import httpx

from fabcatalog.config import get_locale, settings
from fabcatalog.models.card import CardRecord
from fabcatalog.models.failure import CatalogError
from fabcatalog.parsers.card_json import load_cached_cards
from fabcatalog.services.catalog_builder import build_catalog
from fabcatalog.services.csv_writer import write_catalog
from fabcatalog.services.fetcher import download

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "t", "true", "yes", "on"})
_FALSE = frozenset({"0", "f", "false", "no", "off"})


def run_pipeline(
    *,
    branch: str,
    update: bool,
    locales: Sequence[str],
    cards_dir: Path,
    output_path: Path,
    client: httpx.Client | None = None,
) -> Path:
    """
    Run one catalog generation.

    Locales are processed sequentially. Any failure aborts the run before
    the output file is touched.

    Args:
        branch: Dataset branch or tag
        update: Download datasets first; False uses the existing cache
        locales: Locale codes to include
        cards_dir: Dataset cache directory
        output_path: Catalog file to write
        client: Optional HTTP client for downloads

    Returns:
        Path to the written catalog

    Raises:
        CatalogError: If any step fails
        ValueError: If a locale is not registered
    """
    sources = [get_locale(code) for code in locales]

    logger.info("Working with '%s' branch.", branch)

    if update:
        for locale in sources:
            logger.info("Downloading %s...", locale.code)
            download(locale, branch, cards_dir, client=client)

    logger.info("Generating CSV...")

    records: dict[str, list[CardRecord]] = {}
    for locale in sources:
        records[locale.code] = load_cached_cards(locale.code, cards_dir)
        logger.info("Decoded %d cards for %s", len(records[locale.code]), locale.code)

    rows = build_catalog(records)
    path = write_catalog(rows, output_path)

    logger.info("Wrote %d rows to %s", len(rows), path)
    return path


def _parse_bool(value: str) -> bool:
    """Parse a flag value such as true/false/1/0."""
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the card catalog CSV")
    parser.add_argument(
        "-u",
        "--u",
        dest="update",
        type=_parse_bool,
        nargs="?",
        const=True,
        default=settings.update,
        metavar="BOOL",
        help="Update cards before generating (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--b",
        dest="branch",
        default=settings.branch,
        help="Use specific branch (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        run_pipeline(
            branch=args.branch,
            update=args.update,
            locales=settings.locales,
            cards_dir=settings.cards_dir,
            output_path=settings.output_path,
        )
    except CatalogError as e:
        logger.error("%s failed: %s", e.step, e)
        return 1
    except ValueError as e:
        logger.error("configuration failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
