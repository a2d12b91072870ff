"""Catalog file writer."""

import logging
from collections.abc import Iterable
from pathlib import Path

from fabcatalog.models.catalog import CatalogRow
from fabcatalog.models.failure import WriteError
from fabcatalog.services.catalog_builder import render_catalog
from fabcatalog.services.files import replace_file

logger = logging.getLogger(__name__)


def write_catalog(rows: Iterable[CatalogRow], destination: Path) -> Path:
    """
    Write catalog rows to a CSV file, replacing any existing file.

    The document is rendered and encoded before anything touches the
    filesystem, then swapped in whole, so a failed write leaves the
    previous catalog (or no file) behind, never a truncated one. Output is
    UTF-8 without newline translation and byte-identical across platforms.

    Args:
        rows: Rows in output order
        destination: Target file

    Returns:
        The destination path

    Raises:
        WriteError: If the catalog cannot be encoded or on any filesystem
            failure
    """
    try:
        content = render_catalog(rows).encode("utf-8")
    except UnicodeEncodeError as e:
        raise WriteError(f"cannot encode catalog as UTF-8: {e}") from e

    try:
        replace_file(destination, content)
    except OSError as e:
        raise WriteError(f"cannot write {destination}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(content), destination)
    return destination
