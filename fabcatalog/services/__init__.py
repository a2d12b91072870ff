from fabcatalog.services.catalog_builder import (
    build_catalog,
    format_line,
    merge_locales,
    quote_name,
    render_catalog,
    render_row,
)
from fabcatalog.services.csv_writer import write_catalog
from fabcatalog.services.fetcher import download, fetch
from fabcatalog.services.identity import (
    EDITION_LABELS,
    FOILING_LABELS,
    resolve_edition,
    resolve_foiling,
    unique_id,
)

__all__ = [
    "EDITION_LABELS",
    "FOILING_LABELS",
    "build_catalog",
    "download",
    "fetch",
    "format_line",
    "merge_locales",
    "quote_name",
    "render_catalog",
    "render_row",
    "resolve_edition",
    "resolve_foiling",
    "unique_id",
    "write_catalog",
]
