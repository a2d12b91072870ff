"""
Catalog run failures.

Every failure aborts the run. Each error names the pipeline step it came
from so the CLI can report "<step> failed: <cause>" and nothing else.
"""


class CatalogError(Exception):
    """Base class for failures that abort a catalog run."""

    step = "catalog"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FetchError(CatalogError):
    """Raised when downloading or caching a dataset fails."""

    step = "fetch"


class DecodeError(CatalogError):
    """Raised when a cached dataset is missing or malformed."""

    step = "decode"


class WriteError(CatalogError):
    """Raised when the catalog file cannot be written."""

    step = "write"
