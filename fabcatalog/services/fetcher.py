"""
Card dataset downloader.

Fetches a locale's flattened card dataset from the dataset repository and
stores it in the local cache. The cache file, not the network, is what the
rest of the pipeline reads, so generation can also run offline against
whatever was downloaded last.
"""

import logging
from pathlib import Path

import httpx

from fabcatalog.config import cache_path, settings
from fabcatalog.models.failure import FetchError
from fabcatalog.models.locale import Locale
from fabcatalog.services.files import replace_file

logger = logging.getLogger(__name__)


def fetch(
    locale: Locale,
    branch: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> bytes:
    """
    Download a locale's dataset.

    Single attempt, no retries.

    Args:
        locale: Dataset source
        branch: Branch or tag substituted into the source URL
        client: Optional client to reuse (tests, connection pooling)
        timeout: Request timeout in seconds. Defaults to settings.fetch_timeout

    Returns:
        Raw response body

    Raises:
        FetchError: On transport failure or non-success HTTP status
    """
    url = locale.url(branch)
    headers = {"User-Agent": settings.user_agent}
    if timeout is None:
        timeout = settings.fetch_timeout

    try:
        if client is None:
            response = httpx.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        else:
            response = client.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Failed to download {locale.code} dataset: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise FetchError(f"Failed to download {locale.code} dataset: {e}") from e

    return response.content


def download(
    locale: Locale,
    branch: str,
    cards_dir: Path,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> Path:
    """
    Refresh the local cache for a locale.

    The previous cache file is replaced only once the full body has been
    received and written.

    Args:
        locale: Dataset source
        branch: Branch or tag of the dataset repository
        cards_dir: Cache directory, created if missing

    Returns:
        Path to the cache file

    Raises:
        FetchError: If the download or the cache write fails
    """
    content = fetch(locale, branch, client=client, timeout=timeout)
    path = cache_path(locale.code, cards_dir)

    try:
        cards_dir.mkdir(parents=True, exist_ok=True)
        replace_file(path, content)
    except OSError as e:
        raise FetchError(f"Failed to cache {locale.code} dataset at {path}: {e}") from e

    logger.info("Cached %d bytes for %s at %s", len(content), locale.code, path)
    return path
