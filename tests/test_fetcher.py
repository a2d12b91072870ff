"""Tests for the card dataset downloader (mocked HTTP)."""

from pathlib import Path

import httpx
import pytest
import respx

from fabcatalog.config import cache_path, get_locale
from fabcatalog.models.failure import FetchError
from fabcatalog.models.locale import Locale
from fabcatalog.services.fetcher import download, fetch

EN = get_locale("en")
EN_DEVELOP_URL = (
    "https://raw.githubusercontent.com/the-fab-cube/flesh-and-blood-cards/"
    "develop/json/english/card-flattened.json"
)


class TestUrlConstruction:
    def test_branch_is_substituted(self) -> None:
        assert EN.url("develop") == EN_DEVELOP_URL

    def test_other_branch(self) -> None:
        assert "/v5.0.0/json/english/" in EN.url("v5.0.0")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            get_locale("xx")


class TestCachePath:
    def test_named_after_locale(self, tmp_path: Path) -> None:
        assert cache_path("en", tmp_path) == tmp_path / "en.json"


class TestFetch:
    @respx.mock
    def test_returns_body(self) -> None:
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"[]"))

        assert fetch(EN, "develop") == b"[]"

    @respx.mock
    def test_sends_user_agent(self) -> None:
        route = respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"[]"))

        fetch(EN, "develop")

        assert route.called
        assert route.calls.last.request.headers["User-Agent"].startswith("fabcatalog/")

    @respx.mock
    def test_http_error_raises(self) -> None:
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(404))

        with pytest.raises(FetchError, match="HTTP 404"):
            fetch(EN, "develop")

    @respx.mock
    def test_transport_error_raises(self) -> None:
        respx.get(EN_DEVELOP_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(FetchError, match="connection refused"):
            fetch(EN, "develop")

    @respx.mock
    def test_single_attempt(self) -> None:
        route = respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(FetchError):
            fetch(EN, "develop")

        assert route.call_count == 1

    def test_uses_given_client(self) -> None:
        locale = Locale(code="en", url_template="https://example.com/{branch}/cards.json")
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"[1]"))

        with httpx.Client(transport=transport) as client:
            assert fetch(locale, "main", client=client) == b"[1]"

    def test_fetch_error_names_its_step(self) -> None:
        assert FetchError("boom").step == "fetch"


class TestDownload:
    @respx.mock
    def test_writes_cache_file(self, tmp_path: Path) -> None:
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b'[{"id": 1}]'))

        path = download(EN, "develop", tmp_path)

        assert path == tmp_path / "en.json"
        assert path.read_bytes() == b'[{"id": 1}]'

    @respx.mock
    def test_creates_cache_directory(self, tmp_path: Path) -> None:
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"[]"))

        path = download(EN, "develop", tmp_path / "cards")

        assert path.exists()

    @respx.mock
    def test_overwrites_previous_cache(self, tmp_path: Path) -> None:
        (tmp_path / "en.json").write_bytes(b"old")
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"new"))

        download(EN, "develop", tmp_path)

        assert (tmp_path / "en.json").read_bytes() == b"new"

    @respx.mock
    def test_failed_download_keeps_previous_cache(self, tmp_path: Path) -> None:
        (tmp_path / "en.json").write_bytes(b"previous good cache")
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(FetchError):
            download(EN, "develop", tmp_path)

        assert (tmp_path / "en.json").read_bytes() == b"previous good cache"

    @respx.mock
    def test_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"[]"))

        download(EN, "develop", tmp_path)

        assert [p.name for p in tmp_path.iterdir()] == ["en.json"]

    @respx.mock
    def test_unwritable_cache_raises_fetch_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "cards"
        blocker.write_text("a file where the cache directory should be")
        respx.get(EN_DEVELOP_URL).mock(return_value=httpx.Response(200, content=b"[]"))

        with pytest.raises(FetchError, match="Failed to cache"):
            download(EN, "develop", blocker)
