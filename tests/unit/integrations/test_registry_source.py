"""Tests for the local and remote registry sources."""

from pathlib import Path

import httpx
import pytest

from emojidb.integrations.registry_source.fake import FakeRegistrySource
from emojidb.integrations.registry_source.real import LocalRegistrySource, RemoteRegistrySource
from tests.test_utils.registry_text import GRINNING_FACE, registry_text

URL = "https://unicode.org/Public/emoji/latest/emoji-test.txt"


def test_local_source_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "emoji-test.txt"
    path.write_text(registry_text(GRINNING_FACE), encoding="utf-8")
    source = LocalRegistrySource(path)

    assert source.read_text() == registry_text(GRINNING_FACE)
    assert source.is_local
    assert source.describe() == str(path)


def test_local_source_missing_file_raises(tmp_path: Path) -> None:
    source = LocalRegistrySource(tmp_path / "missing.txt")

    with pytest.raises(FileNotFoundError):
        source.read_text()


def test_remote_source_fetches_text() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, content=registry_text(GRINNING_FACE).encode("utf-8"))

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        source = RemoteRegistrySource(URL, client=client)
        text = source.read_text()

    assert text == registry_text(GRINNING_FACE)
    assert requested == [URL]
    assert not source.is_local
    assert source.describe() == URL


def test_remote_source_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="not found")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        source = RemoteRegistrySource(URL, client=client)
        with pytest.raises(httpx.HTTPStatusError):
            source.read_text()


def test_remote_source_propagates_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        source = RemoteRegistrySource(URL, client=client)
        with pytest.raises(httpx.ConnectError):
            source.read_text()


def test_fake_source_returns_text_and_counts_reads() -> None:
    source = FakeRegistrySource(text="abc", local=False)

    assert source.read_text() == "abc"
    assert source.read_calls == 1
    assert not source.is_local


def test_fake_source_raises_configured_error() -> None:
    source = FakeRegistrySource(error=OSError("unreadable"))

    with pytest.raises(OSError, match="unreadable"):
        source.read_text()
