"""Tests for services/release/publish.py - create then upload."""

from __future__ import annotations

from pathlib import Path

from ghrelease.core.result import Err, Ok
from ghrelease.net.http import HttpError, MockHttpClient
from ghrelease.output.console import MockConsole
from ghrelease.services.release.config import ApiTarget, PublishConfig
from ghrelease.services.release.model import ReleaseRequest
from ghrelease.services.release.publish import PublishService

RELEASES_URL = "https://api.example/repos/o/r/releases"
RELEASE_BODY = {
    "html_url": "https://example/o/r/releases/v1",
    "upload_url": "https://x/up{?name,label}",
    "id": 1,
    "tag_name": "v1",
}


def _config(uploads_dir: Path) -> PublishConfig:
    return PublishConfig(
        target=ApiTarget(api_url="https://api.example", owner="o", repo="r", token="t"),
        request=ReleaseRequest(tag_name="v1"),
        uploads_dir=uploads_dir,
    )


def _service(uploads_dir: Path, http: MockHttpClient, console: MockConsole) -> PublishService:
    return PublishService(config=_config(uploads_dir), http=http, console=console)


class TestPublishService:
    def test_uploads_files_skipping_subdirectories(self, tmp_path: Path) -> None:
        (tmp_path / "a.tar.gz").write_bytes(b"a")
        (tmp_path / "b.tar.gz").write_bytes(b"b")
        (tmp_path / "sub").mkdir()
        http = MockHttpClient()
        http.set_json(RELEASES_URL, 201, RELEASE_BODY)
        http.set_response("https://x/up?name=a.tar.gz", 201)
        http.set_response("https://x/up?name=b.tar.gz", 201)
        console = MockConsole()

        result = _service(tmp_path, http, console).run()

        assert isinstance(result, Ok)
        assert http.urls == [
            RELEASES_URL,
            "https://x/up?name=a.tar.gz",
            "https://x/up?name=b.tar.gz",
        ]
        assert result.value.release.id == 1
        assert len(result.value.report.uploaded) == 2
        assert "OK uploaded 2 of 2 assets" in console.messages
        assert "info: release page: https://example/o/r/releases/v1" in console.messages

    def test_upload_failures_are_not_fatal(self, tmp_path: Path) -> None:
        (tmp_path / "a.tar.gz").write_bytes(b"a")
        (tmp_path / "b.tar.gz").write_bytes(b"b")
        http = MockHttpClient()
        http.set_json(RELEASES_URL, 201, RELEASE_BODY)
        http.set_response("https://x/up?name=a.tar.gz", 500, "server error")
        http.set_response("https://x/up?name=b.tar.gz", 201)
        console = MockConsole()

        result = _service(tmp_path, http, console).run()

        assert isinstance(result, Ok)
        assert len(http.calls) == 3
        assert len(result.value.report.failed) == 1
        assert "warning: uploaded 1 of 2 assets" in console.messages

    def test_create_failure_stops_before_uploads(self, tmp_path: Path) -> None:
        (tmp_path / "a.tar.gz").write_bytes(b"a")
        http = MockHttpClient()
        http.set_response(RELEASES_URL, 401, '{"message":"Bad credentials"}')

        result = _service(tmp_path, http, MockConsole()).run()

        assert isinstance(result, Err)
        assert result.error.stage == "create"
        assert result.error.message.startswith("creating release: non 201 response: 401")
        assert "Bad credentials" in result.error.message
        assert http.urls == [RELEASES_URL]

    def test_create_transport_failure_stops_before_uploads(self, tmp_path: Path) -> None:
        (tmp_path / "a.tar.gz").write_bytes(b"a")
        http = MockHttpClient()
        http.set_error(RELEASES_URL, HttpError(url=RELEASES_URL, message="timed out"))

        result = _service(tmp_path, http, MockConsole()).run()

        assert isinstance(result, Err)
        assert result.error.cause.kind == "transport"
        assert http.urls == [RELEASES_URL]

    def test_missing_uploads_dir_is_fatal(self, tmp_path: Path) -> None:
        http = MockHttpClient()
        http.set_json(RELEASES_URL, 201, RELEASE_BODY)

        result = _service(tmp_path / "missing", http, MockConsole()).run()

        assert isinstance(result, Err)
        assert result.error.stage == "list"
        assert result.error.hint == "check --uploads"
        assert http.urls == [RELEASES_URL]

    def test_empty_uploads_dir(self, tmp_path: Path) -> None:
        http = MockHttpClient()
        http.set_json(RELEASES_URL, 201, RELEASE_BODY)

        result = _service(tmp_path, http, MockConsole()).run()

        assert isinstance(result, Ok)
        assert http.urls == [RELEASES_URL]
