"""Tests for services/release/model.py."""

from __future__ import annotations

import json

from ghrelease.core.result import Err, Ok
from ghrelease.services.release.model import Release, ReleaseRequest


def _release_json() -> dict[str, object]:
    return {
        "url": "https://api.github.com/repos/o/r/releases/1",
        "html_url": "https://github.com/o/r/releases/v1",
        "assets_url": "https://api.github.com/repos/o/r/releases/1/assets",
        "upload_url": "https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}",
        "tarball_url": "https://api.github.com/repos/o/r/tarball/v1",
        "zipball_url": "https://api.github.com/repos/o/r/zipball/v1",
        "id": 1,
        "node_id": "MDc6UmVsZWFzZTE=",
        "tag_name": "v1",
        "target_commitish": "main",
        "name": "v1",
        "body": "notes",
        "draft": True,
        "prerelease": False,
        "created_at": "2013-02-27T19:35:32Z",
        "published_at": "2013-02-27T19:35:32Z",
        "author": {"login": "octocat", "id": 1, "site_admin": False},
        "assets": [{"id": 7, "name": "old.tar.gz", "uploader": {"login": "octocat"}}],
    }


class TestReleaseRequest:
    def test_defaults(self) -> None:
        request = ReleaseRequest(tag_name="v1")
        assert request.target_commitish == "master"
        assert request.draft is False
        assert request.prerelease is False

    def test_payload_uses_wire_field_names(self) -> None:
        request = ReleaseRequest(
            tag_name="v1",
            target_commitish="main",
            name="v1",
            body="notes",
            draft=True,
            prerelease=False,
        )

        assert request.to_payload() == {
            "tag_name": "v1",
            "target_commitish": "main",
            "name": "v1",
            "body": "notes",
            "draft": True,
            "prerelease": False,
        }
        json.dumps(request.to_payload())


class TestReleaseFromJson:
    def test_field_for_field(self) -> None:
        data = _release_json()

        result = Release.from_json(data)

        assert isinstance(result, Ok)
        release = result.value
        for key, value in data.items():
            assert getattr(release, key) == value, key

    def test_minimal_object(self) -> None:
        result = Release.from_json({"upload_url": "https://x/up{?name,label}"})

        assert isinstance(result, Ok)
        assert result.value.upload_url == "https://x/up{?name,label}"
        assert result.value.id == 0
        assert result.value.author == {}
        assert result.value.assets == []

    def test_null_published_at_on_draft(self) -> None:
        data = _release_json()
        data["published_at"] = None

        result = Release.from_json(data)

        assert isinstance(result, Ok)
        assert result.value.published_at == ""

    def test_unknown_fields_ignored(self) -> None:
        data = _release_json()
        data["discussion_url"] = "https://github.com/o/r/discussions/1"

        assert isinstance(Release.from_json(data), Ok)

    def test_not_an_object(self) -> None:
        result = Release.from_json([1, 2])

        assert isinstance(result, Err)
        assert "object" in result.error

    def test_missing_upload_url(self) -> None:
        data = _release_json()
        del data["upload_url"]

        result = Release.from_json(data)

        assert isinstance(result, Err)
        assert "upload_url" in result.error

    def test_wrong_types(self) -> None:
        for key, bad in (
            ("name", 5),
            ("draft", "yes"),
            ("id", "1"),
            ("id", True),
            ("author", "octocat"),
            ("assets", [1]),
        ):
            data = _release_json()
            data[key] = bad

            result = Release.from_json(data)

            assert isinstance(result, Err), key
            assert key in result.error
