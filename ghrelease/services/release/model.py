from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ghrelease.core.result import Err, Ok, Result
from ghrelease.core.structured import StrDict, as_dict_list, as_str_dict


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Payload of the create-release call."""

    tag_name: str
    target_commitish: str = "master"
    name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {
            "tag_name": self.tag_name,
            "target_commitish": self.target_commitish,
            "name": self.name,
            "body": self.body,
            "draft": self.draft,
            "prerelease": self.prerelease,
        }


_STR_FIELDS = (
    "url",
    "html_url",
    "assets_url",
    "tarball_url",
    "zipball_url",
    "node_id",
    "tag_name",
    "target_commitish",
    "name",
    "body",
    "created_at",
    "published_at",
)
_BOOL_FIELDS = ("draft", "prerelease")


@dataclass(frozen=True, slots=True)
class Release:
    """A release as returned by the create endpoint.

    ``author`` and ``assets`` are kept as the decoded JSON; nothing here
    depends on their structure.
    """

    upload_url: str
    url: str = ""
    html_url: str = ""
    assets_url: str = ""
    tarball_url: str = ""
    zipball_url: str = ""
    id: int = 0
    node_id: str = ""
    tag_name: str = ""
    target_commitish: str = ""
    name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: str = ""
    published_at: str = ""
    author: StrDict = field(default_factory=dict)
    assets: list[StrDict] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: object) -> Result[Release, str]:
        """Build a Release from a decoded JSON value.

        Missing or null fields fall back to their defaults, except
        ``upload_url`` which is required. A field of the wrong JSON type
        is an error.
        """
        obj = as_str_dict(data)
        if obj is None:
            return Err("expected a JSON object")

        upload_url = obj.get("upload_url")
        if not isinstance(upload_url, str) or not upload_url:
            return Err("missing upload_url")

        values: dict[str, Any] = {"upload_url": upload_url}

        for key in _STR_FIELDS:
            value = obj.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                return Err(f"field '{key}' must be a string")
            values[key] = value

        for key in _BOOL_FIELDS:
            value = obj.get(key)
            if value is None:
                continue
            if not isinstance(value, bool):
                return Err(f"field '{key}' must be a boolean")
            values[key] = value

        release_id = obj.get("id")
        if release_id is not None:
            if isinstance(release_id, bool) or not isinstance(release_id, int):
                return Err("field 'id' must be an integer")
            values["id"] = release_id

        author = obj.get("author")
        if author is not None:
            author_dict = as_str_dict(author)
            if author_dict is None:
                return Err("field 'author' must be an object")
            values["author"] = author_dict

        assets = obj.get("assets")
        if assets is not None:
            asset_list = as_dict_list(assets)
            if asset_list is None:
                return Err("field 'assets' must be a list of objects")
            values["assets"] = asset_list

        return Ok(cls(**values))
