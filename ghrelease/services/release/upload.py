"""Asset uploads.

Uploads are best effort: each file is attempted once, a failure is
reported as a warning and the next file is tried. Only listing the
uploads directory itself is fatal, since an unreadable directory cannot be
told apart from a misconfigured one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import quote

from ghrelease.core.result import Err, Ok, Result
from ghrelease.net.http import HttpClient
from ghrelease.output.console import ConsoleProtocol
from ghrelease.services.release.api import (
    ASSET_CONTENT_TYPE,
    HTTP_CREATED,
    UPLOAD_URL_TEMPLATE_SUFFIX,
    auth_headers,
    status_hint,
)
from ghrelease.services.release.errors import UploadError
from ghrelease.services.release.model import Release


def upload_endpoint(upload_url: str, filename: str) -> str:
    """Concrete upload URL for ``filename``.

    The filename is percent-escaped, so names with spaces, ``&`` or ``%``
    still produce a single well-formed ``name`` parameter.
    """
    base = upload_url.removesuffix(UPLOAD_URL_TEMPLATE_SUFFIX)
    return f"{base}?name={quote(filename, safe='')}"


def list_upload_candidates(directory: Path) -> Result[list[Path], UploadError]:
    """Non-directory entries of ``directory``, sorted by name."""
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        return Err(
            UploadError(
                kind="list_failed",
                message=f"reading assets dir: {e}",
                path=directory,
                hint="check --uploads",
            )
        )
    return Ok([entry for entry in entries if not entry.is_dir()])


def upload_asset(
    http: HttpClient,
    release: Release,
    path: Path,
    token: str,
    console: ConsoleProtocol,
) -> Result[None, UploadError]:
    try:
        data = path.read_bytes()
    except OSError as e:
        return Err(UploadError(kind="read_failed", message=f"reading file for upload: {e}", path=path))

    url = upload_endpoint(release.upload_url, path.name)
    console.info(f"sending upload request to {url}")

    sent = http.post(url, data, auth_headers(token, ASSET_CONTENT_TYPE))
    if isinstance(sent, Err):
        error = sent.error
        if error.kind == "request":
            return Err(
                UploadError(
                    kind="invalid_request",
                    message=f"creating upload request: {error.message}",
                    path=path,
                )
            )
        return Err(
            UploadError(
                kind="transport",
                message=f"sending upload request: {error.message}",
                path=path,
            )
        )

    response = sent.value
    if response.status != HTTP_CREATED:
        return Err(
            UploadError(
                kind="unexpected_status",
                message=f"non 201 response: {response.status_line}: {response.text()}",
                path=path,
                hint=status_hint(response.status),
            )
        )
    return Ok(None)


def _empty_paths() -> list[Path]:
    return []


def _empty_failures() -> list[tuple[Path, UploadError]]:
    return []


@dataclass
class UploadReport:
    uploaded: list[Path] = field(default_factory=_empty_paths)
    failed: list[tuple[Path, UploadError]] = field(default_factory=_empty_failures)

    @property
    def attempted(self) -> int:
        return len(self.uploaded) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


def upload_all(
    http: HttpClient,
    release: Release,
    files: Iterable[Path],
    token: str,
    console: ConsoleProtocol,
) -> UploadReport:
    report = UploadReport()
    for path in files:
        result = upload_asset(http, release, path, token, console)
        if isinstance(result, Err):
            console.warning(f"uploading an asset: {result.error.message}")
            report.failed.append((path, result.error))
            continue
        report.uploaded.append(path)
    return report
