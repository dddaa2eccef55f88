from __future__ import annotations

import json

from ghrelease.core.result import Err, Ok, Result
from ghrelease.net.http import HttpClient
from ghrelease.output.console import ConsoleProtocol
from ghrelease.services.release.api import (
    HTTP_CREATED,
    JSON_CONTENT_TYPE,
    auth_headers,
    status_hint,
)
from ghrelease.services.release.config import ApiTarget
from ghrelease.services.release.errors import CreateReleaseError
from ghrelease.services.release.model import Release, ReleaseRequest


def encode_request(request: ReleaseRequest) -> Result[bytes, CreateReleaseError]:
    try:
        return Ok(json.dumps(request.to_payload()).encode("utf-8"))
    except (TypeError, ValueError) as e:
        return Err(
            CreateReleaseError(kind="encode_failed", message=f"encoding release request: {e}")
        )


def create_release(
    http: HttpClient,
    target: ApiTarget,
    request: ReleaseRequest,
    console: ConsoleProtocol,
) -> Result[Release, CreateReleaseError]:
    """Create a release and return the platform's record of it.

    One POST, no retry. Anything but ``201 Created`` is an error carrying the
    status line and the raw response body, so platform-side validation
    failures (duplicate tag, unknown target) reach the operator verbatim.
    """
    url = target.releases_url
    console.info(f"sending create request to {url}")

    encoded = encode_request(request)
    if isinstance(encoded, Err):
        return encoded

    sent = http.post(url, encoded.value, auth_headers(target.token, JSON_CONTENT_TYPE))
    if isinstance(sent, Err):
        error = sent.error
        if error.kind == "request":
            return Err(
                CreateReleaseError(
                    kind="invalid_request",
                    message=f"creating release request: {error.message}",
                    hint="check --api-url",
                )
            )
        return Err(
            CreateReleaseError(
                kind="transport",
                message=f"sending create release request: {error.message}",
            )
        )

    response = sent.value
    if response.status != HTTP_CREATED:
        return Err(
            CreateReleaseError(
                kind="unexpected_status",
                message=f"non 201 response: {response.status_line}: {response.text()}",
                hint=status_hint(response.status),
            )
        )

    console.info(f"received {response.status_line} response")

    try:
        data: object = json.loads(response.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        return Err(
            CreateReleaseError(kind="decode_failed", message=f"decoding response body: {e}")
        )

    return Release.from_json(data).map_err(
        lambda reason: CreateReleaseError(
            kind="decode_failed",
            message=f"decoding response body: {reason}",
        )
    )
