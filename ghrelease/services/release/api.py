from __future__ import annotations


HTTP_CREATED = 201

JSON_CONTENT_TYPE = "application/json"
ASSET_CONTENT_TYPE = "application/tar+gzip"

# upload_url is a URI template; the suffix must go before it is used as an endpoint.
UPLOAD_URL_TEMPLATE_SUFFIX = "{?name,label}"


def auth_headers(token: str, content_type: str) -> dict[str, str]:
    return {
        "Content-Type": content_type,
        "Authorization": f"token {token}",
    }


def status_hint(status: int) -> str | None:
    """Operator hint for an unexpected status, if there is a common cause."""
    match status:
        case 401:
            return "check the personal access token (--pat / GITHUB_TOKEN)"
        case 403:
            return "the token lacks write access to this repository"
        case 404:
            return "check --user and --repo, and that the token can see the repository"
        case 422:
            return "the platform rejected the request; a release or asset with this name may already exist"
        case _:
            return None
