"""Run configuration.

Built once from command-line flags and never mutated. The services receive
the pieces they need (``ApiTarget`` for the API, the token for uploads)
rather than reading globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from ghrelease.core.result import Err, Ok, Result
from ghrelease.services.release.model import ReleaseRequest


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_OWNER = "imitablerabbit"
DEFAULT_TARGET = "master"
DEFAULT_UPLOADS_DIR = "uploads/"

TOKEN_ENV_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True, slots=True)
class ConfigError:
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ApiTarget:
    """Where releases are created and with which credential."""

    api_url: str
    owner: str
    repo: str
    token: str

    @property
    def releases_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/repos/{self.owner}/{self.repo}/releases"


@dataclass(frozen=True, slots=True)
class PublishConfig:
    target: ApiTarget
    request: ReleaseRequest
    uploads_dir: Path


def validate_config(config: PublishConfig) -> Result[PublishConfig, ConfigError]:
    """Reject configurations that cannot produce a release.

    Runs before any network call, so a typo never creates a half-configured
    release.
    """
    target = config.target

    if not target.repo.strip():
        return Err(ConfigError("missing repository name", hint="pass --repo"))

    if not target.owner.strip():
        return Err(ConfigError("missing user namespace", hint="pass --user"))

    if not target.token.strip():
        return Err(
            ConfigError(
                "missing personal access token",
                hint=f"pass --pat or set {TOKEN_ENV_VAR}",
            )
        )

    if not config.request.tag_name.strip():
        return Err(ConfigError("missing release tag", hint="pass --release-tag"))

    parts = urlsplit(target.api_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return Err(
            ConfigError(
                f"invalid API URL: {target.api_url!r}",
                hint=f"expected an absolute http(s) URL such as {DEFAULT_API_URL}",
            )
        )

    return Ok(config)
