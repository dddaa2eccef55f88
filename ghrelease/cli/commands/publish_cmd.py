from __future__ import annotations

from pathlib import Path

import typer

from ghrelease import __version__
from ghrelease.cli.commands._helpers import exit_on_error
from ghrelease.cli.context import build_context
from ghrelease.core.errors import ErrorCode
from ghrelease.core.result import Err
from ghrelease.services.release.config import (
    DEFAULT_API_URL,
    DEFAULT_OWNER,
    DEFAULT_TARGET,
    DEFAULT_UPLOADS_DIR,
    TOKEN_ENV_VAR,
    ApiTarget,
    PublishConfig,
    validate_config,
)
from ghrelease.services.release.model import ReleaseRequest
from ghrelease.services.release.publish import PublishError, PublishService


def exit_code_for(error: PublishError) -> ErrorCode:
    if error.stage == "list":
        return ErrorCode.IO_ERROR
    if error.cause.kind in ("unexpected_status", "decode_failed"):
        return ErrorCode.API_ERROR
    return ErrorCode.NETWORK_ERROR


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def publish(
    api_url: str = typer.Option(DEFAULT_API_URL, "--api-url", help="Base URL for the GitHub API."),
    pat: str = typer.Option(
        "",
        "--pat",
        envvar=TOKEN_ENV_VAR,
        show_default=False,
        help="Personal access token used to create the release and upload assets.",
    ),
    user: str = typer.Option(
        DEFAULT_OWNER,
        "--user",
        help="User namespace the repository is located under.",
    ),
    repo: str = typer.Option("", "--repo", help="Repository name exactly as it appears on GitHub."),
    release_tag: str = typer.Option(
        "",
        "--release-tag",
        help="tag_name of the release. It does not have to be an existing git tag.",
    ),
    target: str = typer.Option(
        DEFAULT_TARGET,
        "--target",
        help="Commit, branch or tag the release is based on.",
    ),
    name: str = typer.Option("", "--name", help="Name of the release."),
    body: str = typer.Option("", "--body", help="Description of the release."),
    draft: bool = typer.Option(
        False,
        "--draft/--no-draft",
        help="Create the release as a draft, hidden until published.",
    ),
    prerelease: bool = typer.Option(
        False,
        "--prerelease/--no-prerelease",
        help="Mark the release as a pre-release.",
    ),
    uploads: Path = typer.Option(
        Path(DEFAULT_UPLOADS_DIR),
        "--uploads",
        help="Directory whose files are uploaded as release assets.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Create a GitHub release and upload every file in the uploads directory.

    Failing to create the release or to read the uploads directory is fatal.
    A failed asset upload is reported as a warning and does not change the
    exit status.
    """
    ctx = build_context()

    config = PublishConfig(
        target=ApiTarget(api_url=api_url, owner=user, repo=repo, token=pat),
        request=ReleaseRequest(
            tag_name=release_tag,
            target_commitish=target,
            name=name,
            body=body,
            draft=draft,
            prerelease=prerelease,
        ),
        uploads_dir=uploads,
    )
    exit_on_error(validate_config(config), ctx, ErrorCode.USER_ERROR)

    result = PublishService(config=config, http=ctx.http, console=ctx.console).run()
    if isinstance(result, Err):
        exit_on_error(result, ctx, exit_code_for(result.error))
