from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ghrelease.core.result import Err, Ok, Result
from ghrelease.net.http import HttpClient
from ghrelease.output.console import ConsoleProtocol
from ghrelease.services.release.config import PublishConfig
from ghrelease.services.release.create import create_release
from ghrelease.services.release.errors import CreateReleaseError, UploadError
from ghrelease.services.release.model import Release
from ghrelease.services.release.upload import (
    UploadReport,
    list_upload_candidates,
    upload_all,
)


PublishStage = Literal["create", "list"]


@dataclass(frozen=True, slots=True)
class PublishError:
    """A failure that ends the run before or instead of uploading."""

    stage: PublishStage
    cause: CreateReleaseError | UploadError

    @property
    def message(self) -> str:
        if self.stage == "create":
            return f"creating release: {self.cause.message}"
        return self.cause.message

    @property
    def hint(self) -> str | None:
        return self.cause.hint


@dataclass(frozen=True, slots=True)
class PublishOutcome:
    release: Release
    report: UploadReport


class PublishService:
    """Create the release, then upload every file of the uploads directory."""

    def __init__(
        self,
        *,
        config: PublishConfig,
        http: HttpClient,
        console: ConsoleProtocol,
    ) -> None:
        self._config = config
        self._http = http
        self._console = console

    def run(self) -> Result[PublishOutcome, PublishError]:
        config = self._config

        created = create_release(self._http, config.target, config.request, self._console)
        if isinstance(created, Err):
            return Err(PublishError(stage="create", cause=created.error))
        release = created.value

        listed = list_upload_candidates(config.uploads_dir)
        if isinstance(listed, Err):
            return Err(PublishError(stage="list", cause=listed.error))
        files = listed.value

        report = upload_all(self._http, release, files, config.target.token, self._console)
        self._summarize(release, report)
        return Ok(PublishOutcome(release=release, report=report))

    def _summarize(self, release: Release, report: UploadReport) -> None:
        summary = f"uploaded {len(report.uploaded)} of {report.attempted} assets"
        if report.all_succeeded:
            self._console.success(summary)
        else:
            self._console.warning(summary)
        if release.html_url:
            self._console.info(f"release page: {release.html_url}")
