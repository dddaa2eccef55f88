"""Release creation and asset upload."""

from ghrelease.services.release.config import (
    ApiTarget,
    ConfigError,
    PublishConfig,
    validate_config,
)
from ghrelease.services.release.create import create_release
from ghrelease.services.release.errors import CreateReleaseError, UploadError
from ghrelease.services.release.model import Release, ReleaseRequest
from ghrelease.services.release.publish import PublishError, PublishOutcome, PublishService
from ghrelease.services.release.upload import (
    UploadReport,
    list_upload_candidates,
    upload_all,
    upload_asset,
    upload_endpoint,
)

__all__ = [
    "ApiTarget",
    "ConfigError",
    "CreateReleaseError",
    "PublishConfig",
    "PublishError",
    "PublishOutcome",
    "PublishService",
    "Release",
    "ReleaseRequest",
    "UploadError",
    "UploadReport",
    "create_release",
    "list_upload_candidates",
    "upload_all",
    "upload_asset",
    "upload_endpoint",
    "validate_config",
]
