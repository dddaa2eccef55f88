from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


CreateReleaseErrorKind = Literal[
    "encode_failed",
    "invalid_request",
    "transport",
    "unexpected_status",
    "decode_failed",
]

UploadErrorKind = Literal[
    "list_failed",
    "read_failed",
    "invalid_request",
    "transport",
    "unexpected_status",
]


@dataclass(frozen=True, slots=True)
class CreateReleaseError:
    kind: CreateReleaseErrorKind
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class UploadError:
    kind: UploadErrorKind
    message: str
    path: Path | None = None
    hint: str | None = None
