"""Core types shared by every layer: results, exit codes, configuration."""

from ghrelease.core.errors import ErrorCode
from ghrelease.core.result import Err, Ok, Result

__all__ = [
    "ErrorCode",
    "Err",
    "Ok",
    "Result",
]
