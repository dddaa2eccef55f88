"""Error codes for CLI exit status.

The numeric values are the process exit codes of ``ghrelease`` and should
remain stable, since CI pipelines branch on them:
- 0: Success (release created, even if some asset uploads failed)
- 1: User error (missing or invalid flags)
- 2: API error (unexpected status, undecodable response)
- 3: Network error (unreachable API, TLS failure, malformed request)
- 4: I/O error (uploads directory cannot be listed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the ``ghrelease`` command."""

    OK = 0
    USER_ERROR = 1
    API_ERROR = 2
    NETWORK_ERROR = 3
    IO_ERROR = 4

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
