"""
Error types for modetokens exports.

Every failure that aborts an export run derives from ModeTokensError.
Per-variable resolution failures are not exceptions: the resolver reports
them as events and the exporter drops the variable.
"""

from __future__ import annotations

from typing import Any


class ModeTokensError(Exception):
    """Base exception for all modetokens errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class ConfigurationError(ModeTokensError):
    """
    Raised when the design file or the exporter is set up incorrectly.

    Examples:
    - No collection with "Mode" in its name
    - Mode collection without both "Light" and "Dark" modes
    - Invalid modetokens.toml values
    """

    pass


class NoDataError(ModeTokensError):
    """
    Raised when no variable survives filtering and resolution.

    The run produced nothing worth writing, so it is reported as a failure
    rather than an empty stylesheet.
    """

    pass


class HostQueryError(ModeTokensError):
    """
    Raised when the variable host cannot answer a query.

    Examples:
    - Figma REST API returned an error status
    - Snapshot file is missing, unreadable or malformed
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)

    def _format_message(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message
