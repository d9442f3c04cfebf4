"""Shared error hierarchy.

Every failure the user should see is raised as a :class:`RosaError`.
Client wrappers translate ``botocore`` and ``httpx`` exceptions into the
subclasses below, so commands never leak raw third-party errors. Click
renders the exception through the reporter and exits with status 1.
"""

from __future__ import annotations

from typing import IO, Any, Optional

import click

from rosa.shared.reporter import get_reporter


class RosaError(click.ClickException):
    """Base class for reported, fatal command errors."""

    exit_code = 1

    def show(self, file: Optional[IO[Any]] = None) -> None:
        get_reporter().error(self.format_message())


class ValidationError(RosaError):
    """Raised when user input fails validation."""


class ModeError(ValidationError):
    """Raised when an unsupported execution mode is requested."""


class ConfigError(RosaError):
    """Raised when stored configuration is missing or unreadable."""


class AWSError(RosaError):
    """Raised when a call to the cloud infrastructure API fails."""


class OCMError(RosaError):
    """Raised when a call to the cluster-management API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClusterNotFoundError(OCMError):
    """Raised when a cluster key does not match any cluster."""


class AbortedError(RosaError):
    """Raised when the user declines a confirmation or interrupts a prompt."""
