from __future__ import annotations

from typing import Optional


class WildWatchError(Exception):
    """Base class for every error raised inside the package."""

    user_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None) -> None:
        super().__init__(message or self.user_message)
        self.message = message or self.user_message
        self.details = details


class PermissionDenied(WildWatchError):
    """Location or media library access was refused."""

    user_message = "Permission denied."


class BadRequest(WildWatchError):
    """The relay received a request it cannot process (missing file, bad coordinates)."""

    user_message = "No file uploaded"


class UpstreamFailure(WildWatchError):
    """A hosted model call or the network between client and relay failed."""

    user_message = "Failed to analyze media"


class ValidationReject(WildWatchError):
    """
    Audio transcript judged unusable by the rejection filter.

    Not a failure: the relay answers 200 with a fixed message and skips
    the classification call.
    """

    user_message = "Audio not recognized."


class ExportFailure(WildWatchError):
    """PDF generation or writing failed."""

    user_message = "Error exporting PDF."


class NoReports(ExportFailure):
    """Export was requested on an empty session."""

    user_message = "No reports to export."
