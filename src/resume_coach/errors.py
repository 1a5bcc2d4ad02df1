"""Error taxonomy for the resume workflow."""

from __future__ import annotations


class ResumeCoachError(Exception):
    """Base class for errors surfaced to the user as a non-fatal notice."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ResumeCoachError, ValueError):
    """Input rejected locally before any network call is made."""


class TransportFailure(ResumeCoachError):
    """Network, service or payload failure during a backend call."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingPrecondition(ResumeCoachError):
    """A later stage was entered without the upstream data it needs."""
