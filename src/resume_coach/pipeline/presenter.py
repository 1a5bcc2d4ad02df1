"""Interface between the workflow and whatever renders it."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resume_coach.models.export import BinaryArtifact
    from resume_coach.pipeline.states import WorkflowState

logger = logging.getLogger(__name__)


class Signal(str, Enum):
    VALIDATION_ERROR = "validation-error"
    UPLOAD_ERROR = "upload-error"
    ANALYSIS_ERROR = "analysis-error"
    EXPORT_ERROR = "export-error"
    FILE_SELECTED = "file-selected"
    UPLOAD_SUCCESS = "upload-success"
    ANALYSIS_SUCCESS = "analysis-success"
    EXPORT_SUCCESS = "export-success"

    @property
    def is_error(self) -> bool:
        return self.value.endswith("-error")


class Presenter:
    """Base presenter. Subclasses override the hooks they care about.

    The coordinator calls ``render`` after every state change, ``notify`` for
    each user-visible message and ``deliver`` with a finished export.
    """

    def render(self, state: WorkflowState) -> None:
        pass

    def notify(self, signal: Signal, message: str) -> None:
        level = logging.WARNING if signal.is_error else logging.INFO
        logger.log(level, "%s: %s", signal.value, message)

    def deliver(self, artifact: BinaryArtifact) -> None:
        pass
