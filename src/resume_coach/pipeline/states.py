"""Tagged workflow states.

Each variant carries only the data that is valid in that state, so
combinations such as "exporting with no analysis" cannot be built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from resume_coach.models.analysis import AnalysisResult
from resume_coach.models.document import Document, SelectedFile
from resume_coach.models.export import ExportRequest


class Stage(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    UPLOADING = "uploading"
    EXTRACTED = "extracted"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    EXPORTING = "exporting"


@dataclass(frozen=True)
class Idle:
    stage: ClassVar[Stage] = Stage.IDLE


@dataclass(frozen=True)
class FileSelected:
    stage: ClassVar[Stage] = Stage.FILE_SELECTED

    file: SelectedFile


@dataclass(frozen=True)
class Uploading:
    stage: ClassVar[Stage] = Stage.UPLOADING

    file: SelectedFile


@dataclass(frozen=True)
class Extracted:
    """Text is available; ``resume_text`` is the user's working copy of it."""

    stage: ClassVar[Stage] = Stage.EXTRACTED

    document: Document
    resume_text: str


@dataclass(frozen=True)
class Analyzed:
    stage: ClassVar[Stage] = Stage.ANALYZED

    document: Document
    resume_text: str
    analysis: AnalysisResult
    edited_resume: str


@dataclass(frozen=True)
class Analyzing:
    """Analysis in flight. ``origin`` is restored if the call fails."""

    stage: ClassVar[Stage] = Stage.ANALYZING

    origin: Union[Extracted, Analyzed]

    @property
    def document(self) -> Document:
        return self.origin.document


@dataclass(frozen=True)
class Exporting:
    """Export in flight. ``analyzed`` is restored on success and on failure."""

    stage: ClassVar[Stage] = Stage.EXPORTING

    analyzed: Analyzed
    request: ExportRequest

    @property
    def document(self) -> Document:
        return self.analyzed.document


WorkflowState = Union[Idle, FileSelected, Uploading, Extracted, Analyzing, Analyzed, Exporting]

BUSY_STAGES = frozenset({Stage.UPLOADING, Stage.ANALYZING, Stage.EXPORTING})
