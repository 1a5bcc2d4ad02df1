"""Data models for the resume workflow."""

from resume_coach.models.analysis import AnalysisRequest, AnalysisResult
from resume_coach.models.document import (
    Document,
    Extraction,
    SelectedFile,
    UploadResponse,
)
from resume_coach.models.export import (
    EXPORT_FORMATS,
    TEMPLATE_STYLES,
    BinaryArtifact,
    ExportRequest,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "BinaryArtifact",
    "Document",
    "EXPORT_FORMATS",
    "ExportRequest",
    "Extraction",
    "SelectedFile",
    "TEMPLATE_STYLES",
    "UploadResponse",
]
