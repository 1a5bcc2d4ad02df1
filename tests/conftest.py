"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_coach.clients.analysis_client import AnalysisClient
from resume_coach.clients.export_client import ExportClient
from resume_coach.clients.upload_client import UploadClient
from resume_coach.models.analysis import AnalysisResult
from resume_coach.models.document import DOCX_MEDIA_TYPE, Extraction, SelectedFile
from resume_coach.models.export import BinaryArtifact
from resume_coach.pipeline.coordinator import WorkflowCoordinator
from resume_coach.pipeline.presenter import Presenter


class RecordingPresenter(Presenter):
    """Presenter that keeps everything the coordinator sends it."""

    def __init__(self):
        self.rendered = []
        self.messages = []
        self.delivered = []

    def render(self, state):
        self.rendered.append(state)

    def notify(self, signal, message):
        self.messages.append((signal, message))

    def deliver(self, artifact):
        self.delivered.append(artifact)

    @property
    def signals(self):
        return [signal for signal, _ in self.messages]


@pytest.fixture
def sample_resume_text() -> str:
    return """John Doe
john.doe@example.com | (555) 010-2030

Experience
- Acme Corp (2020 - present) - Backend Engineer
  - Built REST APIs in Python
  - Maintained PostgreSQL databases

Education
- B.Sc. Computer Science, State University (2016 - 2020)
"""


@pytest.fixture
def analysis_payload() -> dict:
    return {
        "missing_sections": ["Skills"],
        "weak_areas": [],
        "improvement_suggestions": ["Add metrics"],
        "improved_resume": "John Doe (improved)...",
    }


@pytest.fixture
def sample_analysis(analysis_payload) -> AnalysisResult:
    return AnalysisResult(**analysis_payload)


@pytest.fixture
def pdf_file() -> SelectedFile:
    return SelectedFile(name="resume.pdf", content=b"%PDF-1.4 fake")


@pytest.fixture
def extraction() -> Extraction:
    return Extraction(text="John Doe...", filename="resume.pdf")


@pytest.fixture
def docx_artifact() -> BinaryArtifact:
    return BinaryArtifact(
        content=b"PK\x03\x04 fake docx",
        filename="resume_modern.docx",
        media_type=DOCX_MEDIA_TYPE,
    )


@pytest.fixture
def mock_upload_client(extraction) -> UploadClient:
    client = AsyncMock(spec=UploadClient)
    client.upload = AsyncMock(return_value=extraction)
    return client


@pytest.fixture
def mock_analysis_client(sample_analysis) -> AnalysisClient:
    client = AsyncMock(spec=AnalysisClient)
    client.analyze = AsyncMock(return_value=sample_analysis)
    return client


@pytest.fixture
def mock_export_client(docx_artifact) -> ExportClient:
    client = AsyncMock(spec=ExportClient)
    client.export = AsyncMock(return_value=docx_artifact)
    return client


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def coordinator(mock_upload_client, mock_analysis_client, mock_export_client, presenter):
    return WorkflowCoordinator(
        mock_upload_client,
        mock_analysis_client,
        mock_export_client,
        presenter=presenter,
    )
