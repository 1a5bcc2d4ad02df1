"""Models for export requests and the downloaded artifact."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from resume_coach.models.document import DOCX_MEDIA_TYPE

TemplateStyle = Literal["professional", "modern", "classic", "creative"]
ExportFormat = Literal["pdf", "docx"]

TEMPLATE_STYLES: tuple[str, ...] = get_args(TemplateStyle)
EXPORT_FORMATS: tuple[str, ...] = get_args(ExportFormat)

MEDIA_TYPES: dict[str, str] = {
    "pdf": "application/pdf",
    "docx": DOCX_MEDIA_TYPE,
}


class ExportRequest(BaseModel):
    """Body of POST /api/export. Built fresh for every export action."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resume_text: str
    template_style: TemplateStyle = "professional"
    format_: ExportFormat = Field(default="pdf", alias="format")

    @property
    def suggested_filename(self) -> str:
        return f"resume_{self.template_style}.{self.format_}"

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class BinaryArtifact:
    """An exported document ready to be saved by the presentation layer."""

    content: bytes
    filename: str
    media_type: str

    @property
    def size(self) -> int:
        return len(self.content)
