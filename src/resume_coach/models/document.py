"""Models for the selected file, the upload handoff and the active document."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass(frozen=True)
class SelectedFile:
    """A file picked by the user, held until it is uploaded."""

    name: str
    content: bytes

    @property
    def content_type(self) -> str:
        if self.name.lower().endswith(".docx"):
            return DOCX_MEDIA_TYPE
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> SelectedFile:
        p = Path(path)
        return cls(name=p.name, content=p.read_bytes())


@dataclass(frozen=True)
class Extraction:
    """Text extracted by the upload service, handed to the analysis stage."""

    text: str | None
    filename: str | None = None


@dataclass(frozen=True)
class Document:
    """The active résumé once its text has been extracted."""

    extracted_text: str
    filename: str | None = None
    target_role: str | None = None


class UploadResponse(BaseModel):
    """Payload returned by POST /api/upload."""

    success: bool = False
    extracted_text: str | None = None
    filename: str | None = None
    detail: str | None = None
