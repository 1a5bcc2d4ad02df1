"""Extension-based gate for résumé files.

Only the file name is inspected. Content is never sniffed, so a renamed
file passes as long as it ends in a supported extension.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from resume_coach.models.document import SelectedFile

SUPPORTED_EXTENSIONS = (".pdf", ".docx")
UNSUPPORTED_FILE_TYPE = "unsupported file type"


@dataclass(frozen=True)
class Accepted:
    name: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    name: str
    reason: str = UNSUPPORTED_FILE_TYPE

    @property
    def accepted(self) -> bool:
        return False


def validate_file(file: SelectedFile | str | Path) -> Accepted | Rejected:
    """Accept .pdf and .docx names (case-insensitive), reject everything else."""
    if isinstance(file, SelectedFile):
        name = file.name
    elif isinstance(file, Path):
        name = file.name
    else:
        name = str(file)

    if name.lower().endswith(SUPPORTED_EXTENSIONS):
        return Accepted(name=name)
    return Rejected(name=name)
