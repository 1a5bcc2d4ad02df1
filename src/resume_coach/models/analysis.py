"""Pydantic models for the analysis service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AnalysisRequest(BaseModel):
    resume_text: str
    target_role: str | None = None


class AnalysisResult(BaseModel):
    """Structured feedback for one résumé. Replaced wholesale on re-analysis."""

    model_config = ConfigDict(frozen=True)

    missing_sections: tuple[str, ...]
    weak_areas: tuple[str, ...]
    improvement_suggestions: tuple[str, ...]
    improved_resume: str
