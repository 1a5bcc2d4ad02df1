"""Client for the AI analysis endpoint."""

from __future__ import annotations

import logging

import httpx

from resume_coach.clients.base import ServiceClient, error_detail
from resume_coach.errors import TransportFailure
from resume_coach.models.analysis import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)

ANALYSIS_FAILED = "analysis failed"


class AnalysisClient(ServiceClient):
    """Sends résumé text to POST /api/analyze."""

    async def analyze(self, resume_text: str, target_role: str | None = None) -> AnalysisResult:
        """Analyze ``resume_text``, optionally tailored to ``target_role``.

        The caller is responsible for rejecting blank text. A blank target
        role is sent as null.
        """
        role = target_role.strip() if target_role else None
        request = AnalysisRequest(resume_text=resume_text, target_role=role or None)
        logger.info("Analyzing resume (%d chars, target_role=%s)", len(resume_text), request.target_role)
        try:
            response = await self._post("/analyze", json=request.model_dump())
        except httpx.HTTPError as exc:
            logger.error("Analysis request failed", exc_info=True)
            raise TransportFailure(ANALYSIS_FAILED) from exc

        if not response.is_success:
            logger.error("Analysis rejected with status %d", response.status_code)
            raise TransportFailure(
                error_detail(response) or ANALYSIS_FAILED,
                status_code=response.status_code,
            )

        try:
            result = AnalysisResult.model_validate(response.json())
        except ValueError as exc:
            logger.error("Malformed analysis response", exc_info=True)
            raise TransportFailure(ANALYSIS_FAILED, status_code=response.status_code) from exc

        logger.debug(
            "Analysis: %d missing, %d weak, %d suggestions",
            len(result.missing_sections),
            len(result.weak_areas),
            len(result.improvement_suggestions),
        )
        return result
