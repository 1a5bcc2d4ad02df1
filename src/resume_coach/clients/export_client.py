"""Client for the document export endpoint."""

from __future__ import annotations

import logging

import httpx

from resume_coach.clients.base import ServiceClient
from resume_coach.errors import TransportFailure
from resume_coach.models.export import MEDIA_TYPES, BinaryArtifact, ExportRequest

logger = logging.getLogger(__name__)

EXPORT_FAILED = "export failed"


class ExportClient(ServiceClient):
    """Requests a rendered PDF/DOCX from POST /api/export."""

    async def export(self, request: ExportRequest) -> BinaryArtifact:
        """Render ``request`` and return the binary body.

        Error bodies are binary-typed too, so failures never carry the
        service's detail message.
        """
        logger.info(
            "Exporting resume as %s (%s template)", request.format_, request.template_style
        )
        try:
            response = await self._post("/export", json=request.to_payload())
        except httpx.HTTPError as exc:
            logger.error("Export request failed", exc_info=True)
            raise TransportFailure(EXPORT_FAILED) from exc

        if not response.is_success:
            logger.error("Export rejected with status %d", response.status_code)
            raise TransportFailure(EXPORT_FAILED, status_code=response.status_code)

        media_type = response.headers.get("content-type", "").split(";")[0].strip()
        return BinaryArtifact(
            content=response.content,
            filename=request.suggested_filename,
            media_type=media_type or MEDIA_TYPES[request.format_],
        )
