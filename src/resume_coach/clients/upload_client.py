"""Client for the text extraction endpoint."""

from __future__ import annotations

import logging

import httpx

from resume_coach.clients.base import ServiceClient, error_detail
from resume_coach.errors import TransportFailure
from resume_coach.models.document import Extraction, SelectedFile, UploadResponse

logger = logging.getLogger(__name__)

UPLOAD_FAILED = "upload failed"


class UploadClient(ServiceClient):
    """Sends a résumé file to POST /api/upload and returns its extracted text."""

    async def upload(self, file: SelectedFile) -> Extraction:
        """Upload ``file`` once as multipart field ``file``.

        Raises:
            TransportFailure: on transport errors, non-2xx responses, an
                unsuccessful or malformed payload.
        """
        logger.info("Uploading %s (%d bytes)", file.name, file.size)
        files = {"file": (file.name, file.content, file.content_type)}
        try:
            response = await self._post("/upload", files=files)
        except httpx.HTTPError as exc:
            logger.error("Upload request failed", exc_info=True)
            raise TransportFailure(UPLOAD_FAILED) from exc

        if not response.is_success:
            logger.error("Upload rejected with status %d", response.status_code)
            raise TransportFailure(
                error_detail(response) or UPLOAD_FAILED,
                status_code=response.status_code,
            )

        try:
            payload = UploadResponse.model_validate(response.json())
        except ValueError as exc:
            logger.error("Malformed upload response", exc_info=True)
            raise TransportFailure(UPLOAD_FAILED, status_code=response.status_code) from exc

        if not payload.success or payload.extracted_text is None:
            raise TransportFailure(payload.detail or UPLOAD_FAILED, status_code=response.status_code)

        logger.info("Extracted %d characters from %s", len(payload.extracted_text), file.name)
        return Extraction(text=payload.extracted_text, filename=payload.filename or file.name)
