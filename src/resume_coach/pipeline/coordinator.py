"""Workflow coordinator - drives a résumé from file selection to export."""

from __future__ import annotations

import logging
from dataclasses import replace

import httpx
import pydantic

from resume_coach.clients.analysis_client import AnalysisClient
from resume_coach.clients.export_client import ExportClient
from resume_coach.clients.upload_client import UploadClient
from resume_coach.config import AppConfig
from resume_coach.errors import (
    MissingPrecondition,
    ResumeCoachError,
    TransportFailure,
    ValidationError,
)
from resume_coach.models.analysis import AnalysisResult
from resume_coach.models.document import Document, Extraction, SelectedFile
from resume_coach.models.export import BinaryArtifact, ExportRequest
from resume_coach.pipeline.presenter import Presenter, Signal
from resume_coach.pipeline.states import (
    BUSY_STAGES,
    Analyzed,
    Analyzing,
    Exporting,
    Extracted,
    FileSelected,
    Idle,
    Stage,
    Uploading,
    WorkflowState,
)
from resume_coach.utils.file_validator import Rejected, validate_file

logger = logging.getLogger(__name__)

NO_FILE_SELECTED = "no file selected"
NO_RESUME_DATA = "no résumé data found"
RESUME_TEXT_EMPTY = "resume text is empty"
NO_ANALYSIS = "no analysis to export"
NO_EXPORT_CONTENT = "no resume content to export"


class WorkflowCoordinator:
    """Owns the workflow state and sequences the three service clients.

    Every trigger is handled locally: failures are reported through the
    presenter and the state falls back to the last good one. Triggers issued
    while a call is in flight are ignored.
    """

    def __init__(
        self,
        upload_client: UploadClient,
        analysis_client: AnalysisClient,
        export_client: ExportClient,
        presenter: Presenter | None = None,
    ):
        self.upload_client = upload_client
        self.analysis_client = analysis_client
        self.export_client = export_client
        self.presenter = presenter or Presenter()
        self.state: WorkflowState = Idle()
        self.last_error: ResumeCoachError | None = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        presenter: Presenter | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> WorkflowCoordinator:
        """Build a coordinator whose clients all talk to ``config.api``."""
        kwargs = {"timeout": config.api.timeout, "transport": transport}
        base_url = config.api.base_url
        return cls(
            UploadClient(base_url, **kwargs),
            AnalysisClient(base_url, **kwargs),
            ExportClient(base_url, **kwargs),
            presenter=presenter,
        )

    # ------------------------------------------------------------------
    # Read-only view for presentation
    # ------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def uploading(self) -> bool:
        return isinstance(self.state, Uploading)

    @property
    def analyzing(self) -> bool:
        return isinstance(self.state, Analyzing)

    @property
    def exporting(self) -> bool:
        return isinstance(self.state, Exporting)

    @property
    def busy(self) -> bool:
        return self.state.stage in BUSY_STAGES

    @property
    def selected_file(self) -> SelectedFile | None:
        if isinstance(self.state, (FileSelected, Uploading)):
            return self.state.file
        return None

    @property
    def document(self) -> Document | None:
        if isinstance(self.state, (Extracted, Analyzed, Analyzing, Exporting)):
            return self.state.document
        return None

    @property
    def resume_text(self) -> str | None:
        state = self._editable_state()
        return state.resume_text if state is not None else None

    @property
    def analysis(self) -> AnalysisResult | None:
        state = self._analyzed_state()
        return state.analysis if state is not None else None

    @property
    def edited_resume(self) -> str | None:
        state = self._analyzed_state()
        return state.edited_resume if state is not None else None

    # ------------------------------------------------------------------
    # Upload stage
    # ------------------------------------------------------------------

    def select_file(self, file: SelectedFile) -> bool:
        """Make ``file`` the active file if it passes validation."""
        if self._suppressed("select_file"):
            return False
        check = validate_file(file)
        if isinstance(check, Rejected):
            logger.info("Rejected %s: %s", check.name, check.reason)
            self._fail(Signal.VALIDATION_ERROR, ValidationError(check.reason))
            return False
        self._set_state(FileSelected(file=file))
        self.presenter.notify(Signal.FILE_SELECTED, "File selected successfully!")
        return True

    async def upload(self) -> Extraction | None:
        """Upload the selected file and enter the analysis stage on success."""
        if self._suppressed("upload"):
            return None
        state = self.state
        if not isinstance(state, FileSelected):
            self._fail(Signal.VALIDATION_ERROR, ValidationError(NO_FILE_SELECTED))
            return None

        self._set_state(Uploading(file=state.file))
        try:
            extraction = await self.upload_client.upload(state.file)
        except TransportFailure as exc:
            self._set_state(state)
            self._fail(Signal.UPLOAD_ERROR, exc)
            return None
        except Exception:
            self._set_state(state)
            raise

        if not self._open_analysis(extraction):
            return None
        self.presenter.notify(Signal.UPLOAD_SUCCESS, "Resume uploaded successfully!")
        return extraction

    def back_to_upload(self) -> bool:
        """Discard the document and any analysis and start over."""
        if self._suppressed("back_to_upload"):
            return False
        self._set_state(Idle())
        return True

    # ------------------------------------------------------------------
    # Analysis stage
    # ------------------------------------------------------------------

    def enter_analysis(self, handoff: Extraction | None) -> bool:
        """Open the analysis stage from an upload handoff.

        Without extracted text the stage cannot be entered and the workflow
        returns to ``Idle``. An empty string is accepted here and rejected
        later by ``analyze``.
        """
        if self._suppressed("enter_analysis"):
            return False
        return self._open_analysis(handoff)

    def _open_analysis(self, handoff: Extraction | None) -> bool:
        if handoff is None or handoff.text is None:
            self._set_state(Idle())
            self._fail(Signal.ANALYSIS_ERROR, MissingPrecondition(NO_RESUME_DATA))
            return False
        document = Document(extracted_text=handoff.text, filename=handoff.filename)
        self._set_state(Extracted(document=document, resume_text=handoff.text))
        return True

    def edit_resume_text(self, text: str) -> bool:
        """Replace the working copy of the résumé text sent for analysis."""
        state = self._editable_state()
        if state is None:
            logger.debug("edit_resume_text ignored in %s", self.stage.value)
            return False
        self._replace_editable(replace(state, resume_text=text))
        return True

    def set_target_role(self, role: str | None) -> bool:
        state = self._editable_state()
        if state is None:
            logger.debug("set_target_role ignored in %s", self.stage.value)
            return False
        role = role.strip() if role else None
        document = replace(state.document, target_role=role or None)
        self._replace_editable(replace(state, document=document))
        return True

    async def analyze(
        self,
        target_role: str | None = None,
        resume_text: str | None = None,
    ) -> AnalysisResult | None:
        """Run analysis on the working text.

        Re-running from ``Analyzed`` replaces the result and re-seeds the
        edited résumé, discarding unsaved edits.
        """
        if self._suppressed("analyze"):
            return None
        if not isinstance(self.state, (Extracted, Analyzed)):
            self._fail(Signal.ANALYSIS_ERROR, MissingPrecondition(NO_RESUME_DATA))
            return None
        if resume_text is not None:
            self.edit_resume_text(resume_text)
        if target_role is not None:
            self.set_target_role(target_role)

        origin = self.state
        text = origin.resume_text
        if not text.strip():
            self._fail(Signal.VALIDATION_ERROR, ValidationError(RESUME_TEXT_EMPTY))
            return None

        self._set_state(Analyzing(origin=origin))
        try:
            result = await self.analysis_client.analyze(text, origin.document.target_role)
        except TransportFailure as exc:
            self._set_state(origin)
            self._fail(Signal.ANALYSIS_ERROR, exc)
            return None
        except Exception:
            self._set_state(origin)
            raise

        self._set_state(
            Analyzed(
                document=origin.document,
                resume_text=text,
                analysis=result,
                edited_resume=result.improved_resume,
            )
        )
        self.presenter.notify(Signal.ANALYSIS_SUCCESS, "Analysis complete!")
        return result

    # ------------------------------------------------------------------
    # Editing and export
    # ------------------------------------------------------------------

    def edit_improved_resume(self, text: str) -> bool:
        """Replace the edited résumé buffer. Never triggers a transition."""
        state = self._analyzed_state()
        if state is None:
            logger.debug("edit_improved_resume ignored in %s", self.stage.value)
            return False
        self._replace_editable(replace(state, edited_resume=text))
        return True

    async def export(
        self,
        template_style: str = "professional",
        format_: str = "pdf",
    ) -> BinaryArtifact | None:
        """Export the edited résumé and hand the file to the presenter."""
        if self._suppressed("export"):
            return None
        state = self.state
        if not isinstance(state, Analyzed):
            self._fail(Signal.EXPORT_ERROR, MissingPrecondition(NO_ANALYSIS))
            return None
        if not state.edited_resume.strip():
            self._fail(Signal.VALIDATION_ERROR, ValidationError(NO_EXPORT_CONTENT))
            return None
        try:
            request = ExportRequest(
                resume_text=state.edited_resume,
                template_style=template_style,
                format=format_,
            )
        except pydantic.ValidationError:
            message = f"unsupported export option: {template_style}/{format_}"
            self._fail(Signal.VALIDATION_ERROR, ValidationError(message))
            return None

        self._set_state(Exporting(analyzed=state, request=request))
        try:
            artifact = await self.export_client.export(request)
        except TransportFailure as exc:
            self._finish_export()
            self._fail(Signal.EXPORT_ERROR, exc)
            return None
        except Exception:
            self._finish_export()
            raise

        self._finish_export()
        self.presenter.deliver(artifact)
        self.presenter.notify(
            Signal.EXPORT_SUCCESS, f"Resume exported as {request.format_.upper()}"
        )
        return artifact

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_state(self, state: WorkflowState, *, transition: bool = True) -> None:
        if state.stage is not self.state.stage:
            logger.debug("%s -> %s", self.state.stage.value, state.stage.value)
        self.state = state
        if transition and state.stage not in BUSY_STAGES:
            self.last_error = None
        self.presenter.render(state)

    def _fail(self, signal: Signal, error: ResumeCoachError) -> None:
        self.last_error = error
        self.presenter.notify(signal, error.message)

    def _suppressed(self, trigger: str) -> bool:
        if self.busy:
            logger.debug("%s ignored while %s", trigger, self.stage.value)
            return True
        return False

    def _editable_state(self) -> Extracted | Analyzed | None:
        if isinstance(self.state, (Extracted, Analyzed)):
            return self.state
        if isinstance(self.state, Exporting):
            return self.state.analyzed
        return None

    def _analyzed_state(self) -> Analyzed | None:
        state = self._editable_state()
        return state if isinstance(state, Analyzed) else None

    def _replace_editable(self, state: Extracted | Analyzed) -> None:
        if isinstance(self.state, Exporting):
            self._set_state(replace(self.state, analyzed=state), transition=False)
        else:
            self._set_state(state, transition=False)

    def _finish_export(self) -> None:
        current = self.state
        if isinstance(current, Exporting):
            self._set_state(current.analyzed)
