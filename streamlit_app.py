"""Streamlit Web UI for resume-coach.

Two steps on one page:
  1) Upload: pick a PDF/DOCX résumé and extract its text
  2) Analysis: optional target role, AI analysis, edit the rewrite, export
"""

from __future__ import annotations

import asyncio

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

from resume_coach.config import load_config
from resume_coach.models.document import SelectedFile
from resume_coach.models.export import EXPORT_FORMATS, TEMPLATE_STYLES
from resume_coach.pipeline.coordinator import WorkflowCoordinator
from resume_coach.pipeline.presenter import Presenter, Signal
from resume_coach.pipeline.states import Stage

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Resume Coach",
    page_icon=":page_facing_up:",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Presenter
# ---------------------------------------------------------------------------


class StreamlitPresenter(Presenter):
    """Queues messages and the latest artifact in session state.

    Streamlit reruns the script after every interaction, so messages are
    flushed on the next render instead of being drawn immediately.
    """

    def notify(self, signal: Signal, message: str) -> None:
        super().notify(signal, message)
        st.session_state.messages.append((signal, message))

    def deliver(self, artifact) -> None:
        st.session_state.artifact = artifact


def _coordinator() -> WorkflowCoordinator:
    if "coordinator" not in st.session_state:
        st.session_state.messages = []
        st.session_state.artifact = None
        st.session_state.coordinator = WorkflowCoordinator.from_config(
            load_config(), StreamlitPresenter()
        )
    return st.session_state.coordinator


def _flush_messages() -> None:
    for signal, message in st.session_state.messages:
        if signal.is_error:
            st.error(message)
        else:
            st.success(message)
    st.session_state.messages = []


def _bullets(items, empty: str) -> None:
    if not items:
        st.success(empty)
        return
    for item in items:
        st.markdown(f"- {item}")


coordinator = _coordinator()

with st.sidebar:
    st.title("Resume Coach")
    st.caption("AI-Powered Resume Analysis")
    st.caption(f"Stage: {coordinator.stage.value}")
    if coordinator.document is not None and st.button("Back to Upload", disabled=coordinator.busy):
        coordinator.back_to_upload()
        st.session_state.artifact = None
        st.session_state.pop("picked_file_id", None)
        st.rerun()

_flush_messages()

# ---------------------------------------------------------------------------
# Step 1: Upload
# ---------------------------------------------------------------------------

if coordinator.stage in (Stage.IDLE, Stage.FILE_SELECTED, Stage.UPLOADING):
    st.header("Upload Your Resume")
    st.markdown("Drag and drop your resume here, or click to browse. Supported formats: PDF, DOCX")

    uploaded = st.file_uploader("Resume file", type=["pdf", "docx"])
    # Only react to a new pick; a rejected file would otherwise rerun forever
    if uploaded is not None and uploaded.file_id != st.session_state.get("picked_file_id"):
        st.session_state.picked_file_id = uploaded.file_id
        coordinator.select_file(SelectedFile(name=uploaded.name, content=uploaded.getvalue()))
        st.rerun()

    if st.button(
        "Analyze Resume",
        type="primary",
        disabled=coordinator.selected_file is None or coordinator.uploading,
    ):
        with st.spinner("Processing..."):
            asyncio.run(coordinator.upload())
        st.rerun()
    st.stop()

# ---------------------------------------------------------------------------
# Step 2: Analysis & editor
# ---------------------------------------------------------------------------

st.header("Resume Analysis & Editor")
left, right = st.columns(2)

with left:
    st.subheader("Original Resume")
    target_role = st.text_input(
        "Target Role (Optional)",
        value=coordinator.document.target_role or "",
        placeholder="e.g., Project Manager, Data Analyst",
    )
    resume_text = st.text_area("Resume Text", value=coordinator.resume_text or "", height=400)

    if st.button("Analyze with AI", type="primary", disabled=coordinator.busy):
        with st.spinner("Analyzing with AI..."):
            asyncio.run(coordinator.analyze(target_role=target_role, resume_text=resume_text))
        st.session_state.artifact = None
        st.rerun()

with right:
    analysis = coordinator.analysis
    if analysis is None:
        st.info('Ready to Analyze. Click "Analyze with AI" to get insights and recommendations for your resume.')
    else:
        st.subheader("AI Analysis Results")
        missing_tab, weak_tab, suggestions_tab = st.tabs(["Missing", "Weak Areas", "Suggestions"])
        with missing_tab:
            _bullets(analysis.missing_sections, "All sections present!")
        with weak_tab:
            _bullets(analysis.weak_areas, "No weak areas detected!")
        with suggestions_tab:
            _bullets(analysis.improvement_suggestions, "Resume looks great!")

        st.subheader("Improved Resume")
        edited = st.text_area("Improved resume", value=coordinator.edited_resume, height=300,
                              label_visibility="collapsed")
        if edited != coordinator.edited_resume:
            coordinator.edit_improved_resume(edited)
            st.session_state.artifact = None

        col_template, col_format = st.columns(2)
        template_style = col_template.selectbox(
            "Template Style", TEMPLATE_STYLES, format_func=str.capitalize
        )
        export_format = col_format.selectbox("Format", EXPORT_FORMATS, format_func=str.upper)

        if st.button("Export Resume", disabled=coordinator.busy):
            st.session_state.artifact = None
            with st.spinner("Exporting..."):
                asyncio.run(coordinator.export(template_style, export_format))
            st.rerun()

        artifact = st.session_state.artifact
        if artifact is not None:
            st.download_button(
                f"Download {artifact.filename}",
                data=artifact.content,
                file_name=artifact.filename,
                mime=artifact.media_type,
            )
