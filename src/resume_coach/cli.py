"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel

from resume_coach.config import load_config
from resume_coach.models.analysis import AnalysisResult
from resume_coach.models.document import SelectedFile
from resume_coach.models.export import EXPORT_FORMATS, TEMPLATE_STYLES, BinaryArtifact
from resume_coach.pipeline.coordinator import WorkflowCoordinator
from resume_coach.pipeline.presenter import Presenter, Signal
from resume_coach.utils.file_validator import SUPPORTED_EXTENSIONS, Rejected, validate_file

app = typer.Typer(
    name="resume-coach",
    help="AI résumé analysis, editing and export",
    no_args_is_help=True,
)
console = Console()


class ConsolePresenter(Presenter):
    """Prints workflow signals and saves exported files to ``output_dir``."""

    def __init__(self, console: Console, output_dir: Path):
        self.console = console
        self.output_dir = output_dir
        self.saved: list[Path] = []

    def notify(self, signal: Signal, message: str) -> None:
        color = "red" if signal.is_error else "green"
        self.console.print(f"[{color}]{message}[/{color}]")

    def deliver(self, artifact: BinaryArtifact) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / artifact.filename
        path.write_bytes(artifact.content)
        self.saved.append(path)
        self.console.print(f"[green]Saved: {path} ({artifact.size:,} bytes)[/green]")


def _bullets(items: tuple[str, ...], empty: str) -> str:
    if not items:
        return f"[green]{empty}[/green]"
    return "\n".join(f"- {item}" for item in items)


def _print_analysis(result: AnalysisResult) -> None:
    console.print(Panel(
        _bullets(result.missing_sections, "All sections present!"),
        title="Missing Sections",
        border_style="red",
    ))
    console.print(Panel(
        _bullets(result.weak_areas, "No weak areas detected!"),
        title="Weak Areas",
        border_style="yellow",
    ))
    console.print(Panel(
        _bullets(result.improvement_suggestions, "Resume looks great!"),
        title="Suggestions",
        border_style="blue",
    ))


@app.command()
def run(
    file: Path = typer.Argument(help="Résumé file (PDF/DOCX)"),
    target_role: str = typer.Option(None, "--target-role", "-r", help="Job title to tailor the analysis to"),
    template: str = typer.Option(None, "--template", "-t", help="Template style for export"),
    fmt: str = typer.Option(None, "--format", "-f", help="Export format (pdf/docx)"),
    output: Path = typer.Option(None, "--output", "-o", help="Directory for the exported file"),
    edit: bool = typer.Option(False, "--edit", help="Edit the improved résumé in $EDITOR before export"),
    show_resume: bool = typer.Option(False, "--show", help="Print the improved résumé"),
    backend_url: str = typer.Option(None, "--backend-url", help="Backend base URL (overrides config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Upload, analyze and export a résumé in one go."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    config = load_config()
    if backend_url:
        config = replace(config, api=replace(config.api, backend_url=backend_url))
    template = template or config.export.template_style
    fmt = fmt or config.export.format
    if template not in TEMPLATE_STYLES or fmt not in EXPORT_FORMATS:
        console.print(f"[red]unsupported export option: {template}/{fmt}[/red]")
        console.print(f"[dim]Templates: {', '.join(TEMPLATE_STYLES)}; formats: {', '.join(EXPORT_FORMATS)}[/dim]")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Backend: {config.api.base_url}[/dim]")
        console.print(f"[dim]Export: {template} / {fmt}[/dim]")

    presenter = ConsolePresenter(console, output or config.export.resolved_output_dir)
    coordinator = WorkflowCoordinator.from_config(config, presenter)

    if not coordinator.select_file(SelectedFile.from_path(file)):
        console.print(f"[dim]Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}[/dim]")
        raise typer.Exit(1)

    with console.status("Uploading résumé..."):
        asyncio.run(coordinator.upload())
    if coordinator.document is None:
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Extracted {len(coordinator.document.extracted_text)} chars[/dim]")

    with console.status("Analyzing with AI..."):
        result = asyncio.run(coordinator.analyze(target_role=target_role))
    if result is None:
        raise typer.Exit(1)

    _print_analysis(result)

    if edit:
        edited = typer.edit(coordinator.edited_resume, extension=".md")
        if edited is not None:
            coordinator.edit_improved_resume(edited)

    if show_resume:
        console.print(Panel(coordinator.edited_resume, title="Improved Resume"))

    with console.status("Exporting..."):
        artifact = asyncio.run(coordinator.export(template, fmt))
    if artifact is None:
        raise typer.Exit(1)


@app.command()
def check(
    file: Path = typer.Argument(help="File to check"),
) -> None:
    """Check whether a file can be uploaded."""
    result = validate_file(file)
    if isinstance(result, Rejected):
        console.print(f"[red]{result.name}: {result.reason}[/red]")
        console.print(f"[dim]Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}[/dim]")
        raise typer.Exit(1)
    console.print(f"[green]{result.name}: OK[/green]")


@app.command()
def templates() -> None:
    """List export template styles and formats."""
    for name in TEMPLATE_STYLES:
        console.print(f"  [bold]{name}[/bold]")
    console.print(f"\n[dim]Formats: {', '.join(EXPORT_FORMATS)}[/dim]")


if __name__ == "__main__":
    app()
