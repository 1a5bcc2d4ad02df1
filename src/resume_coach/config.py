"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from resume_coach.models.export import EXPORT_FORMATS, TEMPLATE_STYLES

BACKEND_URL_ENV = "RESUME_COACH_BACKEND_URL"


@dataclass(frozen=True)
class ApiConfig:
    backend_url: str = "http://localhost:8000"
    api_prefix: str = "/api"
    timeout: float | None = None  # None: no client-side timeout

    def __post_init__(self) -> None:
        if not self.backend_url:
            raise ValueError("backend_url must not be empty")
        if self.timeout is not None and self.timeout < 1:
            raise ValueError(f"timeout must be at least 1 second, got {self.timeout}")

    @property
    def base_url(self) -> str:
        prefix = "/" + self.api_prefix.strip("/") if self.api_prefix.strip("/") else ""
        return self.backend_url.rstrip("/") + prefix


@dataclass(frozen=True)
class ExportConfig:
    template_style: str = "professional"
    format: str = "pdf"
    output_dir: str = "./output"

    def __post_init__(self) -> None:
        if self.template_style not in TEMPLATE_STYLES:
            raise ValueError(
                f"template_style must be one of {', '.join(TEMPLATE_STYLES)}, "
                f"got {self.template_style!r}"
            )
        if self.format not in EXPORT_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(EXPORT_FORMATS)}, got {self.format!r}"
            )

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    The backend URL can be overridden with the RESUME_COACH_BACKEND_URL
    environment variable.
    """
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    api = ApiConfig(**raw.get("api", {}))
    env_url = os.environ.get(BACKEND_URL_ENV)
    if env_url:
        api = replace(api, backend_url=env_url)

    return AppConfig(
        api=api,
        export=ExportConfig(**raw.get("export", {})),
    )
