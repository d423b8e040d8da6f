"""Configuration model for the results dashboard."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class DashboardConfig(BaseModel):
    # Data source: local path or http(s) URL, optionally "env:VAR"
    results_source: str = ""
    fetch_timeout_seconds: float = Field(default=60.0, gt=0)

    # Table and pagination
    page_size: int = Field(default=100, gt=0)
    wide_pagination_radius: int = Field(default=2, ge=0)
    narrow_pagination_radius: int = Field(default=1, ge=0)

    # Search box quiet interval before a search term settles
    search_debounce_seconds: float = Field(default=1.0, ge=0)

    # Reporting
    report_formats: list[str] = Field(default_factory=lambda: ["html", "json"])
    report_output_dir: str = "./dashboard-reports"

    @field_validator("results_source", mode="before")
    @classmethod
    def resolve_env_source(cls, v: str) -> str:
        if isinstance(v, str) and v.startswith("env:"):
            env_var = v[4:]
            resolved = os.environ.get(env_var)
            if resolved is None:
                raise ValueError(f"Environment variable '{env_var}' not set")
            return resolved
        return v

    @field_validator("report_formats")
    @classmethod
    def known_formats(cls, v: list[str]) -> list[str]:
        unknown = [fmt for fmt in v if fmt not in ("html", "json")]
        if unknown:
            raise ValueError(f"Unknown report formats: {', '.join(unknown)}")
        return v

    @classmethod
    def load(cls, path: str | Path) -> "DashboardConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
