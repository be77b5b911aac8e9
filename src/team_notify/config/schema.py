"""Configuration schema. Every field has a default; a config file only overrides."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class TelemetryConfig(BaseModel):
    """Optional OpenTelemetry tracing configuration."""
    enabled: bool = False
    service_name: str = "team-notify"
    exporter: Literal["none", "console", "otlp"] = Field(
        "none",
        description="Span exporter: 'none' (default), 'console' (stdout), or 'otlp' (gRPC endpoint).",
    )
    otlp_endpoint: str = Field(
        "",
        description="OTLP gRPC endpoint, e.g. 'http://localhost:4317'. Required when exporter='otlp'.",
    )


class TeamsConfig(BaseModel):
    """Root config for the teams CLI."""
    repository: str = Field(
        ".",
        description="Path inside the git repository whose revisions are diffed.",
    )
    mentors_team: str = Field("mentors", description="Team cc'd by cc-mentors-header-cmd.")
    cc_header: str = Field("X-Debbugs-Cc", description="Mail header used to cc team members.")
    fallback_width: int = Field(
        80,
        ge=20,
        description="Columns used to wrap list-teams output when the terminal width is unknown.",
    )
    codeowners_handle_prefix: str = Field(
        "@guix/",
        description="Prefix prepended to team ids in the generated CODEOWNERS file.",
    )
    telemetry: Optional[TelemetryConfig] = None


DEFAULT_CONFIG = TeamsConfig()
