"""12-factor configuration for recovering aborted requests."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from http_abort.adapters.renderers import (
    render_as_json,
    render_as_json_with_status,
    render_status_only,
)
from http_abort.domain.contracts.renderer import Renderer

RENDERERS: dict[str, Renderer] = {
    "status": render_status_only,
    "json": render_as_json,
    "json_with_status": render_as_json_with_status,
}


class RecoveryConfig(BaseSettings):
    """Recovery configuration read from HTTP_ABORT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTP_ABORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    renderer: str = Field(
        default="status",
        description="How recovered aborts are rendered: 'status', 'json' or 'json_with_status'",
    )

    @field_validator("renderer")
    @classmethod
    def validate_renderer(cls, v: str) -> str:
        """Validate renderer is one of the known renderer names."""
        if v.lower() not in RENDERERS:
            raise ValueError("renderer must be either 'status', 'json' or 'json_with_status'")
        return v.lower()


def resolve_renderer(config: RecoveryConfig) -> Renderer:
    """Return the renderer function selected by the configuration."""
    return RENDERERS[config.renderer]
