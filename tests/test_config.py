"""Tests for configuration adapter."""

import pytest

from http_abort.adapters.config import RecoveryConfig, resolve_renderer
from http_abort.adapters.renderers import (
    render_as_json,
    render_as_json_with_status,
    render_status_only,
)


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    monkeypatch.delenv("HTTP_ABORT_RENDERER", raising=False)

    config = RecoveryConfig()

    assert config.renderer == "status"
    assert resolve_renderer(config) is render_status_only


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HTTP_ABORT_RENDERER", "JSON")

    config = RecoveryConfig()

    assert config.renderer == "json"
    assert resolve_renderer(config) is render_as_json


def test_config_resolves_extended_json_renderer() -> None:
    """Given renderer=json_with_status, when resolving, then the extended renderer is returned."""
    config = RecoveryConfig(renderer="json_with_status")

    assert resolve_renderer(config) is render_as_json_with_status


def test_config_validates_renderer(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown renderer, when loading config, then validation error is raised."""
    monkeypatch.setenv("HTTP_ABORT_RENDERER", "xml")

    with pytest.raises(ValueError, match="renderer must be either"):
        RecoveryConfig()
