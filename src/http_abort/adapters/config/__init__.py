"""Configuration adapters."""

from http_abort.adapters.config.recovery_config import RecoveryConfig, resolve_renderer

__all__ = ["RecoveryConfig", "resolve_renderer"]
