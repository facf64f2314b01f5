"""Starlette middleware rendering aborted requests for a whole application."""

import logging
from collections.abc import Awaitable, Callable

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from http_abort.adapters.config.recovery_config import RecoveryConfig, resolve_renderer
from http_abort.adapters.renderers.status_only import render_status_only
from http_abort.adapters.web.recovery import attempt_to_recover
from http_abort.domain.contracts.renderer import Renderer

logger = logging.getLogger(__name__)


class GracefulMiddleware(BaseHTTPMiddleware):
    """Middleware to render aborted requests with a configured renderer."""

    def __init__(
        self,
        app: ASGIApp,
        renderer: Renderer = render_status_only,
    ) -> None:
        """Initialize graceful recovery middleware.

        Args:
            app: The ASGI application to wrap.
            renderer: Renderer used for every recovered abort.
        """
        super().__init__(app)
        self.renderer = renderer
        renderer_name = getattr(renderer, "__name__", repr(renderer))
        logger.info(f"Graceful recovery enabled, rendering with {renderer_name}")

    @classmethod
    def from_config(
        cls, app: ASGIApp, config: RecoveryConfig | None = None
    ) -> "GracefulMiddleware":
        """Create the middleware with the renderer selected by configuration."""
        config = config or RecoveryConfig()
        return cls(app, renderer=resolve_renderer(config))

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and render any recognized abort."""
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except BaseException as exc:
            response = attempt_to_recover(exc, self.renderer)
            if response is None:
                raise
            return response
