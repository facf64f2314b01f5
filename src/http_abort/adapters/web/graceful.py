"""Endpoint wrappers that render aborted requests instead of crashing."""

import functools
from collections.abc import Awaitable, Callable

from starlette._utils import is_async_callable
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from http_abort.adapters.renderers.status_only import render_status_only
from http_abort.adapters.web.recovery import attempt_to_recover
from http_abort.domain.contracts.renderer import Renderer

Endpoint = Callable[[Request], Awaitable[Response] | Response]
GracefulEndpoint = Callable[[Request], Awaitable[Response]]


async def _call_endpoint(handler: Endpoint, request: Request) -> Response:
    # Same dispatch as Starlette's request_response: sync endpoints run in a threadpool.
    if is_async_callable(handler):
        return await handler(request)  # type: ignore[misc]
    return await run_in_threadpool(handler, request)  # type: ignore[arg-type]


def gracefully_render(handler: Endpoint, renderer: Renderer) -> GracefulEndpoint:
    """Render any Reason to abort with the provided Renderer.

    An error or plain string given to ``Abort`` (or any exception raised by
    the handler) is treated as an Internal Server Error. Anything else given
    to ``Abort``, and exceptions outside the ``Exception`` hierarchy, are
    re-raised unchanged. Starlette's ``HTTPException`` is left to Starlette.
    Nothing recovers from errors raised by the renderer.
    """

    @functools.wraps(handler)
    async def graceful_handler(request: Request) -> Response:
        try:
            return await _call_endpoint(handler, request)
        except HTTPException:
            raise
        except BaseException as exc:
            response = attempt_to_recover(exc, renderer)
            if response is None:
                raise
            return response

    return graceful_handler


def gracefully(handler: Endpoint) -> GracefulEndpoint:
    """Answer any Reason to abort with its status code and no body.

    See ``gracefully_render`` for details.
    """
    return gracefully_render(handler, render_status_only)
