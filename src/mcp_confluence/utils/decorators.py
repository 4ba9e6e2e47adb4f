"""Decorators for Confluence API calls and MCP tool functions."""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

import requests
from fastmcp import Context
from fastmcp.exceptions import ToolError
from requests.exceptions import HTTPError

from ..exceptions import MCPConfluenceAuthenticationError

logger = logging.getLogger("mcp-confluence.utils.decorators")

F = TypeVar("F", bound=Callable[..., Any])


def handle_atlassian_api_errors(service_name: str = "Confluence API") -> Callable[[F], F]:
    """Translate authentication failures and record transport errors.

    - 401/403 responses become MCPConfluenceAuthenticationError.
    - Other HTTP errors (404, 409 version conflicts...) propagate unchanged.
    - Network failures that never produced a response are written to the
      client's audit log, then re-raised.

    Args:
        service_name: Name used in log and error messages
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                if http_err.response is not None and http_err.response.status_code in [
                    401,
                    403,
                ]:
                    error_msg = (
                        f"Authentication failed for {service_name} "
                        f"({http_err.response.status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise MCPConfluenceAuthenticationError(error_msg) from http_err
                logger.error(
                    f"HTTP error during {service_name} call in {func.__name__}: {http_err}"
                )
                raise
            except requests.RequestException as req_err:
                request = getattr(req_err, "request", None)
                audit_logger = getattr(self, "audit_logger", None)
                if audit_logger is not None and req_err.response is None:
                    audit_logger.log_error(
                        getattr(request, "method", None),
                        getattr(request, "url", None) or "",
                        req_err,
                    )
                logger.error(
                    f"Network error during {service_name} call in {func.__name__}: {req_err}"
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def _is_debug_enabled(ctx: Context) -> bool:
    try:
        lifespan_ctx_dict = ctx.request_context.lifespan_context
    except (AttributeError, ValueError):
        return False
    app_lifespan_ctx = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    config = getattr(app_lifespan_ctx, "full_confluence_config", None)
    return bool(getattr(config, "debug", False))


def tool_error_boundary(
    func: Callable[..., Awaitable[str]],
) -> Callable[..., Awaitable[str]]:
    """Convert any failure inside a tool into a uniform ToolError.

    The message is "Error executing <tool>: <reason>". Tracebacks never reach
    the tool result; in debug mode they are written to the log stream.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> str:
        tool_name = func.__name__
        try:
            return await func(ctx, *args, **kwargs)
        except Exception as e:  # noqa: BLE001 - every failure becomes a ToolError
            if _is_debug_enabled(ctx):
                logger.error(f"Tool execution error in {tool_name}", exc_info=True)
            else:
                logger.warning(f"Tool {tool_name} failed: {e}")
            if isinstance(e, ToolError) and str(e).startswith("Error executing"):
                raise
            raise ToolError(f"Error executing {tool_name}: {e}") from e

    return wrapper
