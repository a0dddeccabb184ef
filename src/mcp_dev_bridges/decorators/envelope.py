# mcp_dev_bridges/decorators/envelope.py

import os
import json
import asyncio
import inspect
import logging
import functools
import traceback
from typing import Any, Callable

from mcp.types import CallToolResult, TextContent


__all__ = [
    "tool_envelope",
    "success_envelope",
    "error_envelope",
]

logger = logging.getLogger(__name__)


def _normalize(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    try:
        return json.dumps(value, indent=2, ensure_ascii=False, default=lambda o: getattr(o, "__dict__", repr(o)))
    except (TypeError, ValueError):
        return str(value)


def success_envelope(value: Any) -> CallToolResult:
    """Wrap a handler result as a text success envelope."""
    return CallToolResult(content=[TextContent(type="text", text=_normalize(value))], isError=False)


def error_envelope(err: BaseException, include_traceback: bool = False) -> CallToolResult:
    """Wrap a failure as an error-flagged text envelope carrying its message."""
    text = f"Error: {err}"
    if include_traceback:
        tb = "".join(traceback.format_exception(type(err), err, err.__traceback__))
        text = f"{text}\n\n{tb}"
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


def tool_envelope(func: Callable):
    """
    Decorator for tool handlers:
      - Works with both async and sync callables.
      - On success: wraps the return value in a success envelope (json.dumps for non-strings).
      - On error: returns an error-flagged envelope with the exception message.
    Environment:
      - Set MCP_TOOL_ERRORS_TRACEBACK=1 to append the traceback to error envelopes.
    """
    include_tb = os.getenv("MCP_TOOL_ERRORS_TRACEBACK", "0") not in ("0", "false", "False")

    def _failed(e: Exception) -> CallToolResult:
        logger.warning("Tool %s failed: %s: %s", func.__name__, e.__class__.__name__, e)
        return error_envelope(e, include_traceback=include_tb)

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                result = await func(*args, **kwargs)
            except asyncio.CancelledError:
                # Preserve cooperative cancellation semantics
                raise
            except Exception as e:
                return _failed(e)
            return success_envelope(result)
        return wrapper
    else:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                return _failed(e)
            return success_envelope(result)
        return wrapper
