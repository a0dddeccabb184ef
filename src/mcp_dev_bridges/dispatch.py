"""
Tool-call dispatch.

A Dispatcher maps a tool name onto a handler through a closed Enum, so the
set of callable tools is exactly the Enum's members. Unknown names and
handler failures both come back as error-flagged envelopes; nothing but
cancellation propagates out of invoke().
"""

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Sequence, Type

from mcp.types import CallToolResult

from .errors import UnknownToolError
from .decorators import error_envelope
from .tools.definitions import (
    BrowserTool,
    ChatTool,
    ToolDescriptor,
    BROWSER_TOOLS,
    CHAT_TOOLS,
)
from .tools.browser import BROWSER_HANDLERS
from .tools.chat import CHAT_HANDLERS

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Dict[str, Any]], Awaitable[CallToolResult]]


class Dispatcher:
    """
    Args:
        tool_enum: Closed enumeration of tool names.
        handlers: One envelope-returning handler per enum member.
        target: Object passed to every handler (BrowserManager or ChatAssistant).
        tools: Descriptors advertised for this dispatcher, in order.
    """

    def __init__(
        self,
        tool_enum: Type[Enum],
        handlers: Mapping[Enum, Handler],
        target: Any,
        tools: Sequence[ToolDescriptor] = (),
    ):
        missing = [member.value for member in tool_enum if member not in handlers]
        extra = [key for key in handlers if not isinstance(key, tool_enum)]
        if missing or extra:
            raise ValueError(f"Handler table does not match {tool_enum.__name__}: missing={missing} extra={extra}")

        self.tool_enum = tool_enum
        self.handlers = dict(handlers)
        self.target = target
        self.tools = tuple(tools)

    def resolve(self, tool_name: str) -> Enum:
        try:
            return self.tool_enum(tool_name)
        except ValueError:
            raise UnknownToolError(tool_name) from None

    async def invoke(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Run one tool call and return its envelope."""
        try:
            tool = self.resolve(tool_name)
        except UnknownToolError as e:
            logger.warning("%s", e)
            return error_envelope(e)

        logger.debug("Invoking %s", tool.value)
        return await self.handlers[tool](self.target, dict(arguments or {}))


def browser_dispatcher(manager) -> Dispatcher:
    return Dispatcher(BrowserTool, BROWSER_HANDLERS, manager, BROWSER_TOOLS)


def chat_dispatcher(assistant) -> Dispatcher:
    return Dispatcher(ChatTool, CHAT_HANDLERS, assistant, CHAT_TOOLS)


__all__ = ["Dispatcher", "browser_dispatcher", "chat_dispatcher"]
