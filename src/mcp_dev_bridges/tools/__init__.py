# mcp_dev_bridges/tools/__init__.py
"""
MCP tool registries and handlers.

- definitions: closed tool-name enums and static descriptor tuples
- browser / chat: async handlers that take (target, arguments) and return
  a CallToolResult envelope
"""

from .definitions import (
    BrowserTool,
    ChatTool,
    ToolDescriptor,
    BROWSER_TOOLS,
    CHAT_TOOLS,
)
from .browser import BROWSER_HANDLERS
from .chat import CHAT_HANDLERS

__all__ = [
    'BrowserTool',
    'ChatTool',
    'ToolDescriptor',
    'BROWSER_TOOLS',
    'CHAT_TOOLS',
    'BROWSER_HANDLERS',
    'CHAT_HANDLERS',
]
