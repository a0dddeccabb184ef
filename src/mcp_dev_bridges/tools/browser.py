"""
Browser tool handlers.

Each handler takes the BrowserManager and the raw argument object, applies
the call-site defaults (notably `id` -> "default") and delegates.
"""

from typing import Any, Dict

from ..constants import DEFAULT_SESSION_ID, DEFAULT_BROWSER_TYPE
from ..decorators import tool_envelope
from .definitions import BrowserTool
from ._args import require


def _session_id(arguments: Dict[str, Any]) -> str:
    return arguments.get("id", DEFAULT_SESSION_ID)


@tool_envelope
async def browser_launch(manager, arguments: Dict[str, Any]):
    options = dict(arguments)
    session_id = options.pop("id", DEFAULT_SESSION_ID)
    browser_type = options.pop("browserType", DEFAULT_BROWSER_TYPE)
    headless = options.pop("headless", True)
    return await manager.launch(session_id, browser_type=browser_type, headless=headless, **options)


@tool_envelope
async def browser_navigate(manager, arguments: Dict[str, Any]):
    return await manager.navigate(_session_id(arguments), require(arguments, "url"))


@tool_envelope
async def browser_screenshot(manager, arguments: Dict[str, Any]):
    return await manager.screenshot(
        _session_id(arguments),
        full_page=arguments.get("fullPage", True),
        image_type=arguments.get("type", "png"),
    )


@tool_envelope
async def browser_console_logs(manager, arguments: Dict[str, Any]):
    logs = await manager.get_console_logs(_session_id(arguments), clear=arguments.get("clear", False))
    return {"logs": logs, "count": len(logs)}


@tool_envelope
async def browser_execute(manager, arguments: Dict[str, Any]):
    return await manager.execute_script(_session_id(arguments), require(arguments, "script"))


@tool_envelope
async def browser_wait_for(manager, arguments: Dict[str, Any]):
    return await manager.wait_for_selector(
        _session_id(arguments),
        require(arguments, "selector"),
        timeout=arguments.get("timeout"),
    )


@tool_envelope
async def browser_close(manager, arguments: Dict[str, Any]):
    return await manager.close(_session_id(arguments))


@tool_envelope
async def browser_list(manager, arguments: Dict[str, Any]):
    return {"browsers": manager.list_sessions()}


BROWSER_HANDLERS = {
    BrowserTool.LAUNCH: browser_launch,
    BrowserTool.NAVIGATE: browser_navigate,
    BrowserTool.SCREENSHOT: browser_screenshot,
    BrowserTool.CONSOLE_LOGS: browser_console_logs,
    BrowserTool.EXECUTE: browser_execute,
    BrowserTool.WAIT_FOR: browser_wait_for,
    BrowserTool.CLOSE: browser_close,
    BrowserTool.LIST: browser_list,
}


__all__ = [
    "browser_launch",
    "browser_navigate",
    "browser_screenshot",
    "browser_console_logs",
    "browser_execute",
    "browser_wait_for",
    "browser_close",
    "browser_list",
    "BROWSER_HANDLERS",
]
