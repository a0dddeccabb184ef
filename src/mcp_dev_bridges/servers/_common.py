"""Shared MCP server wiring: tool listing, call dispatch, stdio loop, signals."""

import os
import sys
import signal
import asyncio
import logging
import contextlib
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..dispatch import Dispatcher

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Log to stderr; stdout carries the MCP protocol."""
    level = os.getenv("MCP_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_server(dispatcher: Dispatcher, name: str, version: str) -> Server:
    """Low-level MCP server that lists the dispatcher's registry and routes calls to it."""
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [tool.to_mcp() for tool in dispatcher.tools]

    @server.call_tool()
    async def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        return await dispatcher.invoke(tool_name, arguments)

    return server


async def serve_stdio(server: Server, on_shutdown: Optional[Callable[[], Awaitable[None]]] = None) -> None:
    """
    Serve over stdio until the client disconnects or SIGINT/SIGTERM arrives,
    then run `on_shutdown`.
    """
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, task.cancel)

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except asyncio.CancelledError:
        logger.info("Shutdown signal received")
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            with contextlib.suppress(NotImplementedError, RuntimeError):
                loop.remove_signal_handler(sig)
        if on_shutdown is not None:
            await on_shutdown()


def run(serve: Callable[[], Awaitable[None]]) -> None:
    """Run `serve` to completion; startup or fatal errors exit with status 1."""
    try:
        asyncio.run(serve())
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


__all__ = ["configure_logging", "build_server", "serve_stdio", "run"]
