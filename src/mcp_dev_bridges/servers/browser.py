"""
Browser bridge MCP server.

Exposes multi-session Playwright automation (launch, navigate, screenshot,
console logs, script execution, selector waits, close, list) over stdio.
All live browsers are closed when the client disconnects or the process
receives SIGINT/SIGTERM.
"""

import logging

from ..config import load_env_file, get_browser_config
from ..context import get_manager
from ..dispatch import browser_dispatcher
from ..utils.diagnostics import collect_diagnostics
from ._common import configure_logging, build_server, serve_stdio, run

logger = logging.getLogger(__name__)


async def serve() -> None:
    config = get_browser_config()
    manager = get_manager()
    server = build_server(browser_dispatcher(manager), config["server_name"], config["server_version"])
    logger.debug("Starting %s\n%s", config["server_name"], collect_diagnostics(manager))
    await serve_stdio(server, on_shutdown=manager.cleanup)


def main() -> None:
    load_env_file()
    configure_logging()
    run(serve)


if __name__ == "__main__":
    main()
