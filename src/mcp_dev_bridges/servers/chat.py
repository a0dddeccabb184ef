"""
ChatGPT development assistant MCP server.

Requires OPENAI_API_KEY; a missing or malformed configuration stops the
process with exit status 1 before the transport starts.
"""

import logging

from ..config import load_env_file, get_chat_config
from ..chat import ChatAssistant
from ..dispatch import chat_dispatcher
from ._common import configure_logging, build_server, serve_stdio, run

logger = logging.getLogger(__name__)


async def serve() -> None:
    config = get_chat_config()
    assistant = ChatAssistant(config=config)
    server = build_server(chat_dispatcher(assistant), config["server_name"], config["server_version"])
    logger.debug("Starting %s (model=%s)", config["server_name"], config["model"])
    await serve_stdio(server)


def main() -> None:
    load_env_file()
    configure_logging()
    run(serve)


if __name__ == "__main__":
    main()
