"""
Run one of the servers:

    python -m mcp_dev_bridges browser
    python -m mcp_dev_bridges chat
"""

import sys

from .servers import browser, chat

SERVERS = {
    "browser": browser.main,
    "chat": chat.main,
}


def main(argv=None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    name = argv[0] if argv else "browser"
    entry = SERVERS.get(name)
    if entry is None:
        sys.stderr.write(f"Unknown server {name!r}. Choose one of: {', '.join(SERVERS)}\n")
        sys.exit(2)
    entry()


if __name__ == "__main__":
    main()
