"""Console and page-error capture for a session's page."""

import logging
from typing import List

from .session import LogEntry

logger = logging.getLogger(__name__)


def _stringify_args(msg) -> List[str]:
    try:
        return [str(arg) for arg in msg.args]
    except Exception:
        return []


def attach_console_listeners(page, logs: List[LogEntry]) -> None:
    """
    Append every console message and uncaught page error of `page` to `logs`.

    The list object is captured by the listeners, so callers must clear it in
    place (never rebind it) to keep capture working.
    """

    def _on_console(msg) -> None:
        logs.append(LogEntry(type=msg.type, text=msg.text, args=_stringify_args(msg)))

    def _on_page_error(error) -> None:
        logs.append(
            LogEntry(
                type="error",
                text=getattr(error, "message", None) or str(error),
                stack=getattr(error, "stack", None),
            )
        )

    page.on("console", _on_console)
    page.on("pageerror", _on_page_error)


__all__ = ["attach_console_listeners"]
