"""
Session record owned by the BrowserManager.

One BrowserSession aggregates everything that belongs to a live identifier:
the browser process, its isolated context, the active page and the console
log buffer. The manager keeps exactly one map from identifier to record, so
the handles and the buffer are registered and removed together.
"""

import datetime
from typing import Any, List, Optional
from dataclasses import dataclass, field

from ..constants import BLANK_PAGE_URLS


def _utc_now_iso() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class LogEntry:
    """
    One console message or uncaught page error.

    Attributes:
        type: Console level ("log", "info", "warning", "debug", ...) or "error".
        text: Message text.
        timestamp: ISO-8601 UTC time the event arrived.
        args: Stringified console arguments (console events only).
        stack: Stack trace (page errors only).
    """

    type: str
    text: str
    timestamp: str = field(default_factory=_utc_now_iso)
    args: Optional[List[str]] = None
    stack: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"type": self.type, "text": self.text, "timestamp": self.timestamp}
        if self.args is not None:
            out["args"] = list(self.args)
        if self.stack is not None:
            out["stack"] = self.stack
        return out


@dataclass
class BrowserSession:
    """
    Live browser automation session.

    Attributes:
        session_id: Caller-chosen identifier, unique among live sessions.
        browser_type: Playwright back-end name ("chromium", "firefox", "webkit").
        browser: Playwright Browser (owns the process).
        context: Isolated BrowserContext opened for this session.
        page: Active Page inside the context.
        logs: Console/page-error entries in arrival order.
    """

    session_id: str
    browser_type: str
    browser: Any
    context: Any
    page: Any
    logs: List[LogEntry] = field(default_factory=list)

    def current_url(self) -> Optional[str]:
        """Page URL, or None while the page still shows its initial blank document."""
        try:
            url = self.page.url
        except Exception:
            return None
        if url in BLANK_PAGE_URLS:
            return None
        return url

    def log_snapshot(self) -> List[dict]:
        return [entry.to_dict() for entry in self.logs]

    def clear_logs(self) -> None:
        self.logs.clear()


__all__ = ["LogEntry", "BrowserSession"]
