"""Playwright-backed browser sessions."""

from .session import BrowserSession, LogEntry
from .manager import BrowserManager

__all__ = ["BrowserSession", "LogEntry", "BrowserManager"]
