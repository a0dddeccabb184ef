"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional
from importlib import metadata

import psutil


def _package_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "<not installed>"


def collect_diagnostics(manager=None, exc: Optional[BaseException] = None) -> str:
    """
    Collect diagnostic information about the environment and live sessions.

    Args:
        manager: BrowserManager whose sessions should be listed (optional)
        exc: Exception that occurred (optional)

    Returns:
        str: Formatted diagnostic information
    """
    proc = psutil.Process()
    try:
        rss_mb = proc.memory_info().rss / (1024 * 1024)
        children = proc.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        rss_mb = 0.0
        children = []

    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Python            : {sys.version.split()[0]}",
        f"Playwright        : {_package_version('playwright')}",
        f"MCP               : {_package_version('mcp')}",
        f"Process RSS       : {rss_mb:.1f} MB",
        f"Child processes   : {len(children)}",
    ]

    if manager is not None:
        sessions = manager.list_sessions()
        parts.append(f"Live sessions     : {len(sessions)}")
        for entry in sessions:
            parts.append(f"  - {entry['id']}: {entry['url'] or '<blank>'}")

    if exc is not None:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]

    return "\n".join(parts)


__all__ = ["collect_diagnostics"]
