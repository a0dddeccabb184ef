"""
Process-wide browser manager.

Usage:
    from mcp_dev_bridges.context import get_manager

    manager = get_manager()
    await manager.launch("checkout", browser_type="firefox")
"""

from typing import Optional

from .browser.manager import BrowserManager


_global_manager: Optional[BrowserManager] = None


def get_manager() -> BrowserManager:
    """
    Get or create the global BrowserManager.

    This is a singleton pattern - all calls return the same instance.
    Use reset_manager() to clear the singleton (mainly for testing).
    """
    global _global_manager

    if _global_manager is None:
        _global_manager = BrowserManager()

    return _global_manager


def reset_manager() -> None:
    """
    Forget the global manager without closing anything.

    WARNING: This is primarily for testing. In production code,
    use BrowserManager.cleanup() so browsers are closed.
    """
    global _global_manager
    _global_manager = None


__all__ = [
    "get_manager",
    "reset_manager",
]
