# tests/test_diagnostics.py
import asyncio

from mcp_dev_bridges.browser.manager import BrowserManager
from mcp_dev_bridges.utils.diagnostics import collect_diagnostics

from _utils import FakePlaywright, make_starter


def test_diagnostics_without_manager_reports_environment():
    out = collect_diagnostics()

    assert "Python" in out
    assert "Playwright" in out
    assert "Process RSS" in out
    assert "Live sessions" not in out
    assert "---- ERROR ----" not in out


def test_diagnostics_lists_sessions_and_error():
    manager = BrowserManager(playwright_starter=make_starter(FakePlaywright()))
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(manager.launch("diag"))
    finally:
        loop.close()

    out = collect_diagnostics(manager, RuntimeError("launch failed"))

    assert "Live sessions     : 1" in out
    assert "  - diag: <blank>" in out
    assert "Error type        : RuntimeError" in out
    assert "Error message     : launch failed" in out
