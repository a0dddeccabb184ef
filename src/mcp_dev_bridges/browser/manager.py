"""
Multi-session browser manager.

Every session is keyed by a caller-chosen identifier and owns its own browser
process, context, page and console buffer. All sessions share one Playwright
driver, started on the first launch and stopped by cleanup().

Thread Safety:
    Not thread-safe. Calls on one identifier are serialized by
    exclusive_session_access; calls on different identifiers may interleave
    on the event loop.
"""

import base64
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from ..constants import (
    DEFAULT_SESSION_ID,
    DEFAULT_BROWSER_TYPE,
    SUPPORTED_BROWSER_TYPES,
    NAVIGATION_TIMEOUT_MS,
    WAIT_TIMEOUT_MS,
)
from ..errors import (
    SessionExistsError,
    SessionNotFoundError,
    UnsupportedBrowserError,
    ManagerClosedError,
)
from ..decorators.locking import SessionLocks, exclusive_session_access
from ..utils.diagnostics import collect_diagnostics
from .session import BrowserSession
from .console import attach_console_listeners
from .launcher import start_playwright, launch_browser

logger = logging.getLogger(__name__)


class BrowserManager:
    """
    Registry of live browser sessions.

    Args:
        playwright_starter: Coroutine function returning a started Playwright
            object. Defaults to launching the real driver.
    """

    def __init__(self, playwright_starter: Optional[Callable[[], Awaitable[Any]]] = None):
        self._playwright_starter = playwright_starter or start_playwright
        self._playwright = None
        self._driver_lock: Optional[asyncio.Lock] = None
        self._sessions: Dict[str, BrowserSession] = {}
        self._generation = 0
        self.session_locks = SessionLocks()

    # ------------------------------------------------------------------
    # Registry access
    # ------------------------------------------------------------------

    def has_session(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_session(self, session_id: str) -> BrowserSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    @property
    def session_ids(self) -> List[str]:
        return list(self._sessions)

    async def _ensure_playwright(self):
        if self._driver_lock is None:
            self._driver_lock = asyncio.Lock()
        async with self._driver_lock:
            if self._playwright is None:
                logger.info("Starting Playwright driver")
                self._playwright = await self._playwright_starter()
        return self._playwright

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @exclusive_session_access
    async def launch(
        self,
        session_id: str = DEFAULT_SESSION_ID,
        browser_type: str = DEFAULT_BROWSER_TYPE,
        headless: bool = True,
        **launch_options,
    ) -> dict:
        """
        Launch a browser and register it under `session_id`.

        Raises:
            SessionExistsError: `session_id` already denotes a live session.
            UnsupportedBrowserError: `browser_type` is not chromium, firefox or webkit.
            ManagerClosedError: cleanup() ran while the browser was starting.
        """
        if session_id in self._sessions:
            raise SessionExistsError(session_id)
        if browser_type not in SUPPORTED_BROWSER_TYPES:
            raise UnsupportedBrowserError(browser_type)

        generation = self._generation
        playwright = await self._ensure_playwright()
        try:
            browser, context, page = await launch_browser(
                playwright, browser_type, headless=headless, launch_options=launch_options
            )
        except Exception as e:
            logger.error("Launching %s for session %r failed\n%s", browser_type, session_id, collect_diagnostics(self, e))
            raise

        if generation != self._generation:
            await self._discard_late_browser(session_id, browser)
            raise ManagerClosedError(session_id)

        session = BrowserSession(
            session_id=session_id,
            browser_type=browser_type,
            browser=browser,
            context=context,
            page=page,
        )
        attach_console_listeners(page, session.logs)
        self._sessions[session_id] = session
        logger.info("Launched %s session %r (headless=%s)", browser_type, session_id, headless)

        return {"id": session_id, "browserType": browser_type, "status": "launched"}

    @exclusive_session_access
    async def close(self, session_id: str = DEFAULT_SESSION_ID) -> dict:
        """Close the browser of `session_id` and drop its record."""
        session = self.get_session(session_id)
        try:
            await session.browser.close()
        finally:
            del self._sessions[session_id]
        logger.info("Closed session %r", session_id)
        return {"id": session_id, "status": "closed"}

    async def cleanup(self) -> None:
        """
        Best-effort close of every live session, then stop the driver.

        Individual failures are logged and never raised. Session locks are not
        taken so a hung operation cannot block shutdown; launches still in
        flight notice the shutdown and discard their browser.
        """
        self._generation += 1
        for session_id, session in list(self._sessions.items()):
            try:
                await session.browser.close()
            except Exception as e:
                logger.error("Error closing browser %s: %s", session_id, e)
        self._sessions.clear()

        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning("Stopping Playwright driver failed: %s", e)
            self._playwright = None
        logger.info("Browser manager cleaned up")

    async def _discard_late_browser(self, session_id: str, browser) -> None:
        try:
            await browser.close()
        except Exception as e:
            logger.warning("Closing browser for session %r launched during cleanup failed: %s", session_id, e)

    def list_sessions(self) -> List[dict]:
        """Every live session with its current URL (None before the first navigation)."""
        return [
            {"id": session_id, "url": session.current_url()}
            for session_id, session in self._sessions.items()
        ]

    # ------------------------------------------------------------------
    # Page operations
    # ------------------------------------------------------------------

    @exclusive_session_access
    async def navigate(self, session_id: str, url: str) -> dict:
        """Load `url` and wait for network quiescence."""
        page = self.get_session(session_id).page
        response = await page.goto(url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
        return {
            "url": page.url,
            "status": response.status if response is not None else None,
            "statusText": response.status_text if response is not None else None,
        }

    @exclusive_session_access
    async def screenshot(self, session_id: str, full_page: bool = True, image_type: str = "png") -> dict:
        """Capture the page (full page by default) as base64."""
        page = self.get_session(session_id).page
        data = await page.screenshot(full_page=full_page, type=image_type)
        return {
            "data": base64.b64encode(data).decode("ascii"),
            "type": image_type,
        }

    @exclusive_session_access
    async def get_console_logs(self, session_id: str, clear: bool = False) -> List[dict]:
        """Snapshot of the log buffer; with `clear`, empty it in the same step."""
        session = self.get_session(session_id)
        logs = session.log_snapshot()
        if clear:
            session.clear_logs()
        return logs

    @exclusive_session_access
    async def clear_console_logs(self, session_id: str) -> dict:
        self.get_session(session_id).clear_logs()
        return {"cleared": True}

    @exclusive_session_access
    async def execute_script(self, session_id: str, script: str) -> dict:
        """
        Evaluate `script` in the page.

        Script failures come back as {"success": False, "error": ...}; only a
        missing session raises.
        """
        page = self.get_session(session_id).page
        try:
            result = await page.evaluate(script)
        except PlaywrightError as e:
            return {"success": False, "error": e.message}
        return {"success": True, "result": result}

    @exclusive_session_access
    async def wait_for_selector(self, session_id: str, selector: str, timeout: Optional[float] = None) -> dict:
        """
        Wait up to `timeout` ms for `selector`.

        A timeout is reported as {"found": False, ...}; only a missing session raises.
        """
        page = self.get_session(session_id).page
        try:
            await page.wait_for_selector(selector, timeout=WAIT_TIMEOUT_MS if timeout is None else timeout)
        except PlaywrightError as e:
            return {"found": False, "selector": selector, "error": e.message}
        return {"found": True, "selector": selector}


__all__ = ["BrowserManager"]
