"""Playwright driver start-up and browser launching."""

import logging
from typing import Any, Dict

from playwright.async_api import async_playwright

logger = logging.getLogger(__name__)


async def start_playwright():
    """Start the Playwright driver process. Caller must `await pw.stop()`."""
    return await async_playwright().start()


async def launch_browser(playwright, browser_type: str, headless: bool = True, launch_options: Dict[str, Any] = None):
    """
    Launch one browser process and open an isolated context with a single page.

    `browser_type` must already be one of SUPPORTED_BROWSER_TYPES.

    If the context or page cannot be created the browser is closed again, so
    a failed launch never leaks a process.

    Returns:
        (browser, context, page)
    """
    launcher = getattr(playwright, browser_type)
    options = dict(launch_options or {})
    options["headless"] = headless

    browser = await launcher.launch(**options)
    try:
        context = await browser.new_context()
        page = await context.new_page()
    except BaseException:
        try:
            await browser.close()
        except Exception as close_err:
            logger.warning("Closing half-launched %s browser failed: %s", browser_type, close_err)
        raise
    return browser, context, page


__all__ = ["start_playwright", "launch_browser"]
