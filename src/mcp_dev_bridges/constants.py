"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

import os

# ============================================================================
# Browser Sessions
# ============================================================================

DEFAULT_SESSION_ID = "default"
"""Identifier used by every browser tool when the caller omits `id`."""

DEFAULT_BROWSER_TYPE = "chromium"

SUPPORTED_BROWSER_TYPES = ("chromium", "firefox", "webkit")
"""Playwright back-ends a session can be launched with."""

NAVIGATION_TIMEOUT_MS = int(os.getenv("MCP_NAVIGATION_TIMEOUT_MS", "30000"))
"""How long navigate waits for network quiescence, in milliseconds."""

WAIT_TIMEOUT_MS = int(os.getenv("MCP_WAIT_TIMEOUT_MS", "30000"))
"""Default selector wait, in milliseconds."""

BLANK_PAGE_URLS = ("", "about:blank")


# ============================================================================
# Chat Assistant
# ============================================================================

DEFAULT_CHAT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_SYSTEM_MESSAGE = "You are a helpful development assistant."

CHAT_MODELS = ("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-3.5-turbo", "o3-mini", "o3", "o3-pro")

DEFAULT_IMAGE_MODEL = "dall-e-3"
DEFAULT_IMAGE_SIZE = "1024x1024"

IMAGE_SIZES_BY_MODEL = {
    "dall-e-2": ("256x256", "512x512", "1024x1024"),
    "dall-e-3": ("1024x1024", "1792x1024", "1024x1792"),
}
"""Sizes each image model accepts. Validated before any API call."""

IMAGE_DOWNLOAD_TIMEOUT_SECS = float(os.getenv("MCP_IMAGE_DOWNLOAD_TIMEOUT", "60"))


__all__ = [
    "DEFAULT_SESSION_ID",
    "DEFAULT_BROWSER_TYPE",
    "SUPPORTED_BROWSER_TYPES",
    "NAVIGATION_TIMEOUT_MS",
    "WAIT_TIMEOUT_MS",
    "BLANK_PAGE_URLS",
    "DEFAULT_CHAT_MODEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_SYSTEM_MESSAGE",
    "CHAT_MODELS",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_IMAGE_SIZE",
    "IMAGE_SIZES_BY_MODEL",
    "IMAGE_DOWNLOAD_TIMEOUT_SECS",
]
