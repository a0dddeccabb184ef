"""Environment configuration and validation."""

import os

from dotenv import load_dotenv, find_dotenv

from ..constants import DEFAULT_CHAT_MODEL, DEFAULT_MAX_TOKENS
from .paths import get_images_dir

import logging
logger = logging.getLogger(__name__)


def load_env_file() -> bool:
    """
    Load a `.env` file found from the current working directory upwards.

    Variables already set in the process environment win over the file.
    Returns True if a file was found and loaded.
    """
    path = find_dotenv(filename=".env", usecwd=True)
    if not path:
        return False
    logger.debug("Loading environment from %s", path)
    return load_dotenv(path, override=False)


def get_chat_config() -> dict:
    """
    Read environment variables for the chat assistant and validate required ones.

    Required:   OPENAI_API_KEY
    Optional:   OPENAI_MODEL (default 'gpt-4o-mini')
                OPENAI_MAX_TOKENS (default 2000)
                MCP_SERVER_NAME (default 'ChatGPT Development Assistant')
                MCP_SERVER_VERSION (default '1.0.0')
                CHATGPT_IMAGES_DIR (default '~/chatgpt-images')
    """
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise EnvironmentError("OPENAI_API_KEY is required.")

    model = (os.getenv("OPENAI_MODEL") or "").strip() or DEFAULT_CHAT_MODEL

    max_tokens_env = (os.getenv("OPENAI_MAX_TOKENS") or "").strip()
    if max_tokens_env and not max_tokens_env.isdigit():
        raise EnvironmentError(f"OPENAI_MAX_TOKENS must be a positive integer, got {max_tokens_env!r}.")
    max_tokens = int(max_tokens_env) if max_tokens_env else DEFAULT_MAX_TOKENS

    return {
        "api_key": api_key,
        "model": model,
        "max_tokens": max_tokens,
        "server_name": (os.getenv("MCP_SERVER_NAME") or "").strip() or "ChatGPT Development Assistant",
        "server_version": (os.getenv("MCP_SERVER_VERSION") or "").strip() or "1.0.0",
        "images_dir": str(get_images_dir()),
    }


def get_browser_config() -> dict:
    """
    Read environment variables for the browser bridge. Nothing is required.

    Optional:   MCP_BROWSER_SERVER_NAME (default 'js-debug-bridge')
                MCP_BROWSER_SERVER_VERSION (default '1.0.0')
    """
    return {
        "server_name": (os.getenv("MCP_BROWSER_SERVER_NAME") or "").strip() or "js-debug-bridge",
        "server_version": (os.getenv("MCP_BROWSER_SERVER_VERSION") or "").strip() or "1.0.0",
    }
