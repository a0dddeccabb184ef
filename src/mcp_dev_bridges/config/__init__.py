"""Configuration management for both servers."""

from .environment import (
    load_env_file,
    get_chat_config,
    get_browser_config,
)

from .paths import (
    get_images_dir,
    image_timestamp,
    image_filename,
)

__all__ = [
    "load_env_file",
    "get_chat_config",
    "get_browser_config",
    "get_images_dir",
    "image_timestamp",
    "image_filename",
]
