"""Filesystem locations used by the servers."""

import os
import datetime
from pathlib import Path


def get_images_dir() -> Path:
    """Directory generated images are saved to. Override with CHATGPT_IMAGES_DIR."""
    override = (os.getenv("CHATGPT_IMAGES_DIR") or "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / "chatgpt-images"


def image_timestamp(now: datetime.datetime = None) -> str:
    """ISO-8601 UTC timestamp safe for filenames (':' and '.' become '-')."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    stamp = now.astimezone(datetime.timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    return stamp.replace(":", "-").replace(".", "-")


def image_filename(timestamp: str, model: str, index: int) -> str:
    """Filename for the `index`-th (1-based) image of one generation call."""
    return f"{timestamp}_{model}_{index}.png"


__all__ = ["get_images_dir", "image_timestamp", "image_filename"]
