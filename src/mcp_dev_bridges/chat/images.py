"""Image size validation and download of generated images."""

import logging
from pathlib import Path
from typing import List, Sequence

import httpx

from ..constants import IMAGE_SIZES_BY_MODEL, IMAGE_DOWNLOAD_TIMEOUT_SECS
from ..config.paths import image_timestamp, image_filename
from ..errors import ImageSizeError

logger = logging.getLogger(__name__)

_MODEL_LABELS = {"dall-e-2": "DALL-E 2", "dall-e-3": "DALL-E 3"}


def validate_image_request(model: str, size: str) -> None:
    """Raise ImageSizeError (or ValueError for an unknown model) before any API call."""
    allowed = IMAGE_SIZES_BY_MODEL.get(model)
    if allowed is None:
        raise ValueError(f"Invalid image model: {model}. Expected one of: {', '.join(IMAGE_SIZES_BY_MODEL)}")
    if size not in allowed:
        raise ImageSizeError(f"{_MODEL_LABELS[model]} only supports sizes: {', '.join(allowed)}")


async def download_images(
    urls: Sequence[str],
    images_dir: Path,
    model: str,
    http_client: httpx.AsyncClient = None,
) -> List[str]:
    """
    Download every URL into `images_dir` as <timestamp>_<model>_<n>.png.

    A download that fails part-way removes its file before the error
    propagates.

    Returns:
        Saved file paths, in the order of `urls`.
    """
    images_dir = Path(images_dir)
    images_dir.mkdir(parents=True, exist_ok=True)
    timestamp = image_timestamp()

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=IMAGE_DOWNLOAD_TIMEOUT_SECS, follow_redirects=True)
    saved = []
    try:
        for i, url in enumerate(urls, start=1):
            path = images_dir / image_filename(timestamp, model, i)
            try:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    with open(path, "wb") as fh:
                        async for chunk in response.aiter_bytes():
                            fh.write(chunk)
            except BaseException:
                # never leave a truncated image behind
                path.unlink(missing_ok=True)
                raise
            logger.info("Saved generated image to %s", path)
            saved.append(str(path))
    finally:
        if owns_client:
            await client.aclose()
    return saved


__all__ = ["validate_image_request", "download_images"]
