"""
ChatGPT development assistant.

Stateless: every request is turned into a system message and a user message
and forwarded to the OpenAI chat completion API. Image generation validates
the requested size, calls the image API and downloads the results locally.
"""

import logging
from pathlib import Path
from typing import Optional

from openai import AsyncOpenAI

from ..constants import (
    DEFAULT_SYSTEM_MESSAGE,
    DEFAULT_TEMPERATURE,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_IMAGE_SIZE,
)
from ..config import get_chat_config
from ..errors import ImageGenerationError
from .prompts import (
    ANALYSIS_TEMPERATURE,
    GAME_DEV_TEMPERATURE,
    build_code_analysis_prompt,
    build_game_dev_prompt,
)
from .images import validate_image_request, download_images

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response received"


class ChatAssistant:
    """
    Args:
        client: AsyncOpenAI-compatible client. Created from config when omitted.
        config: Result of get_chat_config(). Read from the environment when omitted.
        http_client: httpx.AsyncClient used for image downloads (optional).
    """

    def __init__(self, client=None, config: Optional[dict] = None, http_client=None):
        self.config = config if config is not None else get_chat_config()
        self._client = client
        self._http_client = http_client

    @property
    def client(self):
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.config["api_key"])
        return self._client

    async def ask(
        self,
        prompt: str,
        context: Optional[str] = None,
        system_message: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Send one prompt (plus optional context) and return the reply text."""
        if system_message is None:
            system_message = DEFAULT_SYSTEM_MESSAGE
        messages = [{"role": "system", "content": system_message}]
        if context:
            messages.append({"role": "user", "content": f"Context: {context}"})
        messages.append({"role": "user", "content": prompt})

        completion = await self.client.chat.completions.create(
            model=model or self.config["model"],
            messages=messages,
            max_tokens=max_tokens if max_tokens is not None else self.config["max_tokens"],
            temperature=temperature if temperature is not None else DEFAULT_TEMPERATURE,
        )

        if not completion.choices:
            return NO_RESPONSE
        return completion.choices[0].message.content or NO_RESPONSE

    async def analyze_code(
        self,
        code: str,
        language: str,
        analysis_type: str,
        context: Optional[str] = None,
    ) -> str:
        system_message, prompt = build_code_analysis_prompt(code, language, analysis_type, context)
        return await self.ask(prompt, system_message=system_message, temperature=ANALYSIS_TEMPERATURE)

    async def game_dev_assistance(
        self,
        feature: str,
        framework: str,
        request_type: str,
        current_code: Optional[str] = None,
        context: Optional[str] = None,
    ) -> str:
        system_message, prompt = build_game_dev_prompt(feature, framework, request_type, current_code, context)
        return await self.ask(prompt, system_message=system_message, temperature=GAME_DEV_TEMPERATURE)

    async def generate_image(
        self,
        prompt: str,
        model: str = DEFAULT_IMAGE_MODEL,
        size: str = DEFAULT_IMAGE_SIZE,
        quality: str = "standard",
        style: str = "vivid",
        n: int = 1,
    ) -> str:
        """
        Generate images, save them under the images directory and return a summary.

        Raises:
            ImageSizeError: `size` is not supported by `model` (no API call is made).
            ImageGenerationError: the API call or a download failed.
        """
        validate_image_request(model, size)

        is_dalle3 = model == "dall-e-3"
        request = {"model": model, "prompt": prompt, "size": size, "n": 1 if is_dalle3 else n}
        if is_dalle3:
            request["quality"] = quality
            request["style"] = style

        try:
            response = await self.client.images.generate(**request)
            urls = [img.url for img in (response.data or []) if getattr(img, "url", None)]
            saved = await download_images(
                urls, Path(self.config["images_dir"]), model, http_client=self._http_client
            )
        except Exception as e:
            raise ImageGenerationError(f"Image generation failed: {e}") from e

        logger.info("Generated %d image(s) with %s", len(urls), model)
        return _image_summary(prompt, model, size, quality, style, urls, saved)


def _image_summary(prompt, model, size, quality, style, urls, saved) -> str:
    lines = [f"Generated {len(urls)} image(s) successfully!", "", "**Saved locally to:**"]
    lines += [f"{i}. {path}" for i, path in enumerate(saved, start=1)]
    lines += ["", "**Image URLs:**"]
    lines += [f"{i}. {url}" for i, url in enumerate(urls, start=1)]
    lines += ["", f'**Prompt:** "{prompt}"', f"**Model:** {model}", f"**Size:** {size}"]
    if model == "dall-e-3":
        lines += [f"**Quality:** {quality}", f"**Style:** {style}"]
    return "\n".join(lines)


__all__ = ["ChatAssistant"]
