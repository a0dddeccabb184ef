"""ChatGPT prompt templating and DALL-E image generation."""

from .assistant import ChatAssistant

__all__ = ["ChatAssistant"]
