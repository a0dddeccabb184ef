"""Chat assistant tool handlers."""

from typing import Any, Dict

from ..constants import DEFAULT_IMAGE_MODEL, DEFAULT_IMAGE_SIZE
from ..decorators import tool_envelope
from .definitions import ChatTool
from ._args import require, optional_int


@tool_envelope
async def ask_chatgpt(assistant, arguments: Dict[str, Any]):
    return await assistant.ask(
        require(arguments, "prompt"),
        context=arguments.get("context"),
        system_message=arguments.get("system_message"),
        model=arguments.get("model"),
        max_tokens=optional_int(arguments, "max_tokens"),
        temperature=arguments.get("temperature"),
    )


@tool_envelope
async def analyze_code(assistant, arguments: Dict[str, Any]):
    return await assistant.analyze_code(
        require(arguments, "code"),
        require(arguments, "language"),
        require(arguments, "analysis_type"),
        context=arguments.get("context"),
    )


@tool_envelope
async def game_dev_assistance(assistant, arguments: Dict[str, Any]):
    return await assistant.game_dev_assistance(
        require(arguments, "feature"),
        require(arguments, "framework"),
        require(arguments, "request_type"),
        current_code=arguments.get("current_code"),
        context=arguments.get("context"),
    )


@tool_envelope
async def generate_image(assistant, arguments: Dict[str, Any]):
    return await assistant.generate_image(
        require(arguments, "prompt"),
        model=arguments.get("model", DEFAULT_IMAGE_MODEL),
        size=arguments.get("size", DEFAULT_IMAGE_SIZE),
        quality=arguments.get("quality", "standard"),
        style=arguments.get("style", "vivid"),
        n=optional_int(arguments, "n") or 1,
    )


CHAT_HANDLERS = {
    ChatTool.ASK_CHATGPT: ask_chatgpt,
    ChatTool.ANALYZE_CODE: analyze_code,
    ChatTool.GAME_DEV_ASSISTANCE: game_dev_assistance,
    ChatTool.GENERATE_IMAGE: generate_image,
}


__all__ = [
    "ask_chatgpt",
    "analyze_code",
    "game_dev_assistance",
    "generate_image",
    "CHAT_HANDLERS",
]
