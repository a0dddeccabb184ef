"""
Static tool registries for both servers.

Each server has a closed enumeration of tool names and an ordered tuple of
descriptors built from it. The tuples are created once at import and never
mutated.
"""

from enum import Enum
from typing import Any, Dict, Tuple
from dataclasses import dataclass

from mcp.types import Tool

from ..constants import (
    DEFAULT_SESSION_ID,
    DEFAULT_BROWSER_TYPE,
    SUPPORTED_BROWSER_TYPES,
    WAIT_TIMEOUT_MS,
    CHAT_MODELS,
    IMAGE_SIZES_BY_MODEL,
)
from ..chat.prompts import ANALYSIS_TYPES, FRAMEWORKS, REQUEST_TYPES


class BrowserTool(str, Enum):
    LAUNCH = "browser_launch"
    NAVIGATE = "browser_navigate"
    SCREENSHOT = "browser_screenshot"
    CONSOLE_LOGS = "browser_console_logs"
    EXECUTE = "browser_execute"
    WAIT_FOR = "browser_wait_for"
    CLOSE = "browser_close"
    LIST = "browser_list"


class ChatTool(str, Enum):
    ASK_CHATGPT = "ask_chatgpt"
    ANALYZE_CODE = "analyze_code"
    GAME_DEV_ASSISTANCE = "game_dev_assistance"
    GENERATE_IMAGE = "generate_image"


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def to_mcp(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


def _object(properties: Dict[str, Any], required: Tuple[str, ...] = ()) -> Dict[str, Any]:
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


_ID = {
    "type": "string",
    "description": "Browser instance identifier",
    "default": DEFAULT_SESSION_ID,
}


BROWSER_TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=BrowserTool.LAUNCH.value,
        description="Launch a new browser instance",
        input_schema=_object({
            "id": {**_ID, "description": "Unique identifier for the browser instance"},
            "browserType": {
                "type": "string",
                "enum": list(SUPPORTED_BROWSER_TYPES),
                "description": "Type of browser to launch",
                "default": DEFAULT_BROWSER_TYPE,
            },
            "headless": {
                "type": "boolean",
                "description": "Run browser in headless mode",
                "default": True,
            },
        }),
    ),
    ToolDescriptor(
        name=BrowserTool.NAVIGATE.value,
        description="Navigate browser to a URL",
        input_schema=_object({
            "id": _ID,
            "url": {"type": "string", "description": "URL to navigate to"},
        }, required=("url",)),
    ),
    ToolDescriptor(
        name=BrowserTool.SCREENSHOT.value,
        description="Take a screenshot of the current page",
        input_schema=_object({
            "id": _ID,
            "fullPage": {
                "type": "boolean",
                "description": "Capture full page screenshot",
                "default": True,
            },
            "type": {
                "type": "string",
                "enum": ["png", "jpeg"],
                "description": "Image format",
                "default": "png",
            },
        }),
    ),
    ToolDescriptor(
        name=BrowserTool.CONSOLE_LOGS.value,
        description="Get all console logs from the browser",
        input_schema=_object({
            "id": _ID,
            "clear": {
                "type": "boolean",
                "description": "Clear logs after retrieving",
                "default": False,
            },
        }),
    ),
    ToolDescriptor(
        name=BrowserTool.EXECUTE.value,
        description="Execute JavaScript in the browser context",
        input_schema=_object({
            "id": _ID,
            "script": {"type": "string", "description": "JavaScript code to execute"},
        }, required=("script",)),
    ),
    ToolDescriptor(
        name=BrowserTool.WAIT_FOR.value,
        description="Wait for an element to appear on the page",
        input_schema=_object({
            "id": _ID,
            "selector": {"type": "string", "description": "CSS selector to wait for"},
            "timeout": {
                "type": "number",
                "description": "Timeout in milliseconds",
                "default": WAIT_TIMEOUT_MS,
            },
        }, required=("selector",)),
    ),
    ToolDescriptor(
        name=BrowserTool.CLOSE.value,
        description="Close a browser instance",
        input_schema=_object({"id": _ID}),
    ),
    ToolDescriptor(
        name=BrowserTool.LIST.value,
        description="List all active browser instances",
        input_schema=_object({}),
    ),
)


_ALL_IMAGE_SIZES = ["256x256", "512x512", "1024x1024", "1792x1024", "1024x1792"]

CHAT_TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=ChatTool.ASK_CHATGPT.value,
        description="Ask ChatGPT for general development assistance",
        input_schema=_object({
            "prompt": {"type": "string", "description": "The question or prompt to send to ChatGPT"},
            "context": {"type": "string", "description": "Additional context about your project or situation"},
            "system_message": {"type": "string", "description": "Custom system message to set ChatGPT behavior"},
            "model": {
                "type": "string",
                "description": "OpenAI model to use (default: gpt-4o-mini)",
                "enum": list(CHAT_MODELS),
            },
            "max_tokens": {"type": "number", "description": "Maximum tokens in response (default: 2000)"},
            "temperature": {"type": "number", "description": "Response creativity (0.0-2.0, default: 0.7)"},
        }, required=("prompt",)),
    ),
    ToolDescriptor(
        name=ChatTool.ANALYZE_CODE.value,
        description="Get ChatGPT analysis of code (review, debug, optimize, explain, or test)",
        input_schema=_object({
            "code": {"type": "string", "description": "The code to analyze"},
            "language": {"type": "string", "description": "Programming language (e.g., typescript, javascript, python)"},
            "analysis_type": {
                "type": "string",
                "description": "Type of analysis to perform",
                "enum": list(ANALYSIS_TYPES),
            },
            "context": {"type": "string", "description": "Additional context about the code purpose or issues"},
        }, required=("code", "language", "analysis_type")),
    ),
    ToolDescriptor(
        name=ChatTool.GAME_DEV_ASSISTANCE.value,
        description="Specialized ChatGPT assistance for game development with Three.js",
        input_schema=_object({
            "feature": {"type": "string", "description": "The game feature or system you need help with"},
            "current_code": {"type": "string", "description": "Current code implementation (if any)"},
            "framework": {
                "type": "string",
                "description": "Primary framework/library being used",
                "enum": list(FRAMEWORKS),
            },
            "request_type": {
                "type": "string",
                "description": "Type of assistance needed",
                "enum": list(REQUEST_TYPES),
            },
            "context": {"type": "string", "description": "Project context and specific requirements"},
        }, required=("feature", "framework", "request_type")),
    ),
    ToolDescriptor(
        name=ChatTool.GENERATE_IMAGE.value,
        description="Generate an image using DALL-E based on a text prompt",
        input_schema=_object({
            "prompt": {"type": "string", "description": "A detailed description of the image to generate"},
            "model": {
                "type": "string",
                "description": "The DALL-E model to use (default: dall-e-3)",
                "enum": list(IMAGE_SIZES_BY_MODEL),
            },
            "size": {
                "type": "string",
                "description": "The size of the image to generate",
                "enum": _ALL_IMAGE_SIZES,
            },
            "quality": {
                "type": "string",
                "description": "The quality of the image (standard or hd, only for dall-e-3)",
                "enum": ["standard", "hd"],
            },
            "style": {
                "type": "string",
                "description": "The style of the image (vivid or natural, only for dall-e-3)",
                "enum": ["vivid", "natural"],
            },
            "n": {
                "type": "number",
                "description": "Number of images to generate (1-10 for dall-e-2, only 1 for dall-e-3)",
            },
        }, required=("prompt",)),
    ),
)


__all__ = [
    "BrowserTool",
    "ChatTool",
    "ToolDescriptor",
    "BROWSER_TOOLS",
    "CHAT_TOOLS",
]
