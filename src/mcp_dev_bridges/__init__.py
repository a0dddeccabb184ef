"""
MCP servers for AI coding agents.

Two independent stdio servers live in this package:

* browser bridge (`mcp-browser-bridge`): multi-session Playwright automation.
  Each session is identified by a caller-chosen id (default "default") and
  owns its own browser process, context, page and console log buffer. Use it
  to compare two pages side by side, or to watch console output while an
  agent reproduces a bug.

* chat assistant (`mcp-chat-assistant`): ChatGPT prompts for general help,
  code analysis and game development, plus DALL-E image generation with the
  images saved locally.

Both servers advertise a fixed list of tools and answer every call with a
text envelope. Failures never crash the server: they come back with
isError set and an "Error: ..." message.
"""

__version__ = "1.0.0"
