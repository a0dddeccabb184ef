# mcp_dev_bridges/decorators/__init__.py
#
# Re-exports decorators from their respective modules.

from .envelope import tool_envelope, success_envelope, error_envelope
from .locking import exclusive_session_access, SessionLocks

__all__ = [
    "tool_envelope",
    "success_envelope",
    "error_envelope",
    "exclusive_session_access",
    "SessionLocks",
]
