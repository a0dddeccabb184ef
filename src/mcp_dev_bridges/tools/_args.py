"""Argument helpers shared by the tool handlers."""

from typing import Any, Dict, Optional


def require(arguments: Dict[str, Any], key: str) -> Any:
    """Return a required argument or raise ValueError naming it."""
    value = arguments.get(key)
    if value is None:
        raise ValueError(f"Missing required argument: {key}")
    return value


def optional_int(arguments: Dict[str, Any], key: str) -> Optional[int]:
    """JSON numbers may arrive as floats; the APIs behind the tools want ints."""
    value = arguments.get(key)
    if value is None:
        return None
    return int(value)
