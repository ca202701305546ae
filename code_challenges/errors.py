"""Helpers for turning errors into text."""

from typing import Any

__all__ = ["err_to_string"]


def err_to_string(err: Any) -> str:
    """Return the debug representation of an error (or any value)."""
    return repr(err)