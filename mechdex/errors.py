"""
Exceptions raised by the KeySwitch services.
"""

from __future__ import annotations

from typing import Optional


class PersistenceError(RuntimeError):
    """Raised when the remote store rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(PersistenceError):
    """Raised when a read of a specific id returns no data."""

    def __init__(self, key_switch_id: str):
        super().__init__(f"KeySwitch with id of {key_switch_id} not found")
        self.key_switch_id = key_switch_id


def _next_cause(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def describe_error_chain(exc: BaseException) -> str:
    """
    Build a diagnostic string by walking the chain of causes of `exc`.

    Explicit causes (`raise ... from ...`) are preferred over the implicit
    context. Returns an empty string when `exc` has no cause.
    """
    parts: list[str] = []
    seen = {id(exc)}
    current = _next_cause(exc)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(str(current) or current.__class__.__name__)
        current = _next_cause(current)
    if not parts:
        return ""
    return str(exc) + "".join(f"    Caused by: {part}" for part in parts)
