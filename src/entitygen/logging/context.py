"""
Logging context management for entitygen.

Lets the generator tag every log line emitted while processing an
interface with the interface, template, and artifact involved.
"""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from entitygen.core.types import BatchEntry

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "entitygen_log_context",
    default=None,
)


@dataclass
class LogContext:
    """
    Structured logging context.

    Contains fields that should be included in all log messages within
    a specific scope (e.g., the generation of one interface).
    """

    interface: str | None = None
    template: str | None = None
    artifact: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_entry(cls, entry: BatchEntry) -> LogContext:
        """
        Create a LogContext for one discovered interface.

        The interface is named by its qualified name; the originating
        source, when known, goes into ``extra``.
        """
        interface = (
            f"{entry.package_name}.{entry.interface_name}"
            if entry.package_name
            else entry.interface_name
        )
        extra = {"source": entry.source} if entry.source else {}
        return cls(interface=interface, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary of non-None values."""
        result = {}
        if self.interface is not None:
            result["interface"] = self.interface
        if self.template is not None:
            result["template"] = self.template
        if self.artifact is not None:
            result["artifact"] = self.artifact
        result.update(self.extra)
        return result


def get_log_context() -> dict[str, Any]:
    """Get the current log context."""
    ctx = _log_context.get()
    return ctx.copy() if ctx else {}


def update_log_context(**kwargs: Any) -> None:
    """
    Update the current log context with additional fields.

    Args:
        **kwargs: Fields to add to the context
    """
    current = get_log_context()
    current.update(kwargs)
    _log_context.set(current)


@contextmanager
def with_log_context(
    context: LogContext | dict[str, Any] | None = None,
    **kwargs: Any,
) -> Iterator[None]:
    """
    Context manager for setting log context within a scope.

    Example:
        with with_log_context(interface="com.example.Person"):
            logger.info("Rendering")  # Includes interface

    Args:
        context: Optional LogContext or dict of context fields
        **kwargs: Additional context fields
    """
    previous = _log_context.get()

    if context is not None:
        new_context = (
            context.to_dict() if isinstance(context, LogContext) else context.copy()
        )
    else:
        new_context = previous.copy() if previous else {}

    new_context.update(kwargs)
    _log_context.set(new_context)

    try:
        yield
    finally:
        _log_context.set(previous)


class ContextFilter(logging.Filter):
    """
    Logging filter that injects context fields into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context fields to the log record."""
        context = get_log_context()
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
