"""
Diagnostics reported during a generation pass.
"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from entitygen.logging import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    """Diagnostic severity."""

    NOTE = "NOTE"
    ERROR = "ERROR"


class Diagnostic(BaseModel):
    """A message for the invoking tool's reporting surface."""

    severity: Severity
    message: str
    element: str | None = None  # Originating element, e.g. a source path

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        location = f"{self.element}: " if self.element else ""
        return f"{location}{self.severity.value.lower()}: {self.message}"


class DiagnosticCollector:
    """
    Records diagnostics and mirrors them to the ``entitygen`` logger.

    Reporting never raises, so callers can report from error paths.

    Args:
        forward: Optional callback receiving every diagnostic as it is reported
    """

    def __init__(self, forward: Callable[[Diagnostic], None] | None = None) -> None:
        self.diagnostics: list[Diagnostic] = []
        self._forward = forward

    def report(
        self,
        severity: Severity,
        message: str,
        element: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic."""
        diagnostic = Diagnostic(severity=severity, message=message, element=element)
        self.diagnostics.append(diagnostic)

        if severity == Severity.ERROR:
            logger.error(message, element=element)
        else:
            logger.info(message, element=element)

        if self._forward is not None:
            try:
                self._forward(diagnostic)
            except Exception as e:  # forward callbacks must not break the pass
                logger.warning("Diagnostic forwarding failed: %s", e)

        return diagnostic

    def note(self, message: str, element: str | None = None) -> Diagnostic:
        """Record a NOTE diagnostic."""
        return self.report(Severity.NOTE, message, element)

    def error(self, message: str, element: str | None = None) -> Diagnostic:
        """Record an ERROR diagnostic."""
        return self.report(Severity.ERROR, message, element)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def notes(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.NOTE]

    def __len__(self) -> int:
        return len(self.diagnostics)
