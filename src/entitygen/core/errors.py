"""
Error taxonomy for entitygen.

All entitygen errors inherit from EntityGenError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional hints on how to fix the problem
"""

from typing import Any


class EntityGenError(Exception):
    """
    Base class for all entitygen errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        hints: Suggestions for how to fix the error
        details: Additional error context
    """

    code: str = "ENTITYGEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        hints: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints or []
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
            "details": self.details,
        }


class MalformedMethodShape(EntityGenError):
    """
    A method does not follow the getter/setter naming convention.

    Never reaches the caller: the field builder recovers from it by
    skipping the method.
    """

    code = "MALFORMED_METHOD_SHAPE"

    def __init__(self, method: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Method '{method}' is not an accessor: {reason}",
            details={"method": method, "reason": reason},
            **kwargs,
        )


class TemplateError(EntityGenError):
    """Base class for template resolution and rendering failures."""

    code = "TEMPLATE_ERROR"


class TemplateNotFound(TemplateError):
    """The named template cannot be located on the search path."""

    code = "TEMPLATE_NOT_FOUND"

    def __init__(
        self,
        name: str,
        search_path: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        hints = []
        if search_path:
            hints.append(f"Searched: {', '.join(search_path)}")
        super().__init__(
            f"Template '{name}' not found",
            hints=hints,
            details={"template": name, "search_path": search_path},
            **kwargs,
        )


class TemplateSyntaxError(TemplateError):
    """The template body cannot be parsed."""

    code = "TEMPLATE_SYNTAX_ERROR"

    def __init__(
        self,
        name: str,
        reason: str,
        lineno: int | None = None,
        **kwargs: Any,
    ) -> None:
        location = f" (line {lineno})" if lineno is not None else ""
        super().__init__(
            f"Template '{name}' could not be parsed{location}: {reason}",
            details={"template": name, "lineno": lineno},
            **kwargs,
        )


class RenderError(TemplateError):
    """Substituting the render context into a template failed."""

    code = "RENDER_ERROR"

    def __init__(self, name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Rendering template '{name}' failed: {reason}",
            details={"template": name},
            **kwargs,
        )


class EmissionIOError(EntityGenError):
    """Writing or closing a generated source artifact failed."""

    code = "EMISSION_IO_ERROR"

    def __init__(self, qualified_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot write source for '{qualified_name}': {reason}",
            details={"qualified_name": qualified_name},
            **kwargs,
        )


class DiscoveryError(EntityGenError):
    """A declaration source could not be parsed."""

    code = "DISCOVERY_ERROR"

    def __init__(self, source: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot read declarations from {source}: {reason}",
            details={"source": source},
            **kwargs,
        )


class ConfigurationError(EntityGenError):
    """Generator settings are invalid."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, key: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message,
            details={"key": key} if key else {},
            **kwargs,
        )
