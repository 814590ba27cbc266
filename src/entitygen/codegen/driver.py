"""
Generation pass driver.

Runs collect -> resolve -> render -> emit for each discovered interface.
A failing interface is reported as an ERROR diagnostic and the pass moves
on to the next one.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from entitygen.codegen.diagnostics import Diagnostic, DiagnosticCollector, Severity
from entitygen.codegen.filer import Filer
from entitygen.codegen.renderer import render
from entitygen.codegen.templates import TemplateHandle
from entitygen.core.descriptor import assemble_descriptor
from entitygen.core.errors import EntityGenError
from entitygen.core.fields import build_field_table
from entitygen.core.types import BatchEntry, EntityDescriptor, MethodDescriptor
from entitygen.logging import LogContext, get_logger, with_log_context

logger = get_logger(__name__)

# (interface name, package name, methods)
BatchTuple = tuple[str, str, Sequence[MethodDescriptor]]


class TemplateSource(Protocol):
    """Anything that resolves template names, e.g. a TemplateResolver."""

    def resolve(self, name: str | None = None) -> TemplateHandle: ...


@dataclass
class EmittedArtifact:
    """A source artifact written during a pass."""

    qualified_name: str
    location: str


@dataclass
class DriverResult:
    """Outcome of one generation pass."""

    artifacts: list[EmittedArtifact] = field(default_factory=list)
    descriptors: list[EntityDescriptor] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def notes(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.NOTE]

    @property
    def ok(self) -> bool:
        """Whether the pass finished without ERROR diagnostics."""
        return not self.errors


class EmissionDriver:
    """
    Generates one implementation per interface in a batch.

    The driver keeps no per-interface state: every entry gets its own
    field table and descriptor, so entries in a batch cannot affect each
    other.
    """

    def __init__(
        self,
        templates: TemplateSource,
        filer: Filer,
        *,
        template_name: str | None = None,
        on_diagnostic: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        """
        Initialize the driver.

        Args:
            templates: Template resolver
            filer: Destination for generated sources
            template_name: Template to render (defaults to the resolver's own)
            on_diagnostic: Called with every diagnostic as it is reported
        """
        self.templates = templates
        self.filer = filer
        self.template_name = template_name
        self.on_diagnostic = on_diagnostic

    def run(self, batch: Iterable[BatchEntry | BatchTuple]) -> DriverResult:
        """
        Run one generation pass.

        Args:
            batch: Discovered interfaces, as BatchEntry or
                (interface name, package name, methods) tuples

        Returns:
            Artifacts written, descriptors built, and diagnostics reported
        """
        diagnostics = DiagnosticCollector(forward=self.on_diagnostic)
        result = DriverResult(diagnostics=diagnostics.diagnostics)

        for item in batch:
            entry = _as_entry(item)
            with with_log_context(LogContext.for_entry(entry)):
                self._generate(entry, diagnostics, result)

        logger.info(
            "Generation pass finished",
            artifacts=len(result.artifacts),
            errors=len(result.errors),
        )
        return result

    def _generate(
        self,
        entry: BatchEntry,
        diagnostics: DiagnosticCollector,
        result: DriverResult,
    ) -> None:
        diagnostics.note(f"annotated interface: {entry.interface_name}", entry.source)

        fields = build_field_table(entry.methods)
        if not fields:
            logger.debug("No accessor methods found, nothing to generate")
            return

        descriptor = assemble_descriptor(entry.interface_name, entry.package_name, fields)
        result.descriptors.append(descriptor)

        qualified_name = descriptor.qualified_generated_name
        try:
            template = self.templates.resolve(self.template_name)
            with with_log_context(template=template.name):
                text = render(descriptor, template)
                diagnostics.note(f"applying template: {template.name}")
                with with_log_context(artifact=qualified_name):
                    location = self._emit(qualified_name, text)
                    diagnostics.note(f"creating source file: {location}")
        except EntityGenError as e:
            diagnostics.error(e.message, entry.source)
            return

        result.artifacts.append(EmittedArtifact(qualified_name=qualified_name, location=location))

    def _emit(self, qualified_name: str, text: str) -> str:
        with self.filer.create_source(qualified_name) as sink:
            sink.write(text)
        return sink.location


def _as_entry(item: BatchEntry | BatchTuple) -> BatchEntry:
    if isinstance(item, BatchEntry):
        return item
    interface_name, package_name, methods = item
    return BatchEntry(
        interface_name=interface_name,
        package_name=package_name,
        methods=tuple(methods),
    )
