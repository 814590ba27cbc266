"""
entitygen Code Generation Module.

Renders entity descriptors through templates and emits the generated sources.
"""

from entitygen.codegen.diagnostics import Diagnostic, DiagnosticCollector, Severity
from entitygen.codegen.driver import DriverResult, EmissionDriver, EmittedArtifact
from entitygen.codegen.filer import DirectoryFiler, Filer, GeneratedFile, MemoryFiler, SourceSink
from entitygen.codegen.renderer import RenderContext, render
from entitygen.codegen.templates import TemplateHandle, TemplateResolver

__all__ = [
    # Driver
    "EmissionDriver",
    "DriverResult",
    "EmittedArtifact",
    # Rendering
    "RenderContext",
    "render",
    "TemplateHandle",
    "TemplateResolver",
    # Emission
    "Filer",
    "DirectoryFiler",
    "MemoryFiler",
    "GeneratedFile",
    "SourceSink",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCollector",
    "Severity",
]
