"""
Java declaration discovery.

Finds interfaces carrying the marker annotation in Java sources and turns
their methods into MethodDescriptors. Type names are kept as written in
the source, generic arguments and array dimensions included.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import javalang

from entitygen.codegen.diagnostics import DiagnosticCollector
from entitygen.config import DEFAULT_MARKER
from entitygen.core.errors import DiscoveryError
from entitygen.core.types import VOID_TYPE, BatchEntry, MethodDescriptor

logger = logging.getLogger(__name__)

# Annotation element carrying the identifier flag
ID_ELEMENT = "id"


class JavaInterfaceIntrospector:
    """
    Introspects Java compilation units for annotated interfaces.
    """

    def __init__(self, marker: str = DEFAULT_MARKER) -> None:
        """
        Initialize the introspector.

        Args:
            marker: Simple name of the marker annotation; qualified uses
                (``@com.example.GenerateEntity``) match too
        """
        self.marker = marker

    def introspect_source(self, text: str, source: str | None = None) -> list[BatchEntry]:
        """
        Find annotated interfaces in one compilation unit.

        Args:
            text: Java source text
            source: Where the text came from, used in diagnostics

        Raises:
            DiscoveryError: If the source cannot be parsed
        """
        label = source or "<string>"
        try:
            unit = javalang.parse.parse(text)
        except javalang.parser.JavaSyntaxError as e:
            reason = getattr(e, "description", None) or "syntax error"
            position = getattr(getattr(e, "at", None), "position", None)
            if position:
                reason += f" at line {position[0]}"
            raise DiscoveryError(label, reason) from e
        except javalang.tokenizer.LexerError as e:
            raise DiscoveryError(label, str(e) or "invalid token") from e

        package_name = unit.package.name if unit.package else ""
        entries = []

        for type_decl in unit.types:
            if not self._find_marker(type_decl.annotations):
                continue
            if not isinstance(type_decl, javalang.tree.InterfaceDeclaration):
                logger.debug("Skipping annotated non-interface %s", type_decl.name)
                continue
            entries.append(BatchEntry(
                interface_name=type_decl.name,
                package_name=package_name,
                methods=tuple(self._introspect_methods(type_decl)),
                source=source,
            ))

        return entries

    def introspect_paths(
        self,
        paths: Iterable[Path | str],
        diagnostics: DiagnosticCollector,
    ) -> list[BatchEntry]:
        """
        Find annotated interfaces in files and directories.

        Directories are searched recursively for ``*.java`` files. Files
        that cannot be read or parsed are reported as ERROR diagnostics
        and skipped.
        """
        entries: list[BatchEntry] = []

        for file_path in _java_files(paths):
            try:
                text = file_path.read_text(encoding="utf-8")
                entries.extend(self.introspect_source(text, str(file_path)))
            except (OSError, UnicodeDecodeError) as e:
                diagnostics.error(f"Cannot read source: {e}", str(file_path))
            except DiscoveryError as e:
                diagnostics.error(e.message, str(file_path))

        return entries

    def _introspect_methods(self, interface: Any) -> list[MethodDescriptor]:
        methods = []
        for member in interface.body:
            if not isinstance(member, javalang.tree.MethodDeclaration):
                continue
            methods.append(MethodDescriptor(
                name=member.name,
                return_type_name=java_type_name(member.return_type),
                parameter_type_names=tuple(
                    java_type_name(p.type) + ("[]" if p.varargs else "")
                    for p in member.parameters
                ),
                identifier=self._identifier_value(member.annotations),
            ))
        return methods

    def _find_marker(self, annotations: list[Any]) -> Any | None:
        for annotation in annotations or []:
            name = annotation.name
            if name == self.marker or name.endswith("." + self.marker):
                return annotation
        return None

    def _identifier_value(self, annotations: list[Any]) -> bool | None:
        """The marker's ``id`` element, or None when the marker is absent."""
        annotation = self._find_marker(annotations)
        if annotation is None:
            return None
        if annotation.element is None:
            return False

        element = annotation.element
        if isinstance(element, list):
            for pair in element:
                if pair.name == ID_ELEMENT:
                    return _literal_true(pair.value)
            return False
        # Single-element form: @GenerateEntity(true)
        return _literal_true(element)


def java_type_name(node: Any) -> str:
    """Render a javalang type node as source text (None means void)."""
    if node is None:
        return VOID_TYPE

    parts = []
    dimensions = 0
    current = node
    while current is not None:
        text = current.name
        arguments = getattr(current, "arguments", None)
        if arguments:
            text += "<" + ", ".join(_type_argument(a) for a in arguments) + ">"
        parts.append(text)
        dimensions += len(current.dimensions or [])
        current = getattr(current, "sub_type", None)

    return ".".join(parts) + "[]" * dimensions


def _type_argument(argument: Any) -> str:
    if argument.type is None:
        return "?"
    inner = java_type_name(argument.type)
    if argument.pattern_type in ("extends", "super"):
        return f"? {argument.pattern_type} {inner}"
    return inner


def _literal_true(value: Any) -> bool:
    return isinstance(value, javalang.tree.Literal) and value.value == "true"


def _java_files(paths: Iterable[Path | str]) -> list[Path]:
    files: list[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(sorted(path.rglob("*.java")))
        else:
            files.append(path)
    return files


def discover_source(
    text: str,
    source: str | None = None,
    marker: str = DEFAULT_MARKER,
) -> list[BatchEntry]:
    """Find annotated interfaces in Java source text."""
    return JavaInterfaceIntrospector(marker).introspect_source(text, source)


def discover_paths(
    paths: Iterable[Path | str],
    diagnostics: DiagnosticCollector,
    marker: str = DEFAULT_MARKER,
) -> list[BatchEntry]:
    """Find annotated interfaces in Java files and directories."""
    return JavaInterfaceIntrospector(marker).introspect_paths(paths, diagnostics)
