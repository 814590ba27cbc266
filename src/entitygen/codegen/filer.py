"""
Source artifact emission.

A Filer creates one writable sink per generated type. Sinks are context
managers: leaving the block normally keeps the artifact, leaving it with
an exception discards it.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from entitygen.core.errors import EmissionIOError

logger = logging.getLogger(__name__)


@dataclass
class GeneratedFile:
    """A generated source file."""

    path: str
    content: str
    qualified_name: str


class SourceSink:
    """
    Writable text sink for one source artifact.

    OS errors raised while writing or closing are reported as
    EmissionIOError.
    """

    def __init__(self, qualified_name: str, stream: TextIO, location: str) -> None:
        self.qualified_name = qualified_name
        self.location = location
        self._stream = stream
        self.closed = False

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
        except OSError as e:
            raise EmissionIOError(self.qualified_name, str(e)) from e

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._stream.close()
        except OSError as e:
            raise EmissionIOError(self.qualified_name, str(e)) from e

    def discard(self) -> None:
        """Close the sink without keeping what was written."""
        if self.closed:
            return
        self.closed = True
        try:
            self._stream.close()
        except OSError as e:
            logger.debug("Closing discarded %s failed: %s", self.qualified_name, e)

    def __enter__(self) -> SourceSink:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, *exc_info: object) -> None:
        if exc_type is None:
            self.close()
        else:
            self.discard()


class Filer(ABC):
    """Creates source artifacts for generated types."""

    @abstractmethod
    def create_source(self, qualified_name: str) -> SourceSink:
        """
        Create a new source artifact.

        Raises:
            EmissionIOError: If the artifact cannot be created
        """
        ...

    @staticmethod
    def relative_path(qualified_name: str, extension: str) -> str:
        """Path of a type's source file relative to the output root."""
        return qualified_name.replace(".", "/") + extension


class _FileSink(SourceSink):
    """Sink for a file on disk; a discarded file is removed again."""

    def __init__(
        self,
        filer: DirectoryFiler,
        qualified_name: str,
        path: Path,
        stream: TextIO,
    ) -> None:
        super().__init__(qualified_name, stream, path.absolute().as_uri())
        self._filer = filer
        self._path = path

    def close(self) -> None:
        try:
            super().close()
        except EmissionIOError:
            self._remove()
            raise

    def discard(self) -> None:
        if self.closed:
            return
        super().discard()
        self._remove()

    def _remove(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Cannot remove partial source %s: %s", self._path, e)
        if self._path in self._filer.created:
            self._filer.created.remove(self._path)


class DirectoryFiler(Filer):
    """
    Writes artifacts below a root directory, one file per type.

    ``com.example.PersonImpl`` becomes ``<root>/com/example/PersonImpl.java``.
    An artifact created once by this filer is never recreated. A file
    whose sink fails is deleted and may be created again.
    """

    def __init__(
        self,
        root: Path | str,
        extension: str = ".java",
        encoding: str = "utf-8",
    ) -> None:
        self.root = Path(root)
        self.extension = extension
        self.encoding = encoding
        self.created: list[Path] = []

    def create_source(self, qualified_name: str) -> SourceSink:
        file_path = self.root / self.relative_path(qualified_name, self.extension)
        if file_path in self.created:
            raise EmissionIOError(qualified_name, "attempt to recreate a file")

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            stream = file_path.open("w", encoding=self.encoding)
        except OSError as e:
            raise EmissionIOError(qualified_name, str(e)) from e

        self.created.append(file_path)
        return _FileSink(self, qualified_name, file_path, stream)


class _MemorySink(SourceSink):
    def __init__(self, filer: MemoryFiler, qualified_name: str, path: str) -> None:
        self._buffer = io.StringIO()
        super().__init__(qualified_name, self._buffer, f"memory:///{path}")
        self._filer = filer
        self._path = path

    def close(self) -> None:
        if self.closed:
            return
        content = self._buffer.getvalue()
        super().close()
        self._filer.files.append(
            GeneratedFile(path=self._path, content=content, qualified_name=self.qualified_name)
        )


class MemoryFiler(Filer):
    """Keeps artifacts in memory; they are recorded when their sink closes."""

    def __init__(self, extension: str = ".java") -> None:
        self.extension = extension
        self.files: list[GeneratedFile] = []

    def create_source(self, qualified_name: str) -> SourceSink:
        if qualified_name in self:
            raise EmissionIOError(qualified_name, "attempt to recreate a file")
        return _MemorySink(self, qualified_name, self.relative_path(qualified_name, self.extension))

    def __contains__(self, qualified_name: object) -> bool:
        return any(f.qualified_name == qualified_name for f in self.files)

    def get(self, qualified_name: str) -> GeneratedFile | None:
        """Get a recorded artifact by qualified type name."""
        for gf in self.files:
            if gf.qualified_name == qualified_name:
                return gf
        return None
