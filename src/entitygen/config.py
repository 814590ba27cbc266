"""
Generator settings.

Settings come from a Java-properties style file (the format template engine
configuration traditionally uses), optionally overlaid with ``ENTITYGEN_*``
environment variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from entitygen.core.errors import ConfigurationError

DEFAULT_TEMPLATE = "entity.java.j2"
DEFAULT_MARKER = "GenerateEntity"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Settings for template resolution, emission, and discovery.
    """

    # Templates
    template_name: str = DEFAULT_TEMPLATE
    template_path: tuple[str, ...] = ()
    template_cache: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Output
    output_extension: str = ".java"
    output_encoding: str = "utf-8"

    # Discovery
    marker_annotation: str = DEFAULT_MARKER

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    # Keys that were present in the source but not recognized
    unknown_keys: tuple[str, ...] = field(default=(), compare=False)

    # Properties key -> attribute name
    PROPERTY_KEYS = {
        "template.name": "template_name",
        "resource.loader.path": "template_path",
        "resource.loader.cache": "template_cache",
        "template.trim_blocks": "trim_blocks",
        "template.lstrip_blocks": "lstrip_blocks",
        "output.extension": "output_extension",
        "output.encoding": "output_encoding",
        "marker.annotation": "marker_annotation",
        "log.level": "log_level",
        "log.format": "log_format",
    }

    # Environment variable -> properties key
    ENV_KEYS = {
        "ENTITYGEN_TEMPLATE": "template.name",
        "ENTITYGEN_TEMPLATE_PATH": "resource.loader.path",
        "ENTITYGEN_TEMPLATE_CACHE": "resource.loader.cache",
        "ENTITYGEN_OUTPUT_EXTENSION": "output.extension",
        "ENTITYGEN_OUTPUT_ENCODING": "output.encoding",
        "ENTITYGEN_MARKER": "marker.annotation",
        "ENTITYGEN_LOG_LEVEL": "log.level",
        "ENTITYGEN_LOG_FORMAT": "log.format",
    }

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, str],
        base: "GeneratorSettings | None" = None,
        path_separator: str = ",",
    ) -> "GeneratorSettings":
        """
        Build settings from properties-style keys.

        Args:
            values: Mapping of properties keys to raw string values
            base: Settings to start from (defaults to the built-in defaults)
            path_separator: Separator for multi-directory loader paths

        Raises:
            ConfigurationError: If a value cannot be converted
        """
        base = base or cls()
        changes: dict[str, Any] = {}
        unknown = list(base.unknown_keys)

        for key, raw in values.items():
            attr = cls.PROPERTY_KEYS.get(key)
            if attr is None:
                unknown.append(key)
                continue
            changes[attr] = _convert(attr, key, raw, path_separator)

        return replace(base, unknown_keys=tuple(unknown), **changes)

    @classmethod
    def from_properties(
        cls,
        source: str | Path,
        base: "GeneratorSettings | None" = None,
    ) -> "GeneratorSettings":
        """
        Load settings from a properties file or properties text.

        Args:
            source: Path to a properties file, or the text itself
            base: Settings to start from

        Raises:
            ConfigurationError: If the file cannot be read or a value is invalid
        """
        if isinstance(source, Path):
            try:
                text = source.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(f"Cannot read settings file {source}: {e}") from e
        else:
            text = source
        return cls.from_mapping(parse_properties(text), base=base)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base: "GeneratorSettings | None" = None,
    ) -> "GeneratorSettings":
        """Overlay ``ENTITYGEN_*`` environment variables onto ``base``."""
        environ = os.environ if environ is None else environ
        values = {
            key: environ[var] for var, key in cls.ENV_KEYS.items() if var in environ
        }
        return cls.from_mapping(values, base=base, path_separator=os.pathsep)

    def with_overrides(self, **overrides: Any) -> "GeneratorSettings":
        """Return a copy with the given attributes replaced, ignoring None."""
        names = {f.name for f in fields(self)}
        changes = {}
        for name, value in overrides.items():
            if name not in names:
                raise ConfigurationError(f"Unknown setting: {name}", key=name)
            if value is not None:
                changes[name] = value
        return replace(self, **changes)


def _convert(attr: str, key: str, raw: str, path_separator: str) -> Any:
    value = raw.strip()
    if attr in ("template_cache", "trim_blocks", "lstrip_blocks"):
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ConfigurationError(
            f"Setting '{key}' expects a boolean, got '{raw}'",
            key=key,
        )
    if attr == "template_path":
        return tuple(part.strip() for part in value.split(path_separator) if part.strip())
    if attr == "output_extension" and value and not value.startswith("."):
        return "." + value
    return value


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse Java-properties style text.

    Supports ``key=value``, ``key: value`` and ``key value`` entries,
    ``#``/``!`` comment lines, and trailing-backslash continuations.
    Later entries override earlier ones.
    """
    result: dict[str, str] = {}
    logical = ""

    for raw_line in text.splitlines():
        line = raw_line.strip() if not logical else raw_line.lstrip()
        if not logical and (not line or line[0] in "#!"):
            continue

        # An odd number of trailing backslashes continues the entry
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            logical += line[:-1]
            continue

        logical += line
        key, value = _split_entry(logical)
        result[key] = value
        logical = ""

    if logical:
        key, value = _split_entry(logical)
        result[key] = value

    return result


def _split_entry(entry: str) -> tuple[str, str]:
    for index, char in enumerate(entry):
        if char in "=:":
            return entry[:index].strip(), entry[index + 1:].strip()
        if char.isspace():
            rest = entry[index:].lstrip()
            if rest[:1] in ("=", ":"):
                rest = rest[1:]
            return entry[:index].strip(), rest.strip()
    return entry.strip(), ""
