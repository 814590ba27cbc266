"""
Field inference from accessor naming.

Maps ``getX``/``setX``/``isX`` methods onto fields. The first method that
names a field decides its type and identifier flag; later methods naming
the same field are ignored, even when they disagree. The only thing a
later method adds is the getter prefix, when the field was first seen
through its setter.
"""

import logging
from collections.abc import Iterable

from entitygen.core.errors import MalformedMethodShape
from entitygen.core.types import FieldEntry, FieldTable, MethodDescriptor

logger = logging.getLogger(__name__)

# Checked in order; "is" must not shadow the three-letter prefixes.
ACCESSOR_PREFIXES = ("get", "set", "is")

# Prefixes a declared getter can carry
GETTER_PREFIXES = ("get", "is")


def accessor_prefix(method_name: str) -> str | None:
    """The accessor prefix a method name starts with, if any."""
    for prefix in ACCESSOR_PREFIXES:
        if method_name.startswith(prefix):
            return prefix
    return None


def derive_field_name(method_name: str) -> str | None:
    """
    Derive a field name from an accessor method name.

    Prefixes are matched case-sensitively and the remainder is lowercased
    as a whole, so ``getURL`` gives ``url`` and ``getX``/``getx`` collide.

    Returns:
        The field name, or None if the method is not an accessor
    """
    prefix = accessor_prefix(method_name)
    if prefix is None:
        return None
    return method_name[len(prefix):].lower()


def infer_field(method: MethodDescriptor) -> FieldEntry:
    """
    Infer the field a single accessor method describes.

    A method with no return value is a setter and takes its type from the
    first parameter. Anything else is a getter typed by its return value.

    Raises:
        MalformedMethodShape: If the method is not an accessor, or is a
            setter without parameters
    """
    prefix = accessor_prefix(method.name)
    if prefix is None:
        raise MalformedMethodShape(method.name, "no get/set/is prefix")
    name = method.name[len(prefix):].lower()

    getter_prefix = None
    if method.returns_value:
        type_name = method.return_type_name
        if prefix in GETTER_PREFIXES:
            getter_prefix = prefix
    else:
        if not method.parameter_type_names:
            raise MalformedMethodShape(method.name, "setter without parameters")
        type_name = method.parameter_type_names[0]

    return FieldEntry(
        name=name,
        type_name=type_name,
        is_identifier=method.is_identifier,
        getter_prefix=getter_prefix,
    )


def build_field_table(methods: Iterable[MethodDescriptor]) -> FieldTable:
    """
    Build the field table for an interface.

    Args:
        methods: Method descriptors in declaration order

    Returns:
        Fields in first-encounter order, unique by name
    """
    entries: dict[str, FieldEntry] = {}

    for method in methods:
        try:
            entry = infer_field(method)
        except MalformedMethodShape as e:
            logger.debug("Skipping method: %s", e.message)
            continue

        existing = entries.get(entry.name)
        if existing is None:
            entries[entry.name] = entry
        elif existing.getter_prefix is None and entry.getter_prefix is not None:
            entries[entry.name] = existing.model_copy(
                update={"getter_prefix": entry.getter_prefix}
            )

    return FieldTable(tuple(entries.values()))
