"""
Template filters for rendering Java members from field entries.
"""

from entitygen.core.types import FieldEntry

# Java primitive types and their wrapper classes
PRIMITIVE_WRAPPERS: dict[str, str] = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "short": "Short",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
}


# Initial values of Java fields that are never assigned
PRIMITIVE_DEFAULTS: dict[str, str] = {
    "boolean": "false",
    "byte": "(byte) 0",
    "char": "'\\u0000'",
    "short": "(short) 0",
    "int": "0",
    "long": "0L",
    "float": "0.0f",
    "double": "0.0d",
}


def capitalize_first(name: str) -> str:
    """Uppercase the first character only (``firstName`` -> ``FirstName``)."""
    return name[:1].upper() + name[1:]


def is_array(type_name: str) -> bool:
    return type_name.endswith("]")


def java_default(field: FieldEntry | str) -> str:
    """Java literal for the default value of a field or type name."""
    type_name = field if isinstance(field, str) else field.type_name
    return PRIMITIVE_DEFAULTS.get(type_name, "null")


def getter_name(field: FieldEntry) -> str:
    """
    Getter name for a field.

    Uses the prefix of the getter the interface declares, so the generated
    method implements it. Fields known only from a setter get ``is`` when
    they are ``boolean`` and ``get`` otherwise.
    """
    prefix = field.getter_prefix
    if prefix is None:
        prefix = "is" if field.type_name == "boolean" else "get"
    return prefix + capitalize_first(field.name)


def setter_name(field: FieldEntry) -> str:
    return "set" + capitalize_first(field.name)


def equals_expr(field: FieldEntry, other: str = "other") -> str:
    """Java expression comparing ``this.<field>`` with ``<other>.<field>``."""
    mine, theirs = f"this.{field.name}", f"{other}.{field.name}"
    if field.type_name in ("float", "double"):
        wrapper = PRIMITIVE_WRAPPERS[field.type_name]
        return f"{wrapper}.compare({mine}, {theirs}) == 0"
    if field.type_name in PRIMITIVE_WRAPPERS:
        return f"{mine} == {theirs}"
    if is_array(field.type_name):
        return f"java.util.Arrays.equals({mine}, {theirs})"
    return f"java.util.Objects.equals({mine}, {theirs})"


def hash_expr(field: FieldEntry) -> str:
    """Java expression hashing ``this.<field>``."""
    value = f"this.{field.name}"
    if field.type_name in PRIMITIVE_WRAPPERS:
        return f"{PRIMITIVE_WRAPPERS[field.type_name]}.hashCode({value})"
    if is_array(field.type_name):
        return f"java.util.Arrays.hashCode({value})"
    return f"java.util.Objects.hashCode({value})"


def string_expr(field: FieldEntry) -> str:
    """Java expression converting ``this.<field>`` for ``toString``."""
    value = f"this.{field.name}"
    if is_array(field.type_name):
        return f"java.util.Arrays.toString({value})"
    return value


FILTERS = {
    "capitalize_first": capitalize_first,
    "java_default": java_default,
    "getter_name": getter_name,
    "setter_name": setter_name,
    "equals_expr": equals_expr,
    "hash_expr": hash_expr,
    "string_expr": string_expr,
}
