"""
Shared type definitions for entitygen.
"""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, computed_field, model_validator

# Return type of a method that yields no value.
VOID_TYPE = "void"

# Appended to an interface name to name its generated implementation.
IMPL_SUFFIX = "Impl"


class MethodDescriptor(BaseModel):
    """
    One method-shaped member of an annotated interface.

    ``identifier`` is the marker's declared ``id`` value, or None when the
    method carries no marker. ``is_identifier`` is the resolved flag and
    follows ``identifier`` unless given explicitly.
    """

    name: str
    return_type_name: str = VOID_TYPE
    parameter_type_names: tuple[str, ...] = ()
    identifier: bool | None = None
    is_identifier: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _resolve_identifier(cls, data: Any) -> Any:
        if isinstance(data, dict) and "is_identifier" not in data:
            identifier = data.get("identifier")
            if identifier is not None:
                data = {**data, "is_identifier": identifier}
        return data

    @property
    def returns_value(self) -> bool:
        """Whether the method has a non-void return type."""
        return self.return_type_name not in ("", VOID_TYPE)


class FieldEntry(BaseModel):
    """A field inferred from accessor naming."""

    name: str
    type_name: str
    is_identifier: bool = False
    getter_prefix: str | None = None  # "get" or "is" as declared; None if no getter

    model_config = ConfigDict(frozen=True)


class FieldTable(RootModel[tuple[FieldEntry, ...]]):
    """
    Ordered field entries, unique by name.

    Order is the order in which the fields were first encountered.
    """

    root: tuple[FieldEntry, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_unique_names(self) -> "FieldTable":
        seen: set[str] = set()
        for entry in self.root:
            if entry.name in seen:
                raise ValueError(f"Duplicate field name: {entry.name}")
            seen.add(entry.name)
        return self

    def __iter__(self) -> Iterator[FieldEntry]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self.root)

    def __getitem__(self, index: int) -> FieldEntry:
        return self.root[index]

    def names(self) -> list[str]:
        """List field names in table order."""
        return [entry.name for entry in self.root]

    def get(self, name: str) -> FieldEntry | None:
        """Get the entry for a field name."""
        for entry in self.root:
            if entry.name == name:
                return entry
        return None

    def identifiers(self) -> list[FieldEntry]:
        """List the entries flagged as identifiers."""
        return [entry for entry in self.root if entry.is_identifier]


class EntityDescriptor(BaseModel):
    """Everything needed to generate the implementation of one interface."""

    package_name: str = ""
    source_type_name: str
    fields: FieldTable = Field(default_factory=FieldTable)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def generated_type_name(self) -> str:
        return self.source_type_name + IMPL_SUFFIX

    @computed_field  # type: ignore[prop-decorator]
    @property
    def qualified_generated_name(self) -> str:
        if not self.package_name:
            return self.generated_type_name
        return f"{self.package_name}.{self.generated_type_name}"


class BatchEntry(BaseModel):
    """A discovered interface awaiting generation."""

    interface_name: str
    package_name: str = ""
    methods: tuple[MethodDescriptor, ...] = ()
    source: str | None = None  # Originating element, e.g. a file path

    model_config = ConfigDict(frozen=True)
