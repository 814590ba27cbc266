"""
Shared test fixtures.
"""

import logging
from collections.abc import Callable

import pytest

from entitygen.codegen.filer import MemoryFiler
from entitygen.codegen.templates import TemplateResolver
from entitygen.core.types import VOID_TYPE, BatchEntry, MethodDescriptor

# === Sample Declarations ===

PERSON_SOURCE = """\
package com.example;

import deors.demos.annotations.entity.GenerateEntity;

@GenerateEntity
public interface Person {

    @GenerateEntity(id = true)
    long getId();

    void setId(long id);

    String getName();

    void setName(String name);

    boolean isActive();

    void setActive(boolean active);

    java.util.List<String> getTags();

    byte[] getPhoto();

    void touch();
}
"""


def _getter(name: str, type_name: str, is_identifier: bool = False) -> MethodDescriptor:
    return MethodDescriptor(name=name, return_type_name=type_name, is_identifier=is_identifier)


def _setter(name: str, type_name: str, is_identifier: bool = False) -> MethodDescriptor:
    return MethodDescriptor(
        name=name,
        return_type_name=VOID_TYPE,
        parameter_type_names=(type_name,),
        is_identifier=is_identifier,
    )


# === Fixtures ===


@pytest.fixture
def getter() -> Callable[..., MethodDescriptor]:
    """Factory for getter descriptors: getter(name, type_name, is_identifier=False)."""
    return _getter


@pytest.fixture
def setter() -> Callable[..., MethodDescriptor]:
    """Factory for void setter descriptors: setter(name, type_name, is_identifier=False)."""
    return _setter


@pytest.fixture
def person_source() -> str:
    """Java source declaring the annotated Person interface."""
    return PERSON_SOURCE


@pytest.fixture
def person_methods() -> tuple[MethodDescriptor, ...]:
    """Methods of the Person example interface."""
    return (
        _getter("getName", "String"),
        _setter("setName", "String"),
        _getter("isActive", "boolean", is_identifier=True),
    )


@pytest.fixture
def person_entry(person_methods) -> BatchEntry:
    """Person interface as a batch entry."""
    return BatchEntry(
        interface_name="Person",
        package_name="com.example",
        methods=person_methods,
        source="Person.java",
    )


@pytest.fixture
def resolver() -> TemplateResolver:
    """Resolver with only the bundled templates."""
    return TemplateResolver()


@pytest.fixture
def filer() -> MemoryFiler:
    """In-memory filer."""
    return MemoryFiler()


@pytest.fixture(autouse=True)
def reset_entitygen_logging():
    """Undo logging configuration done by a test."""
    root = logging.getLogger("entitygen")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
