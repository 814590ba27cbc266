"""
Entity descriptor assembly.
"""

from entitygen.core.types import EntityDescriptor, FieldTable


def assemble_descriptor(
    interface_name: str,
    package_name: str,
    fields: FieldTable,
) -> EntityDescriptor:
    """
    Assemble the descriptor for one interface.

    The generated type name and its qualified form are derived from
    ``interface_name`` and ``package_name``; an empty package name means
    the default package.
    """
    return EntityDescriptor(
        package_name=package_name,
        source_type_name=interface_name,
        fields=fields,
    )
