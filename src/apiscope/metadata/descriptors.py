"""Immutable descriptors for types, members and parameters.

Descriptors refer to other types by *key* (the identity string a catalog
indexes them under) rather than by object, so nested types, generic
parameters and their owners can point at each other without cycles.
Resolve keys through :class:`apiscope.metadata.catalog.Catalog`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Name of the runtime's void type, used as the constructor return marker.
VOID_KEY = "System.Void"


class Accessibility(str, Enum):
    """Declared accessibility of a member or nested type."""

    PUBLIC = "public"
    FAMILY = "family"
    FAMILY_OR_ASSEMBLY = "family_or_assembly"
    ASSEMBLY = "assembly"
    FAMILY_AND_ASSEMBLY = "family_and_assembly"
    PRIVATE = "private"

    @property
    def label(self) -> str:
        """Descriptor-tag label; empty for public."""
        return _ACCESS_LABELS[self]


_ACCESS_LABELS = {
    Accessibility.PUBLIC: "",
    Accessibility.FAMILY: "family",
    Accessibility.FAMILY_OR_ASSEMBLY: "family|assembly",
    Accessibility.ASSEMBLY: "assembly",
    Accessibility.FAMILY_AND_ASSEMBLY: "assembly&family",
    Accessibility.PRIVATE: "private",
}


class ParameterMode(str, Enum):
    VALUE = "value"
    REF = "ref"
    OUT = "out"


class MemberKind(str, Enum):
    """Member kinds, declared in listing tie-break order."""

    NESTED_TYPE = "nested_type"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    EVENT = "event"
    PROPERTY = "property"
    FIELD = "field"

    @property
    def rank(self) -> int:
        return list(MemberKind).index(self)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParameterDescriptor:
    """A method, constructor or indexer parameter.

    ``has_default`` distinguishes "no default" from an explicit ``None``
    (null) default.
    """

    type: str
    name: str | None = None
    mode: ParameterMode = ParameterMode.VALUE
    has_default: bool = False
    default: Any = None


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NestedTypeMember:
    """A nested type; listed with both the static and the instance members."""

    name: str
    type_key: str
    kind: MemberKind = field(default=MemberKind.NESTED_TYPE, init=False)


@dataclass(frozen=True)
class ConstructorMember:
    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    access: Accessibility = Accessibility.PUBLIC
    is_static: bool = False
    is_virtual: bool = False
    is_final: bool = False
    is_abstract: bool = False
    generic_arguments: tuple[str, ...] = ()
    kind: MemberKind = field(default=MemberKind.CONSTRUCTOR, init=False)

    @property
    def is_generic(self) -> bool:
        return bool(self.generic_arguments)


@dataclass(frozen=True)
class MethodMember:
    name: str
    return_type: str = VOID_KEY
    parameters: tuple[ParameterDescriptor, ...] = ()
    access: Accessibility = Accessibility.PUBLIC
    is_static: bool = False
    is_virtual: bool = False
    is_final: bool = False
    is_abstract: bool = False
    generic_arguments: tuple[str, ...] = ()
    is_extension_tagged: bool = False
    kind: MemberKind = field(default=MemberKind.METHOD, init=False)

    @property
    def is_generic(self) -> bool:
        return bool(self.generic_arguments)


@dataclass(frozen=True)
class EventMember:
    name: str
    handler_type: str
    add_access: Accessibility = Accessibility.PUBLIC
    remove_access: Accessibility = Accessibility.PUBLIC
    is_static: bool = False
    kind: MemberKind = field(default=MemberKind.EVENT, init=False)


@dataclass(frozen=True)
class PropertyMember:
    name: str
    property_type: str
    get_access: Accessibility = Accessibility.PUBLIC
    set_access: Accessibility | None = None
    index_parameters: tuple[ParameterDescriptor, ...] = ()
    is_static: bool = False
    kind: MemberKind = field(default=MemberKind.PROPERTY, init=False)


@dataclass(frozen=True)
class FieldMember:
    name: str
    field_type: str
    access: Accessibility = Accessibility.PUBLIC
    is_static: bool = False
    is_init_only: bool = False
    is_literal: bool = False
    is_special_name: bool = False
    kind: MemberKind = field(default=MemberKind.FIELD, init=False)


MemberDescriptor = Union[
    NestedTypeMember,
    ConstructorMember,
    MethodMember,
    EventMember,
    PropertyMember,
    FieldMember,
]


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypeDescriptor:
    """A declared or constructed type.

    For a generic definition ``generic_arguments`` holds its unbound
    parameter keys; for a constructed generic type it holds the bound
    arguments and ``generic_definition`` names the definition.
    """

    key: str
    name: str
    module: str = ""
    namespace: str | None = None

    is_primitive: bool = False
    is_value_type: bool = False
    is_enum: bool = False
    is_interface: bool = False
    is_class: bool = False
    is_abstract: bool = False
    is_sealed: bool = False
    is_array: bool = False
    is_pointer: bool = False
    is_by_ref: bool = False

    element_type: str | None = None
    generic_arguments: tuple[str, ...] = ()
    generic_definition: str | None = None
    is_generic_parameter: bool = False

    declaring_type: str | None = None
    base_type: str | None = None
    interfaces: tuple[str, ...] = ()

    is_visible: bool = True
    nested_access: Accessibility = Accessibility.PUBLIC
    compiler_generated: bool = False
    is_extension_container_tagged: bool = False

    members: tuple[MemberDescriptor, ...] = ()

    @property
    def is_nested(self) -> bool:
        return self.declaring_type is not None and not self.is_generic_parameter

    @property
    def is_generic_type(self) -> bool:
        return bool(self.generic_arguments) and not self.is_generic_parameter

    @property
    def definition_key(self) -> str | None:
        """Key of the generic definition, or None for non-generic types."""
        if not self.is_generic_type:
            return None
        return self.generic_definition or self.key

    @property
    def is_static_class(self) -> bool:
        return self.is_abstract and self.is_sealed
