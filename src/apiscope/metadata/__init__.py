"""Type metadata: descriptors, the immutable catalog and snapshot loading."""

from apiscope.metadata.catalog import VOID, Catalog, ModuleDescriptor
from apiscope.metadata.descriptors import (
    VOID_KEY,
    Accessibility,
    ConstructorMember,
    EventMember,
    FieldMember,
    MemberDescriptor,
    MemberKind,
    MethodMember,
    NestedTypeMember,
    ParameterDescriptor,
    ParameterMode,
    PropertyMember,
    TypeDescriptor,
)
from apiscope.metadata.snapshot import catalog_from_dict, load_catalog

__all__ = [
    "VOID",
    "VOID_KEY",
    "Accessibility",
    "Catalog",
    "ConstructorMember",
    "EventMember",
    "FieldMember",
    "MemberDescriptor",
    "MemberKind",
    "MethodMember",
    "ModuleDescriptor",
    "NestedTypeMember",
    "ParameterDescriptor",
    "ParameterMode",
    "PropertyMember",
    "TypeDescriptor",
    "catalog_from_dict",
    "load_catalog",
]
