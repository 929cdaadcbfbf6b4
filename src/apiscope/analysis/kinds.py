"""Structural kind classification for type descriptors."""

from __future__ import annotations

from enum import Enum

from apiscope.metadata.descriptors import TypeDescriptor


class Kind(str, Enum):
    ARRAY = "array"
    POINTER = "pointer"
    PRIMITIVE = "primitive"
    ENUM = "enum"
    STRUCT = "struct"
    INTERFACE = "interface"
    STATIC_CLASS = "static class"
    ABSTRACT_CLASS = "abstract class"
    FINAL_CLASS = "final class"
    CLASS = "class"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


def classify(t: TypeDescriptor) -> Kind:
    """Map a type to its kind label.

    Checks run in a fixed order (array, pointer, primitive, value type,
    interface, class), so flag combinations that overlap resolve to the
    first match.  Anything else is ``Kind.UNKNOWN``; this never raises.
    """
    if t.is_array:
        return Kind.ARRAY
    if t.is_pointer:
        return Kind.POINTER
    if t.is_primitive:
        return Kind.PRIMITIVE
    if t.is_value_type:
        return Kind.ENUM if t.is_enum else Kind.STRUCT
    if t.is_interface:
        return Kind.INTERFACE
    if t.is_class:
        if t.is_abstract and t.is_sealed:
            return Kind.STATIC_CLASS
        if t.is_abstract:
            return Kind.ABSTRACT_CLASS
        if t.is_sealed:
            return Kind.FINAL_CLASS
        return Kind.CLASS
    return Kind.UNKNOWN
