"""One-line member signatures and per-type member enumeration.

Signatures follow ``Name{desc}...: Type``; the ``{desc}`` tag only appears
when something non-default applies (restricted access, virtual state,
accessor visibility, field modifiers).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apiscope.analysis.kinds import classify
from apiscope.metadata.descriptors import (
    Accessibility,
    ConstructorMember,
    EventMember,
    FieldMember,
    MemberDescriptor,
    MethodMember,
    NestedTypeMember,
    PropertyMember,
    TypeDescriptor,
)
from apiscope.output.formatter import desc_tag
from apiscope.output.names import (
    full_type_name,
    member_name,
    nesting_prefix,
    parameter_list,
    type_name,
    type_ref_name,
    void_name,
)

if TYPE_CHECKING:
    from apiscope.metadata.catalog import Catalog


# ── Descriptor tags ──────────────────────────────────────────────────


def virtual_state(member: ConstructorMember | MethodMember) -> str:
    if not member.is_virtual:
        return ""
    if member.is_final:
        return "overriding"
    if member.is_abstract:
        return "abstract"
    return "overridable"


def method_desc(member: ConstructorMember | MethodMember) -> str:
    return desc_tag([member.access.label, virtual_state(member)])


def accessor_tag(access: Accessibility, accessor: str) -> str:
    label = access.label
    return f"{label}_{accessor}" if label else accessor


def event_desc(ev: EventMember) -> str:
    return desc_tag([accessor_tag(ev.add_access, "add"), accessor_tag(ev.remove_access, "remove")])


def property_desc(prop: PropertyMember) -> str:
    parts = [accessor_tag(prop.get_access, "get")]
    if prop.set_access is not None:
        parts.append(accessor_tag(prop.set_access, "set"))
    return desc_tag(parts)


def field_desc(field: FieldMember) -> str:
    parts = [field.access.label]
    if field.is_init_only:
        parts.append("readonly")
    elif field.is_literal:
        parts.append("literal")
    if field.is_special_name:
        parts.append("special")
    return desc_tag(parts)


def nested_type_desc(t: TypeDescriptor) -> str:
    return desc_tag([t.nested_access.label])


def module_type_desc(t: TypeDescriptor) -> str:
    return desc_tag(["hidden" if not t.is_visible else ""])


# ── Signatures ───────────────────────────────────────────────────────


def nested_type_str(catalog: Catalog, t: TypeDescriptor, namespaced: bool = False) -> str:
    return f"{full_type_name(catalog, t, namespaced)}{nested_type_desc(t)}: {classify(t)}"


def module_type_str(catalog: Catalog, t: TypeDescriptor) -> str:
    """Entry for a module type listing: ``Outer+Name{hidden}: kind``."""
    return f"{nesting_prefix(catalog, t)}{type_name(catalog, t)}{module_type_desc(t)}: {classify(t)}"


def constructor_str(
    catalog: Catalog,
    ctor: ConstructorMember,
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> str:
    name = member_name(catalog, ctor, namespaced)
    args = parameter_list(catalog, ctor.parameters, namespaced, indent, expanded)
    return f"{name}{method_desc(ctor)}({args}): {void_name(catalog, namespaced)}"


def method_str(
    catalog: Catalog,
    meth: MethodMember,
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> str:
    name = member_name(catalog, meth, namespaced)
    args = parameter_list(catalog, meth.parameters, namespaced, indent, expanded)
    ret = type_ref_name(catalog, meth.return_type, namespaced)
    return f"{name}{method_desc(meth)}({args}): {ret}"


def extension_method_str(catalog: Catalog, meth: MethodMember) -> str:
    """Method signature with the receiver parameter dropped."""
    name = member_name(catalog, meth)
    args = parameter_list(catalog, meth.parameters[1:])
    return f"{name}{method_desc(meth)}({args}): {type_ref_name(catalog, meth.return_type)}"


def event_str(catalog: Catalog, ev: EventMember, namespaced: bool = False) -> str:
    return f"{ev.name}{event_desc(ev)}: {type_ref_name(catalog, ev.handler_type, namespaced)}"


def property_str(
    catalog: Catalog,
    prop: PropertyMember,
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> str:
    args = ""
    if prop.index_parameters:
        args = f"[{parameter_list(catalog, prop.index_parameters, namespaced, indent, expanded)}]"
    ptype = type_ref_name(catalog, prop.property_type, namespaced)
    return f"{prop.name}{property_desc(prop)}{args}: {ptype}"


def field_str(catalog: Catalog, field: FieldMember, namespaced: bool = False) -> str:
    return f"{field.name}{field_desc(field)}: {type_ref_name(catalog, field.field_type, namespaced)}"


def member_str(
    catalog: Catalog,
    member: MemberDescriptor,
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> str:
    """Dispatch on member kind.  *indent* is the member line's own indentation,
    used to close expanded parameter lists."""
    if isinstance(member, NestedTypeMember):
        return nested_type_str(catalog, catalog.type(member.type_key), namespaced)
    if isinstance(member, ConstructorMember):
        return constructor_str(catalog, member, namespaced, indent, expanded)
    if isinstance(member, MethodMember):
        return method_str(catalog, member, namespaced, indent, expanded)
    if isinstance(member, EventMember):
        return event_str(catalog, member, namespaced)
    if isinstance(member, PropertyMember):
        return property_str(catalog, member, namespaced, indent, expanded)
    if isinstance(member, FieldMember):
        return field_str(catalog, member, namespaced)
    return str(member)


# ── Enumeration ──────────────────────────────────────────────────────


def declared_members(catalog: Catalog, t: TypeDescriptor, static: bool) -> list[MemberDescriptor]:
    """Members declared on *t* itself, by name then kind then declaration order.

    Nested types are listed on both the static and the instance side;
    compiler-generated nested types are skipped.
    """
    selected = []
    for position, member in enumerate(t.members):
        if isinstance(member, NestedTypeMember):
            if catalog.type(member.type_key).compiler_generated:
                continue
        elif member.is_static != static:
            continue
        selected.append((member.name, member.kind.rank, position, member))
    selected.sort(key=lambda item: item[:3])
    return [item[3] for item in selected]


def static_members(catalog: Catalog, t: TypeDescriptor) -> list[MemberDescriptor]:
    return declared_members(catalog, t, static=True)


def instance_members(catalog: Catalog, t: TypeDescriptor) -> list[MemberDescriptor]:
    return declared_members(catalog, t, static=False)


def member_lines(
    catalog: Catalog,
    members: list[MemberDescriptor],
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> list[str]:
    """One entry per member, each prefixed with *indent*."""
    return [indent + member_str(catalog, m, namespaced, indent, expanded) for m in members]
