"""Display names for types, members and parameter lists.

``namespaced`` selects ``Namespace.Name`` for top-level types.  Unbound
generic parameters are always shown bare; bound generic arguments follow
the caller's mode, including their own nesting prefix.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from apiscope.graph.hierarchy import nesting_chain
from apiscope.metadata.descriptors import (
    VOID_KEY,
    ConstructorMember,
    MethodMember,
    ParameterDescriptor,
    ParameterMode,
    TypeDescriptor,
)
from apiscope.output.formatter import INDENT_UNIT

if TYPE_CHECKING:
    from apiscope.metadata.catalog import Catalog

ARITY_MARK = "`"


def strip_arity(name: str) -> str:
    """``List`1`` -> ``List``."""
    return name.split(ARITY_MARK, 1)[0]


def type_name(catalog: Catalog, t: TypeDescriptor, namespaced: bool = False) -> str:
    if t.element_type is not None and (t.is_array or t.is_pointer or t.is_by_ref):
        elem = type_name(catalog, catalog.type(t.element_type), namespaced)
        if t.is_array:
            return f"{elem}[]"
        if t.is_pointer:
            return f"{elem}*"
        return f"{elem}&"

    qualify = namespaced and not t.is_nested and bool(t.namespace)
    if not t.is_generic_type:
        return f"{t.namespace}.{t.name}" if qualify else t.name

    name = strip_arity(t.name)
    if qualify:
        name = f"{t.namespace}.{name}"
    return f"{name}<{generic_arguments(catalog, t.generic_arguments, namespaced)}>"


def nesting_prefix(catalog: Catalog, t: TypeDescriptor, namespaced: bool = False) -> str:
    """``Outer+Middle+`` for a nested type, ``""`` otherwise."""
    chain = nesting_chain(catalog, t)
    if not chain:
        return ""
    return "+".join(type_name(catalog, o, namespaced) for o in chain) + "+"


def full_type_name(catalog: Catalog, t: TypeDescriptor, namespaced: bool = False) -> str:
    """Nesting prefix plus type name."""
    return nesting_prefix(catalog, t, namespaced) + type_name(catalog, t, namespaced)


def type_ref_name(catalog: Catalog, key: str, namespaced: bool = False) -> str:
    return type_name(catalog, catalog.type(key), namespaced)


def generic_arguments(catalog: Catalog, keys: Sequence[str], namespaced: bool = False) -> str:
    parts = []
    for key in keys:
        arg = catalog.type(key)
        if arg.is_generic_parameter:
            parts.append(type_name(catalog, arg, False))
        else:
            parts.append(full_type_name(catalog, arg, namespaced))
    return ", ".join(parts)


def member_name(
    catalog: Catalog, member: ConstructorMember | MethodMember, namespaced: bool = False
) -> str:
    if not member.is_generic:
        return member.name
    return f"{member.name}<{generic_arguments(catalog, member.generic_arguments, namespaced)}>"


def void_name(catalog: Catalog, namespaced: bool = False) -> str:
    return type_ref_name(catalog, VOID_KEY, namespaced)


# ── Parameters ───────────────────────────────────────────────────────


def pass_prefix(catalog: Catalog, param: ParameterDescriptor) -> str:
    """``out `` or ``ref `` for by-ref parameter types; the mode alone adds nothing."""
    if not catalog.type(param.type).is_by_ref:
        return ""
    return "out " if param.mode is ParameterMode.OUT else "ref "


def default_literal(param: ParameterDescriptor) -> str:
    if not param.has_default:
        return ""
    value = param.default
    if value is None:
        return " = Null"
    if isinstance(value, str):
        return f' = "{value}"'
    return f" = {value}"


def parameter_list(
    catalog: Catalog,
    params: Sequence[ParameterDescriptor],
    namespaced: bool = False,
    indent: str = "",
    expanded: bool | None = None,
) -> str:
    """Render the text between a member's delimiters.

    Compact layout joins parameters with ``", "``.  Expanded layout (the
    default when *namespaced*) puts each parameter on its own line one step
    below *indent* and ends with a newline back at *indent*.
    """
    if expanded is None:
        expanded = namespaced

    rendered = []
    for i, param in enumerate(params, start=1):
        name = param.name or f"arg{i}"
        ptype = full_type_name(catalog, catalog.type(param.type), namespaced)
        rendered.append(f"{pass_prefix(catalog, param)}{name}{default_literal(param)}: {ptype}")

    if not rendered:
        return ""
    if not expanded:
        return ", ".join(rendered)
    lead = f"\n{indent}{INDENT_UNIT}"
    return lead + f",{lead}".join(rendered) + f"\n{indent}"
