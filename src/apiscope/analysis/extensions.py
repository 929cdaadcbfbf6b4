"""Resolve extension methods that structurally apply to a target type.

An extension container is a top-level, non-generic static class carrying
the extension tag.  Its candidate methods are the tagged static methods with
at least one parameter; the first parameter (the receiver) decides which
types a method extends.

Matching is argument-erased: a method declared for an open ``Sequence<T>``
receiver applies to every closed type whose generic definition is, directly
implements, or derives from ``Sequence``, whatever the bound arguments.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apiscope.graph.hierarchy import base_chain
from apiscope.metadata.descriptors import MethodMember, TypeDescriptor

if TYPE_CHECKING:
    from apiscope.metadata.catalog import Catalog

log = logging.getLogger(__name__)


def is_extension_container(t: TypeDescriptor) -> bool:
    return (
        not t.is_nested
        and not t.is_generic_type
        and t.is_static_class
        and t.is_extension_container_tagged
    )


def candidate_methods(catalog: Catalog, container: TypeDescriptor) -> list[MethodMember]:
    """Tagged static methods of *container* that have a receiver parameter, by name."""
    candidates = []
    for member in container.members:
        if not isinstance(member, MethodMember):
            continue
        if not (member.is_static and member.is_extension_tagged):
            continue
        if not member.parameters:
            log.debug(
                "skipping extension method %s.%s: no receiver parameter",
                catalog.qualified_name(container),
                member.name,
            )
            continue
        candidates.append(member)
    # stable: overloads keep declaration order
    candidates.sort(key=lambda m: m.name)
    return candidates


def can_extend(catalog: Catalog, receiver: TypeDescriptor, target: TypeDescriptor) -> bool:
    """True if a method whose receiver is *receiver* applies to *target*.

    1. *target* is assignable to *receiver* (same type, derived, or implementing).
    2. Otherwise, for an open generic receiver and a closed generic target,
       compare generic definitions: the target's own, the interfaces its
       definition declares, then its definition's base chain.
    """
    if catalog.is_assignable_from(receiver, target):
        return True

    if not (receiver.is_generic_type and catalog.contains_generic_parameters(receiver)):
        return False
    if not target.is_generic_type:
        return False

    receiver_def = receiver.definition_key
    target_def = catalog.type(target.definition_key)

    if receiver_def == target_def.key:
        return True
    for key in target_def.interfaces:
        iface = catalog.type(key)
        if iface.is_generic_type and iface.definition_key == receiver_def:
            return True
    for ancestor in reversed(base_chain(catalog, target_def)):
        if ancestor.is_generic_type and ancestor.definition_key == receiver_def:
            return True
    return False


def receiver_type(catalog: Catalog, method: MethodMember) -> TypeDescriptor:
    return catalog.type(method.parameters[0].type)


def extension_methods(
    catalog: Catalog, container: TypeDescriptor, target: TypeDescriptor
) -> list[MethodMember]:
    """Candidates of *container* whose receiver accepts *target*."""
    return [
        m
        for m in candidate_methods(catalog, container)
        if can_extend(catalog, receiver_type(catalog, m), target)
    ]


def extensions(catalog: Catalog, target: TypeDescriptor) -> list[TypeDescriptor]:
    """Extension containers from every module with at least one method for *target*.

    Sorted by (namespace, full name).  An empty list means nothing applies.
    """
    found = [
        t
        for t in catalog.loaded_types()
        if is_extension_container(t) and extension_methods(catalog, t, target)
    ]
    found.sort(key=catalog.sort_key)
    log.debug("%d extension containers apply to %s", len(found), target.key)
    return found
