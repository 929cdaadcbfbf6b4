"""Hierarchy walks: nesting chain, base chain and declared interfaces.

All walks return outermost/root first and are deterministic for a given
catalog.  The catalog guarantees both relations are acyclic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apiscope.metadata.catalog import Catalog
    from apiscope.metadata.descriptors import TypeDescriptor


def nesting_chain(catalog: Catalog, t: TypeDescriptor) -> list[TypeDescriptor]:
    """Enclosing types of *t*, outermost first; empty if *t* is not nested."""
    chain: list[TypeDescriptor] = []
    while t.is_nested:
        t = catalog.type(t.declaring_type)
        chain.append(t)
    chain.reverse()
    return chain


def base_chain(catalog: Catalog, t: TypeDescriptor) -> list[TypeDescriptor]:
    """Base types of *t*, root first, immediate parent last.

    Interfaces have no base chain.
    """
    if t.is_interface:
        return []
    chain: list[TypeDescriptor] = []
    while t.base_type is not None:
        t = catalog.type(t.base_type)
        chain.append(t)
    chain.reverse()
    return chain


def interfaces(catalog: Catalog, t: TypeDescriptor) -> list[TypeDescriptor]:
    """Directly declared interfaces, by (namespace, full name)."""
    return sorted((catalog.type(k) for k in t.interfaces), key=catalog.sort_key)


def ancestry(catalog: Catalog, t: TypeDescriptor) -> list[TypeDescriptor]:
    """The levels rendered above *t*: its interfaces if *t* is an interface,
    otherwise its base chain."""
    if t.is_interface:
        return interfaces(catalog, t)
    return base_chain(catalog, t)
