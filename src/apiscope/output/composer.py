"""Hierarchy-aware API views: chain, static API and full API.

Every view walks the same levels, each one indentation step deeper than
the one before::

    [class Object]                  base chain, root first
      [class Base]
        [interface IThing]          declared interfaces, flat
          [class Target]            the type itself
            [extension Ns.Ext] (ext.dll)

Interface targets replace the base chain with their own interfaces.  The
views differ in which levels they include and which members follow each
bracket line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apiscope.analysis.extensions import extension_methods, extensions
from apiscope.analysis.kinds import classify
from apiscope.config import RenderOptions
from apiscope.graph.hierarchy import ancestry, interfaces
from apiscope.metadata.descriptors import MemberDescriptor, TypeDescriptor
from apiscope.output.formatter import bracket_line, join_lines, pad
from apiscope.output.members import (
    extension_method_str,
    instance_members,
    member_lines,
    static_members,
)
from apiscope.output.names import full_type_name, type_name

if TYPE_CHECKING:
    from apiscope.metadata.catalog import Catalog

STATIC_NOTE = "(static API)"
INSTANCE_NOTE = "(instance API)"


def _header(catalog: Catalog, t: TypeDescriptor, prefix: str, opts: RenderOptions, note: str = "") -> str:
    return bracket_line(prefix, classify(t), full_type_name(catalog, t, opts.namespaced), note)


def _level(
    catalog: Catalog,
    t: TypeDescriptor,
    depth: int,
    opts: RenderOptions,
    members: list[MemberDescriptor] | None = None,
    note: str = "",
) -> list[str]:
    prefix = pad(depth, opts.indent)
    lines = [_header(catalog, t, prefix, opts, note)]
    if members:
        lines.extend(
            member_lines(catalog, members, opts.namespaced, pad(depth + 1, opts.indent), opts.expanded)
        )
    return lines


def _extension_header(catalog: Catalog, container: TypeDescriptor, prefix: str) -> str:
    module = catalog.module_of(container)
    return f"{bracket_line(prefix, 'extension', type_name(catalog, container, True))} ({module.file_name})"


# ── Views ────────────────────────────────────────────────────────────


def chain_lines(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> list[str]:
    """Bracket lines only: ancestry, interfaces, the type, its extensions."""
    opts = opts or RenderOptions()
    lines: list[str] = []
    depth = 0
    for ancestor in ancestry(catalog, t):
        lines.extend(_level(catalog, ancestor, depth, opts))
        depth += 1

    if not t.is_interface:
        ifaces = interfaces(catalog, t)
        for iface in ifaces:
            lines.extend(_level(catalog, iface, depth, opts))
        if ifaces:
            depth += 1

    lines.extend(_level(catalog, t, depth, opts))
    depth += 1

    for container in extensions(catalog, t):
        lines.append(_extension_header(catalog, container, pad(depth, opts.indent)))
    return lines


def static_api_lines(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> list[str]:
    """Ancestry and the type itself, each followed by its static members."""
    opts = opts or RenderOptions()
    lines: list[str] = []
    depth = 0
    for ancestor in ancestry(catalog, t):
        lines.extend(_level(catalog, ancestor, depth, opts, static_members(catalog, ancestor), STATIC_NOTE))
        depth += 1
    lines.extend(_level(catalog, t, depth, opts, static_members(catalog, t), STATIC_NOTE))
    return lines


def api_lines(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> list[str]:
    """Ancestry, interfaces and the type with instance members, then the
    applicable methods of every extension container."""
    opts = opts or RenderOptions()

    def note(level_type: TypeDescriptor) -> str:
        return "" if level_type.is_interface else INSTANCE_NOTE

    lines: list[str] = []
    depth = 0
    for ancestor in ancestry(catalog, t):
        lines.extend(_level(catalog, ancestor, depth, opts, instance_members(catalog, ancestor), note(ancestor)))
        depth += 1

    if not t.is_interface:
        ifaces = interfaces(catalog, t)
        for iface in ifaces:
            lines.extend(_level(catalog, iface, depth, opts, instance_members(catalog, iface)))
        if ifaces:
            depth += 1

    lines.extend(_level(catalog, t, depth, opts, instance_members(catalog, t), note(t)))
    depth += 1

    for container in extensions(catalog, t):
        lines.append(_extension_header(catalog, container, pad(depth, opts.indent)))
        method_prefix = pad(depth + 1, opts.indent)
        lines.extend(
            method_prefix + extension_method_str(catalog, m)
            for m in extension_methods(catalog, container, t)
        )
    return lines


def chain_text(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> str:
    return join_lines(chain_lines(catalog, t, opts))


def static_api_text(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> str:
    return join_lines(static_api_lines(catalog, t, opts))


def api_text(catalog: Catalog, t: TypeDescriptor, opts: RenderOptions | None = None) -> str:
    return join_lines(api_lines(catalog, t, opts))
