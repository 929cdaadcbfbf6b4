"""Immutable catalog of loaded modules and their types.

A :class:`Catalog` is the single metadata snapshot every query runs
against.  It is built once, validated (no unresolved module types, no
base/declaring cycles) and never refreshed; there is no process-wide
registry.
"""

from __future__ import annotations

import logging
import ntpath
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

from apiscope.errors import MetadataUnavailableError, SnapshotError
from apiscope.graph.builder import build_inheritance_graph, build_nesting_graph
from apiscope.metadata.descriptors import VOID_KEY, TypeDescriptor

log = logging.getLogger(__name__)

# Stand-in for the runtime's void type when a snapshot does not carry one.
VOID = TypeDescriptor(
    key=VOID_KEY,
    name="Void",
    namespace="System",
    is_value_type=True,
)


@dataclass(frozen=True)
class ModuleDescriptor:
    """A loaded module: identity string, origin path and declared types."""

    name: str
    location: str = ""
    type_keys: tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        """Base name of the origin path (handles both path separators)."""
        return ntpath.basename(self.location)


class Catalog:
    """Frozen snapshot of modules and types, indexed by key."""

    def __init__(
        self,
        modules: Iterable[ModuleDescriptor],
        types: Iterable[TypeDescriptor],
    ) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        for t in types:
            if t.key in self._types:
                raise SnapshotError(f"duplicate type key: {t.key}")
            self._types[t.key] = t

        self._modules: dict[str, ModuleDescriptor] = {}
        for m in sorted(modules, key=lambda m: m.name):
            if m.name in self._modules:
                raise SnapshotError(f"duplicate module: {m.name}")
            for key in m.type_keys:
                if key not in self._types:
                    raise SnapshotError(f"module {m.name} declares unknown type {key}")
            self._modules[m.name] = m

        self._inheritance = nx.freeze(build_inheritance_graph(self._types.values()))
        self._nesting = nx.freeze(build_nesting_graph(self._types.values()))
        for label, graph in (("inheritance", self._inheritance), ("nesting", self._nesting)):
            if not nx.is_directed_acyclic_graph(graph):
                cycle = nx.find_cycle(graph)
                raise SnapshotError(f"{label} cycle: {' -> '.join(str(u) for u, _ in cycle)}")

        log.debug("catalog built: %d modules, %d types", len(self._modules), len(self._types))

    # ── Modules ──────────────────────────────────────────────────────

    def modules(self) -> tuple[ModuleDescriptor, ...]:
        """All modules, ordered by identity string."""
        return tuple(self._modules.values())

    def module(self, name: str) -> ModuleDescriptor:
        try:
            return self._modules[name]
        except KeyError:
            raise MetadataUnavailableError(name, "module") from None

    def module_types(self, name: str) -> tuple[TypeDescriptor, ...]:
        """Declared, non-compiler-generated types of a module, by (namespace, full name)."""
        module = self.module(name)
        types = (self._types[k] for k in module.type_keys)
        return tuple(sorted((t for t in types if not t.compiler_generated), key=self.sort_key))

    def loaded_types(self) -> tuple[TypeDescriptor, ...]:
        """Every declared type across all modules, module by module."""
        result: list[TypeDescriptor] = []
        for name in self._modules:
            result.extend(self.module_types(name))
        return tuple(result)

    def module_of(self, t: TypeDescriptor) -> ModuleDescriptor:
        return self.module(t.module)

    # ── Types ────────────────────────────────────────────────────────

    def type(self, key: str) -> TypeDescriptor:
        try:
            return self._types[key]
        except KeyError:
            if key == VOID_KEY:
                return VOID
            raise MetadataUnavailableError(key) from None

    def has_type(self, key: str) -> bool:
        return key in self._types or key == VOID_KEY

    def qualified_name(self, t: TypeDescriptor) -> str:
        """Fully qualified raw name, e.g. ``Ns.Outer+Inner``."""
        if t.is_nested:
            return f"{self.qualified_name(self.type(t.declaring_type))}+{t.name}"
        if t.namespace:
            return f"{t.namespace}.{t.name}"
        return t.name

    def sort_key(self, t: TypeDescriptor) -> tuple[str, str]:
        return (t.namespace or "", self.qualified_name(t))

    def contains_generic_parameters(self, t: TypeDescriptor) -> bool:
        """True when *t* is, or is built from, an unbound generic parameter."""
        if t.is_generic_parameter:
            return True
        if t.element_type is not None:
            return self.contains_generic_parameters(self.type(t.element_type))
        return any(self.contains_generic_parameters(self.type(a)) for a in t.generic_arguments)

    def is_assignable_from(self, receiver: TypeDescriptor, target: TypeDescriptor) -> bool:
        """Non-variant assignability: *target* is, derives from, or implements *receiver*."""
        if receiver.key == target.key:
            return True
        graph = self._inheritance
        if target.key not in graph or receiver.key not in graph:
            return False
        return nx.has_path(graph, target.key, receiver.key)

    @property
    def inheritance_graph(self) -> nx.DiGraph:
        """Frozen graph with ``base`` and ``interface`` edges, child -> parent."""
        return self._inheritance

    @property
    def nesting_graph(self) -> nx.DiGraph:
        """Frozen graph with nested -> declaring type edges."""
        return self._nesting

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_type(key)

    def __len__(self) -> int:
        return len(self._types)
