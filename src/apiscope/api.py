"""Programmatic API for rendering type and module views.

This is the embedding surface for hosts: build or load a catalog once,
then ask for text views of any type or module in it.  Every call is a pure
function of the catalog; a missing module or type raises
:class:`~apiscope.errors.MetadataUnavailableError` for that call only.
"""

from __future__ import annotations

from pathlib import Path

from apiscope.analysis.extensions import extension_methods, extensions
from apiscope.config import RenderOptions, find_config_root, load_render_options
from apiscope.metadata.catalog import Catalog
from apiscope.metadata.descriptors import TypeDescriptor
from apiscope.metadata.snapshot import load_catalog
from apiscope.output import composer
from apiscope.output.formatter import INDENT_UNIT, join_lines
from apiscope.output.members import extension_method_str, module_type_str

# The universal root type; its module is the default for module views.
ROOT_KEY = "System.Object"


class ApiSurface:
    """Reusable renderer bound to one catalog and one set of render options."""

    def __init__(self, catalog: Catalog, options: RenderOptions | None = None) -> None:
        self.catalog = catalog
        self.options = options or RenderOptions()

    @classmethod
    def from_snapshot(cls, path: str | Path, options: RenderOptions | None = None) -> ApiSurface:
        """Load a snapshot file; options default to the nearest .apiscope.json."""
        path = Path(path)
        if options is None:
            options = load_render_options(find_config_root(path.parent))
        return cls(load_catalog(path), options)

    def _resolve(self, t: TypeDescriptor | str) -> TypeDescriptor:
        return self.catalog.type(t) if isinstance(t, str) else t

    def chain_text(self, t: TypeDescriptor | str) -> str:
        return composer.chain_text(self.catalog, self._resolve(t), self.options)

    def static_api_text(self, t: TypeDescriptor | str) -> str:
        return composer.static_api_text(self.catalog, self._resolve(t), self.options)

    def api_text(self, t: TypeDescriptor | str) -> str:
        return composer.api_text(self.catalog, self._resolve(t), self.options)

    def extensions(self, t: TypeDescriptor | str) -> list[TypeDescriptor]:
        return extensions(self.catalog, self._resolve(t))

    def extension_methods_text(self, container: TypeDescriptor | str, target: TypeDescriptor | str) -> str:
        methods = extension_methods(self.catalog, self._resolve(container), self._resolve(target))
        return join_lines(extension_method_str(self.catalog, m) for m in methods)

    def module(self, name: str | None = None) -> ModuleApi:
        return ModuleApi(self.catalog, name, indent=self.options.indent)


class ModuleApi:
    """Module-level listings: summary, namespaces and types per namespace."""

    def __init__(self, catalog: Catalog, module: str | None = None, indent: str = "") -> None:
        self.catalog = catalog
        if module is None:
            module = catalog.type(ROOT_KEY).module
        self.module = catalog.module(module)
        self.indent = indent
        self.types = catalog.module_types(self.module.name)
        self.namespaces = sorted({t.namespace or "" for t in self.types})

    @classmethod
    def for_type(cls, catalog: Catalog, t: TypeDescriptor | str, indent: str = "") -> ModuleApi:
        """View of the module that declares *t*."""
        t = catalog.type(t) if isinstance(t, str) else t
        return cls(catalog, t.module, indent)

    def summary(self) -> str:
        return f"{self.indent}{self.module.name}\n{self.indent}{self.module.location}"

    def namespaces_text(self) -> str:
        """Named namespaces, one per line; the global namespace has no line."""
        return join_lines(f"{self.indent}{ns}" for ns in self.namespaces if ns)

    def namespace_types(self, ns: str) -> list[TypeDescriptor]:
        """Types of namespace *ns*, by full name (``""`` for the global namespace)."""
        return [t for t in self.types if (t.namespace or "") == ns]

    def namespace_types_lines(self, ns: str) -> list[str]:
        # global-namespace types have no header and sit at the namespace level
        if not ns:
            return [f"{self.indent}{module_type_str(self.catalog, t)}" for t in self.namespace_types(ns)]
        lines = [f"{self.indent}{ns}"]
        lines.extend(
            f"{self.indent}{INDENT_UNIT}{module_type_str(self.catalog, t)}"
            for t in self.namespace_types(ns)
        )
        return lines

    def namespace_types_text(self, ns: str) -> str:
        return join_lines(self.namespace_types_lines(ns))

    def types_text(self) -> str:
        lines: list[str] = []
        for ns in self.namespaces:
            lines.extend(self.namespace_types_lines(ns))
        return join_lines(lines)
