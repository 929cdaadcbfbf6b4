"""Snapshot loading: JSON document -> :class:`Catalog`.

Document shape::

    {
      "modules": [
        {"name": "core, Version=1.0", "location": "/lib/core.dll",
         "types": [{...type entry...}, ...]}
      ],
      "types": [{...constructed type entry...}, ...]
    }

Module ``types`` are the types a module declares.  Top-level ``types`` hold
constructed types (arrays, pointers, by-refs, closed generics, generic
parameters) that can be resolved but are never listed as module members.
Entry keys mirror the descriptor field names.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from apiscope.errors import SnapshotError
from apiscope.metadata.catalog import Catalog, ModuleDescriptor
from apiscope.metadata.descriptors import (
    VOID_KEY,
    Accessibility,
    ConstructorMember,
    EventMember,
    FieldMember,
    MemberDescriptor,
    MethodMember,
    NestedTypeMember,
    ParameterDescriptor,
    ParameterMode,
    PropertyMember,
    TypeDescriptor,
)

_TYPE_FLAGS = (
    "is_primitive",
    "is_value_type",
    "is_enum",
    "is_interface",
    "is_class",
    "is_abstract",
    "is_sealed",
    "is_array",
    "is_pointer",
    "is_by_ref",
    "is_generic_parameter",
    "is_visible",
    "compiler_generated",
    "is_extension_container_tagged",
)


def load_catalog(path: str | Path) -> Catalog:
    """Read a snapshot JSON file and build a catalog from it.

    Raises FileNotFoundError if *path* does not exist and
    :class:`SnapshotError` if the document is invalid.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"invalid JSON: {exc}", path=str(path)) from exc
    return catalog_from_dict(doc)


def catalog_from_dict(doc: dict[str, Any]) -> Catalog:
    """Build a catalog from an in-memory snapshot document."""
    if not isinstance(doc, dict):
        raise SnapshotError("snapshot must be a JSON object")

    modules: list[ModuleDescriptor] = []
    types: list[TypeDescriptor] = []
    for entry in _list(doc, "modules", "snapshot"):
        name = _required(entry, "name", "module")
        declared = [_parse_type(t, module=name) for t in _list(entry, "types", f"module {name}")]
        types.extend(declared)
        modules.append(
            ModuleDescriptor(
                name=name,
                location=entry.get("location", ""),
                type_keys=tuple(t.key for t in declared),
            )
        )
    for entry in _list(doc, "types", "snapshot"):
        _object(entry, "type entry")
        types.append(_parse_type(entry, module=entry.get("module", "")))

    return Catalog(modules, types)


# ── Entry parsing ────────────────────────────────────────────────────


def _parse_type(entry: dict[str, Any], module: str) -> TypeDescriptor:
    key = _required(entry, "key", "type")
    where = f"type {key}"
    kwargs: dict[str, Any] = {
        "key": key,
        "name": _required(entry, "name", where),
        "module": module,
        "namespace": entry.get("namespace"),
        "element_type": entry.get("element_type"),
        "generic_arguments": tuple(entry.get("generic_arguments", ())),
        "generic_definition": entry.get("generic_definition"),
        "declaring_type": entry.get("declaring_type"),
        "base_type": entry.get("base_type"),
        "interfaces": tuple(entry.get("interfaces", ())),
        "nested_access": _access(entry.get("nested_access", "public"), where),
        "members": tuple(_parse_member(m, where) for m in _list(entry, "members", where)),
    }
    for flag in _TYPE_FLAGS:
        if flag in entry:
            kwargs[flag] = _flag(entry, flag, where)
    return TypeDescriptor(**kwargs)


def _parse_member(entry: dict[str, Any], owner: str) -> MemberDescriptor:
    kind = _required(entry, "kind", f"member of {owner}")
    name = _required(entry, "name", f"{kind} member of {owner}")
    where = f"{owner}.{name}"
    is_static = _flag(entry, "is_static", where)

    if kind == "nested_type":
        return NestedTypeMember(name=name, type_key=_required(entry, "type", where))
    if kind in ("constructor", "method"):
        common = {
            "name": name,
            "parameters": _parameters(entry.get("parameters", ()), where),
            "access": _access(entry.get("access", "public"), where),
            "is_static": is_static,
            "is_virtual": _flag(entry, "is_virtual", where),
            "is_final": _flag(entry, "is_final", where),
            "is_abstract": _flag(entry, "is_abstract", where),
            "generic_arguments": tuple(entry.get("generic_arguments", ())),
        }
        if kind == "constructor":
            return ConstructorMember(**common)
        return MethodMember(
            return_type=entry.get("return_type", VOID_KEY),
            is_extension_tagged=_flag(entry, "is_extension_tagged", where),
            **common,
        )
    if kind == "event":
        return EventMember(
            name=name,
            handler_type=_required(entry, "type", where),
            add_access=_access(entry.get("add_access", "public"), where),
            remove_access=_access(entry.get("remove_access", "public"), where),
            is_static=is_static,
        )
    if kind == "property":
        set_access = entry.get("set_access")
        return PropertyMember(
            name=name,
            property_type=_required(entry, "type", where),
            get_access=_access(entry.get("get_access", "public"), where),
            set_access=_access(set_access, where) if set_access is not None else None,
            index_parameters=_parameters(entry.get("index_parameters", ()), where),
            is_static=is_static,
        )
    if kind == "field":
        return FieldMember(
            name=name,
            field_type=_required(entry, "type", where),
            access=_access(entry.get("access", "public"), where),
            is_static=is_static,
            is_init_only=_flag(entry, "is_init_only", where),
            is_literal=_flag(entry, "is_literal", where),
            is_special_name=_flag(entry, "is_special_name", where),
        )
    raise SnapshotError(f"{where}: unknown member kind {kind!r}")


def _parameters(entries, where: str) -> tuple[ParameterDescriptor, ...]:
    params = []
    for entry in entries:
        _object(entry, f"parameter of {where}")
        try:
            mode = ParameterMode(entry.get("mode", "value"))
        except ValueError:
            raise SnapshotError(f"{where}: unknown parameter mode {entry.get('mode')!r}") from None
        params.append(
            ParameterDescriptor(
                type=_required(entry, "type", f"parameter of {where}"),
                name=entry.get("name"),
                mode=mode,
                has_default="default" in entry,
                default=entry.get("default"),
            )
        )
    return tuple(params)


def _access(value: str, where: str) -> Accessibility:
    try:
        return Accessibility(value)
    except ValueError:
        raise SnapshotError(f"{where}: unknown accessibility {value!r}") from None


def _object(entry: Any, where: str) -> None:
    if not isinstance(entry, dict):
        raise SnapshotError(f"{where}: entry must be an object")


def _required(entry: dict[str, Any], field: str, where: str):
    _object(entry, where)
    if field not in entry:
        raise SnapshotError(f"{where}: missing required field {field!r}")
    return entry[field]


def _flag(entry: dict[str, Any], field: str, where: str) -> bool:
    value = entry.get(field, False)
    if not isinstance(value, bool):
        raise SnapshotError(f"{where}: {field!r} must be true or false, got {value!r}")
    return value


def _list(entry: dict[str, Any], field: str, where: str) -> list:
    value = entry.get(field, [])
    if not isinstance(value, list):
        raise SnapshotError(f"{where}: {field!r} must be a list")
    return value
