"""Shared test fixtures for apiscope tests.

Provides:
- snapshot_doc: an in-memory snapshot document modelling a small runtime
  library ("core") and a plugin module ("ext")
- catalog: the frozen Catalog built from it
- T(): shortcut to resolve a type key against a catalog
"""

from __future__ import annotations

import copy

import pytest

from apiscope.metadata.snapshot import catalog_from_dict

CORE = "core, Version=1.0.0.0"
EXT = "ext, Version=2.0.0.0"

OBJECT = "System.Object"
STRING = "System.String"
INT32 = "System.Int32"
BOOLEAN = "System.Boolean"
IENUM = "System.Collections.Generic.IEnumerable`1"
LIST = "System.Collections.Generic.List`1"
SORTED = "System.Collections.Generic.SortedList`1"
TSOURCE = "System.Linq.Enumerable!!TSource"


# ===========================================================================
# Entry helpers
# ===========================================================================


def cls(key, name, ns, base=OBJECT, **kw):
    entry = {"key": key, "name": name, "namespace": ns, "is_class": True, "base_type": base}
    entry.update(kw)
    return entry


def iface(key, name, ns, **kw):
    entry = {"key": key, "name": name, "namespace": ns, "is_interface": True, "is_abstract": True}
    entry.update(kw)
    return entry


def static_cls(key, name, ns, **kw):
    return cls(key, name, ns, is_abstract=True, is_sealed=True, **kw)


def gparam(key, name, owner=None):
    entry = {"key": key, "name": name, "is_generic_parameter": True}
    if owner:
        entry["declaring_type"] = owner
    return entry


def ctor(name, *params, **kw):
    return {"kind": "constructor", "name": name, "parameters": list(params), **kw}


def meth(name, ret="System.Void", *params, **kw):
    return {"kind": "method", "name": name, "return_type": ret, "parameters": list(params), **kw}


def ext_meth(name, ret, *params, **kw):
    return meth(name, ret, *params, is_static=True, is_extension_tagged=True, **kw)


def param(type_key, name=None, **kw):
    entry = {"type": type_key, **kw}
    if name is not None:
        entry["name"] = name
    return entry


# ===========================================================================
# Snapshot document
# ===========================================================================

_CORE_TYPES = [
    cls(
        OBJECT,
        "Object",
        "System",
        base=None,
        members=[
            ctor("Object"),
            meth("ToString", STRING, is_virtual=True),
            meth("Equals", BOOLEAN, param(OBJECT, "obj"), is_virtual=True),
            meth("GetHashCode", INT32, is_virtual=True),
            meth("MemberwiseClone", OBJECT, access="family"),
            meth(
                "ReferenceEquals",
                BOOLEAN,
                param(OBJECT, "objA"),
                param(OBJECT, "objB"),
                is_static=True,
            ),
        ],
    ),
    cls("System.ValueType", "ValueType", "System", is_abstract=True),
    cls("System.Enum", "Enum", "System", base="System.ValueType", is_abstract=True),
    {
        "key": INT32,
        "name": "Int32",
        "namespace": "System",
        "is_primitive": True,
        "is_value_type": True,
        "is_sealed": True,
        "base_type": "System.ValueType",
        "members": [
            {"kind": "field", "name": "MaxValue", "type": INT32, "is_static": True, "is_literal": True},
            meth("CompareTo", INT32, param(INT32, "value"), is_virtual=True, is_final=True),
        ],
    },
    {
        "key": BOOLEAN,
        "name": "Boolean",
        "namespace": "System",
        "is_primitive": True,
        "is_value_type": True,
        "is_sealed": True,
        "base_type": "System.ValueType",
    },
    {
        "key": "System.Char",
        "name": "Char",
        "namespace": "System",
        "is_primitive": True,
        "is_value_type": True,
        "is_sealed": True,
        "base_type": "System.ValueType",
    },
    {
        "key": "System.Void",
        "name": "Void",
        "namespace": "System",
        "is_value_type": True,
        "is_sealed": True,
        "base_type": "System.ValueType",
    },
    cls(STRING, "String", "System", is_sealed=True, interfaces=["System.IComparable"]),
    cls("System.EventHandler", "EventHandler", "System", is_sealed=True),
    iface("System.IComparable", "IComparable", "System", members=[
        meth("CompareTo", INT32, param(OBJECT, "obj"), is_virtual=True, is_abstract=True),
    ]),
    iface(IENUM, "IEnumerable`1", "System.Collections.Generic", generic_arguments=[f"{IENUM}!T"]),
    cls(
        LIST,
        "List`1",
        "System.Collections.Generic",
        generic_arguments=[f"{LIST}!T"],
        interfaces=[f"{IENUM}[{LIST}!T]"],
        members=[
            ctor("List"),
            meth("Add", "System.Void", param(f"{LIST}!T", "item")),
            {"kind": "property", "name": "Count", "type": INT32},
        ],
    ),
    cls(
        SORTED,
        "SortedList`1",
        "System.Collections.Generic",
        base=f"{LIST}[{SORTED}!T]",
        generic_arguments=[f"{SORTED}!T"],
    ),
    static_cls(
        "System.Linq.Enumerable",
        "Enumerable",
        "System.Linq",
        is_extension_container_tagged=True,
        members=[
            ext_meth("Take", f"{IENUM}[{TSOURCE}]", param(f"{IENUM}[{TSOURCE}]", "source"),
                     param(INT32, "count"), generic_arguments=[TSOURCE]),
            ext_meth("Count", INT32, param(f"{IENUM}[{TSOURCE}]", "source"), generic_arguments=[TSOURCE]),
            ext_meth("First", TSOURCE, param(f"{LIST}[{TSOURCE}]", "source"), generic_arguments=[TSOURCE]),
        ],
    ),
]

_EXT_TYPES = [
    cls("Acme.Widgets.Foo", "Foo", "Acme.Widgets", members=[ctor("Foo")]),
    iface(
        "Acme.Widgets.IWidget",
        "IWidget",
        "Acme.Widgets",
        interfaces=["System.IComparable"],
        members=[meth("Draw", is_virtual=True, is_abstract=True)],
    ),
    cls(
        "Acme.Widgets.Gadget",
        "Gadget",
        "Acme.Widgets",
        base="Acme.Widgets.Foo",
        interfaces=["System.IComparable", "Acme.Widgets.IWidget"],
        members=[
            ctor(
                "Gadget",
                param(STRING, "name"),
                param(INT32, "size", default=5),
                param(STRING, "label", default="x"),
                param(OBJECT, "parent", default=None),
            ),
            {"kind": "field", "name": "_count", "type": INT32, "access": "private"},
            {"kind": "field", "name": "Id", "type": INT32, "is_init_only": True},
            {
                "kind": "field",
                "name": "Limit",
                "type": INT32,
                "access": "private",
                "is_static": True,
                "is_literal": True,
            },
            {"kind": "event", "name": "Changed", "type": "System.EventHandler", "add_access": "private"},
            {"kind": "property", "name": "Name", "type": STRING, "set_access": "private"},
            {"kind": "property", "name": "Item", "type": OBJECT, "index_parameters": [param(INT32, "index")]},
            meth("Draw", is_virtual=True, is_final=True),
            meth(
                "Map",
                "Acme.Widgets.Gadget.Map!!U",
                param("Acme.Widgets.Gadget.Map!!T", "input"),
                generic_arguments=["Acme.Widgets.Gadget.Map!!T", "Acme.Widgets.Gadget.Map!!U"],
            ),
            meth(
                "TryParse",
                BOOLEAN,
                param(STRING, "text"),
                param("System.Int32&", "value", mode="out"),
                is_static=True,
            ),
            meth("Swap", "System.Void", param("System.Int32&", "a", mode="ref")),
            meth("Resize", "System.Void", param(INT32)),
            {"kind": "nested_type", "name": "Settings", "type": "Acme.Widgets.Gadget+Settings"},
            {"kind": "nested_type", "name": "<>c", "type": "Acme.Widgets.Gadget+<>c"},
        ],
    ),
    cls("Acme.Widgets.Gadget+Settings", "Settings", "Acme.Widgets", declaring_type="Acme.Widgets.Gadget"),
    cls(
        "Acme.Widgets.Gadget+<>c",
        "<>c",
        "Acme.Widgets",
        declaring_type="Acme.Widgets.Gadget",
        compiler_generated=True,
        is_sealed=True,
        nested_access="private",
    ),
    cls(
        "Acme.Widgets.Outer",
        "Outer",
        "Acme.Widgets",
        members=[
            {"kind": "nested_type", "name": "Inner", "type": "Acme.Widgets.Outer+Inner"},
            {"kind": "nested_type", "name": "Middle", "type": "Acme.Widgets.Outer+Middle"},
        ],
    ),
    {
        "key": "Acme.Widgets.Outer+Inner",
        "name": "Inner",
        "namespace": "Acme.Widgets",
        "is_value_type": True,
        "is_sealed": True,
        "base_type": "System.ValueType",
        "declaring_type": "Acme.Widgets.Outer",
        "nested_access": "private",
    },
    cls("Acme.Widgets.Outer+Middle", "Middle", "Acme.Widgets", declaring_type="Acme.Widgets.Outer",
        members=[{"kind": "nested_type", "name": "Deep", "type": "Acme.Widgets.Outer+Middle+Deep"}]),
    cls(
        "Acme.Widgets.Outer+Middle+Deep",
        "Deep",
        "Acme.Widgets",
        declaring_type="Acme.Widgets.Outer+Middle",
        nested_access="family",
    ),
    {
        "key": "Acme.Widgets.Color",
        "name": "Color",
        "namespace": "Acme.Widgets",
        "is_value_type": True,
        "is_enum": True,
        "is_sealed": True,
        "base_type": "System.Enum",
    },
    cls("Acme.Widgets.Hidden", "Hidden", "Acme.Widgets", is_visible=False),
    {"key": "<PrivateImplementationDetails>", "name": "<PrivateImplementationDetails>",
     "is_class": True, "is_sealed": True, "base_type": OBJECT, "compiler_generated": True},
    static_cls(
        "Acme.Extensions.SequenceExtensions",
        "SequenceExtensions",
        "Acme.Extensions",
        is_extension_container_tagged=True,
        members=[
            ext_meth("Bar", "System.Void", param(IENUM, "source"), param(INT32, "n")),
            ext_meth("Empty", "System.Void"),
            meth("Helper", "System.Void", param(IENUM, "source"), is_static=True),
        ],
    ),
    static_cls(
        "Acme.Extensions.WidgetExtensions",
        "WidgetExtensions",
        "Acme.Extensions",
        is_extension_container_tagged=True,
        members=[ext_meth("Describe", STRING, param("Acme.Widgets.IWidget", "widget"))],
    ),
    static_cls(
        "Acme.Extensions.Untagged",
        "Untagged",
        "Acme.Extensions",
        members=[ext_meth("Describe", STRING, param("Acme.Widgets.IWidget", "widget"))],
    ),
    static_cls(
        "Acme.Extensions.GenericExtensions`1",
        "GenericExtensions`1",
        "Acme.Extensions",
        is_extension_container_tagged=True,
        generic_arguments=["Acme.Extensions.GenericExtensions`1!T"],
        members=[ext_meth("Describe", STRING, param("Acme.Widgets.IWidget", "widget"))],
    ),
    cls(
        "Acme.Extensions.Holder",
        "Holder",
        "Acme.Extensions",
        members=[{"kind": "nested_type", "name": "NestedExtensions", "type": "Acme.Extensions.Holder+NestedExtensions"}],
    ),
    static_cls(
        "Acme.Extensions.Holder+NestedExtensions",
        "NestedExtensions",
        "Acme.Extensions",
        declaring_type="Acme.Extensions.Holder",
        is_extension_container_tagged=True,
        members=[ext_meth("Describe", STRING, param("Acme.Widgets.IWidget", "widget"))],
    ),
]


def _closed(key, definition, args, base=OBJECT, interfaces=(), interface=False):
    name = definition.rsplit(".", 1)[1]
    entry = {
        "key": key,
        "name": name,
        "namespace": "System.Collections.Generic",
        "generic_definition": definition,
        "generic_arguments": list(args),
        "interfaces": list(interfaces),
    }
    if interface:
        entry.update(is_interface=True, is_abstract=True)
    else:
        entry.update(is_class=True, base_type=base)
    return entry


_CONSTRUCTED_TYPES = [
    gparam(f"{IENUM}!T", "T", IENUM),
    gparam(f"{LIST}!T", "T", LIST),
    gparam(f"{SORTED}!T", "T", SORTED),
    gparam(TSOURCE, "TSource"),
    gparam("Acme.Widgets.Gadget.Map!!T", "T"),
    gparam("Acme.Widgets.Gadget.Map!!U", "U"),
    gparam("Acme.Extensions.GenericExtensions`1!T", "T", "Acme.Extensions.GenericExtensions`1"),
    _closed(f"{IENUM}[{LIST}!T]", IENUM, [f"{LIST}!T"], interface=True),
    _closed(f"{IENUM}[{TSOURCE}]", IENUM, [TSOURCE], interface=True),
    _closed(f"{IENUM}[{STRING}]", IENUM, [STRING], interface=True),
    _closed(f"{IENUM}[{INT32}]", IENUM, [INT32], interface=True),
    _closed(f"{LIST}[{SORTED}!T]", LIST, [f"{SORTED}!T"], interfaces=[f"{IENUM}[{SORTED}!T]"]),
    _closed(f"{IENUM}[{SORTED}!T]", IENUM, [f"{SORTED}!T"], interface=True),
    _closed(f"{LIST}[{TSOURCE}]", LIST, [TSOURCE], interfaces=[f"{IENUM}[{TSOURCE}]"]),
    _closed(f"{LIST}[{STRING}]", LIST, [STRING], interfaces=[f"{IENUM}[{STRING}]"]),
    _closed(f"{LIST}[{INT32}]", LIST, [INT32], interfaces=[f"{IENUM}[{INT32}]"]),
    _closed(f"{SORTED}[{INT32}]", SORTED, [INT32], base=f"{LIST}[{INT32}]"),
    _closed(f"{LIST}[Acme.Widgets.Outer+Inner]", LIST, ["Acme.Widgets.Outer+Inner"]),
    {"key": "System.Int32&", "name": "Int32&", "namespace": "System", "is_by_ref": True, "element_type": INT32},
    {"key": "System.Int32[]", "name": "Int32[]", "namespace": "System", "is_array": True,
     "is_class": True, "base_type": OBJECT, "element_type": INT32},
    {"key": "System.Char*", "name": "Char*", "namespace": "System", "is_pointer": True,
     "element_type": "System.Char"},
    {"key": f"{LIST}[{STRING}][]", "name": "List`1[]", "namespace": "System.Collections.Generic",
     "is_array": True, "is_class": True, "base_type": OBJECT, "element_type": f"{LIST}[{STRING}]"},
]

SNAPSHOT = {
    "modules": [
        {"name": EXT, "location": "C:\\plugins\\ext.dll", "types": _EXT_TYPES},
        {"name": CORE, "location": "/runtime/core.dll", "types": _CORE_TYPES},
    ],
    "types": _CONSTRUCTED_TYPES,
}


# ===========================================================================
# Fixtures
# ===========================================================================


@pytest.fixture
def snapshot_doc():
    """A fresh deep copy of the sample snapshot document."""
    return copy.deepcopy(SNAPSHOT)


@pytest.fixture
def catalog(snapshot_doc):
    return catalog_from_dict(snapshot_doc)


def T(catalog, key):
    """Resolve a type key against *catalog*."""
    return catalog.type(key)
