"""Protocol-agnostic compliance test suite for class factories.

Any ClassFactory must build classes that behave like the extension
operator's plain path when given no extra configuration. Factories are
plugged in through a fixture dict:

    fixture = {
        "create_factory": lambda: ...,   # fresh factory for one create_class call
        "parent": lambda: ...,           # root to build on (optional, default Nil)
    }

Usage with pytest:

    from barista.compliance import run_compliance_tests

    def test_compliance():
        run_compliance_tests({"create_factory": BasicClassFactory})
"""

from typing import Any, Dict, Optional

from barista.core import Nil
from barista.errors import SuperReferenceError
from barista.protocols import is_class_factory


# ============================================================
# Helpers
# ============================================================

def _root(fix: Dict[str, Any]) -> type:
    return fix["parent"]() if fix.get("parent") else Nil


def _build(fix: Dict[str, Any], parent: Optional[type] = None,
           props: Optional[Dict[str, Any]] = None,
           statics: Optional[Dict[str, Any]] = None) -> Any:
    factory = fix["create_factory"]()
    return factory.create_class(parent or _root(fix), props, statics)


def _widget_pair(fix: Dict[str, Any]):
    """A two-level chain: Widget defines value/render, CustomWidget adds x."""
    widget = _build(fix, props={
        "value": 987,
        "render": lambda self: f"SUPER {self.x}",
    })
    custom = _build(fix, parent=widget, props={"x": 123})
    return widget, custom


# ============================================================
# Protocol tests
# ============================================================

def test_factory_is_tagged(fix: Dict[str, Any]) -> None:
    """The factory passes the class factory tag check."""
    assert is_class_factory(fix["create_factory"]()), \
        "factory should be recognised by is_class_factory"


# ============================================================
# Construction tests
# ============================================================

def test_builds_subclass_of_parent(fix: Dict[str, Any]) -> None:
    """create_class returns a class deriving from the parent."""
    root = _root(fix)
    cls = _build(fix)
    assert isinstance(cls, type), "create_class should return a class"
    assert cls.__bases__ == (root,), "parent should be the only base"
    assert isinstance(cls(), root), "instances should be instances of the parent"


def test_records_super_view(fix: Dict[str, Any]) -> None:
    """The new class records its parent as __super__."""
    cls = _build(fix)
    assert cls.__super__ is _root(fix), "__super__ should reference the parent"


def test_instance_properties(fix: Dict[str, Any]) -> None:
    """Bag entries are readable on instances."""
    point = _build(fix, props={"x": 10})
    assert point().x == 10


def test_overrides_parent_properties(fix: Dict[str, Any]) -> None:
    """Subclass properties shadow inherited ones of the same name."""
    widget = _build(fix, props={"render": "Super RENDER"})
    custom = _build(fix, parent=widget, props={"render": "Custom RENDER"})
    assert custom().render == "Custom RENDER"
    assert widget().render == "Super RENDER", "parent must not be modified"


def test_inherits_parent_properties(fix: Dict[str, Any]) -> None:
    """A subclass without its own value sees the parent's."""
    widget = _build(fix, props={"render": "Widget.render"})
    custom = _build(fix, parent=widget)
    assert custom().render == "Widget.render"


def test_constructor(fix: Dict[str, Any]) -> None:
    """A constructor entry initialises instances."""
    def constructor(self, x):
        self.x = x

    point = _build(fix, props={"constructor": constructor})
    assert point(12).x == 12


def test_default_constructor_accepts_arguments(fix: Dict[str, Any]) -> None:
    """Without a constructor any arguments are accepted and ignored."""
    cls = _build(fix, props={"x": 1})
    instance = cls(1, 2, key="value")
    assert instance.x == 1


# ============================================================
# Static property tests
# ============================================================

def test_static_properties(fix: Dict[str, Any]) -> None:
    """Static bag entries live on the class, not on instances."""
    cls = _build(fix, statics={"static_prop": "hello"})
    assert cls.static_prop == "hello"
    assert not hasattr(cls(), "static_prop"), \
        "static properties should not leak onto instances"


def test_static_properties_inherited(fix: Dict[str, Any]) -> None:
    """Subclasses see their parent's statics."""
    base = _build(fix, statics={"kind": "base"})
    sub = _build(fix, parent=base)
    assert sub.kind == "base"


# ============================================================
# Super dispatch tests
# ============================================================

def test_super_without_name(fix: Dict[str, Any]) -> None:
    """_super() returns the parent view."""
    widget, custom = _widget_pair(fix)
    assert custom()._super() is widget


def test_super_method(fix: Dict[str, Any]) -> None:
    """_super(name) returns the parent method bound to the instance."""
    _, custom = _widget_pair(fix)
    assert custom()._super("render")() == "SUPER 123"


def test_super_value(fix: Dict[str, Any]) -> None:
    """_super(name) returns plain values unwrapped."""
    _, custom = _widget_pair(fix)
    assert custom()._super("value") == 987


def test_super_missing_member(fix: Dict[str, Any]) -> None:
    """_super(name) for an unknown name raises SuperReferenceError."""
    _, custom = _widget_pair(fix)
    try:
        custom()._super("bla")
    except SuperReferenceError:
        return
    raise AssertionError("_super('bla') should raise SuperReferenceError")


def test_super_from_overriding_method(fix: Dict[str, Any]) -> None:
    """An override can delegate to the version it replaces."""
    widget, _ = _widget_pair(fix)
    custom = _build(fix, parent=widget, props={
        "x": 5,
        "render": lambda self: "Custom " + self._super("render")(),
    })
    assert custom().render() == "Custom SUPER 5"


# ============================================================
# Full test suite
# ============================================================

ALL_TESTS = {
    "protocol": [test_factory_is_tagged],
    "construction": [
        test_builds_subclass_of_parent,
        test_records_super_view,
        test_instance_properties,
        test_overrides_parent_properties,
        test_inherits_parent_properties,
        test_constructor,
        test_default_constructor_accepts_arguments,
    ],
    "statics": [
        test_static_properties,
        test_static_properties_inherited,
    ],
    "super_dispatch": [
        test_super_without_name,
        test_super_method,
        test_super_value,
        test_super_missing_member,
        test_super_from_overriding_method,
    ],
}


def run_compliance_tests(fixture: Dict[str, Any]) -> None:
    """Run all compliance tests for the given fixture.

    Required fixture keys:
        create_factory - () -> ClassFactory
    Optional:
        parent         - () -> class to build on (default Nil)
    """
    for layer, tests in ALL_TESTS.items():
        for test_fn in tests:
            test_fn(fixture)
