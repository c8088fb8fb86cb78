"""Class factory protocol tests.

Runs the compliance suite against the built-in factories, then checks
delegation through the extension operator.
"""

import pytest

from barista import (
    AbstractClassFactory,
    BasicClassFactory,
    Class,
    ClassFactory,
    Nil,
    SubclassResponsibilityError,
    TraitsClassFactory,
    is_class_factory,
    subclass_of,
)
from barista.compliance import ALL_TESTS, run_compliance_tests
from barista.factories import basic


BASIC_FIXTURE = {"create_factory": basic.create}

TRAITS_FIXTURE = {"create_factory": lambda: TraitsClassFactory([{"trait_member": 1}])}


class _PlainBase:
    pass


PLAIN_PARENT_FIXTURE = {
    "create_factory": BasicClassFactory,
    "parent": lambda: _PlainBase,
}


# ============================================================
# Compliance
# ============================================================

@pytest.mark.parametrize("fixture", [BASIC_FIXTURE, TRAITS_FIXTURE, PLAIN_PARENT_FIXTURE],
                         ids=["basic", "traits", "plain-parent"])
@pytest.mark.parametrize("layer", sorted(ALL_TESTS))
def test_compliance_layer(fixture, layer):
    for test_fn in ALL_TESTS[layer]:
        test_fn(fixture)


class TestFullSuite:
    """Run all compliance tests as a single mega-test."""

    def test_basic(self):
        run_compliance_tests(BASIC_FIXTURE)

    def test_traits(self):
        run_compliance_tests(TRAITS_FIXTURE)


# ============================================================
# Protocol checks
# ============================================================

class TestIsClassFactory:
    def test_plain_bags_are_not_factories(self):
        assert not is_class_factory({"create_class": lambda *args: None})
        assert not is_class_factory(None)

    def test_abstract_factory_subclasses_are_factories(self):
        TestFactory = AbstractClassFactory.extend({"create_class": lambda self, *args: None})
        assert is_class_factory(TestFactory())

    def test_abstract_factory_is_a_barista_class(self):
        assert issubclass(AbstractClassFactory, Nil)
        assert issubclass(AbstractClassFactory, ClassFactory)

    def test_abstract_factory_must_be_overridden(self):
        with pytest.raises(SubclassResponsibilityError):
            AbstractClassFactory().create_class(Nil, {}, {})

    def test_class_factory_is_abstract(self):
        with pytest.raises(TypeError):
            ClassFactory()


# ============================================================
# Delegation through the extension operator
# ============================================================

class TestDelegation:
    def test_result_is_returned_verbatim(self):
        TestFactory = AbstractClassFactory.extend({
            "create_class": lambda self, parent, instance_props=None, static_props=None:
                "From ClassFactory",
        })
        assert Class.create(TestFactory(), {"hello": "world"}) == "From ClassFactory"

    def test_factory_receives_arguments(self):
        TestFactory = AbstractClassFactory.extend({
            "create_class": lambda self, parent, instance_props=None, static_props=None: {
                "parent": parent,
                "instance_props": instance_props,
                "static_props": static_props,
            },
        })
        created = Class.create(TestFactory(), {"hello": "world"}, {"foo": "bar"})
        assert created["static_props"] == {"foo": "bar"}
        assert created["instance_props"] == {"hello": "world"}
        assert created["parent"] is Nil

    def test_factory_on_subclass_receives_subclass(self):
        seen = []

        class Recording(ClassFactory):
            def create_class(self, parent, instance_props=None, static_props=None):
                seen.append(parent)
                return parent

        Widget = Class.create()
        assert Widget.extend(Recording()) is Widget
        assert seen == [Widget]

    def test_subclass_of_plain_parent(self):
        class Parent:
            def hello(self):
                return "hello"

        Child = subclass_of(Parent, BasicClassFactory(), {"hello": lambda self: self._super("hello")() + "!"})
        assert Child().hello() == "hello!"
