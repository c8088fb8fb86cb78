"""Functional class recipes.

A recipe is a chain of bag transforms ending in a class:

    Widget = recipe(wrap_methods("render"), add_defaults, {"render": render})

mix() runs the transforms right to left over a starting bag and
basic_recipe() turns the resulting bag into a class rooted at Nil.
"""

from typing import Any, Callable, Dict

from barista.core import Nil, build_class
from barista.types import PropertyBag, as_bag


def compose(*functions: Callable) -> Callable:
    """compose(f, g)(x) == f(g(x))."""
    def composed(value: Any) -> Any:
        for func in reversed(functions):
            value = func(value)
        return value
    return composed


def mix(*args: Any) -> Dict[str, Any]:
    """Apply bag transforms right to left.

    mix(f, g, bag) returns f(g(bag)). When the last argument is callable
    too, every argument is a transform and the starting bag is empty.
    """
    if not args:
        return {}
    if callable(args[-1]):
        functions, bag = args, {}
    else:
        functions, bag = args[:-1], args[-1]
    return compose(*functions)(as_bag(bag))


def basic_recipe(props: PropertyBag) -> type:
    """Class rooted at Nil built from props ("constructor" is honoured)."""
    return build_class(Nil, props)


def recipe(*args: Any) -> type:
    return basic_recipe(mix(*args))
