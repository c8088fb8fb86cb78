"""Bag transforms for recipes: method wrapping helpers."""

from typing import Any, Callable, Dict, Optional

from barista.types import PropertyBag, as_bag


def before(func_to_wrap: Optional[Callable], func: Callable) -> Callable:
    """A function that runs func, then func_to_wrap, with the same arguments.

    The wrapped function's result is returned. With nothing to wrap,
    func itself is returned.
    """
    if func_to_wrap is None:
        return func

    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func(*args, **kwargs)
        return func_to_wrap(*args, **kwargs)

    return wrapper


def _hooked(name: str, original: Callable) -> Callable:
    before_name, after_name = f"before_{name}", f"after_{name}"

    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        getattr(self, before_name)(*args, **kwargs)
        result = original(self, *args, **kwargs)
        getattr(self, after_name)(*args, **kwargs)
        return result

    method.__name__ = name
    return method


def wrap_methods(methods: str) -> Callable[[PropertyBag], Dict[str, Any]]:
    """Transform wrapping each named method in before_<name>/after_<name> hooks.

    methods is a space separated list of names. The hooks are looked up on
    the instance each time the method runs, so they may come from a later
    transform or a subclass; a missing hook raises AttributeError then.
    """
    names = methods.split()

    def transform(bag: PropertyBag) -> Dict[str, Any]:
        proto = as_bag(bag)
        for name in names:
            proto[name] = _hooked(name, proto[name])
        return proto

    return transform
