"""Class construction engine.

Three pieces live here:
    Nil          - the root class every chain bottoms out at
    extend_class - the extension operator (bound as SomeClass.extend)
    _super       - super-dispatch, installed on every class built here

Instance properties become the class dict of a new Python class whose
only base is the parent, so inherited names resolve through the MRO.
Static properties live on a metaclass derived from the parent's
metaclass, which makes them visible on the class (and its subclasses)
but not on instances.

Super-dispatch resolves relative to the class that *defines* the running
method, not the instance's most-derived class. Every function in an
instance bag is wrapped so that, while it runs, the (instance, defining
class) pair sits on a context-local stack that _super consults.
"""

import functools
import inspect
from contextvars import ContextVar
from typing import Any, Callable, Dict, Optional, Tuple

from loguru import logger

from barista import logs
from barista.errors import SubclassResponsibilityError, SuperReferenceError
from barista.protocols import ClassFactory, is_class_factory
from barista.types import PropertyBag, as_bag


_HOME_ATTR = "__barista_home__"
_NOT_DISPATCHING = frozenset({"_super"})
_RESERVED = ("_super", "__super__")

# (instance, defining class) for every barista method currently running
_running: ContextVar[Tuple[Tuple[Any, type], ...]] = ContextVar(
    "barista_running_methods", default=()
)


def subclass_responsibility(*args: Any, **kwargs: Any) -> Any:
    """Stub for abstract members: put it in a bag, override it in subclasses."""
    raise SubclassResponsibilityError()


# ============================================================
# Super dispatch
# ============================================================

def super_view(cls: type) -> type:
    """The parent class recorded for cls (the root is its own super view)."""
    view = vars(cls).get("__super__")
    if view is not None:
        return view
    return cls.__bases__[0] if cls.__bases__ else cls


def _home_of(instance: Any) -> type:
    for running, home in reversed(_running.get()):
        if running is instance:
            return home
    return type(instance)


def _lookup(view: type, name: str) -> Tuple[type, Any]:
    key = "__init__" if name == "constructor" else name
    for klass in view.__mro__:
        if key in vars(klass):
            return klass, vars(klass)[key]
    raise SuperReferenceError(name, view)


def _super(self, name: Optional[str] = None) -> Any:
    """Parent view of the defining class, or the parent's version of name.

    Callable members come back bound to self; plain values come back as
    they are. "constructor" names the parent's __init__.
    """
    view = super_view(_home_of(self))
    if name is None:
        return view
    owner, member = _lookup(view, name)
    if logs.dispatch_tracing():
        logger.trace("_super({!r}) on {} resolved in {}",
                     name, type(self).__name__, owner.__name__)
    if hasattr(type(member), "__get__"):
        return member.__get__(self, type(self))
    return member


def _dispatching(func: Callable, home: type) -> Callable:
    @functools.wraps(func)
    def method(self, *args, **kwargs):
        token = _running.set(_running.get() + ((self, home),))
        try:
            return func(self, *args, **kwargs)
        finally:
            _running.reset(token)

    setattr(method, _HOME_ATTR, home)
    return method


def _dispatching_generator(func: Callable, home: type) -> Callable:
    # the entry is pushed around every resume, not just the initial call
    @functools.wraps(func)
    def method(self, *args, **kwargs):
        generator = func(self, *args, **kwargs)
        sent, error = None, None
        while True:
            token = _running.set(_running.get() + ((self, home),))
            try:
                if error is not None:
                    item = generator.throw(error)
                else:
                    item = generator.send(sent)
            except StopIteration as stop:
                return stop.value
            finally:
                _running.reset(token)
            sent, error = None, None
            try:
                sent = yield item
            except GeneratorExit:
                token = _running.set(_running.get() + ((self, home),))
                try:
                    generator.close()
                finally:
                    _running.reset(token)
                raise
            except BaseException as exc:
                error = exc

    setattr(method, _HOME_ATTR, home)
    return method


def _tie(func: Callable, home: type) -> Callable:
    """func wrapped so that _super inside it resolves from home."""
    current = getattr(func, _HOME_ATTR, None)
    if current is home:
        return func
    if current is not None:
        func = func.__wrapped__
    if inspect.isgeneratorfunction(func):
        return _dispatching_generator(func, home)
    return _dispatching(func, home)


def _tie_property(prop: property, home: type) -> property:
    accessors = [
        _tie(accessor, home) if inspect.isfunction(accessor) else accessor
        for accessor in (prop.fget, prop.fset, prop.fdel)
    ]
    if accessors == [prop.fget, prop.fset, prop.fdel]:
        return prop
    return property(*accessors, prop.__doc__)


def _prepare(cls: type) -> None:
    """Tie every function and property accessor in cls's own dict to cls for _super.

    classmethods and staticmethods are left alone: they run without an
    instance, so there is nothing for _super to dispatch on.
    """
    for key, value in list(vars(cls).items()):
        if key in _NOT_DISPATCHING:
            continue
        if inspect.isfunction(value):
            tied = _tie(value, cls)
        elif type(value) is property:
            tied = _tie_property(value, cls)
        else:
            continue
        if tied is not value:
            setattr(cls, key, tied)


# ============================================================
# Root class
# ============================================================

class ClassMeta(type):
    """Metaclass of Nil; its attributes form the static side of a class."""

    def extend(cls, *args: Any, name: Optional[str] = None) -> Any:
        """Derive a subclass of cls. See extend_class."""
        return extend_class(cls, *args, name=name)


class Nil(metaclass=ClassMeta):
    """Root of every barista class chain."""

    def __init__(self, *args: Any, **kwargs: Any):
        pass

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if "__super__" not in vars(cls):
            cls.__super__ = cls.__bases__[0]
        _prepare(cls)

    _super = _super


Nil.__super__ = Nil


# ============================================================
# Extension operator
# ============================================================

def _pass_through(self, *args: Any, **kwargs: Any) -> None:
    pass


def build_class(parent: type,
                instance_props: Optional[PropertyBag] = None,
                static_props: Optional[PropertyBag] = None,
                name: Optional[str] = None) -> type:
    """Plain-bag path of the extension operator.

    A "constructor" entry becomes __init__; without one the class gets an
    initializer that does nothing (the parent's is not called).
    """
    if not isinstance(parent, type):
        raise TypeError(f"parent must be a class, got {type(parent).__name__}")
    props = as_bag(instance_props, "instance properties")
    reserved = [key for key in _RESERVED if key in props]
    if reserved:
        raise TypeError(
            f"instance properties may not define {reserved}: barista sets them"
        )
    statics = as_bag(static_props, "static properties")
    name = name or f"{parent.__name__}Subclass"

    namespace: Dict[str, Any] = dict(props)
    constructor = namespace.pop("constructor", None)
    if constructor is not None:
        namespace["__init__"] = constructor
    namespace.setdefault("__init__", _pass_through)
    namespace["__super__"] = parent
    namespace["_super"] = _super
    namespace["__qualname__"] = name

    meta = type(parent)
    if statics:
        meta = type(f"{name}Meta", (meta,), statics)

    cls = meta(name, (parent,), namespace)
    _prepare(cls)
    logger.debug("built class {} from {} with members {} and statics {}",
                 name, parent.__name__, sorted(props), sorted(statics))
    return cls


def extend_class(parent: type, *args: Any, name: Optional[str] = None) -> Any:
    """Extension operator: derive a new class from parent.

    extend_class(parent, instance_props=None, static_props=None)
        builds a class through build_class.
    extend_class(parent, factory, *rest)
        hands everything to factory.create_class(parent, *rest) and
        returns whatever it returns.

    Usable as a classmethod on classes outside barista:
        Parent.extend = classmethod(extend_class)
    """
    if args and is_class_factory(args[0]):
        factory, rest = args[0], args[1:]
        logger.debug("delegating {} extension to {}",
                     getattr(parent, "__name__", parent), type(factory).__name__)
        if name is None:
            return factory.create_class(parent, *rest)
        return factory.create_class(parent, *rest, name=name)
    if len(args) > 2:
        raise TypeError(
            f"extend takes an instance bag and a static bag, got {len(args)} arguments"
        )
    return build_class(parent, *args, name=name)


# ============================================================
# Abstract factory
# ============================================================

AbstractClassFactory = Nil.extend(
    {"create_class": subclass_responsibility},
    name="AbstractClassFactory",
)
ClassFactory.register(AbstractClassFactory)
