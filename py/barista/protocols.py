"""Class factory protocol as a Python Abstract Base Class.

A class factory turns (parent, instance properties, static properties)
into a class. The extension operator checks its first argument against
this protocol before treating it as a plain property bag, which is how
alternative construction strategies (traits, for instance) plug in.

Factories can satisfy the protocol two ways:
    1. subclass ClassFactory and implement create_class
    2. derive from barista.core.AbstractClassFactory, a barista class
       registered as a virtual ClassFactory
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from barista.types import PropertyBag


# ============================================================
# ClassFactory
# ============================================================

class ClassFactory(ABC):
    """Strategy for building a class from a parent and two property bags."""

    @abstractmethod
    def create_class(self, parent: type,
                     instance_props: Optional[PropertyBag] = None,
                     static_props: Optional[PropertyBag] = None) -> Any:
        """Build the class. The return value is handed back verbatim by
        the extension operator, so it need not be a class at all."""
        ...


def is_class_factory(obj: Any) -> bool:
    """True if obj should be invoked as a factory rather than read as a bag."""
    return isinstance(obj, ClassFactory)
