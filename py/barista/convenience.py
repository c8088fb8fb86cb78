"""User-facing shortcuts over the extension operator."""

from typing import Any

from barista.core import Nil, extend_class
from barista.factories.traits import TraitsClassFactory
from barista.types import PropertyBag


class Class:
    """Namespace for Class.create."""

    @staticmethod
    def create(*args: Any, **options: Any) -> Any:
        """Create a class rooted at Nil from a bag or a class factory."""
        return Nil.extend(*args, **options)


def subclass_of(parent: type, *args: Any, **options: Any) -> Any:
    """Like Class.create, with an explicit parent that need not derive from Nil."""
    return extend_class(parent, *args, **options)


def include(*traits: PropertyBag) -> TraitsClassFactory:
    """Factory that mixes traits into the class; pass it to Class.create."""
    return TraitsClassFactory(traits)


def create_class(*args: Any, **options: Any) -> Any:
    """Alias of Class.create."""
    return Class.create(*args, **options)
