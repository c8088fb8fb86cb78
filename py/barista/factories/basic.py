"""Basic class factory: direct extension behind the factory protocol."""

from typing import Optional

from barista.core import build_class
from barista.protocols import ClassFactory
from barista.types import PropertyBag


class BasicClassFactory(ClassFactory):
    """Builds classes exactly as the extension operator's plain path does."""

    def create_class(self, parent: type,
                     instance_props: Optional[PropertyBag] = None,
                     static_props: Optional[PropertyBag] = None,
                     name: Optional[str] = None) -> type:
        return build_class(parent, instance_props, static_props, name=name)


def create() -> BasicClassFactory:
    """Create a basic factory.

    Usage:
        Widget = Nil.extend(create(), {"render": render})
    """
    return BasicClassFactory()
