"""Trait composition factory.

Traits are property bags merged into a class without entering its
inheritance chain. Precedence, highest first:

    explicit class properties > merged trait properties > parent chain

Traits that disagree on a key leave the conflict marker there; calling
it raises MergeConflictError until the class overrides the key.
"""

from typing import Optional, Sequence

from loguru import logger

from barista.core import build_class
from barista.merge import extend, merge
from barista.protocols import ClassFactory
from barista.types import PropertyBag, conflicts


class TraitsClassFactory(ClassFactory):
    """Merges its traits, layers the explicit bag on top, then builds."""

    def __init__(self, traits: Sequence[PropertyBag] = ()):
        self.traits = list(traits)

    def create_class(self, parent: type,
                     instance_props: Optional[PropertyBag] = None,
                     static_props: Optional[PropertyBag] = None,
                     name: Optional[str] = None) -> type:
        combined = merge(*self.traits)
        unresolved = [key for key in conflicts(combined)
                      if key not in (instance_props or {})]
        if unresolved:
            logger.warning("traits conflict on {} and the class does not override them",
                           unresolved)
        combined = extend(combined, instance_props or {})
        return build_class(parent, combined, static_props, name=name)

    def __repr__(self) -> str:
        return f"TraitsClassFactory({len(self.traits)} traits)"


def with_traits(*traits: PropertyBag) -> TraitsClassFactory:
    """Create a trait factory for use as the first argument of extend.

    Usage:
        View = BaseView.extend(with_traits(templating, events), {"render": render})
    """
    return TraitsClassFactory(traits)
