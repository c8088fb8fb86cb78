"""barista - classical classes, super-dispatch and traits for Python.

Single inheritance with explicit super-dispatch by name, static
(class-level) properties, and trait composition with lazy conflict
detection, built on Python's own class machinery.
"""

__version__ = "0.1.0"

from loguru import logger

# silent unless the host application calls configure_logging()
logger.disable("barista")

from barista.errors import (
    BaristaError,
    MergeConflictError,
    SuperReferenceError,
    SubclassResponsibilityError,
)
from barista.types import MERGE_CONFLICT, MergeConflict, conflicts, is_conflict
from barista.merge import merge, extend
from barista.protocols import ClassFactory, is_class_factory
from barista.core import (
    Nil,
    ClassMeta,
    AbstractClassFactory,
    build_class,
    extend_class,
    subclass_responsibility,
    super_view,
)
from barista.factories.basic import BasicClassFactory
from barista.factories.traits import TraitsClassFactory, with_traits
from barista.convenience import Class, subclass_of, include, create_class
from barista.recipes import mix, recipe, basic_recipe
from barista.mixins import before, wrap_methods
from barista.config import BaristaConfig
from barista.logs import configure_logging, disable_logging

merge_conflict = MERGE_CONFLICT
