"""Core data types for the barista object model.

A property bag is any str-keyed mapping. The only other value type the
engine introduces is the conflict marker, a tagged stand-in for a merged
property whose sources disagree.
"""

from typing import Any, Dict, List, Mapping

from barista.errors import MergeConflictError


PropertyBag = Mapping[str, Any]


# ============================================================
# Conflict marker
# ============================================================

class MergeConflict:
    """Sentinel stored in place of a conflicting merged property.

    Reading it yields the marker itself; calling it (as a method would be
    called) raises MergeConflictError. There is exactly one instance.
    """

    _instance = None

    def __new__(cls) -> "MergeConflict":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise MergeConflictError()

    def __repr__(self) -> str:
        return "<merge conflict>"

    def __reduce__(self) -> str:
        return "MERGE_CONFLICT"


MERGE_CONFLICT = MergeConflict()


def is_conflict(value: Any) -> bool:
    """True if value is the conflict marker."""
    return value is MERGE_CONFLICT


def conflicts(bag: PropertyBag) -> List[str]:
    """Keys of bag that still hold the conflict marker, in bag order."""
    return [key for key, value in bag.items() if is_conflict(value)]


def as_bag(props: Any, role: str = "property bag") -> Dict[str, Any]:
    """Copy props into a fresh dict, treating None as empty."""
    if props is None:
        return {}
    if not isinstance(props, Mapping):
        raise TypeError(f"{role} must be a mapping, got {type(props).__name__}")
    return dict(props)
