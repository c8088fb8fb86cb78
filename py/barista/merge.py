"""Merge engine: combine property bags.

merge() is symmetric and marks disagreements with the conflict marker;
extend() is the ordered counterpart where later bags win.
"""

from typing import Any, Dict

from loguru import logger

from barista.types import MERGE_CONFLICT, PropertyBag, as_bag, conflicts


def _same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # 1, 1.0 and True compare equal but are different values
    if type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except Exception:
        # uncomparable values never count as equal
        return False


def merge(*bags: PropertyBag) -> Dict[str, Any]:
    """Union of bags; keys defined with different values become MERGE_CONFLICT.

    The result is always a new dict and no input is modified. A key that
    conflicted once stays conflicted for the rest of the merge.
    """
    result: Dict[str, Any] = {}
    for bag in bags:
        for key, value in as_bag(bag).items():
            if key not in result:
                result[key] = value
            elif result[key] is not MERGE_CONFLICT and not _same(result[key], value):
                result[key] = MERGE_CONFLICT
    clashes = conflicts(result)
    if clashes:
        logger.debug("merge of {} bags marked conflicts: {}", len(bags), clashes)
    return result


def extend(bag: PropertyBag, *bags: PropertyBag) -> Dict[str, Any]:
    """Layer bags over bag left to right; later values overwrite earlier ones."""
    result = as_bag(bag)
    for other in bags:
        result.update(as_bag(other))
    return result
