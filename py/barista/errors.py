"""Error kinds raised by barista.

Every error derives from BaristaError. None of them is raised at class
construction time by the merge step: conflicts fail lazily, on use.
"""


MERGE_CONFLICT_MESSAGE = (
    "This property was defined by multiple merged objects, "
    "override it with the proper implementation"
)


class BaristaError(Exception):
    """Base class for all barista errors."""


class MergeConflictError(BaristaError):
    """A conflicting merged property was invoked before being overridden."""

    def __init__(self, message: str = MERGE_CONFLICT_MESSAGE):
        super().__init__(message)


class SuperReferenceError(BaristaError, AttributeError):
    """_super(name) was asked for a member no ancestor defines."""

    def __init__(self, name: str, owner: type):
        self.name = name
        self.owner = owner
        super().__init__(
            f"no such super member {name!r} in the ancestors of "
            f"{owner.__name__}"
        )


class SubclassResponsibilityError(BaristaError, NotImplementedError):
    """An abstract stub was invoked instead of a subclass override."""

    def __init__(self, message: str = "This method is a subclass responsibility"):
        super().__init__(message)
