from typing import Any


class AVLTreeError(Exception):
    """Base class for errors raised by the tree."""


class IncomparableElementError(AVLTreeError, TypeError):
    """An element cannot be ordered against one already stored in the tree."""

    def __init__(self, value: Any, other: Any) -> None:
        super().__init__(
            f"cannot compare {type(value).__name__} {value!r} "
            f"with {type(other).__name__} {other!r}"
        )
        self.value = value
        self.other = other


class EmptyTreeError(AVLTreeError, ValueError):
    pass


class InvariantViolationError(AVLTreeError, AssertionError):
    pass
