"""Self-balancing (AVL) binary search tree."""

from .errors import (
    AVLTreeError,
    EmptyTreeError,
    IncomparableElementError,
    InvariantViolationError,
)
from .render import level_order, render
from .tree import AVLTree, Comparable

__all__ = [
    "AVLTree",
    "AVLTreeError",
    "Comparable",
    "EmptyTreeError",
    "IncomparableElementError",
    "InvariantViolationError",
    "level_order",
    "render",
]
