import logging
from typing import Any, Generic, Iterator, List, Optional, Protocol, Tuple, TypeVar

from .errors import EmptyTreeError, IncomparableElementError, InvariantViolationError

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class AVLTree(Generic[T]):
    """Binary search tree kept height-balanced by rotations.

    Heights follow the textbook convention: a leaf has height 0 and an absent
    subtree has height -1. Duplicate inserts, removals of missing values and
    ``None`` arguments are silent no-ops.
    """

    MAX_HEIGHT_DIFFERENCE = 1

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def _compare(self, value: T, other: T) -> int:
        try:
            if value < other:
                return -1
            if other < value:
                return 1
        except TypeError as exc:
            raise IncomparableElementError(value, other) from exc
        return 0

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _right_rotate(self, node: Node) -> Node:
        k1 = node.left
        assert k1 is not None
        logger.debug("right rotation at %r, new subtree root %r", node.value, k1.value)

        node.left = k1.right
        k1.right = node

        self._update_height(node)
        k1.height = 1 + max(self._get_height(k1.left), node.height)

        return k1

    def _left_rotate(self, node: Node) -> Node:
        k1 = node.right
        assert k1 is not None
        logger.debug("left rotation at %r, new subtree root %r", node.value, k1.value)

        node.right = k1.left
        k1.left = node

        self._update_height(node)
        k1.height = 1 + max(self._get_height(k1.right), node.height)

        return k1

    def _rebalance(self, node: Node) -> Node:
        left_height = self._get_height(node.left)
        right_height = self._get_height(node.right)

        if abs(left_height - right_height) > self.MAX_HEIGHT_DIFFERENCE:
            if left_height > right_height:
                left = node.left
                assert left is not None
                # ties take the single rotation
                if self._get_height(left.left) >= self._get_height(left.right):
                    node = self._right_rotate(node)
                else:
                    node.left = self._left_rotate(left)
                    node = self._right_rotate(node)
            else:
                right = node.right
                assert right is not None
                if self._get_height(right.left) > self._get_height(right.right):
                    node.right = self._right_rotate(right)
                    node = self._left_rotate(node)
                else:
                    node = self._left_rotate(node)

        # a rebalance without rotation still has to refresh the height
        self._update_height(node)
        return node

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(value)

        result = self._compare(value, node.value)
        if result < 0:
            node.left = self._insert(node.left, value)
        elif result > 0:
            node.right = self._insert(node.right, value)
        else:
            return node

        self._update_height(node)
        return self._rebalance(node)

    def insert(self, value: Optional[T]) -> None:
        if value is None:
            return
        self._root = self._insert(self._root, value)

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max_node(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        result = self._compare(value, node.value)
        if result < 0:
            node.left = self._remove(node.left, value)
        elif result > 0:
            node.right = self._remove(node.right, value)
        elif node.left is None or node.right is None:
            logger.debug("removing node %r", node.value)
            self._size -= 1
            return node.left if node.right is None else node.right
        else:
            # copy the in-order successor up, then delete it from the right subtree
            successor = self._find_min_node(node.right)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)

        self._update_height(node)
        return self._rebalance(node)

    def remove(self, value: Optional[T]) -> None:
        if value is None or self._root is None:
            return
        self._root = self._remove(self._root, value)

    def _contains(self, node: Optional[Node], value: T) -> bool:
        if node is None:
            return False
        result = self._compare(value, node.value)
        if result < 0:
            return self._contains(node.left, value)
        if result > 0:
            return self._contains(node.right, value)
        return True

    def contains(self, value: Optional[T]) -> bool:
        if value is None:
            return False
        return self._contains(self._root, value)

    def min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        return self._find_min_node(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        return self._find_max_node(self._root).value

    def root_value(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return self._get_height(self._root)

    def _preorder(self, node: Optional[Node], result: List[T]) -> List[T]:
        if node is None:
            return result
        result.append(node.value)
        self._preorder(node.left, result)
        self._preorder(node.right, result)
        return result

    def _inorder(self, node: Optional[Node], result: List[T]) -> List[T]:
        if node is None:
            return result
        self._inorder(node.left, result)
        result.append(node.value)
        self._inorder(node.right, result)
        return result

    def _postorder(self, node: Optional[Node], result: List[T]) -> List[T]:
        if node is None:
            return result
        self._postorder(node.left, result)
        self._postorder(node.right, result)
        result.append(node.value)
        return result

    def preorder_traversal(self) -> List[T]:
        return self._preorder(self._root, [])

    def inorder_traversal(self) -> List[T]:
        return self._inorder(self._root, [])

    def postorder_traversal(self) -> List[T]:
        return self._postorder(self._root, [])

    def _is_balanced(self, node: Optional[Node]) -> Tuple[bool, int]:
        if node is None:
            return True, -1
        left_ok, left_height = self._is_balanced(node.left)
        if not left_ok:
            return False, left_height + 1
        right_ok, right_height = self._is_balanced(node.right)
        if not right_ok:
            return False, right_height + 1
        balanced = abs(left_height - right_height) <= self.MAX_HEIGHT_DIFFERENCE
        return balanced, 1 + max(left_height, right_height)

    def is_balanced(self) -> bool:
        balanced, _ = self._is_balanced(self._root)
        return balanced

    def _validate(
        self, node: Optional[Node], lower: Optional[T], upper: Optional[T]
    ) -> Tuple[int, int]:
        """Check the subtree under ``node`` and return its (height, node count).

        Every value must lie strictly between ``lower`` and ``upper`` when
        those bounds are given.
        """
        if node is None:
            return -1, 0

        if lower is not None and self._compare(node.value, lower) <= 0:
            raise InvariantViolationError(
                f"order violated: {node.value!r} is not greater than {lower!r}"
            )
        if upper is not None and self._compare(node.value, upper) >= 0:
            raise InvariantViolationError(
                f"order violated: {node.value!r} is not less than {upper!r}"
            )

        left_height, left_count = self._validate(node.left, lower, node.value)
        right_height, right_count = self._validate(node.right, node.value, upper)

        expected = 1 + max(left_height, right_height)
        if node.height != expected:
            raise InvariantViolationError(
                f"stale height at {node.value!r}: cached {node.height}, actual {expected}"
            )
        if abs(left_height - right_height) > self.MAX_HEIGHT_DIFFERENCE:
            raise InvariantViolationError(
                f"unbalanced at {node.value!r}: left {left_height}, right {right_height}"
            )
        return expected, left_count + right_count + 1

    def validate(self) -> None:
        """Raise ``InvariantViolationError`` if any tree invariant is broken."""
        _, count = self._validate(self._root, None, None)
        if count != self._size:
            raise InvariantViolationError(
                f"size mismatch: counted {count} nodes, size() reports {self._size}"
            )

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.inorder_traversal())

    def __repr__(self) -> str:
        return f"AVLTree({self.inorder_traversal()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
