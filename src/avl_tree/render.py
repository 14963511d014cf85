"""Level-order views of an ``AVLTree``.

Both helpers walk the tree breadth-first, left child before right child, so the
output pins down the exact shape a sequence of rotations produced:

* ``level_order`` returns the elements with ``None`` sentinels for missing
  children, trailing sentinels trimmed.
* ``render`` draws one line per level and marks missing children with ``·``.
  It stops after the deepest level that still holds a real node.
"""

from collections import deque
from typing import Deque, List, Optional

from .tree import AVLTree


def level_order(tree: AVLTree) -> List[Optional[object]]:
    if tree.root is None:
        return []

    result: List[Optional[object]] = []
    queue: Deque[Optional[AVLTree.Node]] = deque([tree.root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.value)
        queue.append(node.left)
        queue.append(node.right)

    while result and result[-1] is None:
        result.pop()
    return result


def render(tree: AVLTree) -> str:
    """Render ``tree`` level by level, or ``<empty>`` when it has no nodes."""
    if tree.root is None:
        return "<empty>"

    lines: List[str] = []
    queue: Deque[Optional[AVLTree.Node]] = deque([tree.root])

    while queue:
        level_nodes: List[str] = []
        next_level_has_node = False
        for _ in range(len(queue)):
            node = queue.popleft()
            if node is None:
                level_nodes.append("·")
                queue.extend((None, None))
                continue

            level_nodes.append(str(node.value))
            queue.append(node.left)
            queue.append(node.right)
            if node.left is not None or node.right is not None:
                next_level_has_node = True

        lines.append(" ".join(level_nodes))
        if not next_level_has_node:
            break

    return "\n".join(lines)
