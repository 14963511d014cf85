import unittest

from avl_tree import AVLTree, level_order, render


def build(values):
    tree: AVLTree[int] = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


class TestLevelOrder(unittest.TestCase):
    def test_empty_tree(self):
        self.assertEqual(level_order(AVLTree()), [])

    def test_perfect_tree(self):
        tree = build([50, 30, 70, 20, 40, 60, 80])
        self.assertEqual(level_order(tree), [50, 30, 70, 20, 40, 60, 80])

    def test_missing_children_become_none(self):
        tree = build([20, 10, 30, 25])
        self.assertEqual(level_order(tree), [20, 10, 30, None, None, 25])


class TestRender(unittest.TestCase):
    def test_empty_tree(self):
        self.assertEqual(render(AVLTree()), "<empty>")

    def test_single_node(self):
        self.assertEqual(render(build([7])), "7")

    def test_renders_placeholders_for_missing_children(self):
        tree = build([20, 10, 30, 25])
        self.assertEqual(render(tree), "\n".join(["20", "10 30", "· · 25 ·"]))

    def test_trims_placeholder_only_levels(self):
        tree = build([10, 20, 30])
        self.assertEqual(render(tree), "\n".join(["20", "10 30"]))

    def test_shape_after_two_children_removal(self):
        tree = build([50, 30, 70, 20, 40, 60, 80])
        tree.remove(30)
        self.assertEqual(render(tree), "\n".join(["50", "40 70", "20 · 60 80"]))


if __name__ == '__main__':
    unittest.main()
