import logging
import tempfile
import unittest
from pathlib import Path

import numpy as np

import demo


class TestInsertionSequence(unittest.TestCase):
    def test_orders(self):
        self.assertEqual(demo.insertion_sequence(4, "ascending"), [0, 1, 2, 3])
        self.assertEqual(demo.insertion_sequence(4, "descending"), [3, 2, 1, 0])
        self.assertEqual(sorted(demo.insertion_sequence(50, "random")), list(range(50)))

    def test_random_order_is_seeded(self):
        self.assertEqual(
            demo.insertion_sequence(30, "random", seed=7),
            demo.insertion_sequence(30, "random", seed=7),
        )

    def test_unknown_order_raises(self):
        with self.assertRaises(ValueError):
            demo.insertion_sequence(4, "sideways")


class TestRotationCounter(unittest.TestCase):
    def test_single_rotation_cases(self):
        _, counter = demo.count_rotations([10, 20, 30])
        self.assertEqual((counter.left, counter.right), (1, 0))
        _, counter = demo.count_rotations([30, 20, 10])
        self.assertEqual((counter.left, counter.right), (0, 1))

    def test_double_rotation_cases(self):
        tree, counter = demo.count_rotations([30, 10, 20])
        self.assertEqual((counter.left, counter.right), (1, 1))
        self.assertEqual(tree.root_value(), 20)
        _, counter = demo.count_rotations([10, 30, 20])
        self.assertEqual(counter.total, 2)

    def test_handler_is_detached_afterwards(self):
        tree_logger = logging.getLogger("avl_tree.tree")
        before = list(tree_logger.handlers)
        level = tree_logger.level
        demo.count_rotations([1, 2, 3])
        self.assertEqual(tree_logger.handlers, before)
        self.assertEqual(tree_logger.level, level)


class TestMeasurements(unittest.TestCase):
    def test_heights_stay_under_bound(self):
        sizes = np.array([1, 10, 100, 500])
        bound = demo.avl_height_bound(sizes)
        for order in demo.ORDERS:
            heights = demo.measure_heights(sizes, order)
            self.assertEqual(heights.shape, sizes.shape)
            self.assertTrue(np.all(heights <= bound))

    def test_ascending_heights_are_minimal_for_powers_of_two(self):
        sizes = np.array([1, 3, 7, 15, 31])
        heights = demo.measure_heights(sizes, "ascending")
        np.testing.assert_array_equal(heights, [0, 1, 2, 3, 4])

    def test_rotations_grow_with_size(self):
        rotations = demo.measure_rotations(np.array([2, 3, 64]), "ascending")
        self.assertEqual(rotations[0], 0)
        self.assertEqual(rotations[1], 1)
        self.assertGreater(rotations[2], rotations[1])


class TestFigures(unittest.TestCase):
    def test_figures_and_report_are_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            viz_dir = Path(tmp) / "viz"
            viz_dir.mkdir()
            fig3, heights = demo.example_3_height_growth(viz_dir)
            fig4, rotations = demo.example_4_rotation_counts(viz_dir)
            pdf_path = demo.generate_pdf_report(
                [("Height", fig3), ("Rotations", fig4)], viz_dir
            )
            self.assertTrue((viz_dir / "01_height_growth.png").exists())
            self.assertTrue((viz_dir / "02_rotation_counts.png").exists())
            self.assertTrue(pdf_path.exists())
            self.assertEqual(set(heights), set(demo.ORDERS))
            self.assertEqual(set(rotations), set(demo.ORDERS))


if __name__ == '__main__':
    unittest.main()
