"""
AVL Tree Demo -- Rotation scenarios, two-children removal, height growth against
the AVL bound, and rotation counts per insertion order.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import random
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from avl_tree import AVLTree, render

SEED = 42
SIZES = np.array([1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048])
ORDERS = ("ascending", "descending", "random")

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


class RotationCounter(logging.Handler):
    """Counts the rotation records emitted by the tree module."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.left = 0
        self.right = 0

    def emit(self, record):
        message = record.getMessage()
        if message.startswith("left rotation"):
            self.left += 1
        elif message.startswith("right rotation"):
            self.right += 1

    @property
    def total(self):
        return self.left + self.right


def insertion_sequence(n, order, seed=SEED):
    values = list(range(n))
    if order == "descending":
        values.reverse()
    elif order == "random":
        random.Random(seed).shuffle(values)
    elif order != "ascending":
        raise ValueError(f"unknown insertion order: {order!r}")
    return values


def build_tree(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def count_rotations(values):
    """Insert ``values`` into a fresh tree and return (tree, RotationCounter)."""
    tree_logger = logging.getLogger("avl_tree.tree")
    counter = RotationCounter()
    previous_level = tree_logger.level
    tree_logger.addHandler(counter)
    tree_logger.setLevel(logging.DEBUG)
    try:
        tree = build_tree(values)
    finally:
        tree_logger.removeHandler(counter)
        tree_logger.setLevel(previous_level)
    return tree, counter


def avl_height_bound(sizes):
    return 1.44 * np.log2(np.asarray(sizes, dtype=float) + 2)


def measure_heights(sizes, order, seed=SEED):
    return np.array([build_tree(insertion_sequence(int(n), order, seed)).height() for n in sizes])


def measure_rotations(sizes, order, seed=SEED):
    return np.array([count_rotations(insertion_sequence(int(n), order, seed))[1].total for n in sizes])


# ---------------------------------------------------------------------------
# Example 1: The Four Rotation Cases
# ---------------------------------------------------------------------------
def example_1_rotation_cases():
    print("=" * 60)
    print("Example 1: The Four Rotation Cases")
    print("=" * 60)

    cases = [
        ("RR -> left rotation", [10, 20, 30]),
        ("LL -> right rotation", [30, 20, 10]),
        ("LR -> left-right rotation", [30, 10, 20]),
        ("RL -> right-left rotation", [10, 30, 20]),
    ]

    results = []
    for name, values in cases:
        tree, counter = count_rotations(values)
        print(f"\n{name}: insert {values}")
        print(f"  root = {tree.root_value()}, height = {tree.height()}, "
              f"rotations = {counter.total} (left {counter.left}, right {counter.right})")
        print("  " + render(tree).replace("\n", "\n  "))
        results.append((name, values, tree.root_value(), counter.total))
    return results


# ---------------------------------------------------------------------------
# Example 2: Removing a Node With Two Children
# ---------------------------------------------------------------------------
def example_2_two_children_removal():
    print("\n" + "=" * 60)
    print("Example 2: Removing a Node With Two Children")
    print("=" * 60)

    tree = build_tree([50, 30, 70, 20, 40, 60, 80])
    print("Before removing 30:")
    print(render(tree))
    tree.remove(30)
    print("After removing 30 (successor 40 moves up):")
    print(render(tree))
    print(f"Inorder: {tree.inorder_traversal()}")
    return tree


# ---------------------------------------------------------------------------
# Example 3: Height Growth vs the AVL Bound
# ---------------------------------------------------------------------------
def example_3_height_growth(viz_dir=VIZ_DIR):
    print("\n" + "=" * 60)
    print("Example 3: Height Growth vs the AVL Bound")
    print("=" * 60)

    bound = avl_height_bound(SIZES)
    heights = {order: measure_heights(SIZES, order) for order in ORDERS}

    print(f"{'n':<8} {'asc':<6} {'desc':<6} {'rand':<6} {'bound':<8}")
    print("-" * 36)
    for i, n in enumerate(SIZES):
        print(f"{n:<8} {heights['ascending'][i]:<6} {heights['descending'][i]:<6} "
              f"{heights['random'][i]:<6} {bound[i]:<8.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(SIZES, heights["ascending"], "o-", color=COLORS["blue"], label="ascending")
    ax.plot(SIZES, heights["descending"], "s--", color=COLORS["orange"], label="descending")
    ax.plot(SIZES, heights["random"], "^-", color=COLORS["green"], label="random")
    ax.plot(SIZES, bound, color=COLORS["red"], linewidth=2, label="1.44 log2(n + 2)")
    ax.plot(SIZES, SIZES - 1, ":", color=COLORS["dark"], alpha=0.5, label="unbalanced BST (n - 1)")
    ax.set_xscale("log", base=2)
    ax.set_ylim(-0.5, bound[-1] + 3)
    ax.set_xlabel("Number of elements")
    ax.set_ylabel("Tree height (leaf = 0)")
    ax.set_title("AVL Tree Height vs Element Count")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(Path(viz_dir) / "01_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, heights


# ---------------------------------------------------------------------------
# Example 4: Rotations per Insertion Order
# ---------------------------------------------------------------------------
def example_4_rotation_counts(viz_dir=VIZ_DIR):
    print("\n" + "=" * 60)
    print("Example 4: Rotations per Insertion Order")
    print("=" * 60)

    rotations = {order: measure_rotations(SIZES, order) for order in ORDERS}
    for order in ORDERS:
        per_insert = rotations[order][-1] / SIZES[-1]
        print(f"{order:<12}: {rotations[order][-1]} rotations for n={SIZES[-1]} "
              f"({per_insert:.3f} per insert)")

    fig, ax = plt.subplots(figsize=(10, 6))
    width = 0.27
    x = np.arange(len(SIZES))
    for offset, (order, color) in zip((-width, 0, width), zip(ORDERS, ("blue", "orange", "green"))):
        ax.bar(x + offset, rotations[order], width, color=COLORS[color], label=order)
    ax.set_xticks(x)
    ax.set_xticklabels([str(n) for n in SIZES], rotation=45)
    ax.set_xlabel("Number of elements")
    ax.set_ylabel("Single rotations performed")
    ax.set_title("Rotation Count by Insertion Order")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(Path(viz_dir) / "02_rotation_counts.png", dpi=150)
    plt.close(fig)

    return fig, rotations


def generate_pdf_report(figures, viz_dir=VIZ_DIR):
    pdf_path = Path(viz_dir).parent / "report.pdf"
    with PdfPages(pdf_path) as pdf:
        for title, fig in figures:
            fig.suptitle(title, fontsize=14, fontweight="bold")
            pdf.savefig(fig)
    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 23 + "AVL TREE DEMO" + " " * 22 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")
    VIZ_DIR.mkdir(exist_ok=True)

    example_1_rotation_cases()
    example_2_two_children_removal()

    figures = []
    fig3, _ = example_3_height_growth()
    figures.append(("Example 3: Height Growth", fig3))
    fig4, _ = example_4_rotation_counts()
    figures.append(("Example 4: Rotation Counts", fig4))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
