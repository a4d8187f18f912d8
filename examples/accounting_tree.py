#!/usr/bin/env python3
"""Demo script for orderedtree using a small chart of accounts.

Builds the tree by hand, walks it in pre-order with the iterator protocol,
searches it and prints a few statistics.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import (
    TreeNode,
    format_tree,
    get_leaf_nodes,
    get_tree_stats,
    traverse_tree,
)


def build_chart_of_accounts() -> TreeNode:
    root = TreeNode("BALANCE")
    net_worth = root.add_child("NET WORTH")
    income_expenses = root.add_child("INCOME & EXPENSES")
    root.add_child("OPENING BALANCE")

    assets = net_worth.add_child("ASSETS")
    assets.add_child("Cash")
    assets.add_child("Bank")
    liabilities = net_worth.add_child("LIABILITIES")
    for name in ("Credit Card", "Bank Loan", "Mortgage"):
        liabilities.add_child(name)

    income = income_expenses.add_child("INCOME")
    income.add_child("Salary")
    income.add_child("Sales")
    expenses = income_expenses.add_child("EXPENSES")
    expenses.add_child("Food")
    expenses.add_child("Car").add_child("Fuel")
    return root


def demo_iteration(root: TreeNode):
    """Walk the tree with has_next/next, the way an external cursor would."""
    print("\n=== Pre-order Iteration ===")
    iterator = root.iter()
    while iterator.has_next():
        node = iterator.next()
        print(f"{'  ' * node.level}{node.value}")


def demo_search(root: TreeNode):
    print("\n=== Search ===")
    for wanted in ("Fuel", "Rent"):
        node = root.find(lambda value: value == wanted)
        if node is None:
            print(f"  {wanted}: not found")
        else:
            print(f"  {wanted}: {' > '.join(node.path())} (id {node.identifier()})")


def demo_traversal(root: TreeNode):
    print("\n=== Breadth-first, top two levels ===")
    for node in traverse_tree(root, strategy="bfs", max_depth=2):
        print(f"  [{node.level}] {node.value}")

    print("\n=== Leaf accounts ===")
    print("  " + ", ".join(node.value for node in get_leaf_nodes(root)))


def demo_stats(root: TreeNode):
    print("\n=== Statistics ===")
    stats = get_tree_stats(root)
    print(f"  Total nodes: {stats['total_nodes']}")
    print(f"  Leaves: {stats['leaf_nodes']}")
    print(f"  Max depth: {stats['max_depth']}")
    print(f"  Average branching: {stats['average_branching']:.2f}")


def main():
    root = build_chart_of_accounts()
    print(format_tree(root))

    demo_iteration(root)
    demo_search(root)
    demo_traversal(root)
    demo_stats(root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
