"""Shared fixtures for the orderedtree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import TreeNode


ACCOUNTING_PRE_ORDER = [
    "BALANCE",
    "NET WORTH",
    "ASSETS",
    "Cash",
    "Bank",
    "LIABILITIES",
    "Credit Card",
    "Bank Loan",
    "Mortgage",
    "INCOME & EXPENSES",
    "INCOME",
    "Salary",
    "Sales",
    "EXPENSES",
    "Food",
    "Car",
    "Fuel",
    "OPENING BALANCE",
]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long running tests (deselect with '-m \"not slow\"')")


def build_accounting_tree() -> TreeNode:
    """Build the chart-of-accounts tree.

    Structure:
    BALANCE
    ├── NET WORTH
    │   ├── ASSETS (Cash, Bank)
    │   └── LIABILITIES (Credit Card, Bank Loan, Mortgage)
    ├── INCOME & EXPENSES
    │   ├── INCOME (Salary, Sales)
    │   └── EXPENSES (Food, Car -> Fuel)
    └── OPENING BALANCE
    """
    root = TreeNode("BALANCE")
    net_worth = root.add_child("NET WORTH")
    income_expenses = root.add_child("INCOME & EXPENSES")
    root.add_child("OPENING BALANCE")

    assets = net_worth.add_child("ASSETS")
    liabilities = net_worth.add_child("LIABILITIES")
    assets.add_child("Cash")
    assets.add_child("Bank")
    liabilities.add_child("Credit Card")
    liabilities.add_child("Bank Loan")
    liabilities.add_child("Mortgage")

    income = income_expenses.add_child("INCOME")
    expenses = income_expenses.add_child("EXPENSES")
    income.add_child("Salary")
    income.add_child("Sales")
    expenses.add_child("Food")
    car = expenses.add_child("Car")
    car.add_child("Fuel")
    return root


def build_numbered_tree() -> TreeNode:
    """Build a 12 node tree where each value encodes its position.

    Root
    ├── Child-1 (Child-11, Child-12)
    └── Child-2
        └── Child-21
            ├── Child-211
            └── Child-212 (Child-2121 .. Child-2124)
    """
    root = TreeNode("Root")
    child1 = root.add_child("Child-1")
    child2 = root.add_child("Child-2")
    child1.add_child("Child-11")
    child1.add_child("Child-12")

    child21 = child2.add_child("Child-21")
    child21.add_child("Child-211")
    child212 = child21.add_child("Child-212")
    for suffix in ("1", "2", "3", "4"):
        child212.add_child("Child-212" + suffix)
    return root


def all_nodes(root: TreeNode):
    """Every node of the tree, gathered through the child links only."""
    nodes = []
    pending = [root]
    while pending:
        node = pending.pop()
        nodes.append(node)
        pending.extend(node.children)
    return nodes


def node_by_value(root: TreeNode, value) -> TreeNode:
    node = root.find(lambda v: v == value)
    assert node is not None, f"{value!r} not in tree"
    return node


@pytest.fixture
def accounting_tree() -> TreeNode:
    return build_accounting_tree()


@pytest.fixture
def numbered_tree() -> TreeNode:
    return build_numbered_tree()


@pytest.fixture
def abc_tree() -> TreeNode:
    """R with children A, B, C; grandchildren added as A1, C1, B1."""
    root = TreeNode("R")
    a = root.add_child("A")
    b = root.add_child("B")
    c = root.add_child("C")
    a.add_child("A1")
    c.add_child("C1")
    b.add_child("B1")
    return root
