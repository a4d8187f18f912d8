"""Tests for the pre-order iterator."""

import pytest

from orderedtree import (
    IteratorExhaustedError,
    IteratorState,
    PreOrderIterator,
    TreeError,
    TreeNode,
)

from conftest import ACCOUNTING_PRE_ORDER, all_nodes, build_accounting_tree, node_by_value


def test_accounting_tree_pre_order(accounting_tree):
    assert accounting_tree.size == 18
    assert [n.value for n in accounting_tree] == ACCOUNTING_PRE_ORDER


def test_pre_order_independent_of_insertion_time(abc_tree):
    assert [n.value for n in abc_tree] == ["R", "A", "A1", "B", "B1", "C", "C1"]


def test_iterate_subtree(accounting_tree):
    income_expenses = node_by_value(accounting_tree, "INCOME & EXPENSES")
    assert [n.value for n in income_expenses] == [
        "INCOME & EXPENSES", "INCOME", "Salary", "Sales",
        "EXPENSES", "Food", "Car", "Fuel",
    ]


def test_iter_method_matches_dunder(accounting_tree):
    assert list(accounting_tree.iter()) == list(iter(accounting_tree))
    assert isinstance(accounting_tree.iter(), PreOrderIterator)


def test_yields_size_nodes_starting_with_start(accounting_tree):
    for start in all_nodes(accounting_tree):
        nodes = list(start)
        assert len(nodes) == start.size
        assert nodes[0] is start


def test_parents_seen_before_children(accounting_tree):
    for start in all_nodes(accounting_tree):
        seen = set()
        for i, node in enumerate(start):
            if i > 0:
                assert id(node.parent) in seen
            seen.add(id(node))


def test_repeated_iteration_is_stable(accounting_tree):
    assert list(accounting_tree) == list(accounting_tree)


def test_next_after_end_raises():
    root = build_accounting_tree()
    iterator = root.iter()
    for _ in range(root.size):
        assert iterator.has_next()
        assert next(iterator) is not None

    assert not iterator.has_next()
    with pytest.raises(IteratorExhaustedError, match="No more nodes in this subtree."):
        iterator.next()


def test_exhausted_error_is_tree_error_and_lookup_error():
    iterator = TreeNode("R").iter()
    iterator.next()
    with pytest.raises(TreeError):
        iterator.next()
    with pytest.raises(LookupError):
        iterator.next()


def test_builtin_next_raises_plain_stop_iteration():
    iterator = TreeNode("R").iter()
    next(iterator)
    with pytest.raises(StopIteration) as excinfo:
        next(iterator)
    assert not isinstance(excinfo.value, TreeError)


def test_exhaustion_inside_generator_is_not_converted():
    def values(iterator):
        while True:
            yield iterator.next().value

    walk = values(TreeNode("R").iter())
    assert next(walk) == "R"
    with pytest.raises(IteratorExhaustedError):
        next(walk)


def test_next_method_alias():
    root = TreeNode("R")
    child = root.add_child("A")
    iterator = root.iter()
    assert iterator.next() is root
    assert iterator.next() is child
    with pytest.raises(IteratorExhaustedError):
        iterator.next()


def test_has_next_is_idempotent(accounting_tree):
    iterator = accounting_tree.iter()
    for _ in range(20):
        assert iterator.has_next()
    assert next(iterator) is accounting_tree


def test_has_next_does_not_consume(accounting_tree):
    iterator = accounting_tree.iter()
    values = []
    while iterator.has_next():
        assert iterator.has_next()
        values.append(next(iterator).value)
    assert values == ACCOUNTING_PRE_ORDER


def test_next_without_has_next(accounting_tree):
    iterator = accounting_tree.iter()
    values = [next(iterator).value for _ in range(accounting_tree.size)]
    assert values == ACCOUNTING_PRE_ORDER
    with pytest.raises(IteratorExhaustedError):
        iterator.next()


def test_state_transitions():
    root = TreeNode("R")
    child = root.add_child("A")
    iterator = root.iter()
    assert iterator.state is IteratorState.PRISTINE

    assert next(iterator) is root
    assert iterator.state is IteratorState.DESCENDING

    assert next(iterator) is child
    assert iterator.state is IteratorState.DESCENDING
    assert not iterator.has_next()

    with pytest.raises(IteratorExhaustedError):
        iterator.next()
    assert iterator.state is IteratorState.EXHAUSTED
    assert not iterator.has_next()


def test_single_root_iteration():
    root = TreeNode("R")
    iterator = root.iter()
    assert iterator.has_next()
    assert next(iterator) is root
    assert not iterator.has_next()
    with pytest.raises(IteratorExhaustedError):
        iterator.next()


def test_iterator_is_its_own_iterator(abc_tree):
    iterator = abc_tree.iter()
    assert iter(iterator) is iterator
    next(iterator)
    assert [n.value for n in iterator] == ["A", "A1", "B", "B1", "C", "C1"]


def test_append_in_unvisited_branch_is_seen(abc_tree):
    iterator = abc_tree.iter()
    assert [next(iterator).value for _ in range(3)] == ["R", "A", "A1"]

    node_by_value(abc_tree, "C").add_child("C2")
    assert [n.value for n in iterator] == ["B", "B1", "C", "C1", "C2"]


def test_append_in_visited_branch_is_safe(abc_tree):
    iterator = abc_tree.iter()
    assert [next(iterator).value for _ in range(4)] == ["R", "A", "A1", "B"]

    node_by_value(abc_tree, "A").add_child("A2")
    rest = [n.value for n in iterator]
    assert "A2" not in rest
    assert rest[-2:] == ["C", "C1"]


def test_append_to_leaf_start_after_first_step():
    root = TreeNode("R")
    iterator = root.iter()
    assert next(iterator) is root
    child = root.add_child("late")
    assert iterator.has_next()
    assert next(iterator) is child


def test_wide_tree_order():
    root = TreeNode(0)
    for i in range(1, 101):
        root.add_child(i)
    assert [n.value for n in root] == list(range(101))


@pytest.mark.slow
def test_deep_chain_iteration():
    root = TreeNode(0)
    node = root
    for i in range(1, 3000):
        node = node.add_child(i)

    assert node.level == 2999
    assert node.root is root
    assert root.size == 3000
    assert [n.value for n in root] == list(range(3000))
