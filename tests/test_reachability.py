"""Tests for reachability and the unused-file complement."""

from pathlib import Path

import pytest

from next_unused.analysis.reachability import find_reachable, find_unused
from next_unused.errors import ConfigurationError

A, B, C, D = (Path(f"/proj/{n}.ts") for n in "abcd")


def test_cycle_scenario():
    graph = {A: [B], B: [A], C: [], D: []}
    reachable = find_reachable(graph, [A])
    assert reachable == {A, B}
    assert find_unused([A, B, C, D], reachable) == [C, D]


def test_entry_points_always_reachable():
    graph = {A: [], B: [], C: [A]}
    reachable = find_reachable(graph, [B, C])
    assert {B, C} <= reachable
    assert reachable == {A, B, C}


def test_self_loop_and_duplicates():
    graph = {A: [A, B, B, B], B: [A]}
    assert find_reachable(graph, [A]) == {A, B}


def test_transitive_chain():
    graph = {A: [B], B: [C], C: [D], D: []}
    assert find_reachable(graph, [A]) == {A, B, C, D}
    assert find_reachable(graph, [C]) == {C, D}


def test_target_missing_from_graph_is_leaf():
    ghost = Path("/proj/ghost.ts")
    graph = {A: [ghost]}
    assert find_reachable(graph, [A]) == {A, ghost}


def test_entry_missing_from_graph():
    assert find_reachable({}, [A]) == {A}


def test_exact_partition():
    files = [A, B, C, D]
    graph = {A: [C], B: [], C: [], D: [B]}
    reachable = find_reachable(graph, [A])
    unused = find_unused(files, reachable)
    assert set(unused).isdisjoint(reachable)
    assert set(unused) | (reachable & set(files)) == set(files)


def test_unused_keeps_discovered_order():
    assert find_unused([D, C, B, A], {B}) == [D, C, A]


def test_graph_not_mutated():
    graph = {A: [B], B: [A], C: []}
    snapshot = {k: list(v) for k, v in graph.items()}
    find_reachable(graph, [A])
    assert graph == snapshot


def test_no_entry_points():
    with pytest.raises(ConfigurationError):
        find_reachable({A: []}, [])
