import pytest

from trench.domains.trench import DEFAULT_START, GOAL, apply_move, neighbors
from trench.experiments.runner import gen_instances
from trench.heuristics.manhattan import manhattan
from trench.heuristics.zero import zero
from trench.search.a_star import a_star
from trench.search.best_first import best_first_search
from trench.search.frontier import Frontier
from trench.search.node import Node, reconstruct_path, solution_actions
from trench.search.ucs import uniform_cost_search

ONE_AWAY = apply_move(GOAL, 0, "left")
INSTANCES = gen_instances([1, 2, 3, 4], per_depth=2, start_seed=11)

def _stats(r):
    return r["g"], r["expanded"], r["generated"], r["peak_open"]

@pytest.mark.parametrize("search", [uniform_cost_search, a_star])
def test_already_solved(search):
    r = search(GOAL)
    assert r["solved"] and r["termination"] == "ok"
    assert (r["g"], r["expanded"], r["peak_open"]) == (0, 0, 1)
    assert r["path"] == [GOAL]
    assert r["actions"] == []

@pytest.mark.parametrize("search", [uniform_cost_search, a_star])
def test_one_move_away(search):
    r = search(ONE_AWAY)
    assert r["g"] == 1
    assert r["path"] == [ONE_AWAY, GOAL]
    assert r["actions"] == [(0, "right")]

def test_ucs_and_astar_agree_on_depth():
    for inst in INSTANCES:
        u = uniform_cost_search(inst.state, return_path=False)
        a = a_star(inst.state, return_path=False)
        assert u["solved"] and a["solved"]
        assert u["g"] == a["g"]
        assert u["g"] <= inst.depth
        assert a["expanded"] <= u["expanded"]

def test_heuristic_never_overestimates_solution_depth():
    for inst in INSTANCES:
        assert manhattan(inst.state, GOAL) <= a_star(inst.state)["g"]

def test_path_replays_to_goal():
    for inst in INSTANCES:
        r = a_star(inst.state)
        path = r["path"]
        assert path[0] == inst.state and path[-1] == GOAL
        assert len(path) == r["g"] + 1
        for s, s2 in zip(path, path[1:]):
            assert s2 in [n for n, _ in neighbors(s)]
        s = inst.state
        for ordinal, action in r["actions"]:
            s = apply_move(s, ordinal, action)
        assert s == GOAL

@pytest.mark.parametrize("search", [uniform_cost_search, a_star])
def test_deterministic(search):
    inst = INSTANCES[-1]
    assert _stats(search(inst.state)) == _stats(search(inst.state))

def test_unreachable_goal_exhausts():
    # one blank on the tree-shaped board: only 13 configurations are reachable
    start = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12)
    goal = (0, 2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12)
    for hfun in (zero, manhattan):
        r = best_first_search(start, goal, hfun)
        assert not r["solved"]
        assert r["termination"] == "exhausted"
        assert r["g"] is None and r["path"] is None
        assert r["expanded"] == 13
        assert r["peak_closed"] == 13

def test_no_blanks_exhausts_immediately():
    r = uniform_cost_search(tuple(range(1, 14)))
    assert not r["solved"]
    assert (r["expanded"], r["peak_open"]) == (1, 1)

def test_duplicates_in_frontier_may_be_expanded_again():
    r = uniform_cost_search(INSTANCES[-1].state)
    assert r["peak_closed"] <= r["expanded"]

def test_on_expand_sees_every_pop():
    seen = []
    r = a_star(ONE_AWAY, on_expand=lambda node, peak: seen.append((node.state, peak)))
    assert len(seen) == r["expanded"] + 1
    assert seen[0] == (ONE_AWAY, 1)
    assert seen[-1][0] == GOAL

@pytest.mark.parametrize("tie_break", ["h", "g", "fifo", "lifo"])
def test_tie_breaks_find_optimal_depth(tie_break):
    inst = INSTANCES[-1]
    expected = uniform_cost_search(inst.state)["g"]
    assert a_star(inst.state, tie_break=tie_break)["g"] == expected

def test_unknown_tie_break():
    with pytest.raises(ValueError):
        Frontier("random")

def test_frontier_orders_by_f_then_tie_break():
    nodes = [Node(GOAL, path_cost=2, heuristic=1), Node(GOAL, path_cost=0, heuristic=1),
             Node(GOAL, path_cost=1, heuristic=2), Node(GOAL, path_cost=3, heuristic=0)]
    fifo = Frontier("fifo")
    lifo = Frontier("lifo")
    for n in nodes:
        fifo.push(n); lifo.push(n)
    assert len(fifo) == 4
    assert fifo.pop() is nodes[1]
    assert [fifo.pop() for _ in range(3)] == [nodes[0], nodes[2], nodes[3]]
    assert not fifo
    assert lifo.pop() is nodes[1]
    assert lifo.pop() is nodes[3]

def test_node_chain_outlives_search():
    root = Node(ONE_AWAY, heuristic=1)
    child = Node(GOAL, parent=root, action=(0, "right"), path_cost=1)
    del root
    assert child.f == 1
    assert reconstruct_path(child) == [ONE_AWAY, GOAL]
    assert solution_actions(child) == [(0, "right")]

@pytest.mark.slow
def test_default_puzzle_ucs_matches_astar():
    u = uniform_cost_search(DEFAULT_START, return_path=False)
    a = a_star(DEFAULT_START, return_path=False)
    assert u["solved"] and a["solved"]
    assert u["g"] == a["g"]

def test_node_repr_skips_parent_chain():
    node = Node(GOAL)
    for i in range(3000):
        node = Node(GOAL, parent=node, action=(0, "left"), path_cost=i + 1)
    text = repr(node)
    assert "parent" not in text
    assert "path_cost=3000" in text
    assert len(reconstruct_path(node)) == 3001
