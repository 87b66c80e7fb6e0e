import matplotlib

matplotlib.use("Agg")

from config import GraphConfig
from planning import solve
from state_space_graph import (
    all_states,
    build_state_graph,
    draw_graph,
    format_state,
    get_neighbors,
    is_shortest_path,
    moves_to_edges,
    shortest_solution_length,
    sierpinski_layout_by_label,
    tower_state,
)


def test_state_graph_size():
    for n in range(1, 5):
        G = build_state_graph(n)
        assert G.number_of_nodes() == 3 ** n
        # Sierpinski graph edge count
        assert G.number_of_edges() == 3 * (3 ** n - 1) // 2
    assert len(set(all_states(3))) == 27


def test_neighbors_of_full_tower():
    # Only the smallest disk can move: two choices
    assert sorted(get_neighbors(tower_state(3, 0))) == sorted([
        ((3, 2), (1,), ()),
        ((3, 2), (), (1,)),
    ])


def test_solution_is_shortest_path():
    for n in range(0, 6):
        G = build_state_graph(n)
        moves = list(solve(n, 'A', 'C', 'B'))
        assert shortest_solution_length(G, n) == 2 ** n - 1
        assert is_shortest_path(G, moves, n), f"Solution for {n} disks is not a shortest path"


def test_other_labels_shortest_path():
    G = build_state_graph(3)
    moves = list(solve(3, 'X', 'Y', 'Z'))
    assert is_shortest_path(G, moves, 3, labels=('X', 'Z', 'Y'), source='X', target='Y')


def test_detour_is_not_shortest():
    G = build_state_graph(2)
    detour = [(1, 'A', 'B'), (1, 'B', 'C'), (1, 'C', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
    assert not is_shortest_path(G, detour, 2)
    # Stops before the goal
    assert not is_shortest_path(G, [(1, 'A', 'B')], 2)


def test_moves_to_edges():
    edges = moves_to_edges([(1, 'A', 'C')], 2)
    assert edges == [(((2, 1), (), ()), ((2,), (), (1,)))]


def test_format_state():
    state = ((3,), (1,), (2,))
    assert format_state(state) == "231"
    assert format_state(state, largest_to_smallest=True) == "132"


def test_layout_corners():
    G = build_state_graph(2)
    pos = sierpinski_layout_by_label(G)
    top = pos[tower_state(2, 0)]
    left = pos[tower_state(2, 1)]
    right = pos[tower_state(2, 2)]
    assert top[1] > left[1] and top[1] > right[1]
    assert left[0] < top[0] < right[0]


def test_draw_graph(tmp_path):
    cfg = GraphConfig(num_disks=2, output_dir=str(tmp_path), out_prefix="toh2", dpi=40)
    G = build_state_graph(2)
    out_path = draw_graph(G, 2, list(solve(2)), cfg)
    assert out_path.endswith("toh2.png")
    assert (tmp_path / "toh2.png").exists()
