"""
Towers of Hanoi state space as a graph.

Every legal configuration of n disks is a node (3**n in total) and two nodes
are joined when a single legal move turns one into the other. The graph forms
a Sierpinski triangle; the generated solution runs along one of its sides
between two corner states.
"""

import argparse
import itertools
import os

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from config import GraphConfig
from planning import TowersOfHanoiState, optimal_move_count, solve


def all_states(num_disks):
    """Generate all valid states for num_disks disks on 3 pegs."""
    # assignment[i] = peg for disk (i+1)
    states = []
    for assignment in itertools.product(range(3), repeat=num_disks):
        pegs = [[], [], []]
        # Place disks from largest to smallest
        for disk in range(num_disks, 0, -1):
            pegs[assignment[disk - 1]].append(disk)
        states.append(tuple(tuple(p) for p in pegs))
    return states


def get_neighbors(state):
    """Get all valid neighbor states (one move away)."""
    neighbors = []
    pegs = [list(p) for p in state]
    for from_peg in range(3):
        if not pegs[from_peg]:
            continue
        disk = pegs[from_peg][-1]
        for to_peg in range(3):
            if from_peg == to_peg:
                continue
            if pegs[to_peg] and pegs[to_peg][-1] < disk:
                continue
            new_pegs = [list(p) for p in pegs]
            new_pegs[from_peg] = new_pegs[from_peg][:-1]
            new_pegs[to_peg] = new_pegs[to_peg] + [disk]
            neighbors.append(tuple(tuple(p) for p in new_pegs))
    return neighbors


def build_state_graph(num_disks):
    states = all_states(num_disks)
    G = nx.Graph()
    G.add_nodes_from(states)

    for s in states:
        for neighbor in get_neighbors(s):
            if not G.has_edge(s, neighbor):
                G.add_edge(s, neighbor)

    return G


def tower_state(num_disks, peg_idx):
    pegs = [(), (), ()]
    pegs[peg_idx] = tuple(range(num_disks, 0, -1))
    return tuple(pegs)


def moves_to_edges(moves, num_disks, labels=TowersOfHanoiState.DEFAULT_LABELS, source=None):
    """Convert a move sequence to a list of (state_from, state_to) edges."""
    if source is None:
        source = labels[0]
    state = TowersOfHanoiState(num_disks, labels=labels, start=source)
    edges = []
    for step, move in enumerate(moves, start=1):
        s_before = state.as_tuple()
        state.apply_move(move, step=step)
        edges.append((s_before, state.as_tuple()))
    return edges


def shortest_solution_length(G, num_disks, source_idx=0, target_idx=2):
    return nx.shortest_path_length(
        G,
        tower_state(num_disks, source_idx),
        tower_state(num_disks, target_idx),
    )


def is_shortest_path(G, moves, num_disks, labels=TowersOfHanoiState.DEFAULT_LABELS, source=None, target=None):
    """
    Check that ``moves`` walks graph edges from the full tower on ``source``
    to the full tower on ``target`` in the fewest possible steps.
    """
    if source is None:
        source = labels[0]
    if target is None:
        target = labels[2]
    labels = tuple(labels)
    source_idx = labels.index(source)
    target_idx = labels.index(target)

    edges = moves_to_edges(moves, num_disks, labels=labels, source=source)
    for a, b in edges:
        if not G.has_edge(a, b):
            return False

    end = edges[-1][1] if edges else tower_state(num_disks, source_idx)
    if end != tower_state(num_disks, target_idx):
        return False

    return len(edges) == shortest_solution_length(G, num_disks, source_idx, target_idx)


def format_state(state, largest_to_smallest=False):
    """Format state as compact label.

    largest_to_smallest=False: disk1..diskN order
    largest_to_smallest=True:  diskN..disk1 order
    """
    assignment = {}
    for peg_idx, peg in enumerate(state):
        for disk in peg:
            assignment[disk] = peg_idx
    num_disks = len(assignment)
    if largest_to_smallest:
        disk_range = range(num_disks, 0, -1)
    else:
        disk_range = range(1, num_disks + 1)
    return ''.join(str(assignment[d] + 1) for d in disk_range)


def sierpinski_layout_by_label(G):
    """
    Label-driven Sierpinski layout.

    The first digit of the largest-disk-first label selects the major triangle
    (1=top, 2=bottom-left, 3=bottom-right), the next digit selects a
    sub-triangle inside it, and so on.
    """
    top = np.array([0.5, np.sqrt(3) / 2])
    bl = np.array([0.0, 0.0])
    br = np.array([1.0, 0.0])

    positions = {}
    for node in G.nodes():
        label = format_state(node, largest_to_smallest=True)

        cT = top.copy()
        cBL = bl.copy()
        cBR = br.copy()

        for ch in label:
            if ch == '1':
                cBL = (cT + cBL) / 2
                cBR = (cT + cBR) / 2
            elif ch == '2':
                cT = (cBL + cT) / 2
                cBR = (cBL + cBR) / 2
            elif ch == '3':
                cT = (cBR + cT) / 2
                cBL = (cBR + cBL) / 2

        positions[node] = (cT + cBL + cBR) / 3

    return positions


def draw_graph(G, num_disks, moves, cfg, title=None):
    """Draw the state space with the edges of ``moves`` highlighted; return the PNG path."""
    print(f"State space ({num_disks} disks): {G.number_of_nodes()} states, {G.number_of_edges()} edges")

    initial_state = tower_state(num_disks, 0)
    goal_state = tower_state(num_disks, 2)

    path_edges = moves_to_edges(moves, num_disks)
    for a, b in path_edges:
        if not G.has_edge(a, b):
            raise ValueError(f"Move sequence contains non-adjacent states: {a} -> {b}")

    path_edge_set = {frozenset(e) for e in path_edges}
    path_states = {s for e in path_edges for s in e}

    pos = sierpinski_layout_by_label(G)

    on_path = [(u, v) for u, v in G.edges() if frozenset((u, v)) in path_edge_set]
    off_path = [(u, v) for u, v in G.edges() if frozenset((u, v)) not in path_edge_set]

    fig, ax = plt.subplots(1, 1, figsize=(cfg.fig_width, cfg.fig_height))

    nx.draw_networkx_edges(G, pos, edgelist=off_path, edge_color='#d8d8d8', width=0.6, alpha=0.35, ax=ax)
    nx.draw_networkx_edges(G, pos, edgelist=on_path, edge_color=cfg.path_color, width=3.0, alpha=0.9, ax=ax)

    regular_nodes = [n for n in G.nodes() if n not in path_states]
    inner_path_nodes = [n for n in path_states if n != initial_state and n != goal_state]

    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=regular_nodes,
        node_color='#ececec',
        node_size=cfg.node_size,
        edgecolors='#999999',
        linewidths=0.4,
        ax=ax,
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=inner_path_nodes,
        node_color='#ccffcc',
        node_size=int(cfg.node_size * 1.35),
        edgecolors=cfg.path_color,
        linewidths=1.8,
        ax=ax,
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=[initial_state],
        node_color='#4444ff',
        node_size=int(cfg.node_size * 2.0),
        edgecolors='black',
        linewidths=2.2,
        ax=ax,
        node_shape='s',
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=[goal_state],
        node_color='gold',
        node_size=int(cfg.node_size * 2.2),
        edgecolors='black',
        linewidths=2.2,
        ax=ax,
        node_shape='*',
    )

    labels = {node: format_state(node, largest_to_smallest=True) for node in G.nodes()}
    label_pos = {node: p + np.array([0.0, -0.018]) for node, p in pos.items()}
    nx.draw_networkx_labels(
        G,
        label_pos,
        labels=labels,
        font_size=cfg.label_font_size,
        font_color='#222222',
        font_family='monospace',
        font_weight='bold',
        ax=ax,
    )

    legend_elements = [
        mpatches.Patch(facecolor=cfg.path_color, edgecolor=cfg.path_color, label=f"Solution ({len(path_edges)} moves)"),
    ]
    ax.legend(handles=legend_elements, loc='lower right', fontsize=9, framealpha=0.9, edgecolor='#cccccc')

    ax.set_title(title or f"{num_disks}-disk TOH state space", fontsize=15, pad=16)
    ax.axis('off')

    os.makedirs(cfg.output_dir, exist_ok=True)
    out_path = os.path.join(cfg.output_dir, f"{cfg.out_prefix}.png")

    plt.tight_layout()
    plt.savefig(out_path, dpi=cfg.dpi, bbox_inches='tight', facecolor='white', edgecolor='none')
    print(f"Saved {out_path}")
    plt.close(fig)
    return out_path


def main():
    defaults = GraphConfig()
    parser = argparse.ArgumentParser(
        description="Draw the Towers of Hanoi state space with the optimal solution highlighted."
    )
    parser.add_argument("--num-disks", type=int, default=defaults.num_disks)
    parser.add_argument("--output-dir", default=defaults.output_dir)
    parser.add_argument("--out-prefix", default=defaults.out_prefix)
    args = parser.parse_args()

    if args.num_disks < 1:
        parser.error(f"--num-disks must be >= 1, got {args.num_disks}")

    cfg = GraphConfig(num_disks=args.num_disks, output_dir=args.output_dir, out_prefix=args.out_prefix)
    moves = list(solve(cfg.num_disks))

    G = build_state_graph(cfg.num_disks)
    length = shortest_solution_length(G, cfg.num_disks)
    print(f"Shortest path: {length} moves (2^n - 1 = {optimal_move_count(cfg.num_disks)})")

    draw_graph(G, cfg.num_disks, moves, cfg)


if __name__ == "__main__":
    main()
