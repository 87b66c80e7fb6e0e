"""
Configuration classes for the Towers of Hanoi scripts.

This module contains:
- SolverConfig: Parameters of the move printer entry point
- VerifyConfig: Range and limits for the solution verifier
- GraphConfig: Rendering options for the state space graph
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Entry point configuration."""
    num_disks: int = 4

    # Peg labels (single characters)
    source: str = "A"
    target: str = "C"
    auxiliary: str = "B"

    # Use the explicit-stack generator instead of recursion
    iterative: bool = False

    # Output
    output_path: Optional[str] = None  # None -> stdout
    show_states: bool = False
    count_only: bool = False


@dataclass
class VerifyConfig:
    """Verifier configuration."""
    min_disks: int = 0
    max_disks: int = 10

    # The state graph has 3**n nodes, so shortest path checks stop here
    max_graph_disks: int = 6

    # Output
    output_path: Optional[str] = None  # JSON summary, skipped if None
    show_progress: bool = True


@dataclass
class GraphConfig:
    """State space drawing configuration."""
    num_disks: int = 3
    output_dir: str = "graphs"
    out_prefix: str = "state_space_graph"

    fig_width: float = 16.0
    fig_height: float = 14.0
    label_font_size: int = 13
    node_size: int = 350
    dpi: int = 220

    path_color: str = "#00aa00"
