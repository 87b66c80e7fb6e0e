"""
Towers of Hanoi move generation.

This module keeps the core pieces used by the entry point and helper scripts:
- Peg labels and the move event type
- Recursive and explicit-stack move generators (identical emission order)
- State representation and move legality checks for simulating a sequence
"""

import sys
from enum import Enum
from typing import Hashable, Iterator, List, NamedTuple, Optional, Sequence, Tuple


# ============================================================================
# Pegs and Move Events
# ============================================================================


class Peg(str, Enum):
    """The three rods of the puzzle."""

    A = "A"
    B = "B"
    C = "C"

    def __str__(self):
        return self.value


class Move(NamedTuple):
    """One relocation of the top disk from ``source`` to ``target``."""

    disk: int
    source: Hashable
    target: Hashable


def optimal_move_count(num_disks: int) -> int:
    _validate_disk_count(num_disks)
    return 2 ** num_disks - 1


def _validate_disk_count(num_disks: int) -> None:
    if isinstance(num_disks, bool) or not isinstance(num_disks, int):
        raise TypeError(f"num_disks must be int, got {type(num_disks).__name__}")
    if num_disks < 0:
        raise ValueError(f"num_disks must be >= 0, got {num_disks}")


def _validate_pegs(source: Hashable, target: Hashable, auxiliary: Hashable) -> None:
    if len({source, target, auxiliary}) != 3:
        raise ValueError(
            f"Pegs must be distinct, got source={source!r} target={target!r} auxiliary={auxiliary!r}"
        )


# ============================================================================
# Move Generators
# ============================================================================


def solve(
    num_disks: int,
    source: Hashable = Peg.A,
    target: Hashable = Peg.C,
    auxiliary: Hashable = Peg.B,
) -> Iterator[Move]:
    """
    Lazily generate the minimal move sequence for ``num_disks`` disks.

    Arguments are checked immediately; the returned iterator yields
    ``2 ** num_disks - 1`` moves and nothing at all for zero disks.
    """
    _validate_disk_count(num_disks)
    _validate_pegs(source, target, auxiliary)
    return _hanoi_recursive(num_disks, source, target, auxiliary)


def _hanoi_recursive(n: int, source: Hashable, target: Hashable, auxiliary: Hashable) -> Iterator[Move]:
    if n == 0:
        return
    if n == 1:
        yield Move(1, source, target)
        return

    # Move n-1 disks out of the way onto the auxiliary peg
    yield from _hanoi_recursive(n - 1, source, auxiliary, target)
    # Largest remaining disk goes straight to the target
    yield Move(n, source, target)
    # Bring the n-1 disks back on top of it
    yield from _hanoi_recursive(n - 1, auxiliary, target, source)


def solve_iterative(
    num_disks: int,
    source: Hashable = Peg.A,
    target: Hashable = Peg.C,
    auxiliary: Hashable = Peg.B,
) -> Iterator[Move]:
    """Explicit-stack equivalent of :func:`solve`, safe for any disk count."""
    _validate_disk_count(num_disks)
    _validate_pegs(source, target, auxiliary)
    return _hanoi_stack(num_disks, source, target, auxiliary)


def _hanoi_stack(num_disks: int, source: Hashable, target: Hashable, auxiliary: Hashable) -> Iterator[Move]:
    # Frames are either pending subproblems or moves ready to emit; pushed in
    # reverse so the stack pops them in recursive order.
    stack: List[Tuple[bool, int, Hashable, Hashable, Hashable]] = []
    if num_disks > 0:
        stack.append((False, num_disks, source, target, auxiliary))

    while stack:
        is_move, n, src, dst, aux = stack.pop()
        if is_move or n == 1:
            yield Move(n, src, dst)
            continue

        stack.append((False, n - 1, aux, dst, src))
        stack.append((True, n, src, dst, aux))
        stack.append((False, n - 1, src, aux, dst))


class TowersOfHanoiSolver:
    """
    Chooses between the recursive and explicit-stack generators.

    The recursive generator is used unless ``iterative`` is set or the disk
    count comes close to the interpreter's recursion limit.
    """

    RECURSION_HEADROOM = 50

    def __init__(self, iterative: bool = False):
        self.iterative = iterative

    def _use_stack(self, num_disks: int) -> bool:
        if self.iterative:
            return True
        return num_disks > sys.getrecursionlimit() - self.RECURSION_HEADROOM

    def moves(
        self,
        num_disks: int,
        source: Hashable = Peg.A,
        target: Hashable = Peg.C,
        auxiliary: Hashable = Peg.B,
    ) -> Iterator[Move]:
        _validate_disk_count(num_disks)
        if self._use_stack(num_disks):
            return solve_iterative(num_disks, source, target, auxiliary)
        return solve(num_disks, source, target, auxiliary)

    def solve(
        self,
        num_disks: int,
        source: Hashable = Peg.A,
        target: Hashable = Peg.C,
        auxiliary: Hashable = Peg.B,
    ) -> List[Move]:
        return list(self.moves(num_disks, source, target, auxiliary))


# ============================================================================
# State Simulation
# ============================================================================


class TowersOfHanoiState:
    """
    Explicit three-peg stack model used to replay a move sequence.

    Disks are numbered 1 (smallest) to num_disks (largest); each peg lists its
    disks bottom to top. ``labels`` fixes the peg order used for indices and
    state labels.
    """

    DEFAULT_LABELS = (Peg.A, Peg.B, Peg.C)

    def __init__(
        self,
        num_disks: int = 3,
        pegs: Optional[List[List[int]]] = None,
        labels: Sequence[Hashable] = DEFAULT_LABELS,
        start: Optional[Hashable] = None,
    ):
        _validate_disk_count(num_disks)
        if len(labels) != 3 or len(set(labels)) != 3:
            raise ValueError(f"Expected three distinct peg labels, got {list(labels)}")

        self.num_disks = num_disks
        self.labels = tuple(labels)
        if pegs is None:
            self.pegs = [[], [], []]
            if start is None:
                start = self.labels[0]
            self.pegs[self._normalize_peg(start)] = list(range(num_disks, 0, -1))
        else:
            self.pegs = [list(p) for p in pegs]

    def _normalize_peg(self, peg) -> int:
        if peg in self.labels:
            return self.labels.index(peg)
        if isinstance(peg, int) and not isinstance(peg, bool) and 0 <= peg <= 2:
            return peg
        # "a" for Peg.A, "0" for the first peg
        if isinstance(peg, str):
            for idx, label in enumerate(self.labels):
                if str(label).lower() == peg.lower():
                    return idx
            if peg.isdigit() and 0 <= int(peg) <= 2:
                return int(peg)
        raise ValueError(f"Invalid peg label: {peg!r}")

    def top(self, peg) -> Optional[int]:
        stack = self.pegs[self._normalize_peg(peg)]
        return stack[-1] if stack else None

    def is_valid_move(self, from_peg, to_peg) -> bool:
        from_peg = self._normalize_peg(from_peg)
        to_peg = self._normalize_peg(to_peg)

        if from_peg == to_peg:
            return False
        if not self.pegs[from_peg]:
            return False

        disk = self.pegs[from_peg][-1]
        if not self.pegs[to_peg]:
            return True

        return disk < self.pegs[to_peg][-1]

    def apply_move(self, move: Sequence, step: Optional[int] = None) -> None:
        """
        Apply a ``(disk, from_peg, to_peg)`` move, raising ValueError if it
        breaks a rule. ``step`` is only used in the error message.
        """
        prefix = f"Step {step}: " if step is not None else ""
        if len(move) != 3:
            raise ValueError(f"{prefix}invalid move format {move}")

        disk, from_peg, to_peg = move
        if isinstance(disk, bool) or not isinstance(disk, int) or disk < 1 or disk > self.num_disks:
            raise ValueError(f"{prefix}invalid disk id {disk}")

        from_idx = self._normalize_peg(from_peg)
        to_idx = self._normalize_peg(to_peg)
        if from_idx == to_idx:
            raise ValueError(f"{prefix}source and target peg are both {from_peg}")

        if not self.pegs[from_idx] or self.pegs[from_idx][-1] != disk:
            raise ValueError(
                f"{prefix}disk {disk} is not on top of peg {from_peg}. Current pegs={self}"
            )
        if self.pegs[to_idx] and self.pegs[to_idx][-1] < disk:
            raise ValueError(
                f"{prefix}cannot place disk {disk} on smaller disk {self.pegs[to_idx][-1]}"
            )

        self.pegs[to_idx].append(self.pegs[from_idx].pop())

    def is_goal(self, goal_peg=None) -> bool:
        """All disks on ``goal_peg`` (last label by default), largest at the bottom."""
        if goal_peg is None:
            goal_peg = self.labels[2]
        goal_peg = self._normalize_peg(goal_peg)
        return self.pegs[goal_peg] == list(range(self.num_disks, 0, -1))

    def label(self) -> str:
        """One digit (1..3) per disk, largest disk first."""
        disk_to_peg = {}
        for peg_idx, peg in enumerate(self.pegs):
            for disk in peg:
                disk_to_peg[disk] = peg_idx
        return "".join(str(disk_to_peg[disk] + 1) for disk in range(self.num_disks, 0, -1))

    def as_tuple(self) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
        return tuple(tuple(peg) for peg in self.pegs)

    def __str__(self):
        return " ".join(f"{label}:{peg}" for label, peg in zip(self.labels, self.pegs))

    def __eq__(self, other):
        if not isinstance(other, TowersOfHanoiState):
            return NotImplemented
        return self.pegs == other.pegs


def simulate(
    moves,
    num_disks: int,
    source: Optional[Hashable] = None,
    labels: Sequence[Hashable] = TowersOfHanoiState.DEFAULT_LABELS,
) -> TowersOfHanoiState:
    """Replay ``moves`` from a full tower on ``source`` and return the final state."""
    state = TowersOfHanoiState(num_disks, labels=labels, start=source)
    for step, move in enumerate(moves, start=1):
        state.apply_move(move, step=step)
    return state
