"""
Needleman-Wunsch dynamic programming matrix (linear gap model)

The matrix is one dense arena: an int64 score grid and an int8 grid of
back-pointer directions, both of shape (len(seq_a) + 1, len(seq_b) + 1).
Row 0 and column 0 stand for the empty prefix of each sequence; they are
indices only, never symbols, so any alphabet can be aligned.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .scoring import ScoringScheme


class Direction(IntEnum):
    """Back-pointer stored for each cell"""
    NONE = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 3


# (row delta, col delta) from a cell to its predecessor
OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.DIAGONAL: (1, 1),
    Direction.UP: (1, 0),
    Direction.LEFT: (0, 1),
}

BACKENDS = ("rowwise", "wavefront")


class Cell(NamedTuple):
    """Read-only view of one matrix cell"""
    score: int
    row: int
    col: int
    predecessor: Optional[Tuple[int, int]]


def _as_symbols(seq: Sequence[Any]) -> np.ndarray:
    """1-D array of the symbols of seq, safe for element-wise == comparison"""
    if isinstance(seq, str):
        return np.array(list(seq), dtype=str)
    # filled one by one so tuple-like symbols are not unpacked into a 2-D array
    arr = np.empty(len(seq), dtype=object)
    for k, symbol in enumerate(seq):
        arr[k] = symbol
    return arr


class AlignmentMatrix:
    """Score and back-pointer grid for one global alignment session"""

    def __init__(
        self,
        seq_a: Sequence[Any],
        seq_b: Sequence[Any],
        scheme: Optional[ScoringScheme] = None
    ):
        self.seq_a = seq_a
        self.seq_b = seq_b
        self.scheme = scheme if scheme is not None else ScoringScheme()

        rows, cols = len(seq_a) + 1, len(seq_b) + 1
        self._scores = np.zeros((rows, cols), dtype=np.int64)
        self._pointers = np.full((rows, cols), Direction.NONE, dtype=np.int8)
        self._filled = False

        # Global alignment: every leading gap is paid for
        indel = self.scheme.indel_cost
        self._scores[:, 0] = np.arange(rows, dtype=np.int64) * indel
        self._scores[0, :] = np.arange(cols, dtype=np.int64) * indel

    @classmethod
    def construct(
        cls,
        seq_a: Sequence[Any],
        seq_b: Sequence[Any],
        scheme: Optional[ScoringScheme] = None
    ) -> "AlignmentMatrix":
        """Allocate the grid and seed row 0 / column 0 with gap scores"""
        return cls(seq_a, seq_b, scheme)

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self._scores.shape

    @property
    def is_filled(self) -> bool:
        return self._filled

    @property
    def scores(self) -> np.ndarray:
        """Read-only view of the score grid"""
        view = self._scores.view()
        view.flags.writeable = False
        return view

    @property
    def pointers(self) -> np.ndarray:
        """Read-only view of the back-pointer grid (Direction values)"""
        view = self._pointers.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> Optional[int]:
        """Optimal global alignment score, None until the matrix is filled"""
        if not self._filled:
            return None
        return int(self._scores[-1, -1])

    @property
    def final_cell(self) -> Cell:
        rows, cols = self.shape
        return self.cell(rows - 1, cols - 1)

    def direction(self, row: int, col: int) -> Direction:
        self._check_bounds(row, col)
        return Direction(int(self._pointers[row, col]))

    def cell(self, row: int, col: int) -> Cell:
        direction = self.direction(row, col)
        predecessor = None
        if direction != Direction.NONE:
            d_row, d_col = OFFSETS[direction]
            predecessor = (row - d_row, col - d_col)
        return Cell(int(self._scores[row, col]), row, col, predecessor)

    def set_predecessor(self, row: int, col: int, direction: Direction) -> None:
        """
        Assign a back-pointer to a cell that has none.

        Only used to link boundary cells the recurrence never visits;
        scores are never touched.
        """
        if self.direction(row, col) != Direction.NONE:
            raise ValueError(f"Cell ({row}, {col}) already has a predecessor")
        d_row, d_col = OFFSETS[Direction(direction)]
        if row - d_row < 0 or col - d_col < 0:
            raise ValueError(f"Cell ({row}, {col}) has no {Direction(direction).name} neighbour")
        self._pointers[row, col] = direction

    def _check_bounds(self, row: int, col: int) -> None:
        rows, cols = self.shape
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"Cell ({row}, {col}) outside matrix of shape {self.shape}")

    # ------------------------------------------------------------------
    # forward pass
    # ------------------------------------------------------------------
    def fill(self, backend: str = "rowwise", verbose: bool = False) -> Cell:
        """
        Run the recurrence over every interior cell and return the final cell.

        Ties are broken diagonal first, then up, then left, on every backend.

        Parameters:
        -----------
        backend : str
            "rowwise" walks rows top to bottom, columns left to right.
            "wavefront" evaluates each anti-diagonal as one numpy operation;
            cells on an anti-diagonal do not depend on each other.
        verbose : bool
            Print progress while filling
        """
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {backend} (expected one of {', '.join(BACKENDS)})")

        rows, cols = self.shape
        if verbose:
            print(f"\nFilling alignment matrix for sequences of length {rows - 1} x {cols - 1}")
            print(f"Total cells to compute: {(rows - 1) * (cols - 1)}")
            print("Computing ", end="")

        if backend == "rowwise":
            self._fill_rowwise(verbose)
        else:
            self._fill_wavefront(verbose)
        self._filled = True

        if verbose:
            print(" 100.0%")
            print("✓ Matrix computation complete!")
            print(f"Final score: {self.score} at position {(rows - 1, cols - 1)}")

        return self.final_cell

    def _fill_rowwise(self, verbose: bool) -> None:
        rows, cols = self.shape
        indel = self.scheme.indel_cost
        substitution = self.scheme.substitution
        scores = self._scores

        previous = scores[0].tolist()
        for i in range(1, rows):
            a = self.seq_a[i - 1]
            current = [int(scores[i, 0])] + [0] * (cols - 1)
            pointers = [Direction.NONE] * cols

            for j in range(1, cols):
                diagonal = previous[j - 1] + substitution(a, self.seq_b[j - 1])
                up = previous[j] + indel
                left = current[j - 1] + indel
                best = max(diagonal, up, left)

                current[j] = best
                if diagonal == best:
                    pointers[j] = Direction.DIAGONAL
                elif up == best:
                    pointers[j] = Direction.UP
                else:
                    pointers[j] = Direction.LEFT

            scores[i, 1:] = current[1:]
            self._pointers[i, 1:] = pointers[1:]
            previous = current

            if verbose and i % max(1, (rows - 1) // 10) == 0:
                print("█", end="", flush=True)

    def _fill_wavefront(self, verbose: bool) -> None:
        rows, cols = self.shape
        indel = self.scheme.indel_cost
        scores = self._scores

        equal = np.asarray(
            _as_symbols(self.seq_a)[:, None] == _as_symbols(self.seq_b)[None, :],
            dtype=bool
        ).reshape(rows - 1, cols - 1)
        substitution = np.where(
            equal, self.scheme.match_score, self.scheme.mismatch_score
        ).astype(np.int64)

        last = rows + cols - 2
        for d in range(2, last + 1):
            lo = max(1, d - (cols - 1))
            hi = min(rows - 1, d - 1)
            if lo > hi:
                continue
            i = np.arange(lo, hi + 1)
            j = d - i

            diagonal = scores[i - 1, j - 1] + substitution[i - 1, j - 1]
            up = scores[i - 1, j] + indel
            left = scores[i, j - 1] + indel
            best = np.maximum(diagonal, np.maximum(up, left))

            scores[i, j] = best
            self._pointers[i, j] = np.where(
                diagonal == best, Direction.DIAGONAL,
                np.where(up == best, Direction.UP, Direction.LEFT)
            )

            if verbose and d % max(1, last // 10) == 0:
                print("█", end="", flush=True)

    def __repr__(self) -> str:
        rows, cols = self.shape
        state = "filled" if self._filled else "empty"
        return f"AlignmentMatrix({rows} x {cols}, {state}, {self.scheme})"
