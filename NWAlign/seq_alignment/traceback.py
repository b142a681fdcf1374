"""
Traceback: walk back-pointers from the final cell to the origin and build
the three display lines of the alignment.

Cells on row 0 and column 0 never receive a back-pointer from the forward
pass. When the walk lands on one of them it switches to REPAIRING, links
the cell to its boundary neighbour and carries on WALKING, so both
sequences are always consumed completely.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from .matrix import AlignmentMatrix, Cell, Direction

GAP_SYMBOL = "-"
MATCH_SYMBOL = "|"
BLANK_SYMBOL = " "
COLUMN_SEPARATOR = " "


class MoveType(Enum):
    DIAGONAL = "diagonal"      # one symbol from each sequence
    VERTICAL = "vertical"      # symbol from A over a gap
    HORIZONTAL = "horizontal"  # gap over a symbol from B


class TracebackState(Enum):
    WALKING = "walking"
    REPAIRING = "repairing"


@dataclass(frozen=True)
class Move:
    """One alignment column"""
    kind: MoveType
    top: Any
    bottom: Any
    marker: str

    @property
    def consumes_a(self) -> bool:
        return self.kind != MoveType.HORIZONTAL

    @property
    def consumes_b(self) -> bool:
        return self.kind != MoveType.VERTICAL

    @property
    def is_match(self) -> bool:
        return self.marker == MATCH_SYMBOL

    @property
    def width(self) -> int:
        return max(len(str(self.top)), len(str(self.bottom)), 1)

    def cells(self) -> Tuple[str, str, str]:
        """(top, marker, bottom) padded to the column width"""
        w = self.width
        top = GAP_SYMBOL * w if self.kind == MoveType.HORIZONTAL else str(self.top).ljust(w)
        bottom = GAP_SYMBOL * w if self.kind == MoveType.VERTICAL else str(self.bottom).ljust(w)
        return top, self.marker * w, bottom


@dataclass
class Traceback:
    """Moves from alignment start to end, plus the number of boundary repairs"""
    moves: List[Move] = field(default_factory=list)
    repairs: int = 0

    def lines(self, separator: str = COLUMN_SEPARATOR) -> Tuple[str, str, str]:
        """(top, match, bottom) display lines, one column per move"""
        return join_columns(self.moves, separator)

    @property
    def path(self) -> List[Tuple[int, int]]:
        """Matrix coordinates visited, origin first"""
        row = sum(1 for m in self.moves if m.consumes_a)
        col = sum(1 for m in self.moves if m.consumes_b)
        out = [(row, col)]
        for m in reversed(self.moves):
            row -= int(m.consumes_a)
            col -= int(m.consumes_b)
            out.append((row, col))
        return out[::-1]


def join_columns(moves: List[Move], separator: str = COLUMN_SEPARATOR) -> Tuple[str, str, str]:
    """
    Join padded move cells into (top, match, bottom).
    Every column is as wide as its widest symbol, so the lines stay equal length.
    """
    cells = [m.cells() for m in moves]
    return tuple(separator.join(c[k] for c in cells) for k in range(3))


def _classify(matrix: AlignmentMatrix, cell: Cell) -> Move:
    """Move from cell's predecessor to cell"""
    prev_row, prev_col = cell.predecessor
    d_row, d_col = cell.row - prev_row, cell.col - prev_col

    if d_row == 1 and d_col == 1:
        a = matrix.seq_a[cell.row - 1]
        b = matrix.seq_b[cell.col - 1]
        marker = MATCH_SYMBOL if a == b else BLANK_SYMBOL
        return Move(MoveType.DIAGONAL, a, b, marker)
    if d_row == 1:
        return Move(MoveType.VERTICAL, matrix.seq_a[cell.row - 1], GAP_SYMBOL, BLANK_SYMBOL)
    return Move(MoveType.HORIZONTAL, GAP_SYMBOL, matrix.seq_b[cell.col - 1], BLANK_SYMBOL)


def _repair(matrix: AlignmentMatrix, cell: Cell) -> Cell:
    """Link a boundary cell without predecessor to its boundary neighbour"""
    if cell.row == 0:
        matrix.set_predecessor(cell.row, cell.col, Direction.LEFT)
    elif cell.col == 0:
        matrix.set_predecessor(cell.row, cell.col, Direction.UP)
    else:
        raise ValueError(
            f"Cell ({cell.row}, {cell.col}) has no predecessor; "
            "fill the matrix before reconstructing"
        )
    return matrix.cell(cell.row, cell.col)


def reconstruct(
    matrix: AlignmentMatrix,
    final_cell: Optional[Cell] = None,
    verbose: bool = False
) -> Traceback:
    """
    Walk from final_cell back to (0, 0) and collect one move per step.

    Parameters:
    -----------
    matrix : AlignmentMatrix
        A filled matrix. Boundary pointers set during repair are written
        back into it.
    final_cell : Cell, optional
        Starting cell (default: the bottom-right cell)
    verbose : bool
        Print progress

    Returns:
    --------
    Traceback
        Moves in alignment order and the number of repairs performed
    """
    if not matrix.is_filled:
        raise ValueError("Matrix has not been filled; call fill() first")

    cell = final_cell if final_cell is not None else matrix.final_cell
    backwards: List[Move] = []
    repairs = 0
    state = TracebackState.WALKING

    if verbose:
        print(f"\nPerforming traceback from ({cell.row}, {cell.col})")

    while True:
        if state is TracebackState.WALKING:
            if cell.predecessor is None:
                if cell.row == 0 and cell.col == 0:
                    break
                state = TracebackState.REPAIRING
                continue
            backwards.append(_classify(matrix, cell))
            cell = matrix.cell(*cell.predecessor)
        else:
            cell = _repair(matrix, cell)
            repairs += 1
            state = TracebackState.WALKING

    backwards.reverse()

    if verbose:
        print(f"✓ Traceback complete! Alignment length: {len(backwards)} ({repairs} boundary repairs)")

    return Traceback(moves=backwards, repairs=repairs)
