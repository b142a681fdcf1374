"""
Pairwise Global Alignment Module
Needleman-Wunsch with a linear gap model
"""

from __future__ import annotations
import asyncio
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple, Union

from .scoring import (
    ScoringScheme,
    DEFAULT_MATCH_SCORE,
    DEFAULT_MISMATCH_SCORE,
    DEFAULT_INDEL_COST,
)
from .matrix import AlignmentMatrix, BACKENDS
from .traceback import Move, MoveType, Traceback, reconstruct, join_columns


@dataclass
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: str
    seq2_aligned: str
    match_string: str
    score: int
    top: str
    match_line: str
    bottom: str
    moves: List[Move]
    repairs: int
    identity: float
    gaps: int
    seq1_original: Sequence[Any]
    seq2_original: Sequence[Any]
    scheme: ScoringScheme
    matrix: Optional[AlignmentMatrix] = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        """String representation of alignment"""
        return (
            f"Alignment Score: {self.score}\n"
            f"Scheme: {self.scheme}\n"
            f"Identity: {self.identity:.2%}\n"
            f"Gaps: {self.gaps}\n"
            f"Length: {len(self.moves)}\n"
        )

    def lines(self) -> Tuple[str, str, str]:
        """(top, match, bottom) display lines"""
        return self.top, self.match_line, self.bottom

    def plot(self, width: int = 80) -> None:
        """Display alignment with match indicators"""
        lines = []
        lines.append("")
        lines.append(f"Score: {self.score}")
        lines.append(f"Identity: {self.identity:.2%}")
        lines.append(f"Gaps: {self.gaps}")
        lines.append("")

        for start in range(0, len(self.seq1_aligned), width):
            end = min(start + width, len(self.seq1_aligned))
            lines.append(f"seq1: {self.seq1_aligned[start:end]}")
            lines.append(f"      {self.match_string[start:end]}")
            lines.append(f"seq2: {self.seq2_aligned[start:end]}")
            lines.append("")

        for line in lines:
            print(line)

    def view(self, width: int = 80) -> None:
        """Alias for plot method"""
        self.plot(width)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return sum(1 for m in self.moves if m.is_match)


def _compact(moves: List[Move]) -> Tuple[str, str, str]:
    """Padded columns, no separators"""
    seq1, match, seq2 = join_columns(moves, separator="")
    return seq1, seq2, match


def _calculate_statistics(moves: List[Move]) -> Tuple[float, int]:
    """Identity over alignment length and number of gap columns"""
    matches = sum(1 for m in moves if m.is_match)
    gaps = sum(1 for m in moves if m.kind != MoveType.DIAGONAL)
    identity = matches / len(moves) if len(moves) > 0 else 0.0
    return identity, gaps


class GlobalAligner:
    """Needleman-Wunsch global aligner with a linear gap cost"""

    def __init__(
        self,
        match_score: int = DEFAULT_MATCH_SCORE,
        mismatch_score: int = DEFAULT_MISMATCH_SCORE,
        indel_cost: int = DEFAULT_INDEL_COST,
        backend: str = "rowwise"
    ):
        """
        Parameters:
        -----------
        match_score : int
            Reward for a matching pair (default 2)
        mismatch_score : int
            Penalty for a mismatching pair (default -1)
        indel_cost : int
            Cost of every gap position (default -2)
        backend : str
            Matrix fill order, "rowwise" or "wavefront"
        """
        if backend not in BACKENDS:
            raise ValueError(f"backend must be one of {', '.join(BACKENDS)}")
        self.scheme = ScoringScheme(match_score, mismatch_score, indel_cost)
        self.backend = backend

    @classmethod
    def from_scheme(cls, scheme: ScoringScheme, backend: str = "rowwise") -> "GlobalAligner":
        return cls(scheme.match_score, scheme.mismatch_score, scheme.indel_cost, backend)

    def build_matrix(
        self,
        seq1: Sequence[Any],
        seq2: Sequence[Any],
        verbose: bool = False
    ) -> AlignmentMatrix:
        """Construct and fill the DP matrix"""
        matrix = AlignmentMatrix.construct(seq1, seq2, self.scheme)
        if verbose:
            rows, cols = matrix.shape
            print(f"✓ Matrix initialized: {rows} x {cols}")
        matrix.fill(self.backend, verbose)
        return matrix

    def score(self, seq1: Sequence[Any], seq2: Sequence[Any]) -> int:
        """Optimal global alignment score only, no traceback"""
        return self.build_matrix(seq1, seq2).score

    def align(
        self,
        seq1: Sequence[Any],
        seq2: Sequence[Any],
        score_only: bool = False,
        verbose: bool = False
    ) -> Union[AlignmentResult, int]:
        """
        Perform global alignment

        Parameters:
        -----------
        seq1 : sequence
            First sequence (top line)
        seq2 : sequence
            Second sequence (bottom line)
        score_only : bool
            If True, return only the alignment score
        verbose : bool
            If True, display progress during alignment

        Returns:
        --------
        AlignmentResult or int
            Alignment result object or score if score_only=True
        """
        if verbose:
            print("\n" + "=" * 70)
            print("GLOBAL SEQUENCE ALIGNMENT (Needleman-Wunsch)")
            print("=" * 70)
            print(f"Sequence 1: {seq1}")
            print(f"Sequence 2: {seq2}")
            print(f"{self.scheme}")
            print(f"Backend: {self.backend}")
            print("=" * 70)

        matrix = self.build_matrix(seq1, seq2, verbose)
        final_cell = matrix.final_cell

        if score_only:
            if verbose:
                print("=" * 70 + "\n")
            return final_cell.score

        traceback = reconstruct(matrix, final_cell, verbose)
        result = self._make_result(seq1, seq2, matrix, traceback)

        if verbose:
            print("\nALIGNMENT RESULTS")
            print("=" * 70)
            print(f"Score: {result.score}")
            print(f"Identity: {result.identity:.2%} ({result.nmatch()} matches)")
            print(f"Gaps: {result.gaps}")
            print(f"Length: {len(result.moves)}")
            print("=" * 70 + "\n")

        return result

    async def align_async(
        self,
        seq1: Sequence[Any],
        seq2: Sequence[Any],
        score_only: bool = False
    ) -> Union[AlignmentResult, int]:
        """
        Run align() in the default thread pool executor.
        (Does not speed up the alignment itself; only keeps the event loop free.)
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, lambda: self.align(seq1, seq2, score_only=score_only)
        )

    def _make_result(
        self,
        seq1: Sequence[Any],
        seq2: Sequence[Any],
        matrix: AlignmentMatrix,
        traceback: Traceback
    ) -> AlignmentResult:
        seq1_aligned, seq2_aligned, match_string = _compact(traceback.moves)
        top, match_line, bottom = traceback.lines()
        identity, gaps = _calculate_statistics(traceback.moves)

        return AlignmentResult(
            seq1_aligned=seq1_aligned,
            seq2_aligned=seq2_aligned,
            match_string=match_string,
            score=matrix.score,
            top=top,
            match_line=match_line,
            bottom=bottom,
            moves=traceback.moves,
            repairs=traceback.repairs,
            identity=identity,
            gaps=gaps,
            seq1_original=seq1,
            seq2_original=seq2,
            scheme=self.scheme,
            matrix=matrix
        )


# MAIN CONVENIENCE FUNCTION
def global_align(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    match_score: int = DEFAULT_MATCH_SCORE,
    mismatch_score: int = DEFAULT_MISMATCH_SCORE,
    indel_cost: int = DEFAULT_INDEL_COST,
    backend: str = "rowwise",
    verbose: bool = False
) -> AlignmentResult:
    """
    Needleman-Wunsch global alignment with a linear gap cost

    Parameters:
    -----------
    seq1, seq2 : sequence
        Sequences to align; any items comparable with ==
    match_score, mismatch_score, indel_cost : int
        Scoring scheme (default 2, -1, -2)
    backend : str
        "rowwise" (default) or "wavefront"
    verbose : bool
        Show progress (default False)

    Returns:
    --------
    AlignmentResult

    Examples:
    ---------
    >>> result = global_align("AC", "AC", 1, -1, -1)
    >>> result.score
    2
    >>> print(result.top)
    A C
    """
    aligner = GlobalAligner(
        match_score=match_score,
        mismatch_score=mismatch_score,
        indel_cost=indel_cost,
        backend=backend
    )
    return aligner.align(seq1, seq2, verbose=verbose)
