"""
Linear scoring scheme for global alignment
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


# DNA demo scheme: match=2, mismatch=-1, indel=-2
DEFAULT_MATCH_SCORE = 2
DEFAULT_MISMATCH_SCORE = -1
DEFAULT_INDEL_COST = -2


@dataclass(frozen=True)
class ScoringScheme:
    """
    Match reward, mismatch penalty and per-position gap cost.

    Every gap position costs ``indel_cost`` regardless of run length
    (linear gap model). Signs are not checked: the aligner maximises
    whatever values are supplied.
    """
    match_score: int = DEFAULT_MATCH_SCORE
    mismatch_score: int = DEFAULT_MISMATCH_SCORE
    indel_cost: int = DEFAULT_INDEL_COST

    def substitution(self, a: Any, b: Any) -> int:
        """Score for pairing symbol a with symbol b"""
        return self.match_score if a == b else self.mismatch_score

    def __str__(self) -> str:
        return (
            f"(Match, Mismatch, Indel) = "
            f"({self.match_score}, {self.mismatch_score}, {self.indel_cost})"
        )
