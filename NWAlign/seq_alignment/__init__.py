"""
Sequence Alignment Module
Provides Needleman-Wunsch global alignment with a linear gap model
"""

from .scoring import ScoringScheme
from .matrix import AlignmentMatrix, Cell, Direction
from .traceback import (
    Move,
    MoveType,
    Traceback,
    TracebackState,
    reconstruct
)
from .pairwise import (
    GlobalAligner,
    AlignmentResult,
    global_align
)

__all__ = [
    "ScoringScheme",
    "AlignmentMatrix",
    "Cell",
    "Direction",
    "Move",
    "MoveType",
    "Traceback",
    "TracebackState",
    "reconstruct",
    "GlobalAligner",
    "AlignmentResult",
    "global_align"
]
