"""
NWAlign - Needleman-Wunsch global sequence alignment
"""

from .seq_alignment import (
    ScoringScheme,
    AlignmentMatrix,
    GlobalAligner,
    AlignmentResult,
    global_align,
    reconstruct
)
from .utils import random_sequence, format_matrix, plot_matrix, read_fasta

__version__ = "0.1.0"

__all__ = [
    "ScoringScheme",
    "AlignmentMatrix",
    "GlobalAligner",
    "AlignmentResult",
    "global_align",
    "reconstruct",
    "random_sequence",
    "format_matrix",
    "plot_matrix",
    "read_fasta"
]
