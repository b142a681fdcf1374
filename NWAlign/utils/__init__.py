"""
Helpers around the aligner: test sequences, FASTA input, matrix display
"""

from .sequences import random_sequence, DNA_ALPHABET
from .seq_io import read_records, read_fasta, read_pair
from .display import format_matrix, print_matrix, plot_matrix

__all__ = [
    "random_sequence",
    "DNA_ALPHABET",
    "read_fasta",
    "read_pair",
    "read_records",
    "format_matrix",
    "print_matrix",
    "plot_matrix"
]
