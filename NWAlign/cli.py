#!/usr/bin/env python3

import argparse
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from NWAlign.seq_alignment import GlobalAligner, Traceback
from NWAlign.seq_alignment.matrix import BACKENDS
from NWAlign.seq_alignment.scoring import (
    DEFAULT_MATCH_SCORE,
    DEFAULT_MISMATCH_SCORE,
    DEFAULT_INDEL_COST,
)
from NWAlign.utils import random_sequence, read_pair, format_matrix, plot_matrix

#usage:
#nwalign [SEQ_A SEQ_B | -f FASTA | -r LEN_A LEN_B] [-m MATCH] [-x MISMATCH] [-g INDEL] [-w WIDTH]

# lengths of the random pair aligned when no sequences are given
DEFAULT_RANDOM_LENGTHS = (34, 32)


def parse_arguments(argv: Optional[List[str]] = None) -> Tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="nwalign",
        description="Global alignment of two sequences (Needleman-Wunsch, linear gap cost)"
    )

    parser.add_argument("sequences", nargs="*", metavar="SEQ", help="two sequences to align")
    parser.add_argument("-f", "--fasta", type=str, help="path to a fasta file; its first two records are aligned")
    parser.add_argument("-r", "--random", nargs=2, type=int, metavar=("LEN_A", "LEN_B"), help="align two random DNA sequences of these lengths")
    parser.add_argument("-s", "--seed", type=int, default=None, help="seed for --random")
    parser.add_argument("-m", "--match", type=int, default=DEFAULT_MATCH_SCORE, help=f"match score (default {DEFAULT_MATCH_SCORE})")
    parser.add_argument("-x", "--mismatch", type=int, default=DEFAULT_MISMATCH_SCORE, help=f"mismatch score (default {DEFAULT_MISMATCH_SCORE})")
    parser.add_argument("-g", "--indel", type=int, default=DEFAULT_INDEL_COST, help=f"cost of each gap position (default {DEFAULT_INDEL_COST})")
    parser.add_argument("-b", "--backend", choices=BACKENDS, default="rowwise", help="matrix fill order")
    parser.add_argument("--show-matrix", action="store_true", help="print the score matrix")
    parser.add_argument("--plot", type=str, metavar="PNG", help="save a heatmap of the score matrix with the traceback path")
    parser.add_argument("-w", "--width", type=int, default=None, help="print the alignment in blocks of this many columns, with score and identity")
    parser.add_argument("-v", "--verbose", action="store_true", help="print progress")
    return parser, parser.parse_args(argv)


def load_sequences(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Tuple[str, str]:
    """
    pick the single sequence source given on the command line
    """
    used = [bool(args.sequences), args.fasta is not None, args.random is not None]
    if sum(used) > 1:
        parser.error("give sequences, --fasta or --random, not more than one")

    if args.sequences:
        if len(args.sequences) != 2:
            parser.error(f"expected two sequences, got {len(args.sequences)}")
        return args.sequences[0], args.sequences[1]

    if args.fasta is not None:
        (_, seq_a), (_, seq_b) = read_pair(args.fasta)
        return seq_a, seq_b

    len_a, len_b = args.random if args.random is not None else DEFAULT_RANDOM_LENGTHS
    seed_b = None if args.seed is None else args.seed + 1
    return random_sequence(len_a, seed=args.seed), random_sequence(len_b, seed=seed_b)


def main(argv: Optional[List[str]] = None) -> int:
    parser, args = parse_arguments(argv)
    if args.width is not None and args.width < 1:
        parser.error(f"--width must be positive, got {args.width}")

    try:
        seq_a, seq_b = load_sequences(parser, args)
    except (ValueError, OSError) as err:
        parser.error(str(err))

    aligner = GlobalAligner(args.match, args.mismatch, args.indel, backend=args.backend)
    result = aligner.align(seq_a, seq_b, verbose=args.verbose)

    if args.show_matrix:
        print(format_matrix(result.matrix))
        print()

    # alignment lines then score
    if args.width is not None:
        result.view(args.width)
    else:
        for line in result.lines():
            print(line)
    print(f"The alignment score is {result.score}")

    if args.plot:
        traceback = Traceback(moves=result.moves, repairs=result.repairs)
        fig = plot_matrix(result.matrix, traceback, title=f"score {result.score}")
        fig.savefig(args.plot)
        plt.close(fig)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
