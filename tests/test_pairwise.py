import asyncio

import pytest

from NWAlign import global_align, GlobalAligner, AlignmentResult, ScoringScheme
from NWAlign.utils import random_sequence


def test_perfect_match():
    result = global_align("AC", "AC", match_score=1, mismatch_score=-1, indel_cost=-1)
    assert isinstance(result, AlignmentResult)
    assert result.score == 2
    assert result.lines() == ("A C", "| |", "A C")
    assert result.seq1_aligned == "AC"
    assert result.match_string == "||"
    assert result.identity == 1.0
    assert result.gaps == 0
    assert result.nmatch() == 2


def test_all_mismatch_tie_break():
    result = global_align("AC", "GT", 2, -1, -2)
    assert result.score == -2
    assert result.top == "A C"
    assert result.bottom == "G T"
    assert result.match_line == "   "
    assert result.nmatch() == 0


def test_boundary_repair_scenario():
    result = global_align("", "AC", 1, -1, -2)
    assert result.score == -4
    assert result.repairs == 2
    assert result.lines() == ("- -", "   ", "A C")
    assert result.seq1_aligned == "--"
    assert result.gaps == 2


def test_default_scheme():
    aligner = GlobalAligner()
    assert aligner.scheme == ScoringScheme(2, -1, -2)
    assert aligner.backend == "rowwise"


def test_from_scheme():
    aligner = GlobalAligner.from_scheme(ScoringScheme(3, -3, -1), backend="wavefront")
    assert aligner.scheme.match_score == 3
    assert aligner.backend == "wavefront"


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        GlobalAligner(backend="gpu")


def test_score_only():
    aligner = GlobalAligner(1, -1, -1)
    assert aligner.align("AC", "AC", score_only=True) == 2
    assert aligner.score("GATTACA", "GATTACA") == 7


def test_backends_give_same_alignment():
    a = random_sequence(80, seed=31)
    b = random_sequence(70, seed=32)
    rowwise = GlobalAligner(backend="rowwise").align(a, b)
    wavefront = GlobalAligner(backend="wavefront").align(a, b)
    assert rowwise.score == wavefront.score
    assert rowwise.lines() == wavefront.lines()


def test_repeated_runs_identical():
    a = random_sequence(25, seed=1)
    b = random_sequence(30, seed=2)
    first = global_align(a, b)
    second = global_align(a, b)
    assert first.score == second.score
    assert first.lines() == second.lines()


def test_gapped_alignment_statistics():
    result = global_align("ACGT", "AGT", 1, -1, -1)
    assert result.score == 2
    assert result.seq1_aligned == "ACGT"
    assert result.seq2_aligned == "A-GT"
    assert result.gaps == 1
    assert result.identity == pytest.approx(0.75)
    assert result.matrix is not None and result.matrix.score == 2


def test_list_sequences():
    result = global_align(["ATG", "CCC"], ["ATG"], 2, -1, -2)
    assert result.score == 0
    assert result.lines() == ("ATG CCC", "|||    ", "ATG ---")
    assert len({len(line) for line in result.lines()}) == 1
    assert result.seq1_aligned == "ATGCCC"
    assert result.match_string == "|||   "
    assert result.seq2_aligned == "ATG---"


def test_integer_symbols_keep_lines_equal_length():
    result = global_align([10, 20], [10, 20], 1, -1, -1)
    assert result.score == 2
    assert result.lines() == ("10 20", "|| ||", "10 20")

    # second column is one character wide: 5 over a gap
    result = global_align([10, 5], [10], 1, -1, -1)
    assert result.lines() == ("10 5", "||  ", "10 -")


def test_mixed_width_mismatch_column():
    result = global_align([7], [1234], 1, -1, -1)
    assert result.lines() == ("7   ", "    ", "1234")


def test_str_and_plot(capsys):
    result = global_align("ACGT", "AGT", 1, -1, -1)
    assert "Alignment Score: 2" in str(result)
    result.view(width=2)
    out = capsys.readouterr().out
    assert "seq1: AC" in out
    assert "seq1: GT" in out
    assert "seq2: A-" in out


def test_verbose_banner(capsys):
    GlobalAligner(1, -1, -1).align("AC", "AC", verbose=True)
    out = capsys.readouterr().out
    assert "GLOBAL SEQUENCE ALIGNMENT" in out
    assert "ALIGNMENT RESULTS" in out
    assert "Score: 2" in out


def test_align_async():
    aligner = GlobalAligner(1, -1, -1)
    result = asyncio.run(aligner.align_async("AC", "AC"))
    assert result.score == 2
    assert asyncio.run(aligner.align_async("AC", "AC", score_only=True)) == 2
