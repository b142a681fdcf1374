import pytest

from NWAlign.utils import read_fasta, read_pair, read_records


def test_read_fasta_multiline(tmp_path):
    path = tmp_path / "seqs.fasta"
    path.write_text(">first description\nACG\nTT\n\n>second\nGGA\n")
    assert read_fasta(str(path)) == {"first": "ACGTT", "second": "GGA"}


def test_read_records_keeps_order_and_blank_headers(tmp_path):
    path = tmp_path / "seqs.fasta"
    path.write_text(">\nAC\n>b\nGT\n")
    assert read_records(str(path)) == [("seq1", "AC"), ("b", "GT")]


def test_read_pair(tmp_path):
    path = tmp_path / "pair.fasta"
    path.write_text(">x\nAC\n>y\nGT\n>z\nAAA\n")
    assert read_pair(str(path)) == (("x", "AC"), ("y", "GT"))


def test_read_pair_with_repeated_header(tmp_path):
    path = tmp_path / "dup.fasta"
    path.write_text(">seq\nAC\n>seq\nGT\n")
    assert read_pair(str(path)) == (("seq", "AC"), ("seq", "GT"))
    assert read_fasta(str(path)) == {"seq": "GT"}


def test_read_pair_needs_two(tmp_path):
    path = tmp_path / "one.fasta"
    path.write_text(">only\nACGT\n")
    with pytest.raises(ValueError):
        read_pair(str(path))
