import pytest

from NWAlign.cli import main


def _run(capsys, argv):
    assert main(argv) == 0
    return capsys.readouterr().out.splitlines()


def test_two_sequences(capsys):
    out = _run(capsys, ["AC", "AC", "-m", "1", "-x", "-1", "-g", "-1"])
    assert out == ["A C", "| |", "A C", "The alignment score is 2"]


def test_show_matrix(capsys):
    out = _run(capsys, ["AC", "GT", "--show-matrix"])
    assert out[0] == "       -   G   T"
    assert out[-1] == "The alignment score is -2"


def test_wavefront_backend(capsys):
    out = _run(capsys, ["GATTACA", "GCATGCT", "--backend", "wavefront"])
    ref = _run(capsys, ["GATTACA", "GCATGCT"])
    assert out == ref


def test_fasta_input(tmp_path, capsys):
    path = tmp_path / "pair.fasta"
    path.write_text(">a\nAC\n>b\nAC\n")
    out = _run(capsys, ["--fasta", str(path), "-m", "1"])
    assert out[:3] == ["A C", "| |", "A C"]


def test_random_is_seeded(capsys):
    first = _run(capsys, ["--random", "12", "10", "--seed", "4"])
    second = _run(capsys, ["--random", "12", "10", "--seed", "4"])
    assert first == second
    assert first[-1].startswith("The alignment score is ")


def test_default_random_demo(capsys):
    out = _run(capsys, [])
    assert len(out) == 4
    top, _, bottom, _ = out
    assert len(top.replace(" ", "").replace("-", "")) == 34
    assert len(bottom.replace(" ", "").replace("-", "")) == 32


def test_plot_written(tmp_path, capsys):
    png = tmp_path / "matrix.png"
    _run(capsys, ["ACGT", "AGT", "--plot", str(png)])
    assert png.exists() and png.stat().st_size > 0


@pytest.mark.parametrize("argv", [
    ["ACGT"],
    ["A", "C", "G"],
    ["A", "C", "--random", "3", "3"],
])
def test_bad_sequence_sources(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_missing_fasta(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--fasta", str(tmp_path / "nope.fasta")])
    assert exc.value.code == 2


def test_width_prints_blocks(capsys):
    out = _run(capsys, ["ACGT", "AGT", "-m", "1", "-x", "-1", "-g", "-1", "--width", "2"])
    assert "seq1: AC" in out
    assert "seq2: A-" in out
    assert "seq1: GT" in out
    assert "Identity: 75.00%" in out
    assert out[-1] == "The alignment score is 2"


def test_width_must_be_positive():
    with pytest.raises(SystemExit) as exc:
        main(["AC", "AC", "--width", "0"])
    assert exc.value.code == 2
