"""
Diagnostic views of an alignment matrix: text table and heatmap
"""
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from ..seq_alignment.matrix import AlignmentMatrix
from ..seq_alignment.traceback import Traceback

# header shown for the empty-prefix row and column
EMPTY_PREFIX_LABEL = "-"


def _labels(seq) -> List[str]:
    return [EMPTY_PREFIX_LABEL] + [str(s) for s in seq]


# ---------- text ----------
def format_matrix(matrix: AlignmentMatrix, width: Optional[int] = None) -> str:
    """
    Score grid as a right-aligned table.
    Column headers are sequence B, row headers sequence A.
    """
    scores = matrix.scores
    row_labels = _labels(matrix.seq_a)
    col_labels = _labels(matrix.seq_b)

    if width is None:
        widest = max(len(str(int(v))) for v in scores.flat)
        widest = max([widest] + [len(x) for x in row_labels + col_labels])
        width = max(4, widest + 1)

    lines = ["".join(f"{x:>{width}}" for x in [""] + col_labels)]
    for label, row in zip(row_labels, scores):
        lines.append(f"{label:>{width}}" + "".join(f"{int(v):>{width}d}" for v in row))
    return "\n".join(lines)


def print_matrix(matrix: AlignmentMatrix, width: Optional[int] = None) -> None:
    print(format_matrix(matrix, width))


# ---------- heatmap ----------
def plot_matrix(
    matrix: AlignmentMatrix,
    traceback: Optional[Traceback] = None,
    figsize: Tuple[int, int] = (8, 6),
    annotate: bool = True,
    font_size: int = 9,
    cmap: str = "viridis",
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the score grid as a heatmap.
    - Sequence A down the left, sequence B along the top.
    - Scores written into each cell when annotate=True.
    - Traceback path drawn on top when given.
    """
    scores = matrix.scores
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(scores, cmap=cmap, aspect="auto")
    fig.colorbar(im, ax=ax, label="score")

    ax.set_xticks(range(scores.shape[1]))
    ax.set_xticklabels(_labels(matrix.seq_b), fontsize=font_size)
    ax.set_yticks(range(scores.shape[0]))
    ax.set_yticklabels(_labels(matrix.seq_a), fontsize=font_size)
    ax.xaxis.tick_top()

    if annotate:
        lo, hi = scores.min(), scores.max()
        mid = (lo + hi) / 2.0
        rows, cols = scores.shape
        for i in range(rows):
            for j in range(cols):
                v = int(scores[i, j])
                ax.text(j, i, f"{v}", ha="center", va="center",
                        fontsize=font_size - 1, color="white" if v < mid else "black")

    if traceback is not None:
        path = traceback.path
        ax.plot([c for _, c in path], [r for r, _ in path], "r-o", lw=2, ms=4)

    if title:
        ax.set_title(title, fontsize=font_size + 2, fontweight="bold")

    plt.tight_layout()
    return fig
