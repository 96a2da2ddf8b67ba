"""
Matplotlib charts for the storm report.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter


def plot_decade_histogram(
    decades: pd.DataFrame,
    out_path: Optional[str | Path] = None,
    show: bool = False,
) -> Tuple[plt.Figure, plt.Axes, Optional[Path]]:
    """Bar chart of storm records per decade bucket.

    decades: output of decade_histogram (label, start, end, count).
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    positions = list(range(len(decades)))
    ax.bar(positions, decades["count"], color="#2E6DA4", edgecolor="#1F3A5F")
    ax.set_xticks(positions)
    ax.set_xticklabels(decades["label"])
    ax.set_title("Storm event records by decade")
    ax.set_xlabel("Begin date")
    ax.set_ylabel("Records")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:,.0f}"))
    for x, n in zip(positions, decades["count"]):
        ax.annotate(f"{int(n):,}", (x, n), ha="center", va="bottom", fontsize=8)
    fig.tight_layout()

    saved = None
    if out_path:
        saved = Path(out_path)
        saved.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(saved, dpi=150, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig, ax, saved
