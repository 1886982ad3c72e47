"""Plot the distribution of rolls-to-win across a batch of games."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_rolls_chart(
    roll_counts: list[int],
    output_path: str = "rolls_histogram.png",
    title: str = "Snakes & Ladders: Rolls to Win",
) -> str:
    """Create a histogram of roll counts with min/avg/max marked.

    Returns the path to the saved PNG.
    """
    if not roll_counts:
        raise ValueError("No games to chart")

    lo, hi = min(roll_counts), max(roll_counts)
    avg = sum(roll_counts) / len(roll_counts)

    fig, ax = plt.subplots(figsize=(10, 5))
    bins = list(range(lo, hi + 2))
    ax.hist(roll_counts, bins=bins, color="#4A90D9", edgecolor="white", align="left")

    for value, label, style in (
        (lo, f"min {lo}", ":"),
        (avg, f"avg {avg:.1f}", "--"),
        (hi, f"max {hi}", ":"),
    ):
        ax.axvline(value, color="#333333", linestyle=style, linewidth=1)
        ax.text(
            value, ax.get_ylim()[1] * 0.95, f" {label}",
            fontsize=10, fontweight="bold", va="top",
        )

    ax.set_xlabel("Rolls to win")
    ax.set_ylabel("Games")
    ax.set_title(f"{title} ({len(roll_counts)} games)", fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
