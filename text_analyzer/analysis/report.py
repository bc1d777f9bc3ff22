# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Plain-text rendering of analysis results.

The functions here only build lines. Printing them or writing them to a file
is up to the caller.
"""

from typing import Iterable, Mapping

from text_analyzer.analysis.ranker import RankedEntry, rank_all


FULL_REPORT_HEADER = "Word statistics for the text:"


def render_entry(label: str, count: int, unit: str = "occurrences") -> str:
    return f"{label}: {count} {unit}"


def render_top(ranked: Iterable[RankedEntry], unit: str = "occurrences") -> list[str]:
    """Render ranked entries as `label: count occurrences` lines."""

    return [render_entry(entry.label, entry.count, unit) for entry in ranked]


def render_histogram(
    ranked: Iterable[RankedEntry],
    max_label_width: int = 20,
    marker: str = "*",
) -> list[str]:
    """
    Render ranked entries as a horizontal bar chart.

    Each label is cut to `max_label_width` characters and padded to a fixed
    column, followed by one `marker` per occurrence:

        cat                       |***
        dog                       |**
    """

    column = max_label_width + 5
    lines: list[str] = []
    for entry in ranked:
        label = entry.label[:max_label_width]
        lines.append(f"{label:<{column}} |{marker * entry.count}")

    return lines


def render_full(counts: Mapping[str, int], *, sort: bool = False, unit: str = "occurrences") -> list[str]:
    """
    Render every entry of a frequency map, one line each.

    Without `sort` the lines follow the mapping's own order, which for
    `aggregate()` results is the order of first occurrence in the document.
    """

    if sort:
        return render_top(rank_all(counts), unit)

    return [render_entry(label, count, unit) for label, count in counts.items()]


def render_scores(scores: Mapping[str, int]) -> list[str]:
    """Render theme scores, best first."""

    return render_top(rank_all(scores), unit="keyword hits")
