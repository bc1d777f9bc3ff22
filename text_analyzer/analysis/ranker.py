# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Top-N ranking for word frequencies and theme scores.

Entries are ordered by count (descending). Equal counts are ordered by label
(ascending) so that the output never depends on dictionary insertion order.
"""

from typing import Mapping, NamedTuple


class RankRequestError(ValueError):
    """Raised when a ranking is requested for a non-positive number of entries."""

    pass


class RankedEntry(NamedTuple):
    label: str
    count: int


def rank_key(item: tuple[str, int]) -> tuple[int, str]:
    label, count = item
    return (-count, label)


def rank_all(counts: Mapping[str, int]) -> list[RankedEntry]:
    """Return all entries of a mapping in rank order."""

    return [RankedEntry(label, count) for label, count in sorted(counts.items(), key=rank_key)]


def top_n(counts: Mapping[str, int], n: int) -> list[RankedEntry]:
    """
    Return the `n` highest ranked entries of a mapping.

    Args:
        counts:
            Word frequencies or theme scores.
        n:
            Number of entries to return. Larger values than the mapping size
            simply return every entry.

    Returns:
        Up to `n` entries, count descending, label ascending on ties.

    Raises:
        RankRequestError:
            If `n` is not a positive integer.
    """

    if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
        raise RankRequestError(f"Number of entries must be a positive integer, got {n!r}")

    return rank_all(counts)[:n]
