# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Word frequency counting."""

from typing import Iterable

from text_analyzer.analysis.sanitizer import FORBIDDEN_CHARACTERS, sanitize


def aggregate(tokens: Iterable[str], forbidden: Iterable[str] = FORBIDDEN_CHARACTERS) -> dict[str, int]:
    """Count sanitized words.

    Tokens that are empty after removing forbidden characters (for example a
    lone `-`) are skipped. Keys keep the order in which words first occur in
    the document.
    """

    forbidden = tuple(forbidden)
    counts: dict[str, int] = {}
    for token in tokens:
        word = sanitize(token, forbidden)
        if not word:
            continue
        counts[word] = counts.get(word, 0) + 1

    return counts
