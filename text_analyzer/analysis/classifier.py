# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Keyword-based theme classification.

Every token is checked against every keyword of every theme. A keyword counts
as a hit when it is a substring of the (lower-cased, unsanitized) token, so
`goal` matches `goalkeeper`. Each hit adds one point to its theme; one token
can score for several themes and several times for the same theme.

The theme with the highest score wins. Ties go to the theme listed first in
the dictionary. A document without any hit is `Undetermined`.
"""

from dataclasses import dataclass, field
from typing import Iterable, Union

from text_analyzer.dictionary import ThemeDictionary


NO_THEME_LABEL = "no theme found"


@dataclass(frozen=True)
class ThemeMatch:
    """
    A theme was determined.

    Attributes:
        theme:
            Winning theme name.
        score:
            Number of keyword hits of the winning theme.
        scores:
            Scores of all themes in dictionary order.
    """

    theme: str
    score: int
    scores: dict[str, int] = field(default_factory=dict)

    def describe(self) -> str:
        return self.theme


@dataclass(frozen=True)
class Undetermined:
    """No keyword of any theme occurred in the document."""

    scores: dict[str, int] = field(default_factory=dict)

    def describe(self) -> str:
        return NO_THEME_LABEL


Classification = Union[ThemeMatch, Undetermined]


def score_themes(tokens: Iterable[str], dictionary: ThemeDictionary) -> dict[str, int]:
    """
    Count keyword hits per theme.

    Args:
        tokens:
            Lower-cased tokens (see `tokenize`). Consumed once.
        dictionary:
            Theme dictionary.

    Returns:
        Mapping theme -> hit count with one entry per theme, in dictionary
        order.
    """

    lowered = [(spec.theme, [w.lower() for w in spec.words]) for spec in dictionary]
    scores = {theme: 0 for theme, _words in lowered}

    for token in tokens:
        for theme, words in lowered:
            for word in words:
                if word in token:
                    scores[theme] += 1

    return scores


def pick_theme(scores: dict[str, int]) -> Classification:
    """Select the best scoring theme; earlier themes win ties."""

    best_theme: str | None = None
    best_score = 0
    for theme, score in scores.items():
        if score > best_score:
            best_theme = theme
            best_score = score

    if best_theme is None:
        return Undetermined(scores=scores)

    return ThemeMatch(theme=best_theme, score=best_score, scores=scores)


def classify(tokens: Iterable[str], dictionary: ThemeDictionary) -> Classification:
    """Classify a token stream into the dictionary theme with most keyword hits."""

    return pick_theme(score_themes(tokens, dictionary))
