# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Analysis session bound to one theme dictionary."""

from dataclasses import dataclass, field

from text_analyzer.analysis.classifier import Classification, classify, score_themes
from text_analyzer.analysis.frequency import aggregate
from text_analyzer.analysis.ranker import RankedEntry, top_n
from text_analyzer.analysis.tokenizer import tokenize
from text_analyzer.dictionary import ThemeDictionary


@dataclass(frozen=True)
class TextAnalyzer:
    """
    Run the analysis operations against plain text.

    The analyzer keeps no per-document state; every call tokenizes the text it
    is given. One instance can therefore be reused for many documents.

    Attributes:
        dictionary:
            Theme dictionary used for classification.
    """

    dictionary: ThemeDictionary = field(default_factory=ThemeDictionary)

    def classify(self, text: str) -> Classification:
        return classify(tokenize(text), self.dictionary)

    def theme_scores(self, text: str) -> dict[str, int]:
        return score_themes(tokenize(text), self.dictionary)

    def word_frequencies(self, text: str) -> dict[str, int]:
        return aggregate(tokenize(text))

    def top_words(self, text: str, n: int) -> list[RankedEntry]:
        return top_n(self.word_frequencies(text), n)
