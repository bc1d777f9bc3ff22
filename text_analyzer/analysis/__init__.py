"""Text analysis engine.

Pure functions over plain text: no file access and no console output.

- `tokenize`: whitespace split and lower-casing
- `sanitize`: forbidden punctuation removal
- `classify` / `score_themes`: keyword-based theme detection
- `aggregate`: word frequencies
- `top_n`: deterministic ranking
- `render_*`: line rendering for reports
"""

from text_analyzer.analysis.analyzer import TextAnalyzer
from text_analyzer.analysis.classifier import (
    NO_THEME_LABEL,
    Classification,
    ThemeMatch,
    Undetermined,
    classify,
    score_themes,
)
from text_analyzer.analysis.frequency import aggregate
from text_analyzer.analysis.ranker import RankedEntry, RankRequestError, top_n
from text_analyzer.analysis.report import (
    render_full,
    render_histogram,
    render_scores,
    render_top,
)
from text_analyzer.analysis.sanitizer import FORBIDDEN_CHARACTERS, sanitize
from text_analyzer.analysis.tokenizer import tokenize

__all__ = [
    "FORBIDDEN_CHARACTERS",
    "NO_THEME_LABEL",
    "Classification",
    "RankRequestError",
    "RankedEntry",
    "TextAnalyzer",
    "ThemeMatch",
    "Undetermined",
    "aggregate",
    "classify",
    "render_full",
    "render_histogram",
    "render_scores",
    "render_top",
    "sanitize",
    "score_themes",
    "tokenize",
    "top_n",
]
