# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Whitespace tokenizer."""

import re
from typing import Iterator


_TOKEN_RE = re.compile(r"\S+")


def tokenize(text: str) -> Iterator[str]:
    """Yield the whitespace-delimited tokens of a text, lower-cased.

    Tokens are produced lazily, so a caller that only needs one pass never
    holds a full token list in memory. Punctuation is kept; see
    `text_analyzer.analysis.sanitizer` for stripping it.
    """

    for match in _TOKEN_RE.finditer(text):
        yield match.group(0).lower()
