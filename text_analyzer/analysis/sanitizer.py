# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Forbidden character removal for word counting."""

from functools import lru_cache
from typing import Iterable


FORBIDDEN_CHARACTERS: tuple[str, ...] = (",", ";", ":", ".", "!", "?", "/", "-")


@lru_cache(maxsize=8)
def _deletion_table(forbidden: tuple[str, ...]) -> dict[int, None]:
    return {ord(ch): None for ch in forbidden}


def sanitize(token: str, forbidden: Iterable[str] = FORBIDDEN_CHARACTERS) -> str:
    """Remove every occurrence of every forbidden character from a token.

    Interior characters are removed too (`"e-mail"` becomes `"email"`). The
    result may be empty; callers must skip empty words.
    """

    return token.translate(_deletion_table(tuple(forbidden)))
