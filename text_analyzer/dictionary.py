# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Theme dictionary model and loader.

A theme dictionary maps theme names to keyword lists. Two file shapes are
supported, in JSON or YAML:

1) List of entries (the classic format):

    [{"theme": "sports", "words": ["ball", "goal"]}, ...]

2) Mapping shorthand:

    sports: [ball, goal]
    tech: [code, server]

Theme order is preserved; it decides ties during classification.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

import yaml

from text_analyzer.config import ConfigError


class DictionaryError(ConfigError):
    """Raised when a theme dictionary is malformed."""

    pass


@dataclass(frozen=True)
class ThemeSpec:
    """
    One dictionary entry.

    Attributes:
        theme:
            Unique theme name.
        words:
            Keywords that indicate the theme.
    """

    theme: str
    words: tuple[str, ...] = ()


@dataclass(frozen=True)
class ThemeDictionary:
    """Immutable, ordered collection of themes with unique names."""

    themes: tuple[ThemeSpec, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for spec in self.themes:
            if spec.theme in seen:
                raise DictionaryError(f"Duplicate theme name in dictionary: '{spec.theme}'")
            seen.add(spec.theme)

    def __iter__(self) -> Iterator[ThemeSpec]:
        return iter(self.themes)

    def __len__(self) -> int:
        return len(self.themes)

    @classmethod
    def from_mapping(cls, mapping: dict[str, list[str]]) -> ThemeDictionary:
        """Build a dictionary from a plain `theme -> words` mapping."""

        return parse_dictionary(mapping)


def parse_dictionary(value: Any) -> ThemeDictionary:
    """
    Validate raw (JSON/YAML) data and build a ThemeDictionary.

    Args:
        value:
            Parsed file content.

    Returns:
        The validated dictionary.

    Raises:
        DictionaryError:
            If the structure does not match one of the supported shapes. No
            partial dictionary is ever returned.
    """

    if isinstance(value, dict):
        items = [{"theme": k, "words": v} for k, v in value.items()]
    elif isinstance(value, list):
        items = value
    else:
        raise DictionaryError("Dictionary must be a list of {theme, words} entries or a mapping")

    themes: list[ThemeSpec] = []
    for idx, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise DictionaryError(f"Dictionary entry must be a mapping (problem at index {idx})")

        missing = [k for k in ("theme", "words") if k not in item]
        if missing:
            raise DictionaryError(
                f"Dictionary entry is missing required key(s): {', '.join(missing)} (problem at index {idx})"
            )

        theme = item.get("theme")
        if not isinstance(theme, str) or not theme.strip():
            raise DictionaryError(f"'theme' must be a non-empty string (problem at index {idx})")

        themes.append(
            ThemeSpec(
                theme=theme.strip(),
                words=_parse_words(item.get("words"), theme=theme.strip(), idx=idx),
            )
        )

    return ThemeDictionary(themes=tuple(themes))


def _parse_words(value: Any, *, theme: str, idx: int) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise DictionaryError(f"'words' for theme '{theme}' must be a list (problem at index {idx})")

    words: list[str] = []
    for w_idx, word in enumerate(value, start=1):
        # An empty keyword is a substring of every token and would match everything.
        if not isinstance(word, str) or not word.strip():
            raise DictionaryError(
                f"Keyword must be a non-empty string for theme '{theme}' (problem at index {idx}, word {w_idx})"
            )
        words.append(word.strip())

    return tuple(words)


def load_dictionary(path: Path) -> ThemeDictionary:
    """
    Load and validate a theme dictionary file.

    Files ending in `.yaml`/`.yml` are read with PyYAML, everything else is
    read as JSON.

    Raises:
        ConfigError:
            If the file is missing or cannot be parsed.
        DictionaryError:
            If the content is malformed.
    """

    if not path.exists():
        raise ConfigError(f"Dictionary file not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Dictionary path is not a file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read dictionary file '{path}': {exc}") from exc

    try:
        return parse_dictionary(raw)
    except DictionaryError as exc:
        raise DictionaryError(f"{path}: {exc}") from exc
