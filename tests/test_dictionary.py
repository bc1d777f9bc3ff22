import json
from pathlib import Path

import pytest

from text_analyzer.config import ConfigError
from text_analyzer.dictionary import DictionaryError, ThemeDictionary, ThemeSpec, load_dictionary, parse_dictionary


def test_parse_list_format_preserves_order() -> None:
    dictionary = parse_dictionary(
        [
            {"theme": "tech", "words": ["code", " server "]},
            {"theme": "sports", "words": []},
        ]
    )
    assert list(dictionary) == [ThemeSpec("tech", ("code", "server")), ThemeSpec("sports", ())]
    assert len(dictionary) == 2


def test_parse_mapping_format() -> None:
    dictionary = parse_dictionary({"sports": ["ball"], "tech": ["code"]})
    assert list(dictionary) == [ThemeSpec("sports", ("ball",)), ThemeSpec("tech", ("code",))]


def test_empty_dictionary_is_allowed() -> None:
    assert len(parse_dictionary([])) == 0


@pytest.mark.parametrize(
    "raw",
    [
        "sports",
        [["ball"]],
        [{"words": ["ball"]}],
        [{"theme": "sports"}],
        [{"theme": "", "words": []}],
        [{"theme": 5, "words": []}],
        [{"theme": "sports", "words": "ball"}],
        [{"theme": "sports", "words": ["ball", 3]}],
        [{"theme": "sports", "words": ["ball", "  "]}],
        [{"theme": "a", "words": []}, {"theme": "a", "words": []}],
    ],
)
def test_malformed_dictionaries_fail(raw: object) -> None:
    with pytest.raises(DictionaryError):
        parse_dictionary(raw)


def test_dictionary_error_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        parse_dictionary([{"theme": "sports"}])


def test_duplicate_theme_names_fail_on_construction() -> None:
    with pytest.raises(DictionaryError, match="Duplicate"):
        ThemeDictionary((ThemeSpec("sports"), ThemeSpec("sports", ("ball",))))


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "themes.json"
    path.write_text(json.dumps([{"theme": "спорт", "words": ["мяч"]}], ensure_ascii=False), encoding="utf-8")
    assert list(load_dictionary(path)) == [ThemeSpec("спорт", ("мяч",))]


def test_load_yaml_mapping(tmp_path: Path) -> None:
    path = tmp_path / "themes.yaml"
    path.write_text("sports: [ball, goal]\ntech:\n  - code\n", encoding="utf-8")
    assert list(load_dictionary(path)) == [ThemeSpec("sports", ("ball", "goal")), ThemeSpec("tech", ("code",))]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_dictionary(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to read dictionary"):
        load_dictionary(path)


def test_load_malformed_entry_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "themes.json"
    path.write_text('[{"theme": "sports"}]', encoding="utf-8")
    with pytest.raises(DictionaryError, match="themes.json"):
        load_dictionary(path)
