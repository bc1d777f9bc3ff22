import json
from pathlib import Path

import pytest


SAMPLE_THEMES = [
    {"theme": "sports", "words": ["ball", "goal"]},
    {"theme": "tech", "words": ["code", "server"]},
]


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TEXT_ANALYZER_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps(SAMPLE_THEMES), encoding="utf-8")
    return path


@pytest.fixture
def document_file(tmp_path: Path) -> Path:
    path = tmp_path / "article.txt"
    path.write_text("The goalkeeper wrote code for the ball game.\nThe ball, the goal!\n", encoding="utf-8")
    return path
