import hashlib
from pathlib import Path

import pytest
from odfdo import Document

from text_analyzer.config import ConfigError
from text_analyzer.hash_utils import md5_text
from text_analyzer.reports import write_full_report


def test_text_report(tmp_path: Path) -> None:
    written = write_full_report(tmp_path / "stats.txt", {"zeta": 1, "alpha": 2})

    assert written == (tmp_path / "stats.txt").resolve()
    assert written.read_text(encoding="utf-8").splitlines() == [
        "Word statistics for the text:",
        "zeta: 1 occurrences",
        "alpha: 2 occurrences",
    ]


def test_sorted_text_report_creates_directories(tmp_path: Path) -> None:
    written = write_full_report(tmp_path / "out" / "stats.txt", {"zeta": 1, "alpha": 2}, sort=True)
    assert written.read_text(encoding="utf-8").splitlines()[1:] == [
        "alpha: 2 occurrences",
        "zeta: 1 occurrences",
    ]


def test_relative_path_is_resolved_against_cwd(isolated_cwd: Path) -> None:
    written = write_full_report(Path("full_statistics.txt"), {"a": 1})
    assert written == (isolated_cwd / "full_statistics.txt").resolve()
    assert written.exists()


def test_ods_report(tmp_path: Path) -> None:
    written = write_full_report(tmp_path / "stats.ods", {"dog": 2, "cat": 3}, sort=True)

    doc = Document(written)
    tables = list(doc.body.tables)
    assert [t.name for t in tables] == ["Words"]
    assert tables[0].get_values() == [["Word", "Count"], ["cat", 3], ["dog", 2]]


def test_ods_report_keeps_first_occurrence_order(tmp_path: Path) -> None:
    written = write_full_report(tmp_path / "stats.ods", {"dog": 2, "cat": 3})

    values = list(Document(written).body.tables)[0].get_values()
    assert [row[0] for row in values[1:]] == ["dog", "cat"]


@pytest.mark.parametrize("name", ["stats.txt", "stats.ods"])
def test_directory_as_destination_fails(tmp_path: Path, name: str) -> None:
    target = tmp_path / name
    target.mkdir()

    with pytest.raises(ConfigError, match="Failed to write report file"):
        write_full_report(target, {"a": 1})


def test_parent_path_is_a_file(tmp_path: Path) -> None:
    (tmp_path / "blocker").write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to write report file"):
        write_full_report(tmp_path / "blocker" / "stats.txt", {"a": 1})


def test_style_name_digest() -> None:
    assert md5_text("Words") == hashlib.md5(b"Words").hexdigest()
    assert len(md5_text("")) == 32
