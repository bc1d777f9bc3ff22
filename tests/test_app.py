import json
from pathlib import Path

import pytest

from text_analyzer.app import build_parser, main


def test_parser_lists_all_commands() -> None:
    help_text = build_parser().format_help()
    for name in ("template", "convert", "theme", "top", "stats", "interactive"):
        assert name in help_text


def test_theme(document_file: Path, dictionary_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["theme", str(document_file), "-d", str(dictionary_file)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Theme: sports"]


def test_theme_with_scores(document_file: Path, dictionary_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["theme", str(document_file), "-d", str(dictionary_file), "--scores"]) == 0
    out = capsys.readouterr().out
    # goalkeeper, ball,, ball, and goal! hit "sports"; code hits "tech".
    assert "sports: 4 keyword hits" in out
    assert "tech: 1 keyword hits" in out


def test_theme_not_found(tmp_path: Path, dictionary_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = tmp_path / "poem.txt"
    doc.write_text("roses are red", encoding="utf-8")
    assert main(["theme", str(doc), "-d", str(dictionary_file)]) == 0
    assert capsys.readouterr().out.strip() == "Theme: no theme found"


def test_theme_uses_dictionary_from_config(
    tmp_path: Path,
    document_file: Path,
    dictionary_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "analyzer.yaml").write_text(f"dictionary: {dictionary_file.name}\n", encoding="utf-8")
    assert main(["theme", str(document_file)]) == 0
    assert "Theme: sports" in capsys.readouterr().out


def test_theme_without_dictionary(document_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["theme", str(document_file)]) == 2
    assert "No theme dictionary given" in capsys.readouterr().err


def test_theme_with_malformed_dictionary(
    tmp_path: Path,
    document_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps([{"theme": "sports", "words": "ball"}]), encoding="utf-8")
    assert main(["theme", str(document_file), "-d", str(bad)]) == 2
    assert "'words' for theme 'sports' must be a list" in capsys.readouterr().err


def test_missing_document(dictionary_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["theme", "nope.txt", "-d", str(dictionary_file)]) == 2
    assert "Document not found" in capsys.readouterr().err


def test_explicit_config_must_exist(document_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["top", str(document_file), "--config", "missing.yaml"]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_config_from_environment(
    tmp_path: Path,
    document_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("top_words: {count: 1}\n", encoding="utf-8")
    monkeypatch.setenv("TEXT_ANALYZER_CONFIG", str(config))

    assert main(["top", str(document_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Top 1 most frequent words:", "the: 4 occurrences"]


def test_top(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = tmp_path / "pets.txt"
    doc.write_text("cat dog cat bird dog cat", encoding="utf-8")

    assert main(["top", str(doc), "-n", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Top 2 most frequent words:",
        "cat: 3 occurrences",
        "dog: 2 occurrences",
    ]


def test_top_with_histogram(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = tmp_path / "pets.txt"
    doc.write_text("cat dog cat", encoding="utf-8")
    (tmp_path / "analyzer.yaml").write_text("histogram: {marker: '#'}\n", encoding="utf-8")

    assert main(["top", str(doc), "--histogram"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Histogram:" in out
    assert "cat" + " " * 22 + " |##" in out
    assert "dog" + " " * 22 + " |#" in out


def test_top_rejects_non_positive_count(document_file: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["top", str(document_file), "-n", "0"])
    assert exc.value.code == 2


def test_top_reads_docx(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    import docx

    path = tmp_path / "pets.docx"
    doc = docx.Document()
    doc.add_paragraph("Cat, cat. Dog!")
    doc.save(str(path))

    assert main(["top", str(path), "-n", "5"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["cat: 2 occurrences", "dog: 1 occurrences"]


def test_stats_default_destination(isolated_cwd: Path, document_file: Path) -> None:
    assert main(["stats", str(document_file)]) == 0

    lines = (isolated_cwd / "full_statistics.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Word statistics for the text:"
    assert lines[1:4] == ["the: 4 occurrences", "goalkeeper: 1 occurrences", "wrote: 1 occurrences"]
    assert "ball: 2 occurrences" in lines


def test_stats_refuses_to_overwrite_without_force(
    tmp_path: Path,
    document_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    out = tmp_path / "report.txt"
    out.write_text("keep", encoding="utf-8")

    assert main(["stats", str(document_file), "-o", str(out)]) == 2
    assert "--force" in capsys.readouterr().err
    assert out.read_text(encoding="utf-8") == "keep"

    assert main(["stats", str(document_file), "-o", str(out), "--force", "--sort"]) == 0
    assert out.read_text(encoding="utf-8").splitlines()[1] == "the: 4 occurrences"


def test_stats_ods(tmp_path: Path, document_file: Path) -> None:
    out = tmp_path / "report.ods"
    assert main(["stats", str(document_file), "-o", str(out)]) == 0
    assert out.exists()


def test_convert(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    import docx

    path = tmp_path / "notes.docx"
    doc = docx.Document()
    doc.add_paragraph("hello")
    doc.save(str(path))

    assert main(["convert", str(path)]) == 0
    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "hello"
    assert "Converted" in capsys.readouterr().out

    assert main(["convert", str(path)]) == 2


def test_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["template", "--dictionary", "dictionary.json"]) == 0
    assert (tmp_path / "analyzer.yaml").exists()
    assert (tmp_path / "dictionary.json").exists()
    capsys.readouterr()

    # The generated files work together out of the box.
    doc = tmp_path / "match.txt"
    doc.write_text("The team scored a goal in the final match", encoding="utf-8")
    assert main(["theme", str(doc)]) == 0
    assert capsys.readouterr().out.strip() == "Theme: sports"

    assert main(["template"]) == 2
    assert main(["template", "--force"]) == 0


def test_stats_into_directory_reports_error(
    tmp_path: Path,
    document_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    target = tmp_path / "outdir"
    target.mkdir()

    assert main(["stats", str(document_file), "-o", str(target), "--force"]) == 2
    assert "error: Failed to write report file" in capsys.readouterr().err
