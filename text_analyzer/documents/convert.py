# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Conversion of rich documents into plain text files."""

from pathlib import Path

from text_analyzer.config import ConfigError
from text_analyzer.documents.registry import read_document_text


def default_text_path(source: Path) -> Path:
    """Return the `.txt` sibling of a document (`report.docx` -> `report.txt`)."""

    return source.with_suffix(".txt")


def convert_to_text(
    source: Path,
    dest: Path | None = None,
    *,
    force: bool = False,
    encoding: str = "utf-8",
) -> Path:
    """
    Extract the text of a document and write it to a UTF-8 text file.

    Args:
        source:
            Document to convert.
        dest:
            Target file. Defaults to the source path with a `.txt` suffix.
        force:
            If True, overwrite an existing target file.
        encoding:
            Encoding of the source, for plain text sources.

    Returns:
        The path of the written text file.

    Raises:
        ConfigError:
            If the source cannot be read, the target exists and `force` is
            False, source and target are the same file, or the target
            cannot be written.
    """

    target = dest if dest is not None else default_text_path(source)

    if target.resolve() == source.resolve():
        raise ConfigError(f"Refusing to convert a file onto itself: {source}")
    if target.exists() and not force:
        raise ConfigError(f"Refusing to overwrite existing file: {target} (use --force)")

    text = read_document_text(source, encoding=encoding)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to write text file '{target}': {exc}") from exc
    return target
