# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Document reader registry."""

from pathlib import Path

from text_analyzer.config import ConfigError
from text_analyzer.documents.base import DocumentReader, ReaderError
from text_analyzer.documents.docx_reader import DocxDocumentReader
from text_analyzer.documents.odt_reader import OdtDocumentReader
from text_analyzer.documents.text_reader import TextDocumentReader


SUPPORTED_SUFFIXES = (".docx", ".md", ".odt", ".txt")


_READERS: list[DocumentReader] = [
    TextDocumentReader(),
    DocxDocumentReader(),
    OdtDocumentReader(),
]


def get_document_reader(path: Path) -> DocumentReader:
    """Select a document reader based on the file.

    Args:
        path:
            Document file path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    if path.suffix.lower() == ".doc":
        raise ConfigError(
            f"Legacy Word files are not supported: {path}. Save the document as .docx or .txt first."
        )

    supported = ", ".join(SUPPORTED_SUFFIXES)
    raise ConfigError(f"Unsupported document format: {path} (supported: {supported})")


def is_plain_text(path: Path) -> bool:
    """Return True if the file is read as-is, without text extraction."""

    return isinstance(get_document_reader(path), TextDocumentReader)


def read_document_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a document as plain text and normalize errors to ConfigError."""

    if not path.exists():
        raise ConfigError(f"Document not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Document path is not a file: {path}")

    reader = get_document_reader(path)
    try:
        return reader.read_text(path, encoding=encoding)
    except ReaderError as exc:
        raise ConfigError(str(exc)) from exc
