# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""DOCX document reader."""

from pathlib import Path

from docx import Document

from text_analyzer.documents.base import ReaderError


class DocxDocumentReader:
    """Extract paragraph text from Word (.docx) files."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".docx"

    def read_text(self, path: Path, *, encoding: str = "utf-8") -> str:
        """Return all body paragraphs, one per line.

        `encoding` is ignored; DOCX files carry their own encoding.
        """

        _ = encoding
        try:
            doc = Document(str(path))
            blocks = [p.text for p in doc.paragraphs]

            # Table cells are not part of `doc.paragraphs`.
            for table in doc.tables:
                for row in table.rows:
                    for cell in row.cells:
                        blocks.append(cell.text)

            return "\n".join(blocks)
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to parse DOCX file: {exc}", path=path) from exc
