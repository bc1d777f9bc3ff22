# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT document reader."""

from pathlib import Path

from odfdo import Document

from text_analyzer.documents.base import ReaderError


def _node_text(node: object) -> str:
    # odfdo Paragraph objects often expose richer text via
    # `inner_text`/`text_recursive` than via `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        if hasattr(node, attr):
            value = getattr(node, attr)
            if callable(value):
                value = value()
            if value is not None:
                return str(value)
    return str(node)


class OdtDocumentReader:
    """Extract paragraph and heading text from ODT files."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path, *, encoding: str = "utf-8") -> str:
        """Return all paragraphs and headings, one per line.

        `encoding` is ignored; ODT files are always UTF-8 XML.
        """

        _ = encoding
        try:
            body = Document(path).body

            # XPath also finds paragraphs nested in lists, tables and frames,
            # which `get_paragraphs()` misses for documents converted from DOCX.
            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())

            return "\n".join(_node_text(n) for n in nodes)
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to parse ODT file: {exc}", path=path) from exc
