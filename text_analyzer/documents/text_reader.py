# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown document reader."""

from pathlib import Path

from text_analyzer.documents.base import ReaderError


class TextDocumentReader:
    """Read .txt and .md files."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_text(self, path: Path, *, encoding: str = "utf-8") -> str:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError as exc:
            raise ReaderError(f"Cannot decode file as {encoding}: {exc}", path=path) from exc
        except LookupError as exc:
            raise ReaderError(f"Unknown text encoding '{encoding}'", path=path) from exc
        except OSError as exc:
            raise ReaderError(f"Failed to read text file: {exc}", path=path) from exc
