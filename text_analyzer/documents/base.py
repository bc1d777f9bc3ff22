# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Document reader interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class DocumentReader(Protocol):
    """Interface for document text extraction.

    Implementations only extract text. Tokenization and everything after it
    belong to the analysis engine.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path, *, encoding: str = "utf-8") -> str:
        """Return the plain text content of the given file."""

        raise NotImplementedError


@dataclass(frozen=True)
class ReaderError(RuntimeError):
    """Raised when a document cannot be read or decoded."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message
