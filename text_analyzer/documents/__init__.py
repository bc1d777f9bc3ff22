"""Document reading.

The analysis engine only works on plain text. Readers in this package turn a
source file into a single string:

- `.txt` / `.md`: decoded as-is
- `.docx`: paragraph text via python-docx
- `.odt`: paragraph and heading text via odfdo

`convert_to_text` writes the extracted text to a `.txt` file.
"""

from text_analyzer.documents.base import DocumentReader, ReaderError
from text_analyzer.documents.convert import convert_to_text, default_text_path
from text_analyzer.documents.registry import get_document_reader, read_document_text

__all__ = [
    "DocumentReader",
    "ReaderError",
    "convert_to_text",
    "default_text_path",
    "get_document_reader",
    "read_document_text",
]
