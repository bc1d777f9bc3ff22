"""
Text analyzer CLI package.

This package contains a small CLI tool that will:
- determine the theme of a plain text document from a keyword dictionary,
- report the most frequent words, optionally as a histogram,
- write full word statistics to a text or spreadsheet file.
"""

from __future__ import annotations
