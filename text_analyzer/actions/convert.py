# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Document conversion action.

The `convert` subcommand extracts the text of a `.docx` or `.odt` document and
writes it to a `.txt` file, so that it can be inspected or analyzed later
without the conversion step.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.cli_io import is_interactive_tty, prompt_overwrite
from text_analyzer.config import AnalyzerConfig
from text_analyzer.documents.convert import convert_to_text, default_text_path


@dataclass(frozen=True)
class ConvertAction:
    """`convert` subcommand."""

    name: str = "convert"
    help: str = "Convert a .docx/.odt document into a .txt file"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("document", help="Document to convert")
        parser.add_argument(
            "-o",
            "--output",
            help="Target text file (default: document path with a .txt suffix)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite the target file if it already exists",
        )

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute the conversion.

        Raises:
            ConfigError:
                If the document cannot be read or the target cannot be written.
        """

        _ = config
        source = Path(args.document)
        dest = Path(args.output) if args.output else default_text_path(source)

        force = bool(args.force)
        if dest.exists() and not force and is_interactive_tty():
            if not prompt_overwrite(dest):
                print(f"Keeping existing file: {dest}")
                return
            force = True

        written = convert_to_text(source, dest, force=force)
        print(f"Converted {source} to: {written}")
