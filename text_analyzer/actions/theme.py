# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Theme detection action.

Prints the dictionary theme whose keywords occur most often in a document, or
`no theme found` if none of the keywords occur at all.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.actions.base import add_dictionary_argument, load_theme_dictionary
from text_analyzer.analysis import TextAnalyzer, render_scores
from text_analyzer.config import AnalyzerConfig
from text_analyzer.documents.registry import read_document_text


@dataclass(frozen=True)
class ThemeAction:
    """`theme` subcommand."""

    name: str = "theme"
    help: str = "Determine the theme of a document"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `theme` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("document", help="Document to analyze (.txt, .md, .docx, .odt)")
        add_dictionary_argument(parser)
        parser.add_argument(
            "--scores",
            action="store_true",
            help="Also print the keyword hit count of every theme",
        )

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute theme detection.

        Raises:
            ConfigError:
                If the document or dictionary cannot be loaded.
        """

        if config is None:
            raise RuntimeError("ThemeAction requires a config, but none was provided")

        analyzer = TextAnalyzer(load_theme_dictionary(args, config))
        text = read_document_text(Path(args.document), encoding=config.encoding)

        result = analyzer.classify(text)
        print(f"Theme: {result.describe()}")

        if bool(args.scores):
            print()
            print("Keyword hits per theme:")
            for line in render_scores(result.scores):
                print(f"  {line}")
