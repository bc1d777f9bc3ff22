# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Top words action.

Prints the most frequent words of a document and, if requested, a histogram
of the same words.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.analysis import RankedEntry, TextAnalyzer, render_histogram, render_top
from text_analyzer.cli_io import positive_int
from text_analyzer.config import AnalyzerConfig, HistogramConfig
from text_analyzer.documents.registry import read_document_text


def print_top_words(ranked: list[RankedEntry], *, requested: int, histogram: HistogramConfig | None) -> None:
    """Print a ranked word list and, if `histogram` is given, the bar chart."""

    print(f"Top {requested} most frequent words:")
    for line in render_top(ranked):
        print(line)

    if histogram is not None:
        print()
        print("Histogram:")
        for line in render_histogram(
            ranked,
            max_label_width=histogram.max_label_width,
            marker=histogram.marker,
        ):
            print(line)


@dataclass(frozen=True)
class TopWordsAction:
    """`top` subcommand."""

    name: str = "top"
    help: str = "Show the most frequent words of a document"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `top` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("document", help="Document to analyze (.txt, .md, .docx, .odt)")
        parser.add_argument(
            "-n",
            "--count",
            type=positive_int,
            help="Number of words to show (default: top_words.count from the config, or 10)",
        )
        parser.add_argument(
            "--histogram",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Show a histogram below the list (default: top_words.histogram from the config)",
        )

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute the top words report.

        Raises:
            ConfigError:
                If the document cannot be loaded.
        """

        if config is None:
            raise RuntimeError("TopWordsAction requires a config, but none was provided")

        count = args.count if args.count is not None else config.top_words.count
        show_histogram = args.histogram if args.histogram is not None else config.top_words.histogram

        text = read_document_text(Path(args.document), encoding=config.encoding)
        ranked = TextAnalyzer().top_words(text, count)

        print_top_words(
            ranked,
            requested=count,
            histogram=config.histogram if show_histogram else None,
        )
