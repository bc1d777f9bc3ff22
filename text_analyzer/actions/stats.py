# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Full statistics action.

The `stats` subcommand counts every word of a document and writes the result
to a text file (default `full_statistics.txt` in the current directory) or, for
a `.ods` destination, to a spreadsheet.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.analysis import TextAnalyzer
from text_analyzer.cli_io import is_interactive_tty, prompt_overwrite
from text_analyzer.config import AnalyzerConfig, ConfigError
from text_analyzer.documents.registry import read_document_text
from text_analyzer.reports import write_full_report


@dataclass(frozen=True)
class StatsAction:
    """`stats` subcommand."""

    name: str = "stats"
    help: str = "Write full word statistics to a file (.txt or .ods)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `stats` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("document", help="Document to analyze (.txt, .md, .docx, .odt)")
        parser.add_argument(
            "-o",
            "--output",
            help="Report file (default: full_report.outfile from the config, or ./full_statistics.txt)",
        )
        parser.add_argument(
            "--sort",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="List the most frequent words first instead of in order of first occurrence",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite the report file if it already exists",
        )

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute the full statistics report.

        Raises:
            ConfigError:
                If the document cannot be loaded or the report exists and
                overwriting was not confirmed.
        """

        if config is None:
            raise RuntimeError("StatsAction requires a config, but none was provided")

        outfile = Path(args.output) if args.output else config.report.outfile
        sort = args.sort if args.sort is not None else config.report.sort

        if outfile.exists() and not bool(args.force):
            if not is_interactive_tty():
                raise ConfigError(
                    f"Output file already exists: {outfile}. Refusing to overwrite in non-interactive mode. "
                    "Use --force to overwrite."
                )
            if not prompt_overwrite(outfile):
                print(f"Keeping existing file: {outfile}")
                return

        text = read_document_text(Path(args.document), encoding=config.encoding)
        counts = TextAnalyzer().word_frequencies(text)

        written = write_full_report(outfile, counts, sort=sort)
        print(f"Wrote statistics for {len(counts)} distinct word(s) to: {written}")
