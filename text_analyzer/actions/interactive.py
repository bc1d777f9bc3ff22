# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Interactive menu action.

The `interactive` subcommand asks for a document and a theme dictionary (unless
given on the command line or in the config) and then offers a menu:

    1. Determine the theme of the text
    2. Show the most frequent words
    3. Write full statistics to a file
    4. Exit

`.docx` and `.odt` documents are converted to a `.txt` file next to the source
first, and the session continues with that file. Invalid menu input is
reported and the menu is shown again. End of input (Ctrl-D) ends the session.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.actions.base import add_dictionary_argument, load_theme_dictionary
from text_analyzer.actions.top_words import print_top_words
from text_analyzer.analysis import TextAnalyzer
from text_analyzer.cli_io import parse_positive_int, parse_yes_no
from text_analyzer.config import AnalyzerConfig, ConfigError
from text_analyzer.dictionary import load_dictionary
from text_analyzer.documents.convert import convert_to_text, default_text_path
from text_analyzer.documents.registry import is_plain_text, read_document_text
from text_analyzer.reports import write_full_report


MENU = "\n".join(
    [
        "",
        "Choose an action:",
        "1. Determine the theme of the text",
        "2. Show the most frequent words",
        "3. Write full statistics to a file",
        "4. Exit",
    ]
)


@dataclass(frozen=True)
class InteractiveAction:
    """`interactive` subcommand."""

    name: str = "interactive"
    help: str = "Analyze a document through an interactive menu"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `interactive` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "document",
            nargs="?",
            help="Document to analyze. If omitted, the path is asked for.",
        )
        add_dictionary_argument(parser)

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Run the menu loop until the user exits.

        Raises:
            ConfigError:
                If the document or dictionary cannot be found or loaded.
        """

        if config is None:
            raise RuntimeError("InteractiveAction requires a config, but none was provided")

        try:
            document = self._document_path(args)
            if not args.dictionary and config.dictionary is None:
                dictionary = load_dictionary(
                    self._existing_file(input("Path of the theme dictionary (JSON or YAML): "))
                )
            else:
                dictionary = load_theme_dictionary(args, config)
        except EOFError:
            print()
            return

        analyzer = TextAnalyzer(dictionary)

        while True:
            print(MENU)
            try:
                choice = input("Your choice: ").strip()
                if choice == "1":
                    text = read_document_text(document, encoding=config.encoding)
                    print(f"Theme of the text: {analyzer.classify(text).describe()}")
                elif choice == "2":
                    self._top_words(analyzer, document, config)
                elif choice == "3":
                    self._full_statistics(analyzer, document, config)
                elif choice == "4":
                    print("Goodbye.")
                    return
                else:
                    print("Invalid choice. Enter a number from 1 to 4.")
            except EOFError:
                print()
                return

    def _document_path(self, args: argparse.Namespace) -> Path:
        """Ask for (if needed) and prepare the document to analyze."""

        if args.document:
            path = self._existing_file(args.document)
        else:
            path = self._existing_file(input("Path of the document to analyze: "))

        if is_plain_text(path):
            return path

        print(f"Detected a {path.suffix.lower()} document. Converting to text...")
        target = default_text_path(path)
        if target.exists() and not self._confirm(f"{target} already exists. Overwrite? (yes/no): "):
            # Analyze the source directly; its text is extracted on every read.
            print(f"Keeping existing file: {target}. Analyzing {path} directly.")
            return path

        written = convert_to_text(path, target, force=True)
        print(f"Converted to text. Continuing with: {written}")
        return written

    def _existing_file(self, value: str) -> Path:
        path = Path(value.strip())
        if not path.is_file():
            raise ConfigError(f"File not found: {path}. Check the path and try again.")
        return path

    def _confirm(self, question: str) -> bool:
        return parse_yes_no(input(question)) is True

    def _top_words(self, analyzer: TextAnalyzer, document: Path, config: AnalyzerConfig) -> None:
        count = parse_positive_int(input("Number of words to show: "))
        if count is None:
            print("Error: enter a positive number greater than 0.")
            return

        show_histogram = parse_yes_no(input("Show histogram? (yes/no): "))
        if show_histogram is None:
            print("Invalid input. Use yes/no or y/n.")
            return

        text = read_document_text(document, encoding=config.encoding)
        print()
        print_top_words(
            analyzer.top_words(text, count),
            requested=count,
            histogram=config.histogram if show_histogram else None,
        )

    def _full_statistics(self, analyzer: TextAnalyzer, document: Path, config: AnalyzerConfig) -> None:
        answer = input(f"Path of the statistics file (default: {config.report.outfile}): ").strip()
        outfile = Path(answer) if answer else config.report.outfile

        if outfile.exists() and not self._confirm(f"{outfile} already exists. Overwrite? (yes/no): "):
            print(f"Keeping existing file: {outfile}")
            return

        text = read_document_text(document, encoding=config.encoding)
        try:
            written = write_full_report(outfile, analyzer.word_frequencies(text), sort=config.report.sort)
        except ConfigError as exc:
            print(f"Error: {exc}")
            return
        print(f"Statistics written to: {written}")
