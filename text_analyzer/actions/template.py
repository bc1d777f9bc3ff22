# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `analyzer.yaml` file into the current
directory (or a user-specified path), and optionally a sample theme
dictionary.
"""

import argparse
import json
from dataclasses import dataclass
from pathlib import Path

from text_analyzer.config import AnalyzerConfig, ConfigError


SAMPLE_DICTIONARY: list[dict[str, object]] = [
    {"theme": "sports", "words": ["ball", "goal", "match", "team", "player"]},
    {"theme": "technology", "words": ["code", "server", "software", "computer", "network"]},
    {"theme": "cooking", "words": ["recipe", "oven", "flour", "kitchen", "taste"]},
]


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template analyzer.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Theme dictionary used by the 'theme' and 'interactive' commands.",
            "# Relative paths are resolved against the directory of this file.",
            "# JSON format (a list of entries):",
            '#   [{"theme": "sports", "words": ["ball", "goal"]}, ...]',
            "# YAML files may also use a mapping:  sports: [ball, goal]",
            "dictionary: dictionary.json",
            "",
            "# Encoding of .txt/.md documents",
            "encoding: utf-8",
            "",
            "# Defaults for the 'top' command (optional; defaults shown)",
            "top_words:",
            "  count: 10",
            "  histogram: false",
            "",
            "# Histogram rendering (optional; defaults shown)",
            "histogram:",
            "  # Longer words are truncated",
            "  max_label_width: 20",
            '  marker: "*"',
            "",
            "# Defaults for the 'stats' command (optional; defaults shown)",
            "full_report:",
            "  # Relative to the current directory. Use a .ods suffix for a spreadsheet.",
            "  outfile: full_statistics.txt",
            "  # false: words in order of first occurrence, true: most frequent first",
            "  sort: false",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="analyzer.yaml",
            help="Destination path for the template (default: ./analyzer.yaml)",
        )
        parser.add_argument(
            "--dictionary",
            metavar="PATH",
            help="Also write a sample theme dictionary (JSON) to PATH",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting existing files",
        )

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute the template writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If a destination exists and `--force` is not set.
        """

        _ = config
        force = bool(args.force)
        dest = Path(args.path)

        dictionary_dest = Path(args.dictionary) if args.dictionary else None
        if dictionary_dest is not None:
            self._check_writable(dictionary_dest, force=force)
        self._check_writable(dest, force=force)

        self._write(dest, self._TEMPLATE_YAML)
        print(f"Wrote template config to: {dest}")

        if dictionary_dest is not None:
            self._write(dictionary_dest, json.dumps(SAMPLE_DICTIONARY, indent=2, ensure_ascii=False) + "\n")
            print(f"Wrote sample dictionary to: {dictionary_dest}")

    def _check_writable(self, dest: Path, *, force: bool) -> None:
        """
        Refuse to overwrite an existing file unless forced.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

    def _write(self, dest: Path, content: str) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(content, encoding="utf-8")
