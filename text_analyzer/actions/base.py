from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
from pathlib import Path
from typing import Protocol

from text_analyzer.config import AnalyzerConfig, ConfigError
from text_analyzer.dictionary import ThemeDictionary, load_dictionary


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they use the YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.

        Returns:
            None
        """

    def run(self, args: argparse.Namespace, config: AnalyzerConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            None
        """


def add_dictionary_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--dictionary",
        help="Theme dictionary (JSON or YAML). Overrides 'dictionary' from the config.",
    )


def load_theme_dictionary(args: argparse.Namespace, config: AnalyzerConfig) -> ThemeDictionary:
    """
    Load the theme dictionary named on the command line or in the config.

    Raises:
        ConfigError:
            If no dictionary is configured or it cannot be loaded.
    """

    cli_value = getattr(args, "dictionary", None)
    if cli_value:
        path = Path(cli_value)
    elif config.dictionary is not None:
        path = config.dictionary
    else:
        raise ConfigError(
            "No theme dictionary given. Pass --dictionary PATH or set 'dictionary' in analyzer.yaml."
        )

    return load_dictionary(path)
