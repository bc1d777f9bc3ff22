"""
CLI entrypoint for the text analyzer.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import sys
from dotenv import load_dotenv

from text_analyzer.actions.convert import ConvertAction
from text_analyzer.actions.interactive import InteractiveAction
from text_analyzer.actions.stats import StatsAction
from text_analyzer.actions.template import TemplateAction
from text_analyzer.actions.theme import ThemeAction
from text_analyzer.actions.top_words import TopWordsAction
from text_analyzer.analysis import RankRequestError
from text_analyzer.config import ConfigError, find_config_path, load_config


def _action_repository():
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		ConvertAction(),
		ThemeAction(),
		TopWordsAction(),
		StatsAction(),
		InteractiveAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="text-analyzer",
		description=(
			"Determine the theme of a text document and report its word frequencies."
		),
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			"Path to analyzer.yaml. If omitted, $TEXT_ANALYZER_CONFIG or ./analyzer.yaml "
			"is used when present, otherwise built-in defaults."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration, input or
		validation errors.

	Raises:
		SystemExit:
			When invoked via `python -m text_analyzer.app` (see module guard).
	"""
	# A .env file may set TEXT_ANALYZER_CONFIG.
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config_path, explicit = find_config_path(getattr(args, "config", None))
			config = load_config(config_path, required=explicit)

		action.run(args, config)
		return 0
	except (ConfigError, RankRequestError) as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())
