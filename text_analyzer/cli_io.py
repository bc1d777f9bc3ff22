# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Small CLI interaction helpers.

These helpers centralize terminal interaction behavior so actions can stay
focused on their core job.

The project uses a safety-first approach for files:
- In interactive terminals, actions may ask before overwriting a file.
- In non-interactive contexts (CI, pipes), actions avoid prompts and require
  an explicit `--force`.
"""

import argparse
import sys
from pathlib import Path


def is_interactive_tty() -> bool:
    """
    Determine whether we can safely prompt the user.

    Returns:
        True if both stdin and stdout are connected to a TTY.
    """

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except Exception:  # noqa: BLE001
        return False


def parse_yes_no(answer: str) -> bool | None:
    """Interpret a yes/no answer. Returns None if the answer is neither."""

    answer = answer.strip().lower()
    if answer in {"y", "yes"}:
        return True
    if answer in {"n", "no"}:
        return False
    return None


def parse_positive_int(value: str) -> int | None:
    """Parse a strictly positive integer. Returns None for anything else."""

    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number > 0 else None


def positive_int(value: str) -> int:
    """argparse `type=` callback for strictly positive integers."""

    number = parse_positive_int(value)
    if number is None:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return number


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Args:
        question:
            Prompt text without the trailing choice suffix.
        default_no:
            If true, empty input is treated as "no".

    Returns:
        True if the user answered yes.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    if not is_interactive_tty():
        raise RuntimeError("Cannot prompt in non-interactive mode")

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip()
        if not answer:
            return not default_no
        parsed = parse_yes_no(answer)
        if parsed is not None:
            return parsed


def prompt_overwrite(path: Path) -> bool:
    """
    Ask the user whether to overwrite an existing file.

    Args:
        path:
            The file path that would be overwritten.

    Returns:
        True if the user agreed to overwrite.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    return prompt_yes_no(f"Output file already exists: {path}. Overwrite?", default_no=True)
