# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Full statistics report files.

The destination suffix selects the format: `.ods` produces a spreadsheet,
anything else a UTF-8 text file with one `word: count occurrences` line per
word below a header line.
"""

from pathlib import Path
from typing import Mapping

from text_analyzer.analysis.ranker import rank_all
from text_analyzer.analysis.report import FULL_REPORT_HEADER, render_full
from text_analyzer.config import ConfigError
from text_analyzer.ods_report import write_statistics_ods


def write_full_report(path: Path, counts: Mapping[str, int], *, sort: bool = False) -> Path:
    """
    Write a full word statistics report.

    Args:
        path:
            Destination file.
        counts:
            Word frequencies.
        sort:
            If True, words are ranked by count; otherwise they keep the
            mapping order.

    Returns:
        The absolute path of the written file.

    Raises:
        ConfigError:
            If the file cannot be written (e.g. the path is a directory).
    """

    path = path.resolve()

    try:
        if path.suffix.lower() == ".ods":
            entries = rank_all(counts) if sort else list(counts.items())
            return write_statistics_ods(path, entries)

        lines = [FULL_REPORT_HEADER, *render_full(counts, sort=sort)]
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")
    except OSError as exc:
        raise ConfigError(f"Failed to write report file '{path}': {exc}") from exc

    return path
