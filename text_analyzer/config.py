# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `analyzer.yaml`, validating its keys, and
normalizing paths so that actions can rely on a typed config object. All
sections are optional: a missing default config file simply yields the
built-in defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV_VAR = "TEXT_ANALYZER_CONFIG"
DEFAULT_CONFIG_NAME = "analyzer.yaml"
DEFAULT_OUTPUT_PATH = "full_statistics.txt"


@dataclass(frozen=True)
class TopWordsConfig:
    """
    Defaults for the top words report.

    Attributes:
        count:
            Number of words to show.
        histogram:
            If True, a histogram is printed below the list.
    """

    count: int = 10
    histogram: bool = False


@dataclass(frozen=True)
class HistogramConfig:
    """
    Histogram rendering options.

    Attributes:
        max_label_width:
            Labels longer than this are truncated.
        marker:
            Single character repeated once per occurrence.
    """

    max_label_width: int = 20
    marker: str = "*"


@dataclass(frozen=True)
class ReportConfig:
    """
    Full statistics report options.

    Attributes:
        outfile:
            Default destination of the report. Files ending in `.ods` are
            written as spreadsheets, everything else as plain text.
        sort:
            If True, entries are ranked by count instead of being listed in
            order of first occurrence.
    """

    outfile: Path = Path(DEFAULT_OUTPUT_PATH)
    sort: bool = False


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Parsed configuration for a text analyzer run.

    Attributes:
        config_path:
            Path to the YAML config file, or None if defaults are used.
        base_dir:
            Directory that relative dictionary paths are resolved against.
        dictionary:
            Theme dictionary file, if configured.
        encoding:
            Encoding used to decode plain text documents.
        top_words:
            Defaults for the `top` command.
        histogram:
            Histogram rendering options.
        report:
            Defaults for the `stats` command.
    """

    config_path: Path | None
    base_dir: Path
    dictionary: Path | None = None
    encoding: str = "utf-8"
    top_words: TopWordsConfig = field(default_factory=TopWordsConfig)
    histogram: HistogramConfig = field(default_factory=HistogramConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


class ConfigError(RuntimeError):
    """
    Raised when the configuration or an input file is missing, invalid, or
    cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> tuple[Path, bool]:
    """
    Determine which YAML config file to use.

    The command line wins over the `TEXT_ANALYZER_CONFIG` environment variable,
    which wins over `./analyzer.yaml`.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        A tuple of the path (not necessarily existing) and a flag telling
        whether the path was requested explicitly.
    """

    if cli_path:
        return Path(cli_path), True

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return Path.cwd() / DEFAULT_CONFIG_NAME, False


def load_config(path: Path, *, required: bool = True) -> AnalyzerConfig:
    """
    Load and validate an `analyzer.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.
        required:
            If False, a missing file yields the default configuration.

    Returns:
        A validated AnalyzerConfig instance.

    Raises:
        ConfigError:
            If the file is missing (and required), unreadable, cannot be parsed
            as YAML, or contains invalid values.
    """

    if not path.exists():
        if not required:
            return AnalyzerConfig(config_path=None, base_dir=Path.cwd())
        raise ConfigError(
            f"Config file not found: {path}. "
            "Use the 'template' command to create one or omit --config."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    # An empty file is a valid "all defaults" config.
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    base_dir = path.parent.resolve()

    dictionary = raw.get("dictionary")
    if dictionary is not None and (not isinstance(dictionary, str) or not dictionary.strip()):
        raise ConfigError("'dictionary' must be a non-empty string if provided")

    encoding = raw.get("encoding", "utf-8")
    if not isinstance(encoding, str) or not encoding.strip():
        raise ConfigError("'encoding' must be a non-empty string")

    return AnalyzerConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        dictionary=(base_dir / dictionary.strip()).resolve() if isinstance(dictionary, str) else None,
        encoding=encoding.strip(),
        top_words=_parse_top_words(raw.get("top_words")),
        histogram=_parse_histogram(raw.get("histogram")),
        report=_parse_report(raw.get("full_report")),
    )


def _parse_top_words(value: Any) -> TopWordsConfig:
    """
    Parse and validate the optional `top_words` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return TopWordsConfig()

    if not isinstance(value, dict):
        raise ConfigError("'top_words' must be a mapping if provided")

    count = value.get("count", TopWordsConfig.count)
    histogram = value.get("histogram", TopWordsConfig.histogram)

    # bool is a subclass of int; `count: true` is almost certainly a typo.
    if not isinstance(count, int) or isinstance(count, bool):
        raise ConfigError("top_words.count must be an integer")
    if count <= 0:
        raise ConfigError("top_words.count must be > 0")
    if not isinstance(histogram, bool):
        raise ConfigError("top_words.histogram must be a boolean")

    return TopWordsConfig(count=count, histogram=histogram)


def _parse_histogram(value: Any) -> HistogramConfig:
    """
    Parse and validate the optional `histogram` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return HistogramConfig()

    if not isinstance(value, dict):
        raise ConfigError("'histogram' must be a mapping if provided")

    max_label_width = value.get("max_label_width", HistogramConfig.max_label_width)
    marker = value.get("marker", HistogramConfig.marker)

    if not isinstance(max_label_width, int) or isinstance(max_label_width, bool):
        raise ConfigError("histogram.max_label_width must be an integer")
    if max_label_width <= 0:
        raise ConfigError("histogram.max_label_width must be > 0")
    if not isinstance(marker, str) or len(marker) != 1:
        raise ConfigError("histogram.marker must be a single character")

    return HistogramConfig(max_label_width=max_label_width, marker=marker)


def _parse_report(value: Any) -> ReportConfig:
    """
    Parse and validate the optional `full_report` section.

    The output file is interpreted relative to the current directory, not the
    config file, so that reports land where the user runs the tool.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ReportConfig()

    if not isinstance(value, dict):
        raise ConfigError("'full_report' must be a mapping if provided")

    outfile = value.get("outfile", DEFAULT_OUTPUT_PATH)
    sort = value.get("sort", ReportConfig.sort)

    if not isinstance(outfile, str) or not outfile.strip():
        raise ConfigError("full_report.outfile must be a non-empty string")
    if not isinstance(sort, bool):
        raise ConfigError("full_report.sort must be a boolean")

    return ReportConfig(outfile=Path(outfile.strip()), sort=sort)
