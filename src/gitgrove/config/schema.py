"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json", "yaml"]
LogFormat = Literal["console", "json"]

OUTPUT_FORMATS = ("terminal", "json", "yaml")
LOG_FORMATS = ("console", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GitConfig:
    timeout: int = 30  # seconds per git invocation
    context_lines: int = 3
    find_renames: bool = True


@dataclass
class LogConfig:
    limit: int = 50  # commits shown by `gitgrove log`


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_stats: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: LogFormat = "console"


@dataclass
class GroveConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    log: LogConfig = field(default_factory=LogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
