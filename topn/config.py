"""
Run configuration.

The CLI parse step produces a ``ParsedOptions`` value; ``validate_options``
checks it and returns a ``RunConfig``. Problems found here are fatal and
are raised before any input is read.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Tuple


class ConfigurationError(ValueError):
    """Invalid startup configuration (bad path, missing file, bad count)."""


class MissingOptionsError(ConfigurationError):
    """One or more required options were not supplied."""

    def __init__(self, missing: Tuple[str, ...], usage: str = "") -> None:
        self.missing = missing
        self.usage = usage
        super().__init__(f"Missing options: {', '.join(missing)}")


@dataclass(frozen=True)
class ParsedOptions:
    file: Optional[str] = None
    top: Optional[int] = None
    verbose: bool = False
    usage: str = ""


@dataclass(frozen=True)
class RunConfig:
    file: str
    top: int
    verbose: bool = False


REQUIRED_OPTIONS = ("file", "top")


def positive_int(text: str) -> int:
    """argparse ``type=`` converter accepting integers greater than zero."""
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError("Number is lesser or equal to zero")
    return n


def validate_options(parsed: ParsedOptions) -> RunConfig:
    """Check the parsed options and build the configuration for a run."""
    missing = tuple(name for name in REQUIRED_OPTIONS if getattr(parsed, name) is None)
    if missing:
        raise MissingOptionsError(missing, parsed.usage)

    file, top = parsed.file, parsed.top
    if not isinstance(file, str) or not file:
        raise ConfigurationError(f"Invalid file name: {file}.")
    if not os.path.isfile(file):
        raise ConfigurationError(f"File '{file}' does not exist.")
    if isinstance(top, bool) or not isinstance(top, int):
        raise ConfigurationError(f"Invalid maximum size {top}.")
    if top <= 0:
        raise ConfigurationError("Maximum size must be greater than zero.")

    return RunConfig(file=file, top=top, verbose=parsed.verbose)
