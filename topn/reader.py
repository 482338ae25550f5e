"""
Line extraction for integer files.

A valid line holds one or more ASCII decimal digits and nothing else once
its line terminator is removed. Leading zeros are accepted ("007" is 7).
Anything else is handed to the ``on_invalid`` callback and skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .logger import logger

_INTEGER_LINE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class InvalidLine:
    """A rejected input line."""

    number: int
    text: str


def extract_integer(line: str) -> Optional[int]:
    """Return the integer held by ``line`` or ``None`` if the line is malformed."""
    text = line.rstrip("\r\n")
    if _INTEGER_LINE.fullmatch(text) is None:
        return None
    return int(text)


def _log_invalid(invalid: InvalidLine) -> None:
    logger().warning(f"Invalid line {invalid.number}: '{invalid.text.strip()}'")


def read_integers(
    path: str,
    on_invalid: Optional[Callable[[InvalidLine], None]] = None,
) -> Iterator[int]:
    """Lazily yield the valid integers of a file, one per line.

    Malformed lines are reported through ``on_invalid`` (a warning is logged
    when no callback is given) and processing carries on with the next line.
    """
    report = on_invalid or _log_invalid
    # Only "\n" ends a line; undecodable bytes become U+FFFD and fail the digit check
    with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        for number, line in enumerate(f, start=1):
            value = extract_integer(line)
            if value is None:
                report(InvalidLine(number, line.rstrip("\r\n")))
                continue
            yield value
