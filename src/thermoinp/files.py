"""File loading and the comment-line filter."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from thermoinp.constants import COMMENT_PREFIX
from thermoinp.models import ThermoFile
from thermoinp.parser import parse_thermo_file


def load_text(path: str | Path) -> str:
    """Read a data file as UTF-8, replacing undecodable bytes."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def read_thermo_file(path: str | Path, strict: bool = False) -> ThermoFile:
    return parse_thermo_file(load_text(path), strict=strict)


def strip_comment_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines that do not begin with ``!``."""
    for line in lines:
        if not line.startswith(COMMENT_PREFIX):
            yield line


def strip_comments(text: str) -> str:
    return "".join(strip_comment_lines(text.splitlines(keepends=True)))
