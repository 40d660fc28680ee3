"""Utility helpers shared across the engine."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


def read_lines(path: PathLike, encoding: str = "utf-8") -> List[str]:
    """Read a text file into a list of lines without their line terminators.

    `\\n`, `\\r\\n` and `\\r` all end a line, and a terminator at the very end of
    the file does not produce an extra empty line.
    """
    with open(path, "r", encoding=encoding) as fh:
        return [line.rstrip("\n") for line in fh]


def dir_string(base: PathLike, *parts: str) -> str:
    """Join path parts and return the result as a string ending in a separator.

    Harvest scripts concatenate file names directly onto these values, so the
    trailing slash is part of the contract.
    """
    joined = Path(base).joinpath(*parts).as_posix()
    return joined if joined.endswith("/") else joined + "/"
