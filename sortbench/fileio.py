"""Reading and writing value files: a count line followed by one value per line."""

from __future__ import annotations

import enum
import os
import re
from collections.abc import Iterable, Sequence
from typing import Union

Number = Union[int, float]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ValueKind(enum.IntEnum):
    """Element type of the values being sorted."""

    INT = 0
    FLOAT = 1
    DOUBLE = 2


def _parse_prefix(text: str, kind: ValueKind) -> tuple[Number, str] | None:
    """Parse a leading value from ``text``; return it and the unread rest."""
    if kind is ValueKind.INT:
        match = _INT_RE.match(text)
        if not match:
            return None
        value: Number = int(match.group(1))
        if not _INT32_MIN <= value <= _INT32_MAX:
            return None
    else:
        match = _FLOAT_RE.match(text)
        if not match:
            return None
        value = float(match.group(1))
    return value, text[match.end():]


def load_values(path: str | os.PathLike, kind: ValueKind | int = ValueKind.INT) -> list[Number]:
    """Read a value file and return its values.

    Raises OSError when the file cannot be opened and ValueError when its
    contents are malformed.
    """
    kind = ValueKind(kind)
    name = os.fspath(path)
    with open(path, encoding="utf-8") as handle:
        lines = (line.rstrip("\r\n") for line in handle)

        header = next(lines, None)
        if header is None:
            raise ValueError(f"Empty file {name}")
        parsed_size = _parse_prefix(header, ValueKind.INT)
        if parsed_size is None:
            raise ValueError(f"Invalid size in file {name}")
        size = int(parsed_size[0])
        if size <= 0:
            raise ValueError(f"Size must be positive in file {name}")

        values: list[Number] = []
        for index in range(size):
            line = next(lines, None)
            if line is None:
                raise ValueError(f"Unexpected end of the file at line {index + 1}")
            parsed = _parse_prefix(line, kind)
            if parsed is None:
                raise ValueError(f"Invalid data at line {index + 2}")
            value, rest = parsed
            if rest.split():
                raise ValueError(f"Extra data at line {index + 2}")
            values.append(value)
    return values


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def save_values(path: str | os.PathLike, values: Sequence[Number]) -> None:
    """Write ``values`` as a count line followed by one value per line."""
    if not values:
        raise ValueError("No data to save")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f"{len(values)}\n")
        handle.writelines(f"{_format_value(value)}\n" for value in values)


def format_values(values: Iterable[Number]) -> str:
    """Render values as ``{a, b, c}``."""
    return "{" + ", ".join(_format_value(value) for value in values) + "}"