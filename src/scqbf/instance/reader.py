"""Read SC-QBF instance files.

File layout (whitespace-delimited, blank lines ignored)::

    n
    |S_0| |S_1| ... |S_{n-1}|
    <elements of S_0, 1-based; line omitted when |S_0| = 0>
    ...
    <elements of S_{n-1}>
    A[0][0..n-1]
    A[1][1..n-1]
    ...
    A[n-1][n-1]

Element identifiers are converted to 0-based on read. Matrix rows are
upper-triangular: row i lists columns i..n-1 only.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterator

import numpy as np

from scqbf.instance.models import Instance

logger = logging.getLogger(__name__)


class InstanceFormatError(ValueError):
    """Raised when an instance file cannot be parsed.

    Attributes:
        line: 1-based line number of the offending line, or None when
            the input ended early.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class _LineCursor:
    """Walks the non-blank lines of a text, remembering line numbers."""

    def __init__(self, text: str) -> None:
        self._lines: Iterator[tuple[int, str]] = (
            (number, line)
            for number, line in enumerate(text.splitlines(), start=1)
            if line.strip()
        )

    def next(self, context: str) -> tuple[int, list[str]]:
        try:
            number, line = next(self._lines)
        except StopIteration:
            raise InstanceFormatError(
                f"unexpected end of input while reading {context}"
            ) from None
        return number, line.split()

    def rest(self) -> list[int]:
        return [number for number, _ in self._lines]


def _to_int(token: str, line: int, context: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InstanceFormatError(
            f"non-integer token {token!r} in {context}", line
        ) from None


def _to_float(token: str, line: int, context: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InstanceFormatError(
            f"non-numeric token {token!r} in {context}", line
        ) from None
    if not math.isfinite(value):
        raise InstanceFormatError(
            f"non-finite value {token!r} in {context}", line
        )
    return value


def parse_instance(text: str, name: str | None = None) -> Instance:
    """Parse instance text into an :class:`Instance`.

    Args:
        text: Full contents of an instance file.
        name: Optional label stored on the instance.

    Returns:
        The parsed instance.

    Raises:
        InstanceFormatError: If any line is missing or malformed.
    """
    cursor = _LineCursor(text)

    line, tokens = cursor.next("n")
    if len(tokens) != 1:
        raise InstanceFormatError(
            f"expected a single value for n, got {len(tokens)} tokens", line
        )
    n = _to_int(tokens[0], line, "n")
    if n < 1:
        raise InstanceFormatError(f"n must be >= 1, got {n}", line)

    line, tokens = cursor.next("set sizes")
    if len(tokens) != n:
        raise InstanceFormatError(
            f"expected {n} set sizes, got {len(tokens)}", line
        )
    sizes = [_to_int(tok, line, "set sizes") for tok in tokens]
    for i, size in enumerate(sizes):
        if size < 0:
            raise InstanceFormatError(f"|S_{i}| is negative: {size}", line)

    sets: list[tuple[int, ...]] = []
    for i, size in enumerate(sizes):
        if size == 0:
            sets.append(())
            continue
        context = f"S_{i}"
        line, tokens = cursor.next(context)
        if len(tokens) != size:
            raise InstanceFormatError(
                f"{context}: expected {size} elements, got {len(tokens)}", line
            )
        members = []
        for tok in tokens:
            value = _to_int(tok, line, context)
            if value < 1 or value > n:
                raise InstanceFormatError(
                    f"{context}: element {value} outside [1, {n}]", line
                )
            members.append(value - 1)
        sets.append(tuple(members))

    A = np.zeros((n, n), dtype=float)
    for i in range(n):
        context = f"A[{i}]"
        line, tokens = cursor.next(context)
        expected = n - i
        if len(tokens) != expected:
            raise InstanceFormatError(
                f"{context}: expected {expected} values, got {len(tokens)}", line
            )
        A[i, i:] = [_to_float(tok, line, context) for tok in tokens]

    trailing = cursor.rest()
    if trailing:
        logger.warning(
            "Ignoring %d trailing line(s) after the matrix (first at line %d)",
            len(trailing),
            trailing[0],
        )

    instance = Instance(n=n, sets=tuple(sets), A=A, name=name)
    logger.info("Loaded instance %s: n=%d, nonzeros=%d", name, n, instance.nonzeros)
    return instance


def read_instance(path: str | Path) -> Instance:
    """Read an instance file from disk.

    Args:
        path: Path to the instance file.

    Returns:
        The parsed instance, named after the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InstanceFormatError: If the contents are malformed.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    return parse_instance(text, name=p.name)
