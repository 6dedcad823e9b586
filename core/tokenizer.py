"""Splits a delimited roster line into trimmed fields.

Every delimiter boundary yields a field, so ``"a,,b"`` has three fields and
``"a,b,"`` ends with an empty one. Parsing state lives in caller-owned
:class:`FieldCursor` objects; two cursors over the same line never interfere.
"""

from typing import Iterator, Optional

import config
from utils.error_handler import ParseError


def _check_input(line: Optional[str], delimiter: str) -> None:
    if line is None:
        raise ParseError("Cannot tokenize an absent line")
    if not delimiter:
        raise ParseError("Delimiter must be a non-empty string")


def count_fields(line: Optional[str], delimiter: str = config.DELIMITER) -> int:
    """Returns the number of fields in ``line``, counting empty ones."""
    _check_input(line, delimiter)
    return line.count(delimiter) + 1


def split_fields(line: Optional[str], delimiter: str = config.DELIMITER) -> Iterator[str]:
    """Lazily yields the trimmed fields of ``line`` in order.

    Raises:
        ParseError: If ``line`` is None or ``delimiter`` is empty. Raised on the
            call itself, not on first iteration.
    """
    _check_input(line, delimiter)
    return _generate_fields(line, delimiter)


def _generate_fields(line: str, delimiter: str) -> Iterator[str]:
    start = 0
    step = len(delimiter)
    while True:
        end = line.find(delimiter, start)
        if end == -1:
            yield line[start:].strip()
            return
        yield line[start:end].strip()
        start = end + step


class FieldCursor:
    """Cursor over the fields of one line, owned by whoever created it."""

    def __init__(self, line: Optional[str], delimiter: str = config.DELIMITER):
        _check_input(line, delimiter)
        self._line = line
        self._delimiter = delimiter
        self._position: Optional[int] = 0  # None once the last field was handed out

    @property
    def line(self) -> str:
        return self._line

    def has_next(self) -> bool:
        return self._position is not None

    def next_field(self) -> Optional[str]:
        """Returns the next trimmed field, or None when the line is exhausted."""
        if self._position is None:
            return None
        end = self._line.find(self._delimiter, self._position)
        if end == -1:
            field = self._line[self._position:]
            self._position = None
        else:
            field = self._line[self._position:end]
            self._position = end + len(self._delimiter)
        return field.strip()

    def remaining(self) -> int:
        """Number of fields not yet returned by :meth:`next_field`."""
        if self._position is None:
            return 0
        return self._line.count(self._delimiter, self._position) + 1

    def reset(self) -> None:
        self._position = 0

    def __iter__(self) -> "FieldCursor":
        return self

    def __next__(self) -> str:
        field = self.next_field()
        if field is None:
            raise StopIteration
        return field


class TokenizedLine:
    """Restartable view of a line's fields.

    Each iteration starts a fresh pass, so the fields can be walked any number
    of times without re-splitting up front.
    """

    def __init__(self, line: Optional[str], delimiter: str = config.DELIMITER):
        _check_input(line, delimiter)
        self.line = line
        self.delimiter = delimiter

    def __iter__(self) -> Iterator[str]:
        return _generate_fields(self.line, self.delimiter)

    def __len__(self) -> int:
        return count_fields(self.line, self.delimiter)

    def cursor(self) -> FieldCursor:
        return FieldCursor(self.line, self.delimiter)

    def __repr__(self) -> str:
        return f"TokenizedLine({self.line!r}, delimiter={self.delimiter!r})"
