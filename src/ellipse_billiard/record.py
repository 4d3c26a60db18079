"""Fixed-width text records for tabular output."""

from __future__ import annotations

from typing import TextIO


class Record:
    """Line buffer of right-aligned fields separated by a single blank."""

    def __init__(self, max_length: int = 4096) -> None:
        """Allocate a record buffer of max_length characters."""
        self._parts: list[str] = []
        self._max_length = max_length
        self._length = 0

    def init(self) -> None:
        """Clear the record."""
        self._parts = []
        self._length = 0

    def append(self, string: str, width: int = 0) -> None:
        """Append a field, right-aligned to ``width``; fields past max_length are cut."""
        field = string.rjust(width)
        sep = 1 if self._parts else 0
        remaining = self._max_length - self._length - sep
        if remaining <= 0:
            return
        field = field[:remaining]
        if sep:
            self._parts.append(' ')
        self._parts.append(field)
        self._length += sep + len(field)

    def append_float(self, value: float, width: int, decimals: int) -> None:
        """Append a fixed-point number."""
        self.append(f'{value:.{decimals}f}', width)

    def append_exp(self, value: float, width: int, decimals: int) -> None:
        """Append a number in exponent form."""
        self.append(f'{value:.{decimals}e}', width)

    def get_line(self) -> str:
        """Return current record as a string without writing or re-initializing."""
        return ''.join(self._parts).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the current record line (if any) and re-initialize."""
        line = self.get_line()
        if line:
            stream.write(line + '\n')
        self.init()
