"""Double-quoted ASCII rendering with hex escapes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from quotable.core.wrapper import ByteViewWrapper, T

# Printable ASCII passes through; only the quote is escaped. Backslash and
# newline are not special-cased, unlike c_escape().
_QUOTE_TABLE: Final[list[str]] = [
    '\\"' if i == ord('"') else chr(i) if 0x20 <= i <= 0x7E else f"\\x{i:02x}"
    for i in range(256)
]


def ascii_quote(data: bytes) -> str:
    """Return data as a double-quoted string with \\xHH escapes."""
    return '"' + "".join(_QUOTE_TABLE[b] for b in data) + '"'


class AsciiQuote(ByteViewWrapper[T]):
    """Render the wrapped value's bytes double-quoted, escaping the rest.

        >>> print(AsciiQuote(b"hello\\x88"))
        "hello\\x88"
    """

    @property
    def value(self) -> T:
        return self._value

    def _chunks(self) -> Iterator[str]:
        yield ascii_quote(self._bytes())
