"""Lowercase hexadecimal rendering."""

from __future__ import annotations

from collections.abc import Iterator

from quotable.core.wrapper import ByteViewWrapper, T


class HexEncode(ByteViewWrapper[T]):
    """Render the wrapped value's bytes as lowercase hex digit pairs.

        >>> str(HexEncode(b"hello"))
        '68656c6c6f'

    The wrapped value is readable and writable through .value and
    item assignment. Mutation is for a single holder at a time.
    """

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        ByteViewWrapper.__init__(self, value)

    def __setitem__(self, key, item) -> None:
        self._value[key] = item  # type: ignore[index]

    def _chunks(self) -> Iterator[str]:
        yield self._bytes().hex()
