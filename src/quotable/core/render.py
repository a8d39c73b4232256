"""Shared rendering plumbing: byte views, sinks, and write errors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Protocol


class QuotableError(Exception):
    """Base class for quotable errors."""


class WriteError(QuotableError):
    """The output sink refused rendered text."""


class Sink(Protocol):
    """Anything rendered text can be written into (io.StringIO, sys.stdout, ...)."""

    def write(self, s: str, /) -> Any: ...


def as_bytes(value: Any) -> bytes:
    """Return a read-only byte view of value.

    Accepts buffer-protocol objects (bytes, bytearray, memoryview, array),
    objects defining __bytes__, str (UTF-8, lone surrogates from undecodable
    argv or filenames map back to their original bytes), and re-iterable
    collections of ints 0..255. One-shot iterators are rejected because a
    view must read the same bytes on every render. Raises TypeError for
    anything else.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8", errors="surrogateescape")
    if hasattr(value, "__bytes__"):
        return bytes(value)
    try:
        return bytes(memoryview(value))
    except TypeError:
        pass
    if isinstance(value, Iterator):
        raise TypeError(f"cannot view one-shot {type(value).__name__} as bytes")
    if isinstance(value, Iterable):
        try:
            return bytes(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot view {type(value).__name__} as bytes: {e}") from None
    raise TypeError(f"cannot view {type(value).__name__} as bytes")


def write_chunks(sink: Sink, chunks: Iterable[str]) -> None:
    """Write chunks to sink in order. Sink failures become WriteError.

    Text written before a failure is left in the sink.
    """
    for chunk in chunks:
        try:
            sink.write(chunk)
        except (OSError, ValueError) as e:
            raise WriteError(f"write failed: {e}") from e


class Renderable(ABC):
    """Base for formatters. Subclasses implement _chunks()."""

    @abstractmethod
    def _chunks(self) -> Iterator[str]:
        """Yield the rendered text in pieces."""

    def write_to(self, sink: Sink) -> None:
        """Render into sink."""
        write_chunks(sink, self._chunks())

    def __str__(self) -> str:
        return "".join(self._chunks())

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)
