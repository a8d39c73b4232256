"""Transparent wrappers that own a value and render its bytes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from quotable.core.render import Renderable, as_bytes

T = TypeVar("T")


class ByteViewWrapper(Renderable, Generic[T]):
    """Own a value with a byte view and behave as it, except when rendered.

    Attribute access, len(), iteration, indexing, bytes(), equality and
    hashing forward to the wrapped value. str() and repr() both render.
    """

    def __init__(self, value: T) -> None:
        as_bytes(value)  # reject values without a byte view up front
        self._value = value

    def _bytes(self) -> bytes:
        return as_bytes(self._value)

    def __getattr__(self, name: str) -> Any:
        if name == "_value":
            raise AttributeError(name)
        return getattr(self._value, name)

    def __len__(self) -> int:
        return len(self._value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)  # type: ignore[call-overload]

    def __getitem__(self, key: Any) -> Any:
        return self._value[key]  # type: ignore[index]

    def __contains__(self, item: Any) -> bool:
        return item in self._value  # type: ignore[operator]

    def __bytes__(self) -> bytes:
        return self._bytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteViewWrapper):
            other = other._value
        return self._value == other

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return str(self)
