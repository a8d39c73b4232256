"""Deferred join of displayable items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from quotable.core.render import Renderable


@dataclass(frozen=True, repr=False)
class JoinWithSeparator(Renderable):
    """Render each item followed by the separator, including the last.

        >>> str(JoinWithSeparator(" ", lambda: [1, 2, 3]))
        '1 2 3 '

    make_items is called on every render, so each render sees a freshly
    produced iterable. The trailing separator is intentional; callers rely
    on it (a newline separator terminates every line).
    """

    separator: Any
    make_items: Callable[[], Iterable[Any]]

    def _chunks(self) -> Iterator[str]:
        for item in self.make_items():
            yield str(item)
            yield str(self.separator)

    def __repr__(self) -> str:
        return f"JoinWithSeparator({self.separator!r}, {self.make_items!r})"
