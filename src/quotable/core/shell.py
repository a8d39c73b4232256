"""POSIX shell single-quoting for command reconstruction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from quotable.core.render import Renderable

# Closes the quote, emits an escaped quote, reopens.
ESCAPED_QUOTE = "'\\''"


@dataclass(frozen=True, repr=False)
class ShellSingleQuote(Renderable):
    """Render a string as a single-quoted shell word.

    Everything inside single quotes is literal to the shell except the single
    quote itself, which cannot be escaped there, so each one closes the
    quote, adds an escaped quote, and reopens.

        >>> str(ShellSingleQuote("hi'there'yall"))
        "'hi'\\\\''there'\\\\''yall'"
    """

    text: str

    def _chunks(self) -> Iterator[str]:
        first, *rest = self.text.split("'")
        yield "'" + first
        for segment in rest:
            yield ESCAPED_QUOTE + segment
        yield "'"

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"ShellSingleQuote({self.text!r})"


def shell_join(args: Iterable[str]) -> str:
    """Join arguments into a command line, quoting every one of them."""
    return " ".join(str(ShellSingleQuote(a)) for a in args)
