"""C source-string escaping for embedding bytes in code or log output."""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Final

from quotable.core.render import Renderable, as_bytes

# Bytes emitted as themselves.
SAFE_BYTES: Final = frozenset(
    (string.ascii_letters + string.digits + " ~!@#$%^&*()_+`-={}|\\[]:;'<>,.?/").encode("ascii")
)

_ESCAPE_TABLE: Final[list[str]] = []


def _init_escape_table() -> None:
    for i in range(256):
        if i in SAFE_BYTES:
            s = chr(i)
        elif i == ord('"'):
            s = '\\"'
        elif i == ord("\n"):
            s = "\\n"
        else:
            s = f"\\x{i:02x}"
        _ESCAPE_TABLE.append(s)


_init_escape_table()


def c_escape(data: bytes) -> str:
    """Escape data for a C string literal body. No surrounding quotes."""
    return "".join(_ESCAPE_TABLE[b] for b in data)


@dataclass(frozen=True, order=True, init=False, repr=False)
class CSourceEscape(Renderable):
    """Render bytes as printable ASCII with C-style backslash escapes.

    Equal byte strings escape identically, so instances compare, hash and
    sort by their wrapped bytes.
    """

    data: bytes

    def __init__(self, data: Any) -> None:
        object.__setattr__(self, "data", as_bytes(data))

    def _chunks(self) -> Iterator[str]:
        for b in self.data:
            yield _ESCAPE_TABLE[b]

    def __str__(self) -> str:
        return c_escape(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"CSourceEscape({self.data!r})"
