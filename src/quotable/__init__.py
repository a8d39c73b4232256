"""
quotable - Display wrappers that quote, escape and hex-encode data.

Render strings as POSIX shell words, bytes as C string bodies, lowercase
hex or double-quoted ASCII, and join displayable items with a separator.
"""

from __future__ import annotations

__version__ = "0.1.0"

from quotable.core.ascii import AsciiQuote
from quotable.core.cescape import CSourceEscape
from quotable.core.hexenc import HexEncode
from quotable.core.join import JoinWithSeparator
from quotable.core.render import QuotableError, WriteError
from quotable.core.shell import ShellSingleQuote, shell_join

__all__ = [
    "AsciiQuote",
    "CSourceEscape",
    "HexEncode",
    "JoinWithSeparator",
    "QuotableError",
    "ShellSingleQuote",
    "WriteError",
    "shell_join",
    "__version__",
]
