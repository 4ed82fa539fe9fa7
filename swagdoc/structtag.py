"""Struct tag strings of the form ``key:"value" other:"value"``."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_PAIR = re.compile(r' *([^\x00-\x20:"\x7f]+):("(?:[^"\\]|\\.)*")', re.DOTALL)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_HEX_WIDTH = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")


def _unquote(quoted: str) -> str:
    """Decode a double-quoted string literal, raising ValueError if malformed."""
    if len(quoted) < 2 or quoted[0] != '"' or quoted[-1] != '"':
        raise ValueError(f"not a quoted string: {quoted!r}")
    body = quoted[1:-1]
    out: list[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char in ('"', "\n"):
            raise ValueError(f"invalid character in quoted string: {quoted!r}")
        if char != "\\":
            out.append(char)
            pos += 1
            continue
        pos += 1
        if pos >= len(body):
            raise ValueError(f"dangling escape in {quoted!r}")
        esc = body[pos]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            pos += 1
        elif esc in _HEX_WIDTH:
            width = _HEX_WIDTH[esc]
            digits = body[pos + 1 : pos + 1 + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise ValueError(f"invalid hex escape in {quoted!r}")
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise ValueError(f"escape out of range in {quoted!r}")
            out.append(chr(code))
            pos += 1 + width
        elif esc in _OCT_DIGITS:
            digits = body[pos : pos + 3]
            if len(digits) != 3 or not set(digits) <= _OCT_DIGITS:
                raise ValueError(f"invalid octal escape in {quoted!r}")
            code = int(digits, 8)
            if code > 0xFF:
                raise ValueError(f"octal escape out of range in {quoted!r}")
            out.append(chr(code))
            pos += 3
        else:
            raise ValueError(f"unknown escape \\{esc} in {quoted!r}")
    return "".join(out)


@dataclass(frozen=True)
class StructTag:
    """A parsed-on-demand struct tag such as ``json:"id" example:"1"``."""

    raw: str = ""

    @classmethod
    def from_literal(cls, literal: str) -> StructTag:
        """Build a tag from a raw literal, dropping backquotes."""
        return cls(literal.replace("`", ""))

    def _pairs(self) -> Iterator[tuple[str, str]]:
        pos = 0
        while self.raw[pos:].strip(" "):
            match = _PAIR.match(self.raw, pos)
            if match is None:
                return
            yield match.group(1), match.group(2)
            pos = match.end()

    def lookup(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when absent or malformed."""
        for name, quoted in self._pairs():
            if name == key:
                try:
                    return _unquote(quoted)
                except ValueError:
                    return None
        return None

    def get(self, key: str) -> str:
        """Return the value stored under ``key``, or an empty string."""
        value = self.lookup(key)
        return "" if value is None else value

    def __str__(self) -> str:
        return self.raw