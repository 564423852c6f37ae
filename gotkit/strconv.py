"""Integer to string conversion in arbitrary bases, with fixed-width parsing."""

from __future__ import annotations

import operator
from enum import Enum

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class IntKind(Enum):
    """Fixed-width integer kinds that bound the results of :func:`a2i`."""

    INT8 = ("int8", 8, True)
    INT16 = ("int16", 16, True)
    INT32 = ("int32", 32, True)
    INT64 = ("int64", 64, True)
    INT = ("int", 64, True)
    UINT8 = ("uint8", 8, False)
    UINT16 = ("uint16", 16, False)
    UINT32 = ("uint32", 32, False)
    UINT64 = ("uint64", 64, False)
    UINT = ("uint", 64, False)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def min(self) -> int:
        """Smallest value of the kind."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        """Largest value of the kind."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def i2a(value: int, base: int) -> str:
    """Format an integer in the given base (2 to 36), lower-case digits."""
    n = operator.index(value)
    if not 2 <= base <= 36:
        raise ValueError(f"invalid base {base}")
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while n:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


def i2dec(value: int) -> str:
    """Format an integer in decimal."""
    return i2a(value, 10)


def i2hex(value: int) -> str:
    """Format an integer in hexadecimal."""
    return i2a(value, 16)


def i2bin(value: int) -> str:
    """Format an integer in binary."""
    return i2a(value, 2)


def _syntax_error(text: str) -> ValueError:
    return ValueError(f"parsing {text!r}: invalid syntax")


def _underscore_ok(s: str) -> bool:
    """Underscores must sit between digits; a base prefix counts as a digit."""
    saw = "^"
    i = 0
    is_hex = False
    if len(s) >= 2 and s[0] == "0" and s[1].lower() in "bxo":
        i = 2
        saw = "0"
        is_hex = s[1].lower() == "x"
    for c in s[i:]:
        if "0" <= c <= "9" or (is_hex and "a" <= c.lower() <= "f"):
            saw = "0"
            continue
        if c == "_":
            if saw != "0":
                return False
            saw = "_"
            continue
        if saw == "_":
            return False
        saw = "!"
    return saw != "_"


def _parse_unsigned(s: str, base: int, text: str) -> int:
    if not s:
        raise _syntax_error(text)
    original = s
    auto_base = base == 0
    if auto_base:
        base = 10
        if s[0] == "0":
            prefix = s[1].lower() if len(s) >= 3 else ""
            if prefix == "b":
                base, s = 2, s[2:]
            elif prefix == "o":
                base, s = 8, s[2:]
            elif prefix == "x":
                base, s = 16, s[2:]
            else:
                base, s = 8, s[1:]
    elif not 2 <= base <= 36:
        raise ValueError(f"parsing {text!r}: invalid base {base}")

    n = 0
    saw_underscore = False
    for c in s:
        if c == "_" and auto_base:
            saw_underscore = True
            continue
        digit = _DIGITS.find(c.lower()) if c.isascii() else -1
        if digit < 0 or digit >= base:
            raise _syntax_error(text)
        n = n * base + digit
    if saw_underscore and not _underscore_ok(original):
        raise _syntax_error(text)
    return n


def a2i(text: str, base: int, kind: IntKind = IntKind.INT) -> int:
    """Parse ``text`` as an integer of ``kind``.

    A ``base`` of 0 detects the base from a ``0b``, ``0o``, ``0x`` or ``0``
    prefix and allows underscores between digits. Raises ValueError on bad
    syntax, a bad base, or a value outside the range of ``kind``.
    """
    s = text
    negative = False
    if kind.signed and s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    n = _parse_unsigned(s, base, text)
    if negative:
        n = -n
    if not kind.min <= n <= kind.max:
        raise ValueError(f"parsing {text!r}: value out of range for {kind.label}")
    return n