"""Small text helpers: names, numbers, character classes and escaping."""

from __future__ import annotations

import logging
import random
import re
import unicodedata
from typing import Iterable, List, Optional, Sequence, TypeVar, Union

from gotkit.ranges import EmptyRange, Range
from gotkit.strconv import IntKind, a2i

T = TypeVar("T")

logger = logging.getLogger(__name__)

NOT_A_NUMBER_MESSAGE = "您这数字有点不太对劲啊。要不您回去再瞅瞅？"
OUT_OF_RANGE_MESSAGE = "太大或是太小，都不太行。适合的，才是坠吼的。"

_SPACE_RE = re.compile(r"[\t\n\f\r ]")
_SPACE_REPLACEMENTS = {" ": " ", "\n": "\\n", "\t": "\\t"}


def get_name(first_name: str, last_name: str = "") -> str:
    """Full name from first and optional last name."""
    if last_name:
        return f"{first_name} {last_name}"
    return first_name


def get_user_name_from_string(text: str) -> Optional[str]:
    """User name from an ``@name`` mention, or None if ``text`` is not one."""
    if len(text) > 1 and text.startswith("@"):
        return text.strip("@")
    return None


def random_choice(items: Sequence[T]) -> Optional[T]:
    """A random element of ``items``, or None if it is empty."""
    if not items:
        return None
    return random.choice(items)


def strings_to_ints(values: Iterable[str]) -> List[int]:
    """Parse decimal 64-bit integers, skipping and logging those that fail."""
    result = []
    for value in values:
        try:
            result.append(a2i(value, 10, IntKind.INT64))
        except ValueError:
            logger.error("parse str to int failed: %r", value)
    return result


def is_number(char: str) -> bool:
    """True if ``char`` is a Unicode number (categories Nd, Nl, No)."""
    return unicodedata.category(char).startswith("N")


def is_upper(char: str) -> bool:
    """True if ``char`` is an upper-case letter."""
    return unicodedata.category(char) == "Lu"


def is_lower(char: str) -> bool:
    """True if ``char`` is a lower-case letter."""
    return unicodedata.category(char) == "Ll"


def replace_space(text: str) -> str:
    """Escape newlines and tabs; turn other blanks into a plain space."""
    return _SPACE_RE.sub(lambda m: _SPACE_REPLACEMENTS.get(m.group(), " "), text)


def parse_number(text: str, rng: Union[Range, EmptyRange, None] = None) -> int:
    """Parse a decimal integer that must lie within ``rng``.

    An empty or missing range accepts any number. Raises ValueError with a
    message fit for the user when ``text`` is not a number or is out of range.
    """
    try:
        number = a2i(text, 10, IntKind.INT)
    except ValueError as exc:
        raise ValueError(NOT_A_NUMBER_MESSAGE) from exc
    if rng is None or rng.is_empty() or rng.cover(number):
        return number
    raise ValueError(OUT_OF_RANGE_MESSAGE)