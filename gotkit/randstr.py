"""Random strings drawn from a fixed alphabet."""

from __future__ import annotations

import random
from typing import Optional

CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
DEFAULT_LENGTH = 8


class RandStr:
    """Generator of random byte strings over the bytes of ``seed``."""

    def __init__(
        self,
        seed: str = CHARS,
        length: int = DEFAULT_LENGTH,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._seed = seed.encode("utf-8")
        if not self._seed:
            raise ValueError("seed must not be empty")
        self.length = length
        self._rng = rng if rng is not None else random.Random()

    def rand_bytes_len(self, length: int) -> bytes:
        """Random bytes of ``length``; 0 gives empty, negative the default length."""
        if length == 0:
            return b""
        if length < 0:
            length = DEFAULT_LENGTH
        return bytes(self._rng.choice(self._seed) for _ in range(length))

    def rand_bytes(self) -> bytes:
        """Random bytes of this generator's length."""
        return self.rand_bytes_len(self.length)

    def rand_str(self) -> str:
        """Random string of this generator's length."""
        return self.rand_bytes().decode("utf-8", errors="replace")

    def rand_str_len(self, length: int) -> str:
        """Random string of ``length``, as for :meth:`rand_bytes_len`."""
        return self.rand_bytes_len(length).decode("utf-8", errors="replace")


_default = RandStr()


def rand_bytes_len(length: int) -> bytes:
    """Random bytes of ``length`` from the default alphabet."""
    return _default.rand_bytes_len(length)


def rand_bytes() -> bytes:
    """Random bytes of the default length."""
    return _default.rand_bytes()


def rand_str() -> str:
    """Random string of the default length."""
    return _default.rand_str()


def rand_str_len(length: int) -> str:
    """Random string of ``length`` from the default alphabet."""
    return _default.rand_str_len(length)