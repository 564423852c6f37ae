"""A container holding either a value or an error, with combinators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class UnwrapError(RuntimeError):
    """Raised when a value is taken out of an error result."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error; an error result carries no usable value."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """A successful result holding ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        """A failed result holding ``error``."""
        return cls(error=error)

    @classmethod
    def wrap(cls, value: Optional[T], error: Optional[BaseException]) -> "Result[T]":
        """Build a result from a value and an optional error."""
        return cls(value=value, error=error)

    def is_error(self) -> bool:
        """True if the result holds an error."""
        return self.error is not None

    def is_ok(self) -> bool:
        """True if the result holds no error."""
        return self.error is None

    def expect(self, message: str) -> T:
        """Return the value, or raise UnwrapError with ``message``."""
        if self.is_error():
            raise UnwrapError(message) from self.error
        return self.value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Return the value, or raise UnwrapError."""
        if self.is_error():
            raise UnwrapError("get value from an error result") from self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if this is an error."""
        if self.is_error():
            return default
        return self.value  # type: ignore[return-value]

    def get(self) -> Tuple[Optional[T], Optional[BaseException]]:
        """Return the pair ``(value, error)``."""
        return self.value, self.error

    def or_(self, other: "Result[T]") -> "Result[T]":
        """Return self if ok, otherwise ``other``."""
        return other if self.is_error() else self

    def then(self, fn: Callable[[T], T]) -> "Result[T]":
        """Apply ``fn`` to the value of an ok result."""
        if self.is_error():
            return self
        return Result.ok(fn(self.value))  # type: ignore[arg-type]

    def else_(self, fn: Callable[[BaseException], T]) -> "Result[T]":
        """Turn an error into an ok result using ``fn``."""
        if self.is_error():
            return Result.ok(fn(self.error))  # type: ignore[arg-type]
        return self

    def then_or(self, fn: Callable[[T], T], other: T) -> "Result[T]":
        """Map the value with ``fn``, or yield an ok result of ``other`` on error."""
        if self.is_error():
            return Result.ok(other)
        return Result.ok(fn(self.value))  # type: ignore[arg-type]

    def then_else(self, fn: Callable[[BaseException], "Result[T]"]) -> "Result[T]":
        """Replace an error result by what ``fn`` returns for its error."""
        if self.is_error():
            return fn(self.error)  # type: ignore[arg-type]
        return self

    def map(self, fn: Callable[[T], T]) -> Any:
        """Return ``fn(value)``, or the stored value unchanged on error."""
        if self.is_error():
            return self.value
        return fn(self.value)  # type: ignore[arg-type]

    def map_or(self, fn: Callable[[T], T], default: T) -> T:
        """Return ``fn(value)``, or ``default`` on error."""
        if self.is_error():
            return default
        return fn(self.value)  # type: ignore[arg-type]

    def map_or_else(
        self,
        fn_ok: Callable[[T], T],
        fn_fail: Callable[[BaseException], T],
    ) -> T:
        """Return ``fn_ok(value)`` or ``fn_fail(error)``."""
        if self.is_error():
            return fn_fail(self.error)  # type: ignore[arg-type]
        return fn_ok(self.value)  # type: ignore[arg-type]

    def do(self, fn: Callable[[T], Any]) -> "Result[T]":
        """Call ``fn`` with the value of an ok result; return self."""
        if self.is_ok():
            fn(self.value)  # type: ignore[arg-type]
        return self

    def do_error(self, fn: Callable[[BaseException], Any]) -> "Result[T]":
        """Call ``fn`` with the error of an error result; return self."""
        if self.is_error():
            fn(self.error)  # type: ignore[arg-type]
        return self


def in_result(result: Result[Any], value: Any) -> bool:
    """True if ``result`` is ok and its value equals ``value``."""
    return result.is_ok() and result.value == value