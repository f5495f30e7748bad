"""Explicit success/failure records returned by coercers and dispatchers.

Key types:
- `CoercionFailure`: reason a raw token could not be converted.
- `OptionsResult`: either a produced value or a categorized `OptionsError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ..errors import OptionsError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CoercionFailure:
    """A coercer's rejection of one raw token.

    Attributes:
        message: Human-readable cause, e.g. `unknown compression type: bogus`.
    """

    message: str


Coerced = Union[T, CoercionFailure]


@dataclass(frozen=True, slots=True)
class OptionsResult(Generic[T]):
    """Outcome of tokenizing or applying an option string.

    Exactly one of `value` and `error` is meaningful; `ok` tells which.
    """

    value: T | None = None
    error: OptionsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> OptionsResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: OptionsError) -> OptionsResult[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the produced value, raising the carried error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
