"""Key-to-field bindings used by the option registries.

Responsibilities:
- Pair one option key with a coercer and a field assignment on a working
  options object.
- Group bindings into named registries so shared keys are declared once and
  reused by every domain that accepts them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, Union

from ..errors import OptionsError
from ..models.results import CoercionFailure
from ..parsing import Coercer

ApplyOutcome = Union[None, CoercionFailure, OptionsError]


class Binding(Protocol):
    """Apply one raw value to a working options object."""

    def apply(self, target: Any, raw_value: str) -> ApplyOutcome:
        """Write the coerced value into `target`, or describe why it failed.

        Returns:
            `None` on success, a `CoercionFailure` for a rejected value, or an
            `OptionsError` that must propagate unchanged.
        """


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """Coerce a raw value and assign it to `attribute`.

    Attributes:
        attribute: Dataclass field written on the working options object.
        coercer: Converts the raw string into a typed value.
        build: Optional constructor applied to the coerced value before the
            assignment, e.g. wrapping a capacity into a cache object.
    """

    attribute: str
    coercer: Coercer
    build: Callable[[Any], Any] | None = None

    def apply(self, target: Any, raw_value: str) -> ApplyOutcome:
        parsed = self.coercer(raw_value)
        if isinstance(parsed, CoercionFailure):
            return parsed
        if self.build is not None:
            parsed = self.build(parsed)
        setattr(target, self.attribute, parsed)
        return None


def bind(coercer: Coercer, *names: str) -> dict[str, FieldBinding]:
    """Bind every key in `names` to the same-named field using `coercer`."""

    return {name: FieldBinding(name, coercer) for name in names}


@dataclass(frozen=True, slots=True)
class OptionRegistry:
    """Named, read-only mapping from option key to binding."""

    name: str
    bindings: Mapping[str, Binding] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def __contains__(self, key: object) -> bool:
        return key in self.bindings

    def get(self, key: str) -> Binding | None:
        return self.bindings.get(key)

    def keys(self) -> frozenset[str]:
        return frozenset(self.bindings)
