"""Generic per-domain dispatch of raw option maps onto options objects.

Responsibilities:
- Copy the caller's base options and apply each raw key through the first
  registry that recognizes it.
- Translate unknown keys, reserved keys, and coercion failures into
  categorized `OptionsError` results without mutating the base.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from ..errors import OptionsError, UnrecognizedKeyError, UnsupportedKeyError, ValueParseError
from ..models.results import CoercionFailure, OptionsResult
from ..telemetry import emit
from ..tokenizer import parse_map
from .bindings import Binding, OptionRegistry

O = TypeVar("O")


@dataclass(frozen=True, slots=True)
class Dispatcher(Generic[O]):
    """Registry chain for one options domain.

    Attributes:
        domain: Short domain label used in logs (`db`, `cf`, `table`, `mutable`).
        registries: Registries tried in priority order; first match wins.
        unsupported: Known keys that are deliberately rejected as unsupported.
        unrecognized_label: Prefix of the error message for unknown keys.
    """

    domain: str
    registries: tuple[OptionRegistry, ...]
    unsupported: frozenset[str] = frozenset()
    unrecognized_label: str = "unrecognized option"

    def lookup(self, key: str) -> Binding | None:
        """Return the first binding registered for `key`, if any."""

        for registry in self.registries:
            binding = registry.get(key)
            if binding is not None:
                return binding
        return None

    def known_keys(self) -> frozenset[str]:
        """Return every accepted or reserved key of this domain."""

        keys: set[str] = set(self.unsupported)
        for registry in self.registries:
            keys.update(registry.keys())
        return frozenset(keys)

    def apply(self, base: O, options: str | Mapping[str, str]) -> OptionsResult[O]:
        """Return a copy of `base` updated from an option string or raw map.

        Keys absent from `options` keep the base values. The base object is
        never modified; on failure no options object is returned.
        """

        if isinstance(options, str):
            tokenized = parse_map(options)
            if not tokenized.ok:
                return OptionsResult.failure(tokenized.error)  # type: ignore[arg-type]
            opts_map: Mapping[str, str] = tokenized.unwrap()
        else:
            opts_map = options

        working = replace(base)  # type: ignore[type-var]
        for key, raw_value in opts_map.items():
            error = self._apply_one(working, key, raw_value)
            if error is not None:
                emit("WARNING", "rejected", self.domain, key=key, kind=error.kind)
                return OptionsResult.failure(error)
            emit("DEBUG", "applied", self.domain, key=key)
        return OptionsResult.success(working)

    def _apply_one(self, working: O, key: str, raw_value: str) -> OptionsError | None:
        binding = self.lookup(key)
        if binding is None:
            if key in self.unsupported:
                return UnsupportedKeyError(
                    detail=f"not supported: {key}",
                    key=key,
                    hint="This option is recognized but cannot be set from a string yet.",
                )
            return UnrecognizedKeyError(detail=f"{self.unrecognized_label}: {key}", key=key)

        outcome = binding.apply(working, raw_value)
        if isinstance(outcome, CoercionFailure):
            return ValueParseError(detail=f"error parsing {key}: {outcome.message}", key=key)
        return outcome
