"""Domain exceptions for option-string parsing diagnostics."""

from __future__ import annotations


class OptionsError(ValueError):
    """Base error carried by a failed parse or apply operation."""

    kind = "options"

    def __init__(
        self,
        *,
        detail: str,
        key: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a categorized options error."""

        super().__init__(detail)
        self.detail = detail
        self.key = key
        self.hint = hint


class MalformedGrammarError(OptionsError):
    """Raised when an option string does not follow `key=value;...` grammar."""

    kind = "malformed_grammar"


class UnrecognizedKeyError(OptionsError):
    """Raised when a key is unknown to every registry of a domain."""

    kind = "unrecognized_key"


class UnsupportedKeyError(OptionsError):
    """Raised for known option keys that are deliberately not implemented."""

    kind = "unsupported_key"


class ValueParseError(OptionsError):
    """Raised when a recognized key carries a value its coercer rejects."""

    kind = "value_parse"
