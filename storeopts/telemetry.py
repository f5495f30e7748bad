"""Structured option-parsing log events.

Responsibilities:
- Emit concise, deterministic single-line events through `loguru`.
- Keep the library silent until a host enables the `storeopts` namespace.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE = "storeopts"
_EVENT_PREFIX = "[options]"
# Option keys come from user input; long ones are cut to keep lines scannable.
_MAX_TOKEN_LENGTH = 64
_SAFE_PUNCTUATION = frozenset("-_.:/")


def _event_token(value: object) -> str:
    """Render one field value as a single shell-safe token."""

    raw = str(value).strip()
    if not raw:
        return "none"
    if len(raw) > _MAX_TOKEN_LENGTH:
        raw = raw[:_MAX_TOKEN_LENGTH] + "..."
    return "".join(
        character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
        for character in raw
    )


def format_event(level: str, event: str, domain: str, **context: object) -> str:
    """Build one `[options] level=... domain=... event=...` line with sorted context."""

    fields: list[tuple[str, object]] = [("level", level), ("domain", domain), ("event", event)]
    fields.extend(sorted(context.items()))
    return " ".join([_EVENT_PREFIX, *(f"{name}={_event_token(value)}" for name, value in fields)])


def emit(level: str, event: str, domain: str, **context: object) -> None:
    """Emit one structured option-parsing event."""

    logger.log(level, format_event(level, event, domain, **context))


def configure_logging(level: str = "WARNING", sink: TextIO | None = None) -> None:
    """Route `storeopts` events to `sink` (stderr by default) at `level`."""

    logger.remove()
    logger.add(sink or sys.stderr, format="{message}", level=level.upper(), colorize=False)
    logger.enable(_PACKAGE)
