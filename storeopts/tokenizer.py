"""Tokenizer for `key1=value1;key2={nested=1};...` option strings.

The tokenizer only splits the grammar; values stay raw strings. A value that
starts with `{` is returned as the trimmed text between the matching braces so
a dispatcher can tokenize it again.
"""

from __future__ import annotations

from .errors import MalformedGrammarError
from .models.results import OptionsResult
from .parsing import WHITESPACE, trim
from .telemetry import emit

RawOptionMap = dict[str, str]


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _malformed(detail: str, fragment: str) -> OptionsResult[RawOptionMap]:
    emit("WARNING", "malformed", "tokenizer", fragment=fragment)
    return OptionsResult.failure(
        MalformedGrammarError(
            detail=f"{detail}: {fragment!r}",
            hint="Use `key=value` pairs separated by `;`, e.g. `block_size=4k;checksum=kCRC32c`.",
        )
    )


def parse_map(opts_str: str) -> OptionsResult[RawOptionMap]:
    """Split an option string into an ordered map of key to raw value.

    A key repeated in the input keeps the value of its last occurrence.

    Args:
        opts_str: Option string such as `write_buffer_size=4m;nested={a=1;b=2}`.

    Returns:
        Result carrying the raw option map, or a `MalformedGrammarError`.
    """

    opts = trim(opts_str)
    opts_map: RawOptionMap = {}
    pos = 0
    while pos < len(opts):
        eq_pos = opts.find("=", pos)
        if eq_pos == -1:
            return _malformed("mismatched key value pair, missing '='", opts[pos:])
        key = trim(opts[pos:eq_pos])
        if not key:
            return _malformed("empty key found", opts[pos:eq_pos + 1])

        pos = _skip_whitespace(opts, eq_pos + 1)
        if pos >= len(opts):
            opts_map[key] = ""
            break

        if opts[pos] == "{":
            depth = 1
            brace_pos = pos + 1
            while brace_pos < len(opts):
                if opts[brace_pos] == "{":
                    depth += 1
                elif opts[brace_pos] == "}":
                    depth -= 1
                    if depth == 0:
                        break
                brace_pos += 1
            if depth != 0:
                return _malformed("mismatched curly braces for nested options", opts[pos:])
            opts_map[key] = trim(opts[pos + 1:brace_pos])
            pos = _skip_whitespace(opts, brace_pos + 1)
            if pos < len(opts) and opts[pos] != ";":
                return _malformed("unexpected characters after nested value", opts[pos:])
            pos += 1
        else:
            sc_pos = opts.find(";", pos)
            if sc_pos == -1:
                opts_map[key] = trim(opts[pos:])
                break
            opts_map[key] = trim(opts[pos:sc_pos])
            pos = sc_pos + 1

    return OptionsResult.success(opts_map)
