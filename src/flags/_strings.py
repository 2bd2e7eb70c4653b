"""Utilities and constants for working with strings."""

from __future__ import annotations

import functools
import json
import re
from typing import Any, Sequence


def wrap_lines(text: str, width: int, first_width: int | None = None) -> list[str]:
    """Greedily break `text` into lines of at most `width` characters.

    Explicit line breaks are kept, leading indentation of each input line is kept,
    and words longer than a line are never split. `first_width`, if set, replaces
    `width` for the first output line.
    """
    lines: list[str] = []
    for paragraph in text.split("\n"):
        stripped = paragraph.lstrip(" ")
        current = paragraph[: len(paragraph) - len(stripped)]
        has_word = False
        for word in stripped.split():
            limit = width if first_width is None or len(lines) > 0 else first_width
            if has_word and len(current) + 1 + len(word) > limit:
                lines.append(current)
                current = word
            elif has_word:
                current = f"{current} {word}"
            else:
                current += word
            has_word = True
        lines.append(current)
    return lines


def caret_underline(tokens: Sequence[str], index: int, indent: int = 2) -> str:
    """Build a line of carets underlining `tokens[index]`, assuming the tokens are
    rendered joined by single spaces after `indent` columns.

    (["--a=1", "--b"], 1) => "        ^^^"
    """
    offset = indent + len(" ".join(tokens[:index])) + (1 if index > 0 else 0)
    return " " * offset + "^" * max(1, len(tokens[index]))


def format_literal(value: Any) -> str:
    """Render a default value the way it would be written as a literal."""
    return json.dumps(value, default=repr)


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)
