"""Single-pass parser for argument vectors.

The parser sets values on the flags it is given and raises `FlagError`s carrying
positional context. It never prints or exits; reporting is left to the registry.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence

from ._errors import (
    FlagValueError,
    FlagValueParseError,
    InvalidArgumentError,
    MissingRequiredFlagError,
    UnrecognizedFlagError,
)
from ._flags import Flag

END_OF_FLAGS = "--"
NEGATION_PREFIX = "no"
HELP_FLAG = "help"


@dataclasses.dataclass(frozen=True)
class ParseResult:
    trailing_args: list[str]
    """Arguments after an explicit `--`, untouched."""
    help_requested: bool


def split_flag_token(arg: str) -> tuple[str, str | None]:
    """Split a `--name` or `--name=value` token into its name and value.

    "--name" => ("name", None)
    "--name=a=b" => ("name", "a=b")
    """
    name, equals, value = arg[2:].partition("=")
    return name, (value if equals else None)


def parse_args(
    flags: Mapping[str, Flag[Any]],
    args: Sequence[str],
    ignore_unrecognized: bool = False,
) -> ParseResult:
    """Walk `args` once, setting the value of each flag that appears.

    Accepted forms are `--name`, `--name=value`, `--name value` and `--noname`
    (shorthand for `--name=0` when no flag is literally called `noname`).
    """
    # Working copy. A flag and the value token it consumes are merged into one
    # entry, so error context underlines both.
    tokens = list(args)

    i = 0
    while i < len(tokens):
        arg = tokens[i]

        if arg == END_OF_FLAGS:
            return ParseResult(trailing_args=tokens[i + 1 :], help_requested=False)
        if not arg.startswith("--"):
            raise InvalidArgumentError(f'Invalid argument "{arg}"').with_context(
                tokens, i
            )

        name, value = split_flag_token(arg)

        # Space-separated form: --name value.
        if (
            value is None
            and i + 1 < len(tokens)
            and not tokens[i + 1].startswith("--")
        ):
            value = tokens.pop(i + 1)
            tokens[i] = f"{arg} {value}"

        # Negated form: --noname.
        if name not in flags and value is None and name.startswith(NEGATION_PREFIX):
            name = name[len(NEGATION_PREFIX) :]
            value = "0"

        if name in flags:
            try:
                flags[name].set(value)
            except FlagValueError as e:
                raise FlagValueParseError.from_error(e).with_context(tokens, i) from e
        elif not ignore_unrecognized:
            raise UnrecognizedFlagError(
                f'Unrecognized flag name "{arg}"'
            ).with_context(tokens, i)
        i += 1

    missing = [
        flag.name for flag in flags.values() if flag.is_required and not flag.is_set
    ]
    if len(missing) > 0:
        raise MissingRequiredFlagError(missing).with_context(tokens, None)

    help_requested = HELP_FLAG in flags and bool(flags[HELP_FLAG].get())
    return ParseResult(trailing_args=[], help_requested=help_requested)
