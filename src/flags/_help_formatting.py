"""Help text and console reporting. This is the only module that prints or exits."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any, NoReturn

import termcolor

from . import _settings

if TYPE_CHECKING:
    from ._errors import FlagError
    from ._flags import Flag
    from ._registry import FlagRegistry


def default_usage_info() -> str:
    prog = os.path.basename(sys.argv[0]) if len(sys.argv) > 0 else ""
    return f"Usage: {prog} [options]"


def _highlight_invocation(flag: Flag[Any], help_string: str) -> str:
    invocation = flag.invocation()
    return help_string.replace(
        invocation,
        termcolor.colored(invocation, _settings.ACCENT_COLOR, attrs=["bold"]),
        1,
    )


def format_help(registry: FlagRegistry) -> str:
    """Render the usage banner followed by one block per non-secret flag, in
    declaration order."""
    usage_info = (
        registry.usage_info
        if registry.usage_info is not None
        else default_usage_info()
    )
    parts: list[str] = []
    if usage_info:
        parts.append(usage_info + "\n")
    parts.append("Options:")
    for flag in registry.values():
        if flag.is_secret:
            continue
        parts.append(_highlight_invocation(flag, flag.to_help_string()))
    return "\n".join(parts)


def help_and_exit(registry: FlagRegistry) -> NoReturn:
    print(format_help(registry), flush=True)
    sys.exit(0)


def error_and_exit(error: FlagError) -> NoReturn:
    header, line_break, rest = error.format().partition("\n")
    print(
        termcolor.colored(header, "red", attrs=["bold"]) + line_break + rest,
        file=sys.stderr,
        flush=True,
    )
    sys.exit(1)
