"""Warnings for flag declarations that parse, but probably not as intended."""

from __future__ import annotations

import sys


class FlagsWarning(UserWarning):
    """Emitted when a declaration or validator is likely a mistake:

    - A flag named `noX` shadows the `--noX` negation of a boolean flag `X`.
    - A validator returns `False` instead of raising to reject a value.

    To silence these:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=FlagsWarning)
    """


def external_stacklevel() -> int:
    """`stacklevel` for a `warnings.warn()` call made by the caller of this
    function, pointing at the first frame outside of this package."""
    package = __name__.rpartition(".")[0]
    frame = sys._getframe(1)
    level = 1
    while frame.f_back is not None:
        module = frame.f_globals.get("__name__", "")
        if module != package and not module.startswith(package + "."):
            break
        frame = frame.f_back
        level += 1
    return level
