"""Flag registries and the module-level default registry."""

from __future__ import annotations

import sys
import warnings
from typing import Any, Iterator, Mapping, Sequence, cast

from . import _help_formatting, _parser
from ._errors import (
    DuplicateFlagError,
    FlagError,
    RegistrationAfterParseError,
    UnknownFlagError,
)
from ._flags import (
    FLAG_CLASSES,
    BooleanFlag,
    Flag,
    FlagKind,
    IntegerFlag,
    MultiStringFlag,
    NumberFlag,
    StringFlag,
    StringListFlag,
)
from ._singleton import MISSING
from ._warnings import FlagsWarning, external_stacklevel


class FlagRegistry(Mapping[str, Flag[Any]]):
    """A set of declared flags, mapping names to `Flag` objects in declaration
    order.

    A registry is filled by the `define_*()` methods, frozen by the first
    successful call to `parse()`, and emptied by `reset()`. It always contains the
    built-in, secret `--help` flag.

    Args:
        exit_on_error: If True, parse errors are printed to stderr and the process
            exits with status 1. If False, they are raised.
        usage_info: Banner shown above the flags in help text. Defaults to
            "Usage: <prog> [options]"; an empty string hides it.
    """

    def __init__(
        self, exit_on_error: bool = True, usage_info: str | None = None
    ) -> None:
        self._flags: dict[str, Flag[Any]] = {}
        self._parse_called = False
        self.exit_on_error = exit_on_error
        self.usage_info = usage_info
        self._register_internal_flags()

    # Mapping interface.

    def __getitem__(self, name: str) -> Flag[Any]:
        try:
            return self._flags[name]
        except KeyError:
            raise UnknownFlagError(f'Unknown flag "{name}"') from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __repr__(self) -> str:
        return f"FlagRegistry({list(self._flags)!r}, parse_called={self._parse_called})"

    # Configuration.

    @property
    def parse_called(self) -> bool:
        return self._parse_called

    def set_exit_on_error(self, value: bool) -> None:
        """If True, then the process will exit on a parse error. If False, an
        error is raised. Set to False in tests."""
        self.exit_on_error = value

    def set_usage_info(self, value: str | None) -> None:
        """Set extra usage information shown in the help message, above the
        flags."""
        self.usage_info = value

    # Declaration.

    def define_string(
        self, name: str, default_value: str = MISSING, description: str | None = None
    ) -> StringFlag:
        """Defines a string flag. e.g. --servername=bob"""
        flag = self._define(FlagKind.STRING, name, default_value, description)
        return cast(StringFlag, flag)

    def define_boolean(
        self, name: str, default_value: bool = MISSING, description: str | None = None
    ) -> BooleanFlag:
        """Defines a boolean flag. e.g. --turnonlights"""
        flag = self._define(FlagKind.BOOLEAN, name, default_value, description)
        return cast(BooleanFlag, flag)

    def define_integer(
        self, name: str, default_value: int = MISSING, description: str | None = None
    ) -> IntegerFlag:
        """Defines an integer flag. e.g. --age=12"""
        flag = self._define(FlagKind.INTEGER, name, default_value, description)
        return cast(IntegerFlag, flag)

    def define_number(
        self, name: str, default_value: float = MISSING, description: str | None = None
    ) -> NumberFlag:
        """Defines a number flag. e.g. --number=1.345"""
        flag = self._define(FlagKind.NUMBER, name, default_value, description)
        return cast(NumberFlag, flag)

    def define_string_list(
        self,
        name: str,
        default_value: Sequence[str] = MISSING,
        description: str | None = None,
    ) -> StringListFlag:
        """Defines a string list flag. e.g. --animal=frog,bat,chicken"""
        flag = self._define(FlagKind.STRING_LIST, name, default_value, description)
        return cast(StringListFlag, flag)

    def define_multi_string(
        self,
        name: str,
        default_value: Sequence[str] = MISSING,
        description: str | None = None,
    ) -> MultiStringFlag:
        """Defines a multi string flag. e.g. --allowedip=127.0.0.1 --allowedip=::1"""
        flag = self._define(FlagKind.MULTI_STRING, name, default_value, description)
        return cast(MultiStringFlag, flag)

    def _define(
        self, kind: FlagKind, name: str, default_value: Any, description: str | None
    ) -> Flag[Any]:
        if self._parse_called:
            raise RegistrationAfterParseError(
                "Can not register new flags after parse()"
            )
        if name in self._flags:
            raise DuplicateFlagError(f'Flag already defined: "{name}"')

        # --noX is read as the negation of X only when no flag is named noX.
        if name.startswith(_parser.NEGATION_PREFIX):
            negated = self._flags.get(name[len(_parser.NEGATION_PREFIX) :])
            if isinstance(negated, BooleanFlag):
                self._warn_shadowed_negation(negated.name)
        negation = _parser.NEGATION_PREFIX + name
        if kind is FlagKind.BOOLEAN and negation in self._flags:
            self._warn_shadowed_negation(name)

        flag = FLAG_CLASSES[kind](name, default_value, description)
        self._flags[name] = flag
        return flag

    @staticmethod
    def _warn_shadowed_negation(name: str) -> None:
        warnings.warn(
            f"--{_parser.NEGATION_PREFIX}{name} refers to the flag named "
            f'"{_parser.NEGATION_PREFIX}{name}", so it cannot be used to negate '
            f"--{name}. Use --{name}=false instead.",
            category=FlagsWarning,
            stacklevel=external_stacklevel(),
        )

    def _register_internal_flags(self) -> None:
        self.define_boolean(_parser.HELP_FLAG).set_description(
            "Shows this help text."
        ).set_secret(True)

    # Lookup.

    def get(self, name: str) -> Any:  # type: ignore[override]
        """Gets the current value of the given flag."""
        return self[name].get()

    def is_set(self, name: str) -> bool:
        """Gets whether or not the flag was set."""
        return self[name].is_set

    def values_dict(self) -> dict[str, Any]:
        """Current value of every flag, secret ones included."""
        return {name: flag.get() for name, flag in self._flags.items()}

    # Lifecycle.

    def reset(self) -> None:
        """Removes all flags and allows parsing again."""
        self._parse_called = False
        self._flags.clear()
        self._register_internal_flags()

    def parse(
        self, args: Sequence[str] | None = None, ignore_unrecognized: bool = False
    ) -> list[str]:
        """Parses `args` (default: `sys.argv[1:]`) for flags. Idempotent: after
        the first successful call, this returns an empty list until `reset()`.

        Returns:
            Arguments following a `--` separator.
        """
        if self._parse_called:
            return []
        if args is None:
            args = sys.argv[1:]

        try:
            result = _parser.parse_args(
                self, args, ignore_unrecognized=ignore_unrecognized
            )
        except FlagError as e:
            if self.exit_on_error:
                _help_formatting.error_and_exit(e)
            raise

        self._parse_called = True
        if result.help_requested:
            _help_formatting.help_and_exit(self)
        return result.trailing_args

    # Help.

    def format_help(self) -> str:
        return _help_formatting.format_help(self)

    def help(self) -> None:
        """Dumps the help text to stdout."""
        print(self.format_help())


FLAGS = FlagRegistry()
"""Default registry, shared by every module in the process."""

define_string = FLAGS.define_string
define_boolean = FLAGS.define_boolean
define_integer = FLAGS.define_integer
define_number = FLAGS.define_number
define_string_list = FLAGS.define_string_list
define_multi_string = FLAGS.define_multi_string
get = FLAGS.get
is_set = FLAGS.is_set
parse = FLAGS.parse
reset = FLAGS.reset
help = FLAGS.help
format_help = FLAGS.format_help
set_exit_on_error = FLAGS.set_exit_on_error
set_usage_info = FLAGS.set_usage_info
