"""Exceptions raised by flags.

Every error can carry positional context: the argument vector being parsed and
the index of the offending token. Parse-time failures always have it; errors
raised by direct programmatic use of a flag do not.
"""

from __future__ import annotations

from typing import Sequence

from typing_extensions import Self

from . import _strings


class FlagError(Exception):
    """Base class for all errors raised by flags."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.argv: tuple[str, ...] | None = None
        self.index: int | None = None

    def with_context(self, argv: Sequence[str], index: int | None) -> Self:
        """Attach the argument vector and the index of the offending token."""
        self.argv = tuple(argv)
        self.index = index
        return self

    def format(self) -> str:
        """Format the error. With positional context this spans three lines:

            FLAG PARSING ERROR: Invalid argument "x"
              --a=1 x --b
                    ^
        """
        if self.argv is None:
            return self.message
        lines = [f"FLAG PARSING ERROR: {self.message}", "  " + " ".join(self.argv)]
        if self.index is not None:
            lines.append(_strings.caret_underline(self.argv, self.index))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


# Declaration and lookup.


class DuplicateFlagError(FlagError):
    """A flag with the same name was already declared."""


class RegistrationAfterParseError(FlagError):
    """A flag was declared after the registry was parsed."""


class UnknownFlagError(FlagError, KeyError):
    """A flag was looked up by a name that was never declared."""


# Values.


class FlagValueError(FlagError):
    """Base class for errors raised while setting a flag's value."""


class InvalidValueError(FlagValueError):
    """A value could not be coerced to the flag's kind."""


class ValidatorRejectionError(FlagValueError):
    """A user-supplied validator raised for a coerced value."""


class AlreadySetError(FlagValueError):
    """A non-cumulative flag was set more than once."""


# Argument vector.


class FlagParseError(FlagError):
    """Base class for errors in the structure of the argument vector."""


class UnrecognizedFlagError(FlagParseError):
    """A `--` token matched no declared flag."""


class InvalidArgumentError(FlagParseError):
    """A top-level token was not a flag."""


class MissingRequiredFlagError(FlagParseError):
    """One or more required flags were not set."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        if len(self.names) == 1:
            message = f'Missing required flag "--{self.names[0]}"'
        else:
            message = "Missing required flags " + ", ".join(
                f'"--{name}"' for name in self.names
            )
        super().__init__(message)


class FlagValueParseError(FlagParseError, FlagValueError):
    """A flag's value was rejected while parsing the argument vector.

    `error` is the error raised by the flag, also chained as `__cause__`. The
    concrete subclass raised is also an instance of the kind of `error`, so
    `except InvalidValueError` keeps working for parse-time failures.
    """

    def __init__(self, error: FlagValueError) -> None:
        super().__init__(error.message)
        self.error = error

    @staticmethod
    def from_error(error: FlagValueError) -> FlagValueParseError:
        for error_type in type(error).__mro__:
            if error_type in _VALUE_PARSE_ERRORS:
                return _VALUE_PARSE_ERRORS[error_type](error)
        return FlagValueParseError(error)


class InvalidValueParseError(FlagValueParseError, InvalidValueError):
    pass


class ValidatorRejectionParseError(FlagValueParseError, ValidatorRejectionError):
    pass


class AlreadySetParseError(FlagValueParseError, AlreadySetError):
    pass


_VALUE_PARSE_ERRORS: dict[type[FlagValueError], type[FlagValueParseError]] = {
    InvalidValueError: InvalidValueParseError,
    ValidatorRejectionError: ValidatorRejectionParseError,
    AlreadySetError: AlreadySetParseError,
}
