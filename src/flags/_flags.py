"""Flag kinds. Each kind is one `Flag` subclass that decides how raw command-line
strings are coerced, whether repeated occurrences accumulate, and how the flag
is described in help text."""

from __future__ import annotations

import abc
import enum
import math
import re
import warnings
from typing import Any, Callable, ClassVar, Generic, List, TypeVar

from typing_extensions import Self, assert_never

from . import _settings, _strings
from ._errors import AlreadySetError, InvalidValueError, ValidatorRejectionError
from ._singleton import MISSING
from ._warnings import FlagsWarning, external_stacklevel

T = TypeVar("T")

Validator = Callable[[Any], Any]
"""Called with each coerced value. Raise to reject it; the return value is ignored."""


class FlagKind(enum.Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING_LIST = "string_list"
    MULTI_STRING = "multi_string"


def kind_label(kind: FlagKind) -> str:
    """Human-readable name of a flag kind, used in error messages."""
    if kind is FlagKind.STRING:
        return "String"
    elif kind is FlagKind.BOOLEAN:
        return "Boolean"
    elif kind is FlagKind.INTEGER:
        return "Integer"
    elif kind is FlagKind.NUMBER:
        return "Number"
    elif kind is FlagKind.STRING_LIST:
        return "StringList"
    elif kind is FlagKind.MULTI_STRING:
        return "MultiString"
    else:
        assert_never(kind)


class Flag(abc.ABC, Generic[T]):
    """A declared flag: its kind, default, metadata, and the value it was set to.

    Flags are created by the `define_*()` functions of a registry, which return
    them so they can be configured fluently:

    .. code-block:: python

        flags.define_integer("port", 8080).set_description("Port.").set_required(True)
    """

    kind: ClassVar[FlagKind]
    cumulative: ClassVar[bool] = False
    """If True, repeated occurrences append to the value instead of failing."""
    type_hint: ClassVar[str | None] = None
    """Shown below the default in help text."""

    def __init__(
        self, name: str, default_value: Any = MISSING, description: str | None = None
    ) -> None:
        self.name = name
        self.default_value: T = (
            self.empty_default()
            if default_value is MISSING
            else self._copy_default(default_value)
        )
        self.description = description
        self.current_value: T | None = None
        self.validator: Validator | None = None
        self.is_secret = False
        self.is_required = False
        self.is_set = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"default_value={self.default_value!r}, "
            f"current_value={self.current_value!r}, "
            f"is_set={self.is_set})"
        )

    # Fluent configuration.

    def set_default(self, default_value: T) -> Self:
        """Set the value returned by `get()` until the flag is set."""
        self.default_value = self._copy_default(default_value)
        return self

    def set_description(self, description: str) -> Self:
        """Set a description for use in the help message."""
        self.description = description
        return self

    def set_validator(self, validator: Validator | None) -> Self:
        """Set a custom validator, called with each coerced value."""
        self.validator = validator
        return self

    def set_secret(self, is_secret: bool = True) -> Self:
        """Hide this flag from the help message."""
        self.is_secret = is_secret
        return self

    def set_required(self, is_required: bool = True) -> Self:
        """Make parsing fail if this flag is not set."""
        self.is_required = is_required
        return self

    # Values.

    def set(self, value: T | str | None) -> None:
        """Coerce, validate, and store a value.

        Strings and `None` are treated as command-line input; anything else must
        already have the flag's type.
        """
        if self.is_set and not self.cumulative:
            raise AlreadySetError(f'Flag "--{self.name}" already set')
        coerced = self.coerce(value)
        self._validate(coerced)
        self._store(coerced)
        self.is_set = True

    def get(self) -> T:
        return self.current_value if self.is_set else self.default_value  # type: ignore

    def coerce(self, value: Any) -> T:
        if value is None or isinstance(value, str):
            return self.parse_input(value)
        return self.coerce_value(value)

    @abc.abstractmethod
    def parse_input(self, inp: str | None) -> T:
        """Convert a raw command-line value. `None` means the flag was given
        without a value."""
        ...

    def coerce_value(self, value: Any) -> T:
        """Check a value that was set programmatically rather than parsed."""
        raise self._invalid(value)

    @staticmethod
    def empty_default() -> Any:
        return None

    def _copy_default(self, default_value: Any) -> Any:
        return default_value

    def _store(self, value: T) -> None:
        self.current_value = value

    def _validate(self, value: T) -> None:
        if self.validator is None:
            return
        try:
            result = self.validator(value)
        except Exception as e:
            raise ValidatorRejectionError(
                f'Invalid value for flag "--{self.name}": {str(e) or type(e).__name__}'
            ) from e
        if result is False:
            warnings.warn(
                f"Validator for --{self.name} returned False, which does not reject "
                "the value. Raise an exception to reject a value.",
                category=FlagsWarning,
                stacklevel=external_stacklevel(),
            )

    def _invalid(self, value: Any) -> InvalidValueError:
        shown = f'"{value}"' if value is None or isinstance(value, str) else repr(value)
        return InvalidValueError(
            f"Invalid {kind_label(self.kind)} flag {shown} for --{self.name}"
        )

    # Help text.

    def invocation(self) -> str:
        return f"--{self.name}"

    def to_help_string(self, width: int | None = None) -> str:
        if width is None:
            width = _settings.HELP_WIDTH
        head = f"  {self.invocation()}"
        if self.description:
            head += f": {self.description}"
        lines = _strings.wrap_lines(head, width, first_width=width + 4)
        out = [lines[0]] + [f"    {line}" for line in lines[1:]]
        out.append(f"    (default: {_strings.format_literal(self.default_value)})")
        if self.type_hint is not None:
            out.append(f"    ({self.type_hint})")
        return "\n".join(out)


class StringFlag(Flag[str]):
    """e.g. --servername=bob"""

    kind = FlagKind.STRING
    type_hint = "a string"

    @staticmethod
    def empty_default() -> str:
        return ""

    def parse_input(self, inp: str | None) -> str:
        if inp is None:
            raise self._invalid(inp)
        return inp


class BooleanFlag(Flag[bool]):
    """e.g. --turnonlights, --noturnonlights, --turnonlights=false"""

    kind = FlagKind.BOOLEAN

    @staticmethod
    def empty_default() -> bool:
        return False

    def parse_input(self, inp: str | None) -> bool:
        # A bare flag means true.
        if inp is None:
            return True
        lowered = inp.lower()
        if lowered in ("1", "true", "t"):
            return True
        elif lowered in ("0", "false", "f"):
            return False
        raise self._invalid(inp)

    def coerce_value(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise self._invalid(value)

    def get(self) -> bool:
        return bool(super().get())

    def invocation(self) -> str:
        return f"--[no]{self.name}"


class IntegerFlag(Flag[int]):
    """e.g. --age=12"""

    kind = FlagKind.INTEGER
    type_hint = "an integer"

    @staticmethod
    def empty_default() -> int:
        return 0

    # Whole numbers only, optionally written with a zero fraction: "12", "-3",
    # "1.0". Exponents, hex and digit separators are rejected.
    _pattern: ClassVar[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)(?:\.0*)?\s*")

    def parse_input(self, inp: str | None) -> int:
        if inp is None:
            raise self._invalid(inp)
        match = self._pattern.fullmatch(inp)
        if match is None:
            raise self._invalid(inp)
        return int(match.group(1))

    def coerce_value(self, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise self._invalid(value)


class NumberFlag(Flag[float]):
    """e.g. --height=1.85"""

    kind = FlagKind.NUMBER
    type_hint = "a number"

    @staticmethod
    def empty_default() -> float:
        return 0.0

    def parse_input(self, inp: str | None) -> float:
        if inp is None:
            raise self._invalid(inp)
        try:
            out = float(inp)
        except ValueError:
            raise self._invalid(inp) from None
        if math.isnan(out):
            raise self._invalid(inp)
        return out

    def coerce_value(self, value: Any) -> float:
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and not math.isnan(value)
        ):
            return float(value)
        raise self._invalid(value)


class _ListFlag(Flag[List[str]]):
    @staticmethod
    def empty_default() -> list[str]:
        return []

    def _copy_default(self, default_value: Any) -> Any:
        return [] if default_value is None else list(default_value)

    def get(self) -> list[str]:
        # Callers may mutate the result without touching the stored value.
        return list(super().get())

    def coerce_value(self, value: Any) -> list[str]:
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return list(value)
        raise self._invalid(value)


class StringListFlag(_ListFlag):
    """e.g. --animal=frog,bat,chicken"""

    kind = FlagKind.STRING_LIST

    def parse_input(self, inp: str | None) -> list[str]:
        if inp is None:
            return []
        return inp.split(",")


class MultiStringFlag(_ListFlag):
    """e.g. --allowedip=127.0.0.1 --allowedip=127.0.0.2"""

    kind = FlagKind.MULTI_STRING
    cumulative = True

    def parse_input(self, inp: str | None) -> list[str]:
        if inp is None:
            raise self._invalid(inp)
        return [inp]

    def _store(self, value: list[str]) -> None:
        self.current_value = (self.current_value or []) + value


FLAG_CLASSES: dict[FlagKind, type[Flag[Any]]] = {
    cls.kind: cls
    for cls in (
        StringFlag,
        BooleanFlag,
        IntegerFlag,
        NumberFlag,
        StringListFlag,
        MultiStringFlag,
    )
}
