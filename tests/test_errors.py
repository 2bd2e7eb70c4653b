import contextlib
import io

import pytest

import flags
from flags._strings import strip_ansi_sequences


def test_exit_on_error() -> None:
    registry = flags.FlagRegistry(exit_on_error=True)
    registry.define_integer("age", 21)

    target = io.StringIO()
    with pytest.raises(SystemExit) as excinfo, contextlib.redirect_stderr(target):
        registry.parse(["--age=old"])
    assert excinfo.value.code == 1
    assert strip_ansi_sequences(target.getvalue()).splitlines() == [
        'FLAG PARSING ERROR: Invalid Integer flag "old" for --age',
        "  --age=old",
        "  ^^^^^^^^^",
    ]
    assert not registry.parse_called


def test_exit_on_error_unrecognized() -> None:
    flags.set_exit_on_error(True)
    target = io.StringIO()
    with pytest.raises(SystemExit) as excinfo, contextlib.redirect_stderr(target):
        flags.parse(["--ghost"])
    assert excinfo.value.code == 1
    assert "Unrecognized flag name" in target.getvalue()


def test_exit_on_error_missing_required() -> None:
    registry = flags.FlagRegistry()
    registry.define_string("name").set_required()
    target = io.StringIO()
    with pytest.raises(SystemExit) as excinfo, contextlib.redirect_stderr(target):
        registry.parse([])
    assert excinfo.value.code == 1
    assert 'Missing required flag "--name"' in target.getvalue()


def test_definition_errors_always_raise() -> None:
    registry = flags.FlagRegistry(exit_on_error=True)
    registry.define_string("one")
    with pytest.raises(flags.DuplicateFlagError):
        registry.define_string("one")
    with pytest.raises(flags.UnknownFlagError):
        registry.get("two")


def test_error_hierarchy() -> None:
    assert issubclass(flags.InvalidValueError, flags.FlagValueError)
    assert issubclass(flags.ValidatorRejectionError, flags.FlagValueError)
    assert issubclass(flags.AlreadySetError, flags.FlagValueError)
    assert issubclass(flags.UnrecognizedFlagError, flags.FlagParseError)
    assert issubclass(flags.InvalidArgumentError, flags.FlagParseError)
    assert issubclass(flags.MissingRequiredFlagError, flags.FlagParseError)
    assert issubclass(flags.FlagValueParseError, flags.FlagParseError)
    assert issubclass(flags.FlagValueParseError, flags.FlagValueError)
    assert issubclass(flags.UnknownFlagError, KeyError)
    for error_type in (
        flags.FlagValueError,
        flags.FlagParseError,
        flags.DuplicateFlagError,
        flags.RegistrationAfterParseError,
        flags.UnknownFlagError,
    ):
        assert issubclass(error_type, flags.FlagError)


def test_unknown_flag_message_is_not_quoted() -> None:
    with pytest.raises(flags.UnknownFlagError) as excinfo:
        flags.get("ghost")
    assert str(excinfo.value) == 'Unknown flag "ghost"'


def test_value_parse_error_keeps_error_kind() -> None:
    for error_type in (
        flags.InvalidValueError,
        flags.ValidatorRejectionError,
        flags.AlreadySetError,
    ):
        error = error_type("bad value")
        wrapped = flags.FlagValueParseError.from_error(error)
        assert isinstance(wrapped, error_type)
        assert isinstance(wrapped, flags.FlagParseError)
        assert wrapped.error is error
        assert wrapped.message == "bad value"
