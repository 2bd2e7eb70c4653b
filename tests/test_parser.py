import pytest

import flags
from flags import _parser


def test_split_flag_token() -> None:
    assert _parser.split_flag_token("--name") == ("name", None)
    assert _parser.split_flag_token("--name=") == ("name", "")
    assert _parser.split_flag_token("--name=a=b") == ("name", "a=b")


def test_parse_args_on_plain_mapping() -> None:
    one = flags.StringFlag("one", "111")
    verbose = flags.BooleanFlag("verbose", True)
    result = _parser.parse_args(
        {"one": one, "verbose": verbose}, ["--one", "x", "--noverbose", "--", "rest"]
    )
    assert result.trailing_args == ["rest"]
    assert not result.help_requested
    assert one.get() == "x"
    assert verbose.get() is False


def test_parse_args_does_not_mutate_input() -> None:
    flags.define_string("one", "")
    args = ["--one", "value", "--", "x"]
    flags.parse(args)
    assert args == ["--one", "value", "--", "x"]


def test_space_form_does_not_consume_flags() -> None:
    flags.define_string_list("one", ["default"])
    flags.define_boolean("two")
    flags.parse(["--one", "--two"])
    assert flags.get("one") == []
    assert flags.get("two") is True


def test_space_form_consumes_value_for_booleans() -> None:
    flags.define_boolean("a")
    flags.parse(["--a", "false"])
    assert flags.get("a") is False


def test_space_form_does_not_consume_separator() -> None:
    flags.define_boolean("a")
    assert flags.parse(["--a", "--", "x"]) == ["x"]
    assert flags.get("a") is True


def test_negation_of_unknown_flag_is_unrecognized() -> None:
    with pytest.raises(flags.UnrecognizedFlagError, match='"--noghost"'):
        flags.parse(["--noghost"])


def test_negation_only_without_value() -> None:
    flags.define_boolean("verbose", True)
    with pytest.raises(flags.UnrecognizedFlagError):
        flags.parse(["--noverbose=1"])


def test_ignore_unrecognized() -> None:
    flags.define_string("one", "")
    rv = flags.parse(["--ghost", "--one=1", "--spooky=2", "--", "x"], True)
    assert rv == ["x"]
    assert flags.get("one") == "1"


def test_ignore_unrecognized_still_rejects_arguments() -> None:
    with pytest.raises(flags.InvalidArgumentError):
        flags.parse(["positional"], ignore_unrecognized=True)


def test_invalid_argument() -> None:
    flags.define_string("one", "")
    with pytest.raises(flags.InvalidArgumentError) as excinfo:
        flags.parse(["--one=a", "-x"])
    assert excinfo.value.index == 1
    assert excinfo.value.message == 'Invalid argument "-x"'


def test_error_context_first_token() -> None:
    with pytest.raises(flags.UnrecognizedFlagError) as excinfo:
        flags.parse(["--ghost", "--other"])
    assert str(excinfo.value) == "\n".join(
        [
            'FLAG PARSING ERROR: Unrecognized flag name "--ghost"',
            "  --ghost --other",
            "  ^^^^^^^",
        ]
    )


def test_error_context_later_token() -> None:
    flags.define_integer("a")
    with pytest.raises(flags.InvalidArgumentError) as excinfo:
        flags.parse(["--a=1", "x", "--b"])
    assert str(excinfo.value).splitlines()[1:] == [
        "  --a=1 x --b",
        "        ^",
    ]


def test_error_context_spans_consumed_value() -> None:
    flags.define_string("one", "")
    flags.define_integer("two", 0)
    with pytest.raises(flags.InvalidValueError) as excinfo:
        flags.parse(["--one", "a", "--two", "bad"])
    error = excinfo.value
    assert error.argv == ("--one a", "--two bad")
    assert error.index == 1
    assert str(error).splitlines()[1:] == [
        "  --one a --two bad",
        "          ^^^^^^^^^",
    ]


def test_validator_error_has_context() -> None:
    def validate(value: int) -> None:
        if value < 0:
            raise ValueError("must be non-negative")

    flags.define_integer("n").set_validator(validate)
    with pytest.raises(flags.ValidatorRejectionError) as excinfo:
        flags.parse(["--n=-1"])
    assert excinfo.value.index == 0
    assert isinstance(excinfo.value, flags.FlagParseError)
    assert isinstance(excinfo.value.__cause__, flags.ValidatorRejectionError)
    assert isinstance(excinfo.value.__cause__.__cause__, ValueError)
    assert "must be non-negative" in excinfo.value.message


def test_value_errors_are_parse_errors() -> None:
    flags.define_integer("n")
    with pytest.raises(flags.FlagParseError) as excinfo:
        flags.parse(["--n=x"])
    error = excinfo.value
    assert isinstance(error, flags.FlagValueParseError)
    assert isinstance(error, flags.InvalidValueError)
    assert isinstance(error.error, flags.InvalidValueError)
    assert error.__cause__ is error.error
    assert error.error.argv is None
    assert error.message == 'Invalid Integer flag "x" for --n'
    assert error.index == 0


def test_already_set_during_parse_is_parse_error() -> None:
    flags.define_string("one")
    with pytest.raises(flags.AlreadySetError) as excinfo:
        flags.parse(["--one=a", "--one=b"])
    assert isinstance(excinfo.value, flags.FlagParseError)
    assert excinfo.value.index == 1


def test_direct_set_errors_are_not_parse_errors() -> None:
    flag = flags.define_integer("n")
    with pytest.raises(flags.InvalidValueError) as excinfo:
        flag.set("x")
    assert not isinstance(excinfo.value, flags.FlagParseError)


def test_missing_required_lists_all_flags() -> None:
    flags.define_string("a").set_required()
    flags.define_string("b")
    flags.define_string("c").set_required()
    with pytest.raises(flags.MissingRequiredFlagError) as excinfo:
        flags.parse(["--b=1"])
    assert excinfo.value.names == ("a", "c")
    assert excinfo.value.index is None
    assert str(excinfo.value).splitlines() == [
        'FLAG PARSING ERROR: Missing required flags "--a", "--c"',
        "  --b=1",
    ]


def test_required_not_checked_after_separator() -> None:
    flags.define_string("a").set_required()
    assert flags.parse(["--", "x"]) == ["x"]
    assert flags.FLAGS.parse_called


def test_registry_parse_defaults_to_sys_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["prog", "--one=from-argv"])
    flags.define_string("one", "")
    flags.parse()
    assert flags.get("one") == "from-argv"
