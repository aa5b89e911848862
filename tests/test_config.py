import pytest

from freud.config import (
    MAX_ARGUMENT_COUNT,
    MAX_FILE_COUNT,
    MAX_LENGTH_COMMAND,
    Config,
    MissingFileError,
    parse_arguments,
)


def test_short_options():
    config = parse_arguments(["-f", "a.png", "-c", "dimension"])
    assert config.filenames == ["a.png"]
    assert config.command == "dimension"
    assert config.arguments == []
    assert config.debug_mode is False


def test_long_options_and_operands():
    config = parse_arguments(["--file=a.png", "--command", "print_pixel", "1", "2"])
    assert config.filenames == ["a.png"]
    assert config.command == "print_pixel"
    assert config.arguments == ["1", "2"]


def test_operands_are_collected_around_options():
    config = parse_arguments(["1", "-f", "a.png", "2"])
    assert config.arguments == ["1", "2"]
    assert config.filenames == ["a.png"]


def test_attached_short_argument():
    config = parse_arguments(["-fa.png", "-cdimension"])
    assert config.filenames == ["a.png"]
    assert config.command == "dimension"


def test_debug_and_brief():
    assert parse_arguments(["--debug"]).debug_mode is True
    assert parse_arguments(["--debug", "--brief"]).debug_mode is False


def test_long_option_abbreviation():
    assert parse_arguments(["--comm", "dimension"]).command == "dimension"


def test_double_dash_ends_options():
    config = parse_arguments(["--", "-f", "x"])
    assert config.arguments == ["-f", "x"]
    assert config.filenames == []


def test_type_is_ignored():
    assert parse_arguments(["--type", "jpeg", "-f", "a.png"]) == Config(filenames=["a.png"])


def test_command_is_truncated():
    config = parse_arguments(["-c", "x" * 40])
    assert len(config.command) == MAX_LENGTH_COMMAND


def test_too_many_files():
    argv = []
    for index in range(MAX_FILE_COUNT + 1):
        argv += ["-f", f"{index}.png"]
    with pytest.raises(ValueError):
        parse_arguments(argv)


def test_too_many_arguments():
    with pytest.raises(ValueError):
        parse_arguments([str(i) for i in range(MAX_ARGUMENT_COUNT + 1)])


def test_version_exits(capsys):
    with pytest.raises(SystemExit) as info:
        parse_arguments(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out == "Version 1.0.0\n"


def test_short_version_needs_argument(capsys):
    config = parse_arguments(["-f", "a.png", "-v"])
    assert config.filenames == ["a.png"]
    assert "requires an argument" in capsys.readouterr().err
    with pytest.raises(SystemExit):
        parse_arguments(["-v", "x"])


def test_unrecognized_option_is_reported_and_skipped(capsys):
    config = parse_arguments(["--nope", "-f", "a.png"])
    assert config.filenames == ["a.png"]
    assert "unrecognized option '--nope'" in capsys.readouterr().err


def test_check_file():
    with pytest.raises(MissingFileError, match="Missing file"):
        Config().check_file()
    Config(filenames=["a.png"]).check_file()
    assert Config(filenames=["a.png"]).filenames == ["a.png"]


def test_debug_report():
    config = Config(debug_mode=True, command="dimension", filenames=["a.png"], arguments=["1"])
    assert config.debug_report() == (
        "debug flag is setfile 1/1: a.png\narguments 1/1: 1\noption: dimension\n"
    )
    assert Config(command="dimension").debug_report() == ""