import io

import pytest

from stdext.console import cin, cin_parse, cin_parse_list, cout, cout_endl, endl


def test_cin_parse_list_of_ints():
    assert cin_parse_list("1 2 3", int) == [1, 2, 3]


def test_cin_parse_single_int():
    assert cin_parse("12", int) == 12


def test_cin_parse_list_skips_bad_tokens():
    assert cin_parse_list("  4 x 5\t6.5 7\n", int) == [4, 5, 7]


def test_cin_parse_list_floats():
    assert cin_parse_list("1.5 2 abc", float) == [1.5, 2.0]


def test_cin_parse_list_empty_input():
    assert cin_parse_list("   ", int) == []


@pytest.mark.parametrize(
    "text, kind, expected",
    [
        ("abc", int, 0),
        (" 12", int, 0),
        ("12\n", int, 0),
        ("2.5", float, 2.5),
        ("oops", float, 0.0),
        ("true", bool, True),
        ("false", bool, False),
        ("yes", bool, False),
        (" keep ", str, " keep "),
    ],
)
def test_cin_parse_values_and_defaults(text, kind, expected):
    assert cin_parse(text, kind) == expected


def test_cin_reads_one_line(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nworld\n"))
    assert cin() == "hello\n"
    assert cin() == "world\n"
    assert cin() == ""


def test_cout_formats(capsys):
    cout("Name: {}, Age: {}\n", "Alice", 30)
    assert capsys.readouterr().out == "Name: Alice, Age: 30\n"


def test_endl_writes_newline(capsys):
    endl()
    assert capsys.readouterr().out == "\n"


def test_cout_endl_appends_newline(capsys):
    cout_endl("Name: {}, Age: {}\n", "Alice", 30)
    assert capsys.readouterr().out == "Name: Alice, Age: 30\n\n"


def test_cout_without_args(capsys):
    cout("plain")
    assert capsys.readouterr().out == "plain"