import pytest

from pushswap.parsing import (
    EmptyArgument,
    InputError,
    has_duplicate,
    is_numeric,
    parse_args,
    parse_int,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17abc", -17),
        ("+5", 5),
        ("\t\n 8", 8),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("-") == 0


def test_parse_int_overflow():
    assert parse_int("99999999999999999999") == -1
    assert parse_int("-99999999999999999999") == 0


@pytest.mark.parametrize("text", ["123", "-5", "0", "-0", "2147483648"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "-", "+5", "1a", " 1", "--1", "1 2"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_split_words_plain():
    assert split_words("1 2 3", " ") == ["1", "2", "3"]


def test_split_words_extra_separators():
    assert split_words("  7   8 ", " ") == ["7", "8"]


@pytest.mark.parametrize("text", ["", " ", "   ", "x ", "5"])
def test_split_words_gives_nothing(text):
    assert split_words(text, " ") == []


def test_split_words_drops_word_after_single_leading_separator():
    assert split_words(" a b", " ") == ["a"]
    assert split_words(" a", " ") == ["a"]


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "  ")


def test_has_duplicate():
    assert has_duplicate([1, 2, 1]) is True
    assert has_duplicate([1, 2, 3]) is False
    assert has_duplicate([7]) is False


def test_parse_args_separate():
    assert parse_args(["3", "2", "1"]) == [3, 2, 1]


def test_parse_args_single_string():
    assert parse_args(["3 2 1"]) == [3, 2, 1]


def test_parse_args_mixed():
    assert parse_args(["1", "2 3", " 4"]) == [1, 2, 3, 4]


def test_parse_args_limits():
    assert parse_args(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


def test_parse_args_empty_list():
    assert parse_args([]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["2147483648"],
        ["-2147483649"],
        ["abc"],
        ["1 x"],
        ["000000000001"],
        ["+1"],
        ["   "],
        ["1\t2"],
        ["1", "2 99999999999"],
    ],
)
def test_parse_args_errors(args):
    with pytest.raises(InputError):
        parse_args(args)


@pytest.mark.parametrize("args", [[""], ["1", ""], ["1", "", "x"]])
def test_parse_args_empty_argument(args):
    with pytest.raises(EmptyArgument):
        parse_args(args)


def test_parse_args_error_before_empty_argument():
    with pytest.raises(InputError):
        parse_args(["x", ""])