"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
LONG_MAX = 2**63 - 1

# Longest accepted number text, which is the length of "-2147483648".
MAX_NUMBER_LENGTH = 11

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Input that the program rejects with an error message."""


class EmptyArgument(Exception):
    """An empty argument, on which the program stops without any output."""


def parse_int(text: str) -> int:
    """Read a leading integer the way the C ``atoi`` family does.

    Leading whitespace and one sign are skipped, then digits are read until
    the first non-digit. Text with no digits gives 0. When the value no
    longer fits a signed 64-bit integer the result is -1 for a positive
    number and 0 for a negative one.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
        if number > LONG_MAX:
            return 0 if negative else -1
    return -number if negative else number


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is an optional ``-`` followed by digits only."""
    body = text[1:] if text.startswith("-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep`` into its non-empty words.

    The word count is worked out as the library splitter does: text whose
    characters after the first are all separators yields no words, and a
    word starting right after a single leading separator is only taken
    when it is the first word counted; words beyond the count are dropped.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    words = [word for word in text.split(sep) if word]
    if text and not text[1:].strip(sep):
        return []
    count = 1 if text[:1] and text[0] != sep else 0
    count += sum(
        1 for previous, current in zip(text[1:], text[2:])
        if previous == sep and current != sep
    )
    return words[:max(count, 1)]


def has_duplicate(values: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def _parse_number(word: str) -> int:
    if not is_numeric(word) or len(word) > MAX_NUMBER_LENGTH:
        raise InputError(f"not an integer: {word!r}")
    number = parse_int(word)
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"out of range: {word!r}")
    return number


def parse_args(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the list of integers to sort.

    An argument is either one integer or several separated by spaces.
    Raises ``EmptyArgument`` on an empty argument and ``InputError`` on
    anything that is not a 32-bit integer.
    """
    values: list[int] = []
    for arg in args:
        if not arg:
            raise EmptyArgument("empty argument")
        if is_numeric(arg):
            values.append(_parse_number(arg))
            continue
        words = split_words(arg, " ")
        if not words:
            raise InputError(f"no numbers in {arg!r}")
        values.extend(_parse_number(word) for word in words)
    return values