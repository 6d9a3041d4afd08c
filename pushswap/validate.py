"""Validation of the integer list given on the command line.

The numbers come either as separate arguments or as a single argument
holding several numbers separated by spaces. Each must be a plain
decimal integer with an optional sign, fit in a signed 32-bit int, and
appear only once. Duplicates are detected by comparing the text as
written, so ``"1"`` and ``"+1"`` count as different.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

from pushswap.chars import is_digit
from pushswap.strings import atoi, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ErrorKind(Enum):
    """The kinds of invalid input, each with the message reported for it."""

    NOT_A_NUMBER = "Just Numbers"
    OUT_OF_RANGE = "INT INVALID"
    REPEATED = "Do Not Repeat"
    NO_ARGUMENTS = "Invalid Number of Args"

    @property
    def message(self) -> str:
        return self.value


class ValidationError(ValueError):
    """Raised when the input numbers are not acceptable."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def _digits_after_sign(word: str) -> str:
    return word[1:] if word[:1] in ("-", "+") else word


def _parse(word: str, *, allow_bare_sign: bool) -> int:
    digits = _digits_after_sign(word)
    if not digits and not allow_bare_sign:
        raise ValidationError(ErrorKind.NOT_A_NUMBER)
    if not all(is_digit(ch) for ch in digits):
        raise ValidationError(ErrorKind.NOT_A_NUMBER)
    value = atoi(word)
    if not INT_MIN <= value <= INT_MAX:
        raise ValidationError(ErrorKind.OUT_OF_RANGE)
    return value


def has_repeat(args: Sequence[str]) -> bool:
    """True if any two entries of ``args`` are the same text."""
    return len(set(args)) != len(args)


def check_args(args: Sequence[str]) -> list[int]:
    """Validate numbers given as separate arguments and return their values.

    An argument that is empty or only a sign is rejected.
    """
    values = [_parse(word, allow_bare_sign=False) for word in args]
    if has_repeat(args):
        raise ValidationError(ErrorKind.REPEATED)
    return values


def check_split(text: str) -> list[int]:
    """Validate numbers given in one space-separated string and return their values.

    A word that is only a sign is accepted and reads as 0. The first word
    takes no part in the duplicate check.
    """
    words = split(text, " ")
    values = [_parse(word, allow_bare_sign=True) for word in words]
    if has_repeat(words[1:]):
        raise ValidationError(ErrorKind.REPEATED)
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the command-line numbers; report an error on standard error."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise ValidationError(ErrorKind.NO_ARGUMENTS)
        if len(args) == 1:
            check_split(args[0])
        else:
            check_args(args)
    except ValidationError as error:
        sys.stderr.write(f"{error.kind.message}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())