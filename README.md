# pushswap

Checks the list of integers given to a stack-sorting program before any sorting
happens. Every number must be a plain decimal integer with an optional sign. It
must fit in a signed 32-bit int, and it may appear only once. The package also
has the small string and character helpers that the check is built on.

## Install

```
pip install .
```

To get the test tools as well, add the `test` extra: `pip install ".[test]"`.

## Command line

```
push-swap 3 2 1
push-swap "3 2 1"
```

You can give the numbers as separate arguments. You can also give them as a
single argument, with the numbers separated by spaces.

- If the list is valid, the command prints nothing and exits with status 0.
- If the list is not valid, the command writes one message to standard error and exits with status 1.

| Problem                                       | Message                  |
|-----------------------------------------------|--------------------------|
| a token that is not a signed decimal number   | `Just Numbers`           |
| a value outside -2147483648 .. 2147483647     | `INT INVALID`            |
| the same token given twice                    | `Do Not Repeat`          |
| no arguments at all                           | `Invalid Number of Args` |

Repeats are found by comparing the tokens as text. Signs and leading zeros are
part of that text, so `1` and `+1` are not treated as a repeat.

The two ways of giving the numbers behave differently in two cases:

- Separate arguments: an argument that is empty, or that is only a sign, is
  rejected with `Just Numbers`.
- One space-separated argument: a word that is only a sign is accepted and
  reads as 0. The first word is left out of the repeat check.

## Library

```python
from pushswap.validate import (
    ErrorKind,
    ValidationError,
    check_args,
    check_split,
    has_repeat,
    main,
)

check_args(["3", "-1", "+7"])   # [3, -1, 7]
check_split("3 -1 +7")          # [3, -1, 7]
has_repeat(["1", "2", "1"])     # True

try:
    check_args(["1", "1"])
except ValidationError as err:
    assert err.kind is ErrorKind.REPEATED
    assert str(err) == "Do Not Repeat"

main(["4", "5"])                # 0
```

`ValidationError` is a subclass of `ValueError`. Its `kind` is one of these
`ErrorKind` members:

- `NOT_A_NUMBER`
- `OUT_OF_RANGE`
- `REPEATED`
- `NO_ARGUMENTS`

Each member's `message` is the text shown in the table above.

`main(argv=None)` reads `sys.argv[1:]` when it is given no list. It returns the
exit status.

### Helper modules

- `pushswap.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`.
  - Each takes a one-character string or an integer code.
  - The converters return the same kind of value they were given.
- `pushswap.strings`:
  - Parsing and formatting: `atoi`, `itoa`.
  - Splitting and trimming: `split`, `strtrim`, `substr`, `strmapi`.
  - Comparing: `strcmp`, `strncmp`, `memcmp`.
  - Searching: `strchr`, `strrchr`, `strnstr`, `memchr`.
    - Each returns an index, or `None` when nothing is found.
  - Comparisons return the difference between the first characters or bytes
    that differ.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`.
  - Each writes to a text stream passed as the second argument, or to standard
    output when none is given.

## What it does not do

The package only validates the input. It does not sort anything. It has no
stack operations, and it does not print a sequence of moves. On a valid list,
`push-swap` exits without output.