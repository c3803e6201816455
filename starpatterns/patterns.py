"""Text patterns of stars, digits and letters, each drawn for a size ``n``.

Every pattern function returns the drawing as one string in which each row
ends with a newline. A size of zero or less draws nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import wraps

PatternFunc = Callable[[int], str]


def _drawing(rows_of: Callable[[int], Iterator[str]]) -> PatternFunc:
    """Turn a generator of rows into a function returning the finished text."""

    @wraps(rows_of)
    def draw(n: int) -> str:
        return "".join(f"{row}\n" for row in rows_of(n))

    return draw


def _letters(first: str, count: int) -> list[str]:
    """Return ``count`` consecutive characters starting at ``first``."""
    start = ord(first)
    return [chr(start + k) for k in range(count)]


@_drawing
def pattern1(n: int) -> Iterator[str]:
    """A solid square of ``n`` rows of ``n`` stars, each star followed by a space."""
    for _ in range(n):
        yield "* " * n


@_drawing
def pattern2(n: int) -> Iterator[str]:
    """A growing triangle of spaced stars."""
    for i in range(1, n + 1):
        yield "* " * i


@_drawing
def pattern3(n: int) -> Iterator[str]:
    """Rows counting from 1 up to the row number."""
    for i in range(1, n + 1):
        yield "".join(str(j) for j in range(1, i + 1))


@_drawing
def pattern4(n: int) -> Iterator[str]:
    """Each row repeats its own number as many times as the number."""
    for i in range(1, n + 1):
        yield str(i) * i


@_drawing
def pattern5(n: int) -> Iterator[str]:
    """A shrinking triangle of spaced stars."""
    for i in range(n, 0, -1):
        yield "* " * i


@_drawing
def pattern6(n: int) -> Iterator[str]:
    """Row ``i`` repeats the digit ``i`` for ``n - i + 1`` times."""
    for i in range(1, n + 1):
        yield str(i) * (n - i + 1)


@_drawing
def pattern7(n: int) -> Iterator[str]:
    """A centred pyramid of stars, padded with spaces on both sides."""
    for i in range(n):
        pad = " " * (n - i - 1)
        yield f"{pad}{'*' * (2 * i + 1)}{pad}"


@_drawing
def pattern8(n: int) -> Iterator[str]:
    """An upside-down centred pyramid of stars, padded on both sides."""
    for i in range(n):
        pad = " " * i
        yield f"{pad}{'*' * (2 * n - (2 * i + 1))}{pad}"


def pattern9(n: int) -> str:
    """A diamond: the pyramid followed by the upside-down pyramid."""
    return pattern7(n) + pattern8(n)


@_drawing
def pattern10(n: int) -> Iterator[str]:
    """A sideways triangle of stars, starting with an empty row."""
    for i in range(2 * n):
        yield "*" * (2 * n - i if i > n else i)


@_drawing
def pattern11(n: int) -> Iterator[str]:
    """Alternating 1s and 0s; row ``i`` has ``i`` digits, starting at an empty row."""
    for i in range(n):
        first = 1 if i % 2 == 0 else 0
        yield "".join(str(first if j % 2 == 0 else 1 - first) for j in range(i))


@_drawing
def pattern12(n: int) -> Iterator[str]:
    """Counting up and back down, with a shrinking gap between the halves."""
    for i in range(1, n + 1):
        rising = "".join(str(j) for j in range(1, i + 1))
        falling = "".join(str(j) for j in range(i, 0, -1))
        yield f"{rising}{' ' * (2 * (n - i))}{falling}"


@_drawing
def pattern13(n: int) -> Iterator[str]:
    """Floyd's triangle: consecutive numbers, each followed by a space."""
    number = 1
    for i in range(1, n + 1):
        yield "".join(f"{k} " for k in range(number, number + i))
        number += i


@_drawing
def pattern14(n: int) -> Iterator[str]:
    """Letters from A, one more per row, each followed by a space."""
    for i in range(1, n + 1):
        yield "".join(f"{ch} " for ch in _letters("A", i))


@_drawing
def pattern15(n: int) -> Iterator[str]:
    """Letters from A, one fewer per row, each followed by a space."""
    for i in range(n, 0, -1):
        yield "".join(f"{ch} " for ch in _letters("A", i))


@_drawing
def pattern16(n: int) -> Iterator[str]:
    """Row ``i`` repeats the ``i``-th letter ``i + 1`` times."""
    for i in range(n):
        yield chr(ord("A") + i) * (i + 1)


@_drawing
def pattern17(n: int) -> Iterator[str]:
    """A centred letter pyramid rising to the row's letter and back to A."""
    for i in range(n):
        pad = " " * (n - i - 1)
        rising = _letters("A", i + 1)
        yield pad + "".join(rising + rising[-2::-1]) + pad


@_drawing
def pattern18(n: int) -> Iterator[str]:
    """Letters ending at E, starting one letter earlier on each row."""
    for i in range(n):
        yield "".join(_letters(chr(ord("E") - i), i + 1))


@_drawing
def pattern19(n: int) -> Iterator[str]:
    """Two facing star triangles that open up, then close again."""
    for i in range(n):
        stars = "*" * (n - i)
        yield f"{stars}{' ' * (2 * i + 1)}{stars}"
    # The lower half always starts from a gap of nine spaces.
    for i in range(n):
        stars = "*" * (i + 1)
        yield f"{stars}{' ' * max(0, 9 - 2 * i)}{stars}"


@_drawing
def pattern20(n: int) -> Iterator[str]:
    """Two facing star triangles that close up in the middle row, then open."""
    for i in range(1, 2 * n):
        stars = "*" * ((2 * n - i if i > n else i) + 1)
        gap = 2 * abs(n - i)
        yield f"{stars}{' ' * (gap + 1)}{stars}"


@_drawing
def pattern21(n: int) -> Iterator[str]:
    """A hollow square of stars."""
    for i in range(n):
        if i in (0, n - 1):
            yield "*" * n
        else:
            yield "".join("*" if j in (0, n - 1) else " " for j in range(n))


@_drawing
def pattern22(n: int) -> Iterator[str]:
    """Concentric squares of numbers from ``n`` at the edge down to 1 at the centre."""
    size = 2 * n - 1
    for i in range(size):
        yield "".join(
            str(n - min(i, j, size - 1 - i, size - 1 - j)) for j in range(size)
        )


_PATTERNS: dict[int, PatternFunc] = {
    1: pattern1,
    2: pattern2,
    3: pattern3,
    4: pattern4,
    5: pattern5,
    6: pattern6,
    7: pattern7,
    8: pattern8,
    9: pattern9,
    10: pattern10,
    11: pattern11,
    12: pattern12,
    13: pattern13,
    14: pattern14,
    15: pattern15,
    16: pattern16,
    17: pattern17,
    18: pattern18,
    19: pattern19,
    20: pattern20,
    21: pattern21,
    22: pattern22,
}


def get_pattern(number: int) -> PatternFunc:
    """Return the pattern function with the given number.

    Raises ValueError if there is no such pattern.
    """
    try:
        return _PATTERNS[number]
    except (KeyError, TypeError):
        raise ValueError(
            f"no pattern {number!r}; choose one from {min(_PATTERNS)} to {max(_PATTERNS)}"
        ) from None