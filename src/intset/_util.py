from __future__ import annotations

import math
import sys

NEG_INF = -math.inf
POS_INF = math.inf

# Width of the interpreter's native signed integer, e.g. 64 on a 64-bit build.
NATIVE_WORD_BITS = sys.maxsize.bit_length() + 1

Bound = int | float


def _max_uint(word_bits: int) -> int:
    if word_bits < 1:
        raise ValueError(f"Invalid word_bits: {word_bits!r}. Expected a positive integer.")
    return (1 << word_bits) - 1


def _uint_add(total: int, n: int, *, max_uint: int) -> tuple[int, bool]:
    """Add ``n`` to an unsigned accumulator, reporting wraparound.

    Returns the new total and True if the sum no longer fits in
    ``max_uint``; on overflow the total is left unchanged.
    """
    s = total + n
    if s > max_uint:
        return total, True
    return s, False


def _check_anchor(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return value
