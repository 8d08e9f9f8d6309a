"""Mixed-radix conversion between an ordinal and fixed-length digit sequences.

The ordinal is one integer in [0, CARDINALITY). A sequence of `length`
digits covers the same space when every digit uses the base
ceil(CARDINALITY ** (1/length)):

    4 digits -> base 256  (IPv4 octets)
    3 digits -> base 1626 (word indices)

Digits are always most-significant first.
"""

import math
from typing import Sequence

# 256^4 — every IPv4 address
CARDINALITY = 256 ** 4


def components_base(length: int, cardinality: int = CARDINALITY) -> int:
    """Return the smallest base B with B ** length >= cardinality."""
    if length < 1:
        raise ValueError(f"Component count must be >= 1, got {length}")
    base = math.ceil(cardinality ** (1 / length))
    # Float rounding can land one off near perfect powers
    while base ** length < cardinality:
        base += 1
    while base > 1 and (base - 1) ** length >= cardinality:
        base -= 1
    return base


def compose(components: Sequence[int], base: int | None = None) -> int:
    """Combine digits (most-significant first) into a single ordinal."""
    if base is None:
        base = components_base(len(components))
    ordinal = 0
    for digit in components:
        if not 0 <= digit < base:
            raise ValueError(f"Digit must be 0-{base - 1}, got {digit}")
        ordinal = ordinal * base + digit
    return ordinal


def decompose(ordinal: int, length: int) -> list[int]:
    """Split an ordinal into `length` digits of base components_base(length).

    Higher positions stay zero once the remainder runs out.
    """
    base = components_base(length)
    if not 0 <= ordinal < base ** length:
        raise ValueError(
            f"Ordinal must be 0-{base ** length - 1} for {length} digits, got {ordinal}"
        )
    digits = [0] * length
    remainder = ordinal
    for place in range(length):
        remainder, digits[length - place - 1] = divmod(remainder, base)
        if remainder == 0:
            break
    return digits
