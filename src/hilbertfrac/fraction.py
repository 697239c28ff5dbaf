"""
Binary expansion of fractions in [0, 1).

The mantissa is the digit string after the binary point, most
significant bit first. It is consumed two bits per recursion level.
"""

import math
from numbers import Real
from typing import Iterable, Sequence, Union

import numpy as np

from .errors import InvalidBit, InvalidFraction

Bits = Union[Sequence[int], np.ndarray]


def validate_fraction(fraction) -> float:
    """
    Check that ``fraction`` is a finite real in [0, 1).

    Returns:
        The fraction as a float

    Raises:
        InvalidFraction: For NaN, infinities, non-reals and out of range values
    """
    if isinstance(fraction, bool) or not isinstance(fraction, Real):
        raise InvalidFraction(fraction)
    value = float(fraction)
    if not math.isfinite(value) or not (0.0 <= value < 1.0):
        raise InvalidFraction(fraction)
    return value


def fraction_to_bits(fraction: float, precision: int) -> np.ndarray:
    """
    Extract the first ``precision`` mantissa bits of a fraction.

    Args:
        fraction: Value in [0, 1)
        precision: Number of bits to extract

    Returns:
        uint8 array of 0/1 values, most significant first

    Example:
        >>> fraction_to_bits(0.1875, 4).tolist()
        [0, 0, 1, 1]
    """
    value = validate_fraction(fraction)
    if precision < 0:
        raise ValueError(f"Precision must be >= 0, got {precision}")

    # Scaling by a power of two is exact for doubles; floor drops the tail
    scaled = int(math.ldexp(value, precision))
    return np.array(
        [(scaled >> (precision - 1 - i)) & 1 for i in range(precision)],
        dtype=np.uint8,
    )


def bits_to_fraction(bits: Bits) -> float:
    """Value of the mantissa ``bits`` as a fraction in [0, 1)"""
    bits = as_bits(bits)
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return math.ldexp(value, -len(bits))


def as_bits(bits: Iterable[int]) -> np.ndarray:
    """
    Normalize a bit sequence to a uint8 array.

    Raises:
        InvalidBit: If any element is not 0 or 1
    """
    values = [int(b) for b in bits]
    for b in values:
        if b not in (0, 1):
            raise InvalidBit(f"Bits must be 0 or 1, got {b!r}")
    return np.array(values, dtype=np.uint8)


def pad_bits(bits: Bits, length: int) -> np.ndarray:
    """Right-pad ``bits`` with zeros up to ``length``; longer input is kept whole"""
    bits = as_bits(bits)
    if len(bits) >= length:
        return bits
    return np.concatenate([bits, np.zeros(length - len(bits), dtype=np.uint8)])


def bits_from_string(text: str) -> np.ndarray:
    """
    Parse a binary fraction literal.

    Accepts ``0b0.0011``, ``0.0011``, ``.0011`` or a bare digit string
    ``0011`` (taken as the mantissa).
    """
    digits = text.strip().replace("_", "")
    if digits.lower().startswith("0b"):
        digits = digits[2:]
    if "." in digits:
        whole, _, digits = digits.partition(".")
        if whole not in ("", "0"):
            raise InvalidFraction(text)
    if any(ch not in "01" for ch in digits):
        raise InvalidFraction(text)
    return as_bits(int(ch) for ch in digits)
