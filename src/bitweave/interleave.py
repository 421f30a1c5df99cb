# src/bitweave/interleave.py
from __future__ import annotations

from typing import Any

import numpy as np

from bitweave.tables import (
    DEINTERLEAVE_LOOKUP_TABLE,
    EVEN_BITS_MASK,
    INTERLEAVE_LOOKUP_TABLE,
    ODD_BITS_MASK,
)

WORD_BITS = 32
CODE_BITS = 64

WORD_MASK = (1 << WORD_BITS) - 1
CODE_MASK = (1 << CODE_BITS) - 1

# Plain Python ints: numpy scalars would wrap at their dtype width when shifted.
_SPREAD: tuple[int, ...] = tuple(INTERLEAVE_LOOKUP_TABLE.tolist())
_COMPACT: tuple[int, ...] = tuple(DEINTERLEAVE_LOOKUP_TABLE.tolist())


def interleave_integer(val0: Any, val1: Any) -> int:
    """
    Interleave two unsigned 32-bit integers into one unsigned 64-bit integer.

    Bit i of val0 becomes bit 2*i of the result, bit i of val1 becomes
    bit 2*i + 1. Negative inputs (down to -2**31) are read as their 32-bit
    two's-complement pattern.
    """
    a = _get_word(val0, "val0")
    b = _get_word(val1, "val1")

    return (
        _SPREAD[a & 0xFF]
        | _SPREAD[(a >> 8) & 0xFF] << 16
        | _SPREAD[(a >> 16) & 0xFF] << 32
        | _SPREAD[a >> 24] << 48
        | _SPREAD[b & 0xFF] << 1
        | _SPREAD[(b >> 8) & 0xFF] << 17
        | _SPREAD[(b >> 16) & 0xFF] << 33
        | _SPREAD[b >> 24] << 49
    )


def deinterleave_integer(code: Any) -> tuple[int, int]:
    """
    Inverse of interleave_integer().

    Returns (val0, val1): val0 from the even bit positions of code, val1
    from the odd ones. Negative codes (down to -2**63) are read as their
    64-bit two's-complement pattern.
    """
    c = _get_code(code)

    val0 = (
        _COMPACT[c & EVEN_BITS_MASK]
        | _COMPACT[(c >> 8) & EVEN_BITS_MASK] << 4
        | _COMPACT[(c >> 16) & EVEN_BITS_MASK] << 8
        | _COMPACT[(c >> 24) & EVEN_BITS_MASK] << 12
        | _COMPACT[(c >> 32) & EVEN_BITS_MASK] << 16
        | _COMPACT[(c >> 40) & EVEN_BITS_MASK] << 20
        | _COMPACT[(c >> 48) & EVEN_BITS_MASK] << 24
        | _COMPACT[(c >> 56) & EVEN_BITS_MASK] << 28
    )
    val1 = (
        _COMPACT[c & ODD_BITS_MASK]
        | _COMPACT[(c >> 8) & ODD_BITS_MASK] << 4
        | _COMPACT[(c >> 16) & ODD_BITS_MASK] << 8
        | _COMPACT[(c >> 24) & ODD_BITS_MASK] << 12
        | _COMPACT[(c >> 32) & ODD_BITS_MASK] << 16
        | _COMPACT[(c >> 40) & ODD_BITS_MASK] << 20
        | _COMPACT[(c >> 48) & ODD_BITS_MASK] << 24
        | _COMPACT[(c >> 56) & ODD_BITS_MASK] << 28
    )
    return val0, val1


# ----------------------------
# Internal
# ----------------------------

def _get_word(value: Any, name: str) -> int:
    return _as_unsigned(value, WORD_BITS, name)


def _get_code(value: Any) -> int:
    return _as_unsigned(value, CODE_BITS, "code")


def _as_unsigned(value: Any, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    v = int(value)
    if not (-(1 << (bits - 1)) <= v < (1 << bits)):
        raise ValueError(
            f"{name} must be a {bits}-bit pattern in [{-(1 << (bits - 1))}, {(1 << bits) - 1}], got {v}"
        )
    return v & ((1 << bits) - 1)
