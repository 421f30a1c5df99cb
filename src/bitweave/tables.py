# src/bitweave/tables.py
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

TABLE_SIZE = 256

# DEINTERLEAVE_LOOKUP_TABLE[x & EVEN_BITS_MASK] collapses bits 0,2,4,6;
# DEINTERLEAVE_LOOKUP_TABLE[x & ODD_BITS_MASK] collapses bits 1,3,5,7.
EVEN_BITS_MASK = 0x55
ODD_BITS_MASK = 0xAA


def build_interleave_table() -> np.ndarray:
    """
    8 bits -> interleaved 16 bits.

    Bit i of the index lands on bit 2*i of the entry; odd bits stay zero,
    so an entry OR'ed with another entry shifted left by one never overlaps.
    Returned array is uint16 and read-only.
    """
    idx = np.arange(TABLE_SIZE, dtype=np.uint16)
    table = np.zeros(TABLE_SIZE, dtype=np.uint16)
    for bit in range(8):
        table |= ((idx >> bit) & 1) << (2 * bit)

    table.setflags(write=False)
    logger.debug("built interleave table: %d uint16 entries", table.size)
    return table


def build_deinterleave_table() -> np.ndarray:
    """
    Interleaved 8 bits -> 4 bits.

    Bit j of the index lands on bit j//2 of the entry. With the index
    pre-masked by EVEN_BITS_MASK or ODD_BITS_MASK only one bit of each
    pair survives, so the same table serves both operands.
    Returned array is uint8 and read-only.
    """
    idx = np.arange(TABLE_SIZE, dtype=np.uint8)
    table = np.zeros(TABLE_SIZE, dtype=np.uint8)
    for bit in range(8):
        table |= ((idx >> bit) & 1) << (bit // 2)

    table.setflags(write=False)
    logger.debug("built deinterleave table: %d uint8 entries", table.size)
    return table


INTERLEAVE_LOOKUP_TABLE = build_interleave_table()
DEINTERLEAVE_LOOKUP_TABLE = build_deinterleave_table()


def verify_tables(
    interleave_table: Sequence[int] = INTERLEAVE_LOOKUP_TABLE,
    deinterleave_table: Sequence[int] = DEINTERLEAVE_LOOKUP_TABLE,
) -> None:
    """
    Check a pair of tables against the interleave/deinterleave laws.

    - both tables have 256 entries
    - interleave entry x places bit i of x on bit 2*i and nothing else
    - deinterleave entries fit in a nibble
    - composing the two recovers both nibbles of x, through the even mask
      and (after a one-bit shift) through the odd mask

    Raises ValueError naming the table and the first offending index.
    """
    spread = _as_int_list(interleave_table, "interleave")
    compact = _as_int_list(deinterleave_table, "deinterleave")

    for x in range(TABLE_SIZE):
        if spread[x] != _spread_byte(x):
            raise ValueError(
                f"interleave table: entry {x:#04x} is {spread[x]:#06x}, "
                f"expected {_spread_byte(x):#06x}"
            )

    for x in range(TABLE_SIZE):
        if not (0 <= compact[x] <= 0xF):
            raise ValueError(f"deinterleave table: entry {x:#04x} is not a nibble: {compact[x]}")

    for x in range(TABLE_SIZE):
        lo, hi = x & 0xF, x >> 4
        even = spread[x]
        odd = spread[x] << 1
        got = (
            compact[even & EVEN_BITS_MASK],
            compact[(even >> 8) & EVEN_BITS_MASK],
            compact[odd & ODD_BITS_MASK],
            compact[(odd >> 8) & ODD_BITS_MASK],
        )
        if got != (lo, hi, lo, hi):
            raise ValueError(
                f"deinterleave table: does not invert interleave entry {x:#04x} "
                f"(got nibbles {got}, expected {(lo, hi, lo, hi)})"
            )

    logger.debug("lookup tables verified")


# ----------------------------
# Internal
# ----------------------------

def _spread_byte(x: int) -> int:
    r = 0
    for i in range(8):
        r |= ((x >> i) & 1) << (2 * i)
    return r


def _as_int_list(table: Sequence[int], name: str) -> list[int]:
    if len(table) != TABLE_SIZE:
        raise ValueError(f"{name} table: expected {TABLE_SIZE} entries, got {len(table)}")
    return [int(v) for v in table]
