"""
AES round transformations (FIPS-197 section 5.1 and 5.3).

Every function mutates the given State in place and returns it, so both
``sub_bytes(state)`` and ``state = sub_bytes(state)`` read naturally.
"""

from __future__ import annotations

from typing import Sequence

from .gf import mul_poly
from .tables import INV_SBOX, SBOX
from .utils import State

# MixColumns matrices, row-major
MIX_MATRIX = (
    (0x02, 0x03, 0x01, 0x01),
    (0x01, 0x02, 0x03, 0x01),
    (0x01, 0x01, 0x02, 0x03),
    (0x03, 0x01, 0x01, 0x02),
)

INV_MIX_MATRIX = (
    (0x0e, 0x0b, 0x0d, 0x09),
    (0x09, 0x0e, 0x0b, 0x0d),
    (0x0d, 0x09, 0x0e, 0x0b),
    (0x0b, 0x0d, 0x09, 0x0e),
)


def _substitute(state: State, box: bytes) -> State:
    for col in state:
        for row in range(4):
            col[row] = box[col[row]]
    return state


def sub_bytes(state: State) -> State:
    """Replace every byte with its S-box image."""
    return _substitute(state, SBOX)


def inv_sub_bytes(state: State) -> State:
    """Replace every byte with its inverse S-box image."""
    return _substitute(state, INV_SBOX)


def _rotate_rows(state: State, direction: int) -> State:
    # Row r moves by r positions; row 0 stays put
    for row in range(1, 4):
        values = [state[col][row] for col in range(4)]
        for col in range(4):
            state[col][row] = values[(col + direction * row) % 4]
    return state


def shift_rows(state: State) -> State:
    """Rotate row r left by r positions."""
    return _rotate_rows(state, 1)


def inv_shift_rows(state: State) -> State:
    """Rotate row r right by r positions."""
    return _rotate_rows(state, -1)


def mix_single_column(column: Sequence[int], matrix=MIX_MATRIX) -> list[int]:
    """
    Multiply one column vector by a 4x4 matrix over GF(2^8).

    Args:
        column: 4 bytes, top row first
        matrix: MIX_MATRIX or INV_MIX_MATRIX

    Returns:
        The 4 output bytes
    """
    out = []
    for coeffs in matrix:
        value = 0
        for coeff, byte in zip(coeffs, column):
            value ^= mul_poly(byte, coeff)
        out.append(value)
    return out


def _mix(state: State, matrix) -> State:
    for col in state:
        col[:] = mix_single_column(col, matrix)
    return state


def mix_columns(state: State) -> State:
    """Mix each column with the forward matrix."""
    return _mix(state, MIX_MATRIX)


def inv_mix_columns(state: State) -> State:
    """Mix each column with the inverse matrix."""
    return _mix(state, INV_MIX_MATRIX)


def add_round_key(state: State, round_key: Sequence[Sequence[int]]) -> State:
    """
    XOR the state with a round key.

    Args:
        state: State to update
        round_key: 4 words; word c is XORed into column c
    """
    for col, word in zip(state, round_key):
        for row in range(4):
            col[row] ^= word[row]
    return state
