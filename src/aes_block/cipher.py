"""
AES single-block cipher and inverse cipher (FIPS-197 sections 5.1 and 5.3).

Round structure for Nr rounds:
- Round 0:          AddRoundKey
- Rounds 1..Nr-1:   SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round Nr:         SubBytes, ShiftRows, AddRoundKey (no MixColumns)

The inverse cipher runs the inverse transformations with round keys
consumed from Nr down to 0.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidBlockLength
from .key_schedule import KeySchedule, expand_key
from .trace import TraceRecorder
from .transforms import (
    add_round_key,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)
from .utils import BLOCK_SIZE, State, as_bytes


def _load(block, schedule: KeySchedule) -> State:
    if not isinstance(schedule, KeySchedule):
        raise TypeError(
            f"schedule must be a KeySchedule, got {type(schedule).__name__}"
        )
    data = as_bytes(block)
    if len(data) != BLOCK_SIZE:
        raise InvalidBlockLength(len(data))
    return State.from_bytes(data)


def _trace(tracer: TraceRecorder | None, direction: str, round_num: int,
           operation: str, state: State) -> None:
    if tracer is not None:
        tracer.record(
            direction=direction,
            round=round_num,
            operation=operation,
            state=state.copy(),
        )


def encrypt_block(
    plaintext: bytes | bytearray | Iterable[int],
    schedule: KeySchedule,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Encrypt a single 16-byte block.

    Args:
        plaintext: 16-byte plaintext block
        schedule: Key schedule from expand_key()
        tracer: Optional trace recorder; gets the state after every step

    Returns:
        16-byte ciphertext

    Raises:
        InvalidBlockLength: If plaintext is not 16 bytes
    """
    state = _load(plaintext, schedule)
    nr = schedule.rounds
    _trace(tracer, "encrypt", 0, "input", state)

    add_round_key(state, schedule.round_key(0))
    _trace(tracer, "encrypt", 0, "AddRoundKey", state)

    for round_num in range(1, nr):
        sub_bytes(state)
        _trace(tracer, "encrypt", round_num, "SubBytes", state)
        shift_rows(state)
        _trace(tracer, "encrypt", round_num, "ShiftRows", state)
        mix_columns(state)
        _trace(tracer, "encrypt", round_num, "MixColumns", state)
        add_round_key(state, schedule.round_key(round_num))
        _trace(tracer, "encrypt", round_num, "AddRoundKey", state)

    # Final round: no MixColumns
    sub_bytes(state)
    _trace(tracer, "encrypt", nr, "SubBytes", state)
    shift_rows(state)
    _trace(tracer, "encrypt", nr, "ShiftRows", state)
    add_round_key(state, schedule.round_key(nr))
    _trace(tracer, "encrypt", nr, "AddRoundKey", state)

    return state.to_bytes()


def decrypt_block(
    ciphertext: bytes | bytearray | Iterable[int],
    schedule: KeySchedule,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Decrypt a single 16-byte block.

    Args:
        ciphertext: 16-byte ciphertext block
        schedule: Key schedule from expand_key() for the same key
        tracer: Optional trace recorder

    Returns:
        16-byte plaintext

    Raises:
        InvalidBlockLength: If ciphertext is not 16 bytes
    """
    state = _load(ciphertext, schedule)
    nr = schedule.rounds
    _trace(tracer, "decrypt", 0, "input", state)

    add_round_key(state, schedule.round_key(nr))
    _trace(tracer, "decrypt", 0, "AddRoundKey", state)

    for round_num in range(1, nr):
        inv_shift_rows(state)
        _trace(tracer, "decrypt", round_num, "InvShiftRows", state)
        inv_sub_bytes(state)
        _trace(tracer, "decrypt", round_num, "InvSubBytes", state)
        add_round_key(state, schedule.round_key(nr - round_num))
        _trace(tracer, "decrypt", round_num, "AddRoundKey", state)
        inv_mix_columns(state)
        _trace(tracer, "decrypt", round_num, "InvMixColumns", state)

    # Final round: no InvMixColumns
    inv_shift_rows(state)
    _trace(tracer, "decrypt", nr, "InvShiftRows", state)
    inv_sub_bytes(state)
    _trace(tracer, "decrypt", nr, "InvSubBytes", state)
    add_round_key(state, schedule.round_key(0))
    _trace(tracer, "decrypt", nr, "AddRoundKey", state)

    return state.to_bytes()


class BlockCipher:
    """
    A cipher key bound to its expanded schedule.

    The schedule is computed once in the constructor and reused for every
    block. Instances hold no per-block state and may be shared between
    threads.
    """

    def __init__(self, key: bytes | bytearray | Iterable[int]):
        self.schedule = expand_key(key)

    @property
    def key_bits(self) -> int:
        return self.schedule.params.key_bits

    @property
    def rounds(self) -> int:
        return self.schedule.rounds

    def encrypt_block(self, plaintext, tracer: TraceRecorder | None = None) -> bytes:
        return encrypt_block(plaintext, self.schedule, tracer)

    def decrypt_block(self, ciphertext, tracer: TraceRecorder | None = None) -> bytes:
        return decrypt_block(ciphertext, self.schedule, tracer)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(aes{self.key_bits})"
