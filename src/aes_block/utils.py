"""
State type and byte/hex conversion helpers.

The AES state is 4x4 bytes addressed as state[col][row], so each inner
list is one column (one 32-bit word).

Mapping from a 16-byte block:
  byte[0]  -> state[0][0]
  byte[1]  -> state[0][1]
  byte[2]  -> state[0][2]
  byte[3]  -> state[0][3]
  byte[4]  -> state[1][0]
  ...
  byte[15] -> state[3][3]
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .errors import InvalidBlockLength

BLOCK_SIZE = 16


class State:
    """
    One AES block being transformed.

    Created fresh for every block operation and mutated in place by the
    round transformations; never shared between calls.
    """

    __slots__ = ("_cols",)

    def __init__(self, columns: Iterable[Iterable[int]] | None = None):
        if columns is None:
            self._cols = [[0, 0, 0, 0] for _ in range(4)]
            return
        cols = [list(col) for col in columns]
        if len(cols) != 4 or any(len(col) != 4 for col in cols):
            raise ValueError("State must be 4 columns of 4 bytes")
        for col in cols:
            for b in col:
                if not 0 <= b <= 0xff:
                    raise ValueError(f"State byte out of range: {b}")
        self._cols = cols

    @classmethod
    def from_bytes(cls, data: bytes) -> State:
        """Load a 16-byte block: byte i goes to column i // 4, row i % 4."""
        if len(data) != BLOCK_SIZE:
            raise InvalidBlockLength(len(data))
        state = cls()
        for i in range(BLOCK_SIZE):
            state._cols[i // 4][i % 4] = data[i]
        return state

    def to_bytes(self) -> bytes:
        """Copy the state out using the same mapping as from_bytes()."""
        return bytes(self._cols[i // 4][i % 4] for i in range(BLOCK_SIZE))

    def copy(self) -> State:
        return State(self._cols)

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __getitem__(self, col: int) -> list[int]:
        return self._cols[col]

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self._cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._cols == other._cols

    def __repr__(self) -> str:
        return f"State({self.hex()})"


def as_bytes(data: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    """
    Normalize bytes-like input or a sequence of ints to bytes.

    Raises:
        ValueError: If an int is outside 0..255
    """
    if isinstance(data, bytes):
        return data
    return bytes(data)


def encode_text(text: str) -> bytes:
    """Encode text as UTF-8 bytes."""
    return text.encode("utf-8")


def decode_text(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing undecodable sequences."""
    return data.decode("utf-8", errors="replace")


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Whitespace between byte pairs is ignored, so "00 11 22" is accepted.
    """
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to a lowercase hex string."""
    return data.hex()


def format_state_grid(state: State) -> str:
    """
    Format state as a readable 4x4 grid, one row per line.

    Rows are printed across the four columns:
      00 44 88 cc
      11 55 99 dd
      22 66 aa ee
      33 77 bb ff
    """
    lines = []
    for row in range(4):
        row_hex = [f"{state[col][row]:02x}" for col in range(4)]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_word(word: Iterable[int]) -> str:
    """Format a 4-byte word as 8 hex chars."""
    return "".join(f"{b:02x}" for b in word)
