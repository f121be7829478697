"""Core parameter and result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidKeyLength

# Number of columns in the state; fixed for AES
NB = 4


@dataclass(frozen=True)
class CipherParams:
    """Size parameters for one AES key length.

    Everything is derived from Nk, the number of 32-bit words in the
    cipher key.
    """

    # Key length in words: 4 = AES-128, 6 = AES-192, 8 = AES-256
    nk: int = 4

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.nk not in (4, 6, 8):
            raise ValueError(f"nk must be 4, 6, or 8, got {self.nk}")

    @classmethod
    def from_key_length(cls, length: int) -> CipherParams:
        """Parameters for a key of ``length`` bytes.

        Raises:
            InvalidKeyLength: If length is not 16, 24 or 32
        """
        if length not in (16, 24, 32):
            raise InvalidKeyLength(length)
        return cls(nk=length // 4)

    @property
    def nb(self) -> int:
        return NB

    @property
    def nr(self) -> int:
        """Number of rounds (10, 12 or 14)."""
        return self.nk + 6

    @property
    def key_bytes(self) -> int:
        return 4 * self.nk

    @property
    def key_bits(self) -> int:
        return 32 * self.nk

    @property
    def schedule_words(self) -> int:
        """Length of the expanded key in words: Nb * (Nr + 1)."""
        return NB * (self.nr + 1)


@dataclass
class BlockResult:
    """Outcome of a single-block operation, as reported by the CLI."""

    direction: str
    key_bits: int
    rounds: int
    input: bytes
    output: bytes

    # None when no reference check was requested
    verified: bool | None = None
    error_detail: str = ""

    notes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.direction not in ("encrypt", "decrypt"):
            raise ValueError(f"Unknown direction: {self.direction}")

    def add_note(self, note: str) -> None:
        """Add an informational note."""
        self.notes.append(note)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "direction": self.direction,
            "key_bits": self.key_bits,
            "rounds": self.rounds,
            "input_hex": self.input.hex(),
            "output_hex": self.output.hex(),
            "verified": self.verified,
            "error_detail": self.error_detail,
            "notes": self.notes,
        }
