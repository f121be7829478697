"""
AES key expansion (FIPS-197 section 5.2).

The expanded key is a flat sequence of Nb * (Nr + 1) words; round key r
is words 4r .. 4r + 3. A KeySchedule depends only on the cipher key, is
immutable, and can be reused for any number of blocks and shared between
threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .errors import InvalidKeySchedule
from .interfaces import NB, CipherParams
from .tables import RCON, SBOX
from .utils import as_bytes, format_word

Word = tuple[int, int, int, int]


def rot_word(word: Sequence[int]) -> Word:
    """[a0, a1, a2, a3] -> [a1, a2, a3, a0]."""
    return (word[1], word[2], word[3], word[0])


def sub_word(word: Sequence[int]) -> Word:
    """Apply the S-box to each byte of a word."""
    return (SBOX[word[0]], SBOX[word[1]], SBOX[word[2]], SBOX[word[3]])


def xor_word(a: Sequence[int], b: Sequence[int]) -> Word:
    return (a[0] ^ b[0], a[1] ^ b[1], a[2] ^ b[2], a[3] ^ b[3])


@dataclass(frozen=True)
class KeySchedule:
    """Expanded key: all round keys for one cipher key."""

    words: tuple[Word, ...]

    def __post_init__(self) -> None:
        """Reject schedules that no AES key could have produced."""
        if len(self.words) not in (44, 52, 60):
            raise InvalidKeySchedule(
                f"Key schedule must have 44, 52 or 60 words, got {len(self.words)}"
            )
        for i, word in enumerate(self.words):
            if len(word) != 4 or any(not 0 <= b <= 0xff for b in word):
                raise InvalidKeySchedule(f"Word {i} is not 4 bytes: {word!r}")

    @property
    def params(self) -> CipherParams:
        return CipherParams(nk=len(self.words) // NB - 7)

    @property
    def rounds(self) -> int:
        """Nr: 10, 12 or 14."""
        return len(self.words) // NB - 1

    def round_key(self, round_num: int) -> tuple[Word, ...]:
        """
        Round key for round ``round_num``.

        Raises:
            IndexError: If round_num is outside 0..Nr
        """
        if not 0 <= round_num <= self.rounds:
            raise IndexError(
                f"Round must be in 0..{self.rounds}, got {round_num}"
            )
        return self.words[round_num * NB:(round_num + 1) * NB]

    def round_keys(self) -> list[tuple[Word, ...]]:
        return [self.round_key(r) for r in range(self.rounds + 1)]

    def round_key_bytes(self, round_num: int) -> bytes:
        """Round key as 16 bytes, in block order."""
        return bytes(b for word in self.round_key(round_num) for b in word)

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        return (
            f"KeySchedule(aes{self.params.key_bits}, "
            f"first={format_word(self.words[0])}, last={format_word(self.words[-1])})"
        )


def expand_key(key: bytes | bytearray | Iterable[int]) -> KeySchedule:
    """
    Expand a cipher key into its key schedule.

    Args:
        key: 16, 24 or 32 byte cipher key

    Returns:
        KeySchedule with 44, 52 or 60 words

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes
    """
    key = as_bytes(key)
    params = CipherParams.from_key_length(len(key))
    nk = params.nk

    w: list[Word] = [
        (key[4 * i], key[4 * i + 1], key[4 * i + 2], key[4 * i + 3])
        for i in range(nk)
    ]

    for i in range(nk, params.schedule_words):
        temp = w[i - 1]
        if i % nk == 0:
            temp = xor_word(sub_word(rot_word(temp)), RCON[i // nk])
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        w.append(xor_word(w[i - nk], temp))

    return KeySchedule(tuple(w))
