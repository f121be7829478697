"""
Tests for key expansion.

Expected words are from FIPS-197 Appendix A.
"""

import dataclasses

import pytest

from aes_block.errors import InvalidKeyLength, InvalidKeySchedule
from aes_block.interfaces import CipherParams
from aes_block.key_schedule import (
    KeySchedule,
    expand_key,
    rot_word,
    sub_word,
    xor_word,
)


# (key_hex, nk, nr, {word_index: word_hex})
EXPANSION_VECTORS = [
    (
        "2b7e151628aed2a6abf7158809cf4f3c",
        4, 10,
        {0: "2b7e1516", 3: "09cf4f3c", 4: "a0fafe17", 5: "88542cb1", 43: "b6630ca6"},
    ),
    (
        "8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b",
        6, 12,
        {0: "8e73b0f7", 5: "522c6b7b", 6: "fe0c91f7", 51: "01002202"},
    ),
    (
        "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4",
        8, 14,
        {0: "603deb10", 7: "0914dff4", 8: "9ba35411", 12: "a8b09c1a", 59: "706c631e"},
    ),
]


class TestWordHelpers:
    """RotWord, SubWord and word XOR."""

    def test_rot_word(self):
        assert rot_word([0x09, 0xcf, 0x4f, 0x3c]) == (0xcf, 0x4f, 0x3c, 0x09)

    def test_sub_word(self):
        # FIPS-197 Appendix A.1, i = 4
        assert sub_word((0xcf, 0x4f, 0x3c, 0x09)) == (0x8a, 0x84, 0xeb, 0x01)

    def test_xor_word(self):
        assert xor_word((0xff, 0x00, 0x0f, 0xf0), (0x0f, 0x0f, 0x0f, 0x0f)) == (
            0xf0, 0x0f, 0x00, 0xff,
        )

    def test_helpers_do_not_mutate(self):
        word = [1, 2, 3, 4]
        rot_word(word)
        sub_word(word)
        assert word == [1, 2, 3, 4]


class TestExpandKey:
    """Tests for expand_key()."""

    @pytest.mark.parametrize("key_hex,nk,nr,words", EXPANSION_VECTORS)
    def test_fips_197_appendix_a(self, key_hex, nk, nr, words):
        schedule = expand_key(bytes.fromhex(key_hex))

        assert schedule.params.nk == nk
        assert schedule.rounds == nr
        assert len(schedule) == 4 * (nr + 1)
        for index, word_hex in words.items():
            assert bytes(schedule.words[index]).hex() == word_hex, f"w[{index}]"

    def test_round_key_slices(self):
        schedule = expand_key(bytes.fromhex(EXPANSION_VECTORS[0][0]))
        assert schedule.round_key_bytes(0).hex() == EXPANSION_VECTORS[0][0]
        assert schedule.round_key_bytes(1).hex() == "a0fafe1788542cb123a339392a6c7605"
        assert schedule.round_key_bytes(10).hex() == "d014f9a8c9ee2589e13f0cc8b6630ca6"
        assert len(schedule.round_keys()) == 11

    def test_round_key_out_of_range(self):
        schedule = expand_key(bytes(16))
        with pytest.raises(IndexError):
            schedule.round_key(11)
        with pytest.raises(IndexError):
            schedule.round_key(-1)

    def test_deterministic(self):
        key = bytes(range(32))
        assert expand_key(key) == expand_key(key)
        assert expand_key(key).words == expand_key(bytearray(key)).words

    def test_accepts_int_sequence(self):
        key = list(range(16))
        assert expand_key(key) == expand_key(bytes(key))

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 20, 23, 25, 31, 33, 64])
    def test_invalid_key_length(self, length):
        """Wrong lengths are rejected, never padded or truncated."""
        with pytest.raises(InvalidKeyLength) as excinfo:
            expand_key(bytes(length))
        assert excinfo.value.length == length

    def test_invalid_key_length_is_value_error(self):
        with pytest.raises(ValueError, match="16, 24 or 32 bytes"):
            expand_key(bytes(20))

    def test_schedule_is_immutable(self):
        schedule = expand_key(bytes(16))
        with pytest.raises(dataclasses.FrozenInstanceError):
            schedule.words = ()
        assert isinstance(schedule.words, tuple)
        assert all(isinstance(w, tuple) for w in schedule.words)


class TestKeySchedule:
    """KeySchedule construction checks."""

    def test_wrong_word_count(self):
        with pytest.raises(InvalidKeySchedule):
            KeySchedule(tuple((0, 0, 0, 0) for _ in range(43)))

    def test_wrong_word_size(self):
        words = [(0, 0, 0, 0)] * 44
        words[7] = (0, 0, 0)
        with pytest.raises(InvalidKeySchedule, match="Word 7"):
            KeySchedule(tuple(words))

    def test_byte_out_of_range(self):
        words = [(0, 0, 0, 0)] * 44
        words[0] = (0, 0, 0, 256)
        with pytest.raises(InvalidKeySchedule):
            KeySchedule(tuple(words))


class TestCipherParams:
    """Tests for CipherParams."""

    @pytest.mark.parametrize("length,nk,nr,words", [
        (16, 4, 10, 44),
        (24, 6, 12, 52),
        (32, 8, 14, 60),
    ])
    def test_from_key_length(self, length, nk, nr, words):
        params = CipherParams.from_key_length(length)
        assert params.nk == nk
        assert params.nr == nr
        assert params.nb == 4
        assert params.schedule_words == words
        assert params.key_bytes == length
        assert params.key_bits == length * 8

    def test_invalid_nk(self):
        with pytest.raises(ValueError, match="nk must be"):
            CipherParams(nk=5)

    def test_invalid_length(self):
        with pytest.raises(InvalidKeyLength):
            CipherParams.from_key_length(15)
