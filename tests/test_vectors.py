"""
Test known AES test vectors through the block cipher driver.

Uses vectors from FIPS-197 and NIST.
"""

import pytest

from aes_block import (
    BlockCipher,
    InvalidBlockLength,
    decrypt_block,
    encrypt_block,
    expand_key,
)
from aes_block.reference import FIPS_197_TEST_VECTORS
from aes_block.utils import bytes_to_hex, hex_to_bytes


VECTOR_IDS = [vec["name"] for vec in FIPS_197_TEST_VECTORS]


class TestEncryptVectors:
    """encrypt_block() against known answers."""

    def test_fips_197_appendix_c1(self):
        key = hex_to_bytes("00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f")
        pt = hex_to_bytes("00 11 22 33 44 55 66 77 88 99 aa bb cc dd ee ff")

        ct = encrypt_block(pt, expand_key(key))

        assert bytes_to_hex(ct) == "69c4e0d86a7b0430d8cdb78070b4c55a"

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS, ids=VECTOR_IDS)
    def test_all_vectors(self, vec):
        ct = encrypt_block(vec["plaintext"], expand_key(vec["key"]))
        assert ct == vec["ciphertext"], (
            f"{vec['name']}: expected {vec['ciphertext'].hex()}, got {ct.hex()}"
        )


class TestDecryptVectors:
    """decrypt_block() against known answers."""

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS, ids=VECTOR_IDS)
    def test_all_vectors(self, vec):
        pt = decrypt_block(vec["ciphertext"], expand_key(vec["key"]))
        assert pt == vec["plaintext"], (
            f"{vec['name']}: expected {vec['plaintext'].hex()}, got {pt.hex()}"
        )


class TestDriverContract:
    """Input handling at the API boundary."""

    def test_returns_bytes(self):
        schedule = expand_key(bytes(16))
        assert isinstance(encrypt_block(bytearray(16), schedule), bytes)
        assert isinstance(decrypt_block(memoryview(bytes(16)), schedule), bytes)

    def test_accepts_int_list(self):
        vec = FIPS_197_TEST_VECTORS[1]
        schedule = expand_key(list(vec["key"]))
        assert encrypt_block(list(vec["plaintext"]), schedule) == vec["ciphertext"]

    def test_input_not_modified(self):
        vec = FIPS_197_TEST_VECTORS[1]
        block = bytearray(vec["plaintext"])
        encrypt_block(block, expand_key(vec["key"]))
        assert bytes(block) == vec["plaintext"]

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_encrypt_invalid_block_length(self, length):
        schedule = expand_key(bytes(16))
        with pytest.raises(InvalidBlockLength) as excinfo:
            encrypt_block(bytes(length), schedule)
        assert excinfo.value.length == length

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_decrypt_invalid_block_length(self, length):
        schedule = expand_key(bytes(24))
        with pytest.raises(InvalidBlockLength):
            decrypt_block(bytes(length), schedule)

    def test_byte_out_of_range(self):
        with pytest.raises(ValueError):
            encrypt_block([256] + [0] * 15, expand_key(bytes(16)))

    def test_schedule_type_checked(self):
        with pytest.raises(TypeError, match="KeySchedule"):
            encrypt_block(bytes(16), bytes(16))

    def test_schedule_reused_across_blocks(self):
        schedule = expand_key(bytes(range(16)))
        first = encrypt_block(bytes(16), schedule)
        encrypt_block(bytes([0xff] * 16), schedule)
        assert encrypt_block(bytes(16), schedule) == first


class TestBlockCipher:
    """BlockCipher wrapper."""

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS, ids=VECTOR_IDS)
    def test_vectors(self, vec):
        cipher = BlockCipher(vec["key"])
        assert cipher.encrypt_block(vec["plaintext"]) == vec["ciphertext"]
        assert cipher.decrypt_block(vec["ciphertext"]) == vec["plaintext"]

    @pytest.mark.parametrize("length,bits,rounds", [(16, 128, 10), (24, 192, 12), (32, 256, 14)])
    def test_sizes(self, length, bits, rounds):
        cipher = BlockCipher(bytes(length))
        assert cipher.key_bits == bits
        assert cipher.rounds == rounds
        assert repr(cipher) == f"BlockCipher(aes{bits})"
