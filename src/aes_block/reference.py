"""Golden reference AES using PyCryptodome, plus FIPS-197 test vectors."""

from Crypto.Cipher import AES

from .errors import InvalidBlockLength, InvalidKeyLength


def _check(key: bytes, block: bytes) -> None:
    if len(key) not in (16, 24, 32):
        raise InvalidKeyLength(len(key))
    if len(block) != 16:
        raise InvalidBlockLength(len(block))


def reference_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16, 24 or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidKeyLength: If key is not 16, 24 or 32 bytes
        InvalidBlockLength: If plaintext is not 16 bytes
    """
    _check(key, plaintext)
    cipher = AES.new(bytes(key), AES.MODE_ECB)
    return cipher.encrypt(bytes(plaintext))


def reference_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome as golden reference."""
    _check(key, ciphertext)
    cipher = AES.new(bytes(key), AES.MODE_ECB)
    return cipher.decrypt(bytes(ciphertext))


def validate_against_reference(
    key: bytes, block: bytes, candidate: bytes, direction: str = "encrypt"
) -> tuple[bool, str]:
    """Validate a candidate output against the golden reference.

    Args:
        key: AES key
        block: Input block (plaintext when encrypting, ciphertext when decrypting)
        candidate: 16-byte output to validate
        direction: "encrypt" or "decrypt"

    Returns:
        Tuple of (is_correct, error_detail)
    """
    if direction == "encrypt":
        expected = reference_encrypt(key, block)
    elif direction == "decrypt":
        expected = reference_decrypt(key, block)
    else:
        raise ValueError(f"Unknown direction: {direction}")

    if candidate == expected:
        return True, ""
    return False, (
        f"{direction.capitalize()} mismatch: expected {expected.hex()}, "
        f"got {candidate.hex()}"
    )


# FIPS-197 known-answer vectors
FIPS_197_TEST_VECTORS = [
    {
        "name": "FIPS-197 Appendix B",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "name": "FIPS-197 Appendix C.1 (AES-128)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "name": "FIPS-197 Appendix C.2 (AES-192)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    {
        "name": "FIPS-197 Appendix C.3 (AES-256)",
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    # Additional test vectors from NIST
    {
        "name": "All zeros",
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "name": "GFSbox #1",
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("f34481ec3cc627bacd5dc3fb08f273e6"),
        "ciphertext": bytes.fromhex("0336763e966d92595a567cc9ce537f5e"),
    },
    {
        "name": "All ones",
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]
