"""Exceptions raised at the cipher API boundary."""


class AESError(ValueError):
    """Base class for all cipher input errors."""


class InvalidKeyLength(AESError):
    """Cipher key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be 16, 24 or 32 bytes, got {length}")


class InvalidBlockLength(AESError):
    """Block is not exactly 16 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Block must be 16 bytes, got {length}")


class InvalidKeySchedule(AESError):
    """Key schedule has the wrong shape for any AES key size."""
