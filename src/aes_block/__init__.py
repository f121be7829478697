"""AES single-block cipher core (FIPS-197, 128/192/256-bit keys)."""

__version__ = "0.1.0"

from .errors import AESError, InvalidKeyLength, InvalidBlockLength, InvalidKeySchedule
from .gf import mul_poly
from .tables import SBOX, INV_SBOX, RCON
from .interfaces import CipherParams, BlockResult
from .key_schedule import KeySchedule, expand_key
from .cipher import BlockCipher, encrypt_block, decrypt_block
from .utils import State

# Default CLI values: FIPS-197 Appendix C.1
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "00112233445566778899aabbccddeeff"
DEFAULT_CT_HEX = "69c4e0d86a7b0430d8cdb78070b4c55a"

__all__ = [
    "AESError",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "InvalidKeySchedule",
    "mul_poly",
    "SBOX",
    "INV_SBOX",
    "RCON",
    "CipherParams",
    "BlockResult",
    "KeySchedule",
    "expand_key",
    "BlockCipher",
    "encrypt_block",
    "decrypt_block",
    "State",
]
