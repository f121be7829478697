"""
GF(2^8) arithmetic for AES.

Elements are bytes interpreted as polynomials over GF(2), reduced modulo
the AES irreducible polynomial x^8 + x^4 + x^3 + x + 1 (0x11b).
"""

# x^8 + x^4 + x^3 + x + 1
IRREDUCIBLE = 0x11b


def xtime(a: int) -> int:
    """Multiply by x (i.e. {02}) in GF(2^8)."""
    a = (a & 0xff) << 1
    if a & 0x100:
        a ^= IRREDUCIBLE
    return a


def mul_poly(a: int, b: int) -> int:
    """
    Multiply two field elements in GF(2^8).

    Shift-and-add: walk the bits of ``b`` from least to most significant,
    accumulating the running multiple of ``a`` whenever the bit is set.
    ``a`` is doubled (with reduction) after every bit.

    Args:
        a: Field element (0..255)
        b: Field element (0..255)

    Returns:
        Product a*b (0..255)
    """
    a &= 0xff
    b &= 0xff
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result
