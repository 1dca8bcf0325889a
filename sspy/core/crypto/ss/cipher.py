"""Single-integer Schmidt-Samoa encryption and decryption."""
from ..numtheory import pow_mod


def encrypt(m: int, n: int) -> int:
    """Encrypts m as m^n mod n; the public modulus is also the exponent."""
    return pow_mod(m, n, n)


def decrypt(c: int, d: int, pq: int) -> int:
    """Decrypts c as c^d mod pq."""
    return pow_mod(c, d, pq)
