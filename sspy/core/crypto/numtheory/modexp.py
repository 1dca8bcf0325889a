"""Modular exponentiation."""


def pow_mod(a: int, d: int, n: int) -> int:
    """
    Computes a^d mod n by right-to-left square-and-multiply.

    Args:
        a: Base
        d: Exponent, must not be negative
        n: Modulus, must be positive

    Returns:
        a^d reduced modulo n
    """
    if d < 0:
        raise ValueError("Exponent must not be negative")

    value = 1 % n
    base = a % n
    while d > 0:
        if d & 1:
            value = (value * base) % n
        base = (base * base) % n
        d //= 2
    return value
