"""Euclidean algorithms: greatest common divisor and modular inverse."""


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the classic Euclidean algorithm.

    Args:
        a: First integer
        b: Second integer

    Returns:
        gcd(a, b); non-negative for non-negative inputs
    """
    while b != 0:
        a, b = b, a % b
    return a


def mod_inverse(a: int, n: int) -> int:
    """
    Modular inverse of `a` modulo `n` by the extended Euclidean algorithm.

    Tracks the remainder pair (r, r1) and the Bezout coefficient pair
    (t, t1) until the remainder reaches zero.

    Args:
        a: Value to invert
        n: Modulus

    Returns:
        t in [0, n) with a*t = 1 (mod n), or 0 when a and n are not
        coprime. Callers must treat 0 as "no inverse".
    """
    r, r1 = n, a
    t, t1 = 0, 1

    while r1 != 0:
        q = r // r1
        r, r1 = r1, r - q * r1
        t, t1 = t1, t - q * t1

    if r > 1:
        return 0
    if t < 0:
        t += n
    return t
