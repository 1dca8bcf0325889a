"""Number theory primitives used by the cryptosystem."""
from .euclid import gcd, mod_inverse
from .modexp import pow_mod
from .primes import is_prime, make_prime

__all__ = [
    'gcd',
    'mod_inverse',
    'pow_mod',
    'is_prime',
    'make_prime',
]
