"""
Schmidt-Samoa key construction.

The public key is n = p^2 * q. The private key is pq = p * q together
with d, the inverse of n modulo lambda(pq) = lcm(p - 1, q - 1).
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..numtheory import gcd, mod_inverse, make_prime
from ..random_state import RandomState
from ...config import PrimeConfig
from ...exceptions import NotInvertibleError
from ...logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SSPublicKey:
    """Public key: modulus/exponent n and the owner's login name."""
    n: int
    owner: str

    @property
    def bits(self) -> int:
        return self.n.bit_length()


@dataclass(frozen=True)
class SSPrivateKey:
    """Private key: modulus pq and private exponent d."""
    pq: int
    d: int

    @property
    def bits(self) -> int:
        return self.pq.bit_length()


@dataclass(frozen=True)
class SSKeyPair:
    """
    Freshly generated key pair.

    p and q are kept only so they can be reported; they are never
    serialized.
    """
    public: SSPublicKey
    private: SSPrivateKey
    p: int
    q: int


class KeyGenerator:
    """Generates Schmidt-Samoa keys from an explicit random state."""

    def __init__(self, rng: RandomState, prime_config: Optional[PrimeConfig] = None):
        """
        Initialize the generator.

        Args:
            rng: Random state consumed by prime generation
            prime_config: Prime search settings (rounds, max attempts)
        """
        self.rng = rng
        self.prime_config = prime_config or PrimeConfig.default()

    def make_pub(self, nbits: int, iters: Optional[int] = None) -> Tuple[int, int, int]:
        """
        Generates the primes p, q and the public modulus n = p^2 * q.

        The size budget nbits is split so that p gets between nbits/5 and
        2*nbits/5 bits and q takes what remains after counting p twice.

        Args:
            nbits: Requested bits of n
            iters: Miller-Rabin rounds for each prime
                (defaults to prime_config.iters)

        Returns:
            (p, q, n)
        """
        if iters is None:
            iters = self.prime_config.iters
        low, high = nbits // 5, (2 * nbits) // 5
        if low < 1 or low >= high:
            raise ValueError(f"Key size of {nbits} bits is too small")
        p_bits = self.rng.between(low, high)
        q_bits = nbits - 2 * p_bits
        if q_bits < 1:
            raise ValueError(f"Key size of {nbits} bits leaves no bits for q")

        logger.debug(f"Splitting {nbits} bits: p={p_bits}, q={q_bits}")

        while True:
            p = make_prime(p_bits, iters, self.rng, self.prime_config.max_attempts)
            q = make_prime(q_bits, iters, self.rng, self.prime_config.max_attempts)
            # n must be invertible modulo lcm(p - 1, q - 1)
            if p == q or (p - 1) % q == 0 or (q - 1) % p == 0:
                logger.debug("Rejected degenerate prime pair, resampling")
                continue
            break

        n = p * p * q
        return p, q, n

    @staticmethod
    def make_priv(p: int, q: int) -> Tuple[int, int]:
        """
        Derives the private modulus pq and exponent d from p and q.

        Returns:
            (pq, d)

        Raises:
            NotInvertibleError: If n has no inverse modulo lambda(pq)
        """
        pq = p * q
        p_minus_1 = p - 1
        q_minus_1 = q - 1
        lam = (p_minus_1 * q_minus_1) // gcd(p_minus_1, q_minus_1)

        n = p * pq
        d = mod_inverse(n, lam)
        if d == 0:
            raise NotInvertibleError(n, lam)
        return pq, d

    def generate(self, nbits: int, iters: Optional[int], owner: str) -> SSKeyPair:
        """Generates a complete key pair for `owner`."""
        p, q, n = self.make_pub(nbits, iters)
        pq, d = self.make_priv(p, q)
        logger.debug(f"Generated {n.bit_length()}-bit public key for {owner}")
        return SSKeyPair(
            public=SSPublicKey(n=n, owner=owner),
            private=SSPrivateKey(pq=pq, d=d),
            p=p,
            q=q,
        )


def make_pub(
    nbits: int,
    iters: Optional[int],
    rng: RandomState,
    prime_config: Optional[PrimeConfig] = None
) -> Tuple[int, int, int]:
    """Generates (p, q, n) with n = p^2 * q."""
    return KeyGenerator(rng, prime_config).make_pub(nbits, iters)


def make_priv(p: int, q: int) -> Tuple[int, int]:
    """Derives (pq, d) from the primes p and q."""
    return KeyGenerator.make_priv(p, q)


def generate_keypair(
    nbits: int,
    iters: Optional[int],
    owner: str,
    rng: RandomState,
    prime_config: Optional[PrimeConfig] = None
) -> SSKeyPair:
    """Generates a public/private key pair for `owner`."""
    return KeyGenerator(rng, prime_config).generate(nbits, iters, owner)
