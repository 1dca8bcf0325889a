"""Miller-Rabin primality testing and random prime generation."""
from typing import Optional

from ..random_state import RandomState
from .modexp import pow_mod
from ...config import PrimeConfig
from ...exceptions import PrimeGenerationError
from ...logging import get_logger

logger = get_logger(__name__)


def is_prime(n: int, iters: int, rng: RandomState) -> bool:
    """
    Probabilistic Miller-Rabin primality test.

    A prime always passes. A composite passes a single round with
    probability at most 1/4, so the error bound is 4^-iters.

    Args:
        n: Candidate
        iters: Number of random witnesses to try
        rng: Random state the witnesses are drawn from

    Returns:
        True if n is probably prime
    """
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False

    # n - 1 = 2^s * r with r odd
    r = n - 1
    s = 0
    while r % 2 == 0:
        r //= 2
        s += 1

    for _ in range(iters):
        witness = 2 + rng.below(n - 3)  # [2, n - 2]
        y = pow_mod(witness, r, n)

        if y != 1 and y != n - 1:
            j = 1
            while j <= s - 1 and y != n - 1:
                y = pow_mod(y, 2, n)
                if y == 1:
                    return False
                j += 1
            if y != n - 1:
                return False

    return True


def make_prime(
    bits: int,
    iters: int,
    rng: RandomState,
    max_attempts: Optional[int] = None
) -> int:
    """
    Generates a random probable prime exactly `bits + 1` bits long.

    Candidates are sampled with `bits + 1` random bits; those whose top
    bit is clear are discarded and resampled.

    Args:
        bits: Requested size; the result has bits + 1 significant bits
        iters: Miller-Rabin rounds per candidate
        rng: Random state to sample from
        max_attempts: Candidates to sample before giving up
            (defaults to PrimeConfig.max_attempts)

    Returns:
        A probable prime

    Raises:
        PrimeGenerationError: If no prime was found within max_attempts
    """
    if bits < 0:
        raise ValueError(f"Prime size must not be negative, got {bits}")
    if max_attempts is None:
        max_attempts = PrimeConfig.default().max_attempts

    width = bits + 1
    for attempt in range(1, max_attempts + 1):
        candidate = rng.bits(width)
        if candidate.bit_length() < width:
            continue
        if is_prime(candidate, iters, rng):
            logger.debug(f"Found {width}-bit prime after {attempt} candidates")
            return candidate

    logger.warning(f"Gave up searching for a {width}-bit prime after {max_attempts} candidates")
    raise PrimeGenerationError(bits, max_attempts)
