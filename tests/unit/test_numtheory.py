"""Tests for number theory primitives."""
import pytest
from Crypto.Util.number import isPrime

from sspy.core.crypto import RandomState
from sspy.core.crypto.numtheory import gcd, mod_inverse, pow_mod, is_prime, make_prime
from sspy.core.exceptions import PrimeGenerationError


def trial_division(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


class TestGcd:
    """Test suite for gcd."""

    def test_known_values(self):
        """Test gcd against hand-computed values."""
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(100, 10) == 10
        assert gcd(270, 192) == 6

    def test_zero_operand(self):
        """Test gcd with a zero operand."""
        assert gcd(0, 9) == 9
        assert gcd(9, 0) == 9
        assert gcd(0, 0) == 0

    def test_order_does_not_matter(self):
        """Test gcd is symmetric."""
        for a, b in [(48, 36), (7, 91), (1024, 96)]:
            assert gcd(a, b) == gcd(b, a)

    def test_inputs_unchanged(self):
        """Test caller's values are not modified."""
        a, b = 84, 36
        gcd(a, b)
        assert (a, b) == (84, 36)


class TestModInverse:
    """Test suite for mod_inverse."""

    def test_inverse_property_for_coprime_values(self):
        """Test a * inverse = 1 (mod n) for coprime a and n."""
        for n in range(2, 120):
            for a in range(1, n):
                if gcd(a, n) == 1:
                    inv = mod_inverse(a, n)
                    assert (a * inv) % n == 1, (a, n)
                    assert 0 <= inv < n

    def test_returns_zero_when_not_coprime(self):
        """Test 0 sentinel is returned when no inverse exists."""
        for n in range(2, 120):
            for a in range(1, n):
                if gcd(a, n) > 1:
                    assert mod_inverse(a, n) == 0, (a, n)

    def test_negative_coefficient_is_normalized(self):
        """Test negative Bezout coefficients are shifted into [0, n)."""
        # Extended Euclid yields t = -2 for (3, 7)
        assert mod_inverse(3, 7) == 5

    def test_large_values(self):
        """Test inverse of large coprime values."""
        n = 2 ** 127 - 1
        a = 0xDEADBEEFCAFEBABE
        assert (a * mod_inverse(a, n)) % n == 1


class TestPowMod:
    """Test suite for pow_mod."""

    def test_matches_reference_exponentiation(self):
        """Test pow_mod agrees with a**d % n for small values."""
        for a in range(0, 20):
            for d in range(0, 20):
                for n in range(1, 20):
                    assert pow_mod(a, d, n) == (a ** d) % n, (a, d, n)

    def test_zero_exponent(self):
        """Test a^0 is 1 reduced modulo n."""
        assert pow_mod(5, 0, 7) == 1
        assert pow_mod(5, 0, 1) == 0

    def test_large_values(self):
        """Test against built-in pow for large operands."""
        a = 3 ** 200
        d = 2 ** 300 + 17
        n = 2 ** 521 - 1
        assert pow_mod(a, d, n) == pow(a, d, n)

    def test_negative_exponent_raises(self):
        """Test negative exponents are rejected."""
        with pytest.raises(ValueError):
            pow_mod(2, -1, 7)


class TestIsPrime:
    """Test suite for Miller-Rabin is_prime."""

    def test_agrees_with_trial_division(self, rng):
        """Test is_prime matches trial division on [0, 10000)."""
        for n in range(10000):
            assert is_prime(n, 20, rng) == trial_division(n), n

    def test_small_cases(self, rng):
        """Test the special-cased small inputs."""
        assert is_prime(2, 1, rng)
        assert is_prime(3, 1, rng)
        assert not is_prime(0, 1, rng)
        assert not is_prime(1, 1, rng)
        assert not is_prime(4, 1, rng)
        assert not is_prime(-7, 1, rng)

    def test_known_large_primes(self, rng):
        """Test Mersenne primes are accepted."""
        for exponent in (61, 89, 107, 127, 521):
            assert is_prime(2 ** exponent - 1, 20, rng)

    def test_carmichael_numbers_rejected(self, rng):
        """Test Carmichael numbers are rejected."""
        for n in (561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265):
            assert not is_prime(n, 20, rng)

    def test_large_composite_rejected(self, rng):
        """Test product of two large primes is rejected."""
        assert not is_prime((2 ** 61 - 1) * (2 ** 89 - 1), 20, rng)


class TestMakePrime:
    """Test suite for make_prime."""

    @pytest.mark.parametrize("bits", [1, 2, 8, 16, 64, 128])
    def test_exact_bit_length(self, rng, bits):
        """Test generated primes are exactly bits + 1 bits long."""
        p = make_prime(bits, 20, rng)
        assert p.bit_length() == bits + 1
        assert is_prime(p, 20, rng)
        assert isPrime(p)

    def test_reproducible_from_seed(self):
        """Test the same seed yields the same prime."""
        assert make_prime(64, 20, RandomState(1234)) == make_prime(64, 20, RandomState(1234))

    def test_different_seeds_differ(self):
        """Test different seeds yield different primes."""
        assert make_prime(128, 20, RandomState(1)) != make_prime(128, 20, RandomState(2))

    def test_bounded_search_raises(self, rng):
        """Test a search with no possible prime fails after max_attempts."""
        # The only 1-bit candidate is 1, which is never prime
        with pytest.raises(PrimeGenerationError) as exc_info:
            make_prime(0, 10, rng, max_attempts=100)

        assert exc_info.value.bits == 0
        assert exc_info.value.attempts == 100

    def test_negative_bits_raises(self, rng):
        """Test negative sizes are rejected."""
        with pytest.raises(ValueError):
            make_prime(-1, 10, rng)
