from typing import Tuple

from rsabreak.errors import InvalidInputError, NoInverseError


def euclidean_mod(d: int, m: int) -> int:
    """Remainder of Euclidean division: always 0 <= r < |m|, whatever the sign of d."""
    if m == 0:
        raise InvalidInputError("modulus must be nonzero")
    return d % abs(m)


def gcd(a: int, b: int) -> int:
    while b != 0:
        a, b = b, euclidean_mod(a, b)
    return abs(a)


def extended_euclidean(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a * x + b * y == g, g being gcd(a, b)."""
    s, old_s = 0, 1
    t, old_t = 1, 0
    r, old_r = b, a

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    return old_r, old_s, old_t


def modular_inverse(n: int, modulus_base: int) -> int:
    """Return d in [0, modulus_base) with (n * d) % modulus_base == 1.

    Raises NoInverseError when n and modulus_base are not coprime.
    """
    if modulus_base <= 0:
        raise InvalidInputError("modulus_base must be positive")
    g, x, _ = extended_euclidean(n, modulus_base)
    if abs(g) != 1:
        raise NoInverseError(n, modulus_base, abs(g))
    # extended_euclidean(n, m) may return g == -1 for negative n
    return euclidean_mod(x * g, modulus_base)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply, least significant bit first."""
    if modulus <= 0:
        raise InvalidInputError("modulus must be positive")
    if exponent < 0:
        raise InvalidInputError("exponent must be nonnegative")
    if modulus == 1:
        return 0

    base = euclidean_mod(base, modulus)
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result
