"""
Pollard's rho factorization of an RSA modulus.

The iterate x follows f(x) = (x * x + 1) mod n. Every round compares up to
`cycle_size` new iterates against a fixed anchor, then doubles `cycle_size`
and moves the anchor to the latest iterate. A gcd of the distance with n
greater than 1 reveals a factor.
https://en.wikipedia.org/wiki/Pollard%27s_rho_algorithm
"""

import logging
import secrets
from dataclasses import dataclass

from rsabreak import config
from rsabreak.crypto.modular import gcd
from rsabreak.errors import FactorizationFailedError, InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SEED = 2


@dataclass(frozen=True)
class FactorPair:
    p: int
    q: int

    @property
    def n(self) -> int:
        return self.p * self.q


def _ordered(a: int, b: int) -> FactorPair:
    return FactorPair(p=a, q=b) if a <= b else FactorPair(p=b, q=a)


def _coprime_pair(n: int, factor: int, iterations: int) -> FactorPair:
    """Pair factor with its cofactor; a shared divisor means n is not p * q with distinct primes."""
    pair = _ordered(factor, n // factor)
    if gcd(pair.p, pair.q) != 1:
        raise FactorizationFailedError(n, iterations, "n is a prime power or not square-free")
    return pair


def _rho(n: int, seed: int, max_cycle_size: int) -> tuple[int, int]:
    """Run one rho attempt. Returns (factor, iterations); factor is 1 or n on failure."""
    x = seed
    x_fixed = seed
    cycle_size = 2
    factor = 1
    iterations = 0

    while factor == 1:
        if cycle_size > max_cycle_size:
            break
        count = 1
        while count <= cycle_size and factor == 1:
            x = (x * x + 1) % n
            factor = gcd(x - x_fixed, n)
            count += 1
            iterations += 1
        cycle_size *= 2
        x_fixed = x

    return factor, iterations


def factorize(
    n: int,
    *,
    max_cycle_size: int | None = None,
    seed: int = DEFAULT_SEED,
    retries: int | None = None,
) -> FactorPair:
    """Split a composite n into a FactorPair with 1 < p <= q < n.

    `max_cycle_size` bounds each attempt; `retries` extra attempts start from
    random seeds. Raises FactorizationFailedError when n is prime, a prime power,
    not square-free, or the bound is exhausted.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError("n must be an integer")
    if n <= 1:
        raise InvalidInputError("n must be greater than 1")
    if max_cycle_size is None:
        max_cycle_size = config.MAX_CYCLE_SIZE
    if retries is None:
        retries = config.FACTOR_RETRIES
    if max_cycle_size < 2:
        raise InvalidInputError("max_cycle_size must be at least 2")
    if retries < 0:
        raise InvalidInputError("retries must be nonnegative")

    if n == 2:
        raise FactorizationFailedError(n, 0, "n is prime")
    if n % 2 == 0:
        return _coprime_pair(n, 2, 0)

    total = 0
    for attempt in range(retries + 1):
        start = seed if attempt == 0 else secrets.randbelow(max(n - 3, 1)) + 2
        factor, iterations = _rho(n, start, max_cycle_size)
        total += iterations
        logger.debug("rho attempt %d on n=%d from x=%d: factor=%d after %d iterations",
                     attempt, n, start, factor, iterations)
        if 1 < factor < n:
            pair = _coprime_pair(n, factor, total)
            logger.info("factored n=%d: p=%d, q=%d (%d iterations)", n, pair.p, pair.q, total)
            return pair

    logger.warning("factorization of n=%d failed after %d attempt(s), %d iterations", n, retries + 1, total)
    reason = "cycle closed without a factor (n may be prime)" if factor == n else f"cycle size bound {max_cycle_size} reached"
    raise FactorizationFailedError(n, total, reason)
