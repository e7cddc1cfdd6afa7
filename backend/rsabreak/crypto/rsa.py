import logging
from dataclasses import dataclass

from rsabreak.crypto.modular import mod_pow, modular_inverse
from rsabreak.crypto.pollard import FactorPair, factorize
from rsabreak.errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    n: int
    e: int


@dataclass(frozen=True)
class PrivateKey:
    n: int
    d: int


@dataclass(frozen=True)
class BrokenKey:
    public: PublicKey
    private: PrivateKey
    factors: FactorPair


def _check_key(n: int, e: int) -> None:
    if n <= 1:
        raise InvalidInputError("n must be greater than 1")
    if e <= 0:
        raise InvalidInputError("e must be positive")


def _check_range(value: int, n: int, what: str) -> None:
    if not 0 <= value < n:
        raise InvalidInputError(f"{what} out of range [0, n)")


def compute_totient(p: int, q: int) -> int:
    return (p - 1) * (q - 1)


def derive_private_exponent(e: int, phi: int) -> int:
    """d = e^-1 mod phi. NoInverseError means (n, e) is not a valid RSA key."""
    return modular_inverse(e, phi)


def reconstruct_private_key(public_key: PublicKey, factors: FactorPair) -> PrivateKey:
    if factors.n != public_key.n:
        raise InvalidInputError("factors do not multiply to n")
    phi = compute_totient(factors.p, factors.q)
    d = derive_private_exponent(public_key.e, phi)
    logger.debug("phi(n)=%d, d=%d", phi, d)
    return PrivateKey(n=public_key.n, d=d)


def break_key(
    public_key: PublicKey,
    *,
    max_cycle_size: int | None = None,
    retries: int | None = None,
) -> BrokenKey:
    """Factor n and rebuild the private key matching public_key."""
    _check_key(public_key.n, public_key.e)
    factors = factorize(public_key.n, max_cycle_size=max_cycle_size, retries=retries)
    private_key = reconstruct_private_key(public_key, factors)
    logger.info("recovered private exponent for n=%d", public_key.n)
    return BrokenKey(public=public_key, private=private_key, factors=factors)


def encrypt(message: int, e: int, n: int) -> int:
    _check_key(n, e)
    _check_range(message, n, "message")
    return mod_pow(message, e, n)


def decrypt_with_key(cipher: int, private_key: PrivateKey) -> int:
    _check_range(cipher, private_key.n, "ciphertext")
    return mod_pow(cipher, private_key.d, private_key.n)


def decrypt(
    cipher: int,
    n: int,
    e: int,
    *,
    max_cycle_size: int | None = None,
    retries: int | None = None,
) -> int:
    """Recover the plaintext of cipher knowing only the public key (n, e).

    FactorizationFailedError and NoInverseError from the lower layers are
    raised unchanged.
    """
    _check_key(n, e)
    _check_range(cipher, n, "ciphertext")
    broken = break_key(PublicKey(n=n, e=e), max_cycle_size=max_cycle_size, retries=retries)
    return decrypt_with_key(cipher, broken.private)
