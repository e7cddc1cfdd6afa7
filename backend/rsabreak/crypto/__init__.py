from rsabreak.crypto.modular import euclidean_mod, extended_euclidean, gcd, mod_pow, modular_inverse
from rsabreak.crypto.pollard import FactorPair, factorize
from rsabreak.crypto.rsa import (
    BrokenKey,
    PrivateKey,
    PublicKey,
    break_key,
    compute_totient,
    decrypt,
    decrypt_with_key,
    derive_private_exponent,
    encrypt,
    reconstruct_private_key,
)

__all__ = [
    "BrokenKey",
    "FactorPair",
    "PrivateKey",
    "PublicKey",
    "break_key",
    "compute_totient",
    "decrypt",
    "decrypt_with_key",
    "derive_private_exponent",
    "encrypt",
    "euclidean_mod",
    "extended_euclidean",
    "factorize",
    "gcd",
    "mod_pow",
    "modular_inverse",
    "reconstruct_private_key",
]
