class RsaBreakError(Exception):
    """Base class for every error raised by rsabreak."""


class InvalidInputError(RsaBreakError, ValueError):
    """Input rejected before any computation (bad modulus, exponent or range)."""


class FactorizationFailedError(RsaBreakError):
    """Pollard's rho could not split n within its bound."""

    def __init__(self, n: int, iterations: int, reason: str = "no nontrivial factor found"):
        self.n = n
        self.iterations = iterations
        super().__init__(f"could not factor n={n} after {iterations} iterations: {reason}")


class NoInverseError(RsaBreakError, ArithmeticError):
    """value has no inverse modulo modulus (gcd is not 1)."""

    def __init__(self, value: int, modulus: int, gcd: int):
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(
            f"no inverse of {value} modulo {modulus}: gcd is {gcd}, not 1 "
            "(the key is inconsistent or the modulus was not built from two primes)"
        )
