"""Break weak RSA keys by factoring the modulus with Pollard's rho."""

__version__ = "0.1.0"
