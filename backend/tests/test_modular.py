import pytest

from rsabreak.crypto.modular import euclidean_mod, extended_euclidean, gcd, mod_pow, modular_inverse
from rsabreak.errors import InvalidInputError, NoInverseError

PAIRS = [(240, 46), (46, 240), (17, 5), (937513, 877), (2**127 - 1, 2**89 - 1), (12, 18), (1, 1), (7, 0)]


@pytest.mark.anyio
async def test_euclidean_mod_is_never_negative():
    assert euclidean_mod(-7, 3) == 2
    assert euclidean_mod(7, -3) == 1
    assert euclidean_mod(-9, 3) == 0
    assert euclidean_mod(10, 4) == 2
    with pytest.raises(InvalidInputError):
        euclidean_mod(5, 0)


@pytest.mark.anyio
async def test_gcd_is_symmetric():
    for a, b in PAIRS:
        assert gcd(a, b) == gcd(b, a)
    assert gcd(240, 46) == 2
    assert gcd(937513, 1069) == 1069


@pytest.mark.anyio
async def test_gcd_with_zero_and_negative_operand():
    for a in (1, 5, 937513):
        assert gcd(a, 0) == a
    assert gcd(-3, 15) == 3
    assert gcd(0, 15) == 15


@pytest.mark.anyio
async def test_gcd_leaves_arguments_untouched():
    a, b = 240, 46
    gcd(a, b)
    assert (a, b) == (240, 46)


@pytest.mark.anyio
async def test_extended_euclidean_bezout_identity():
    for a, b in PAIRS:
        g, x, y = extended_euclidean(a, b)
        assert a * x + b * y == g
        assert g == gcd(a, b)


@pytest.mark.anyio
async def test_modular_inverse():
    assert modular_inverse(3, 8) == 3
    assert modular_inverse(-3, 8) == 5
    for e, phi in [(17, 3120), (638471, 935568), (65537, (2**61 - 2) * (2**31 - 2))]:
        d = modular_inverse(e, phi)
        assert 0 <= d < phi
        assert (e * d) % phi == 1


@pytest.mark.anyio
async def test_modular_inverse_requires_coprime_values():
    with pytest.raises(NoInverseError) as exc_info:
        modular_inverse(4, 8)
    assert exc_info.value.gcd == 4
    with pytest.raises(NoInverseError):
        modular_inverse(0, 8)
    with pytest.raises(InvalidInputError):
        modular_inverse(3, 0)


@pytest.mark.anyio
async def test_mod_pow_identities():
    assert mod_pow(5, 0, 7) == 1
    assert mod_pow(123, 0, 2) == 1
    assert mod_pow(5, 3, 1) == 0
    assert mod_pow(2, 10, 1000) == 24
    assert mod_pow(-2, 3, 5) == 2


@pytest.mark.anyio
async def test_mod_pow_matches_builtin_on_wide_values():
    modulus = (2**127 - 1) * (2**89 - 1)
    base = 3**200
    exponent = 2**100 + 12345
    assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.anyio
async def test_mod_pow_rejects_bad_arguments():
    with pytest.raises(InvalidInputError):
        mod_pow(2, -1, 7)
    with pytest.raises(InvalidInputError):
        mod_pow(2, 3, 0)
