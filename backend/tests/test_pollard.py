import pytest

from rsabreak.crypto.pollard import FactorPair, factorize
from rsabreak.errors import FactorizationFailedError, InvalidInputError


@pytest.mark.anyio
@pytest.mark.parametrize(
    "n, expected",
    [
        (15, (3, 5)),
        (6, (2, 3)),
        (8051, (83, 97)),
        (10403, (101, 103)),
        (3233, (53, 61)),
        (937513, (877, 1069)),
    ],
)
async def test_factorize_splits_composites(n, expected):
    pair = factorize(n)
    assert pair == FactorPair(*expected)
    assert pair.p * pair.q == n
    assert 1 < pair.p <= pair.q < n


@pytest.mark.anyio
async def test_factorize_prime_fails_instead_of_looping():
    with pytest.raises(FactorizationFailedError) as exc_info:
        factorize(13)
    assert exc_info.value.n == 13
    assert exc_info.value.iterations > 0


@pytest.mark.anyio
@pytest.mark.parametrize("n", [2, 4, 8, 9, 16, 25, 27, 32, 49, 125, 343, 1331])
async def test_factorize_rejects_squares_and_prime_powers(n):
    with pytest.raises(FactorizationFailedError):
        factorize(n)


@pytest.mark.anyio
async def test_factorize_stops_at_cycle_bound():
    with pytest.raises(FactorizationFailedError) as exc_info:
        factorize(937513, max_cycle_size=2)
    assert exc_info.value.iterations == 2


@pytest.mark.anyio
async def test_factorize_custom_seed():
    assert factorize(8051, seed=3) == FactorPair(83, 97)


@pytest.mark.anyio
async def test_factorize_retries_still_fail_on_prime():
    with pytest.raises(FactorizationFailedError) as exc_info:
        factorize(101, retries=3)
    assert exc_info.value.n == 101


@pytest.mark.anyio
async def test_factorize_retry_uses_fresh_random_seed(monkeypatch):
    # from x = 2 the walk on 217 = 7 * 31 closes its cycle without a factor
    with pytest.raises(FactorizationFailedError):
        factorize(217)

    draws = []

    def fake_randbelow(bound):
        draws.append(bound)
        return 1

    monkeypatch.setattr("rsabreak.crypto.pollard.secrets.randbelow", fake_randbelow)
    assert factorize(217, retries=1) == FactorPair(7, 31)
    assert draws == [214]


@pytest.mark.anyio
@pytest.mark.parametrize("n", [1, 0, -15])
async def test_factorize_rejects_small_n(n):
    with pytest.raises(InvalidInputError):
        factorize(n)


@pytest.mark.anyio
async def test_factorize_rejects_bad_options():
    with pytest.raises(InvalidInputError):
        factorize(15, max_cycle_size=1)
    with pytest.raises(InvalidInputError):
        factorize(15, retries=-1)
