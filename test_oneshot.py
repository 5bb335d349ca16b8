import pytest
from sympy import factorint, isprime, totient

from primeset import factors, factors_uniq, firstfac, is_prime, phi

def test_firstfac():
    assert firstfac(2) == 2
    assert firstfac(0) == 2
    assert firstfac(1) == 1
    assert firstfac(91) == 7
    assert firstfac(97) == 97
    assert firstfac(121) == 11

def test_firstfac_domain_check():
    with pytest.raises(ValueError):
        firstfac(-9)
    with pytest.raises(ValueError):
        firstfac(2 ** 64)

def test_is_prime_small():
    assert not is_prime(0)
    assert not is_prime(1)
    for p in (2, 3, 5, 7, 13, 97, 7919):
        assert is_prime(p)
    for c in (4, 9, 45, 169, 561, 1105, 2047):
        assert not is_prime(c)

def test_is_prime_large():
    assert is_prime(2147483647)
    assert not is_prime(2147483649)
    assert not is_prime(18409199 * 18409201)

def test_is_prime_matches_sympy():
    for n in range(0, 10000):
        assert is_prime(n) == isprime(n), n

def test_factors_edges():
    assert factors(0) == []
    assert factors(1) == []
    assert factors_uniq(0) == []
    assert factors_uniq(1) == []
    assert factors(10_000_000) == [2] * 7 + [5] * 7
    assert factors_uniq(10_000_000) == [2, 5]

def test_factors_matches_sympy():
    for n in range(2, 5000):
        expected = [p for p, e in sorted(factorint(n).items()) for _ in range(e)]
        assert factors(n) == expected
        assert factors_uniq(n) == sorted(factorint(n))

def test_factors_uniq_strictly_increasing():
    for n in (2 ** 10 * 3 ** 4 * 7, 30030, 999999, 1 << 40):
        u = factors_uniq(n)
        assert all(a < b for a, b in zip(u, u[1:]))

def test_phi():
    assert phi(0) == 0
    assert phi(1) == 1
    assert phi(9) == 6
    assert phi(10) == 4
    assert phi(97) == 96
    assert phi(12, [2, 3]) == 4
    for n in range(1, 2000):
        assert phi(n) == totient(n), n

def test_domain_checks():
    with pytest.raises(ValueError):
        factors(-4)
    with pytest.raises(ValueError):
        is_prime(2 ** 64)
    with pytest.raises(ValueError):
        phi(-1)
