from datetime import datetime

import pytest

from probe_harness.probing import (
    double_hashing, h1, h2, hash_code, linear_probing, positive_mod,
)


def test_positive_mod():
    assert positive_mod(7, 5) == 2
    assert positive_mod(-7, 5) == 3
    assert positive_mod(-10, 5) == 0
    assert positive_mod(-2**31, 11) == 9


def test_hash_code_is_stable():
    assert hash_code(42) == 42
    assert hash_code(-42) == -42
    assert hash_code("a") == 97
    assert hash_code("ab") == 97 * 31 + 98
    assert hash_code("hello") == 99162322
    # wraps to the most negative 32-bit value
    assert hash_code("polygenelubricants") == -2**31

    d = datetime(2020, 1, 1, 12, 0, 0)
    assert hash_code(d) == hash_code(datetime(2020, 1, 1, 12, 0, 0))
    assert -2**31 <= hash_code(d) < 2**31


def test_linear_probing():
    s = linear_probing(11)
    assert [s.hash(0, i) for i in range(4)] == [0, 1, 2, 3]
    assert [s.hash(9, i) for i in range(4)] == [9, 10, 0, 1]
    # negative hash codes still land in range
    assert s.hash(-1, 0) == 10
    assert s.hash("polygenelubricants", 0) == 9


def test_double_hashing_sequence():
    s = double_hashing(13)
    assert h1(5, 13) == 5
    assert h2(5, 13) == 6
    assert [s.hash(5, i) for i in range(5)] == [5, 11, 4, 10, 3]
    assert list(s.sequence(5))[:5] == [5, 11, 4, 10, 3]


def test_h2_range():
    for code in range(-500, 500):
        assert 1 <= h2(code, 13) <= 11
    assert 1 <= h2(-2**31, 95791) <= 95789


@pytest.mark.parametrize("factory", [linear_probing, double_hashing])
def test_sequence_is_permutation(factory):
    s = factory(13)
    for key in [0, 1, 5, -7, 12345, "word", "polygenelubricants"]:
        seq = list(s.sequence(key))
        assert sorted(seq) == list(range(13))
        assert seq == [s.hash(key, i) for i in range(13)]


def test_capacity_checks():
    with pytest.raises(ValueError):
        linear_probing(0)
    with pytest.raises(ValueError):
        double_hashing(2)


def test_custom_key_hash():
    s = linear_probing(11, key_hash=len)
    assert s.hash("abc", 0) == 3
    assert s.hash("abc", 9) == 1
