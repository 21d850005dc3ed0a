import pytest

from puzzlekit.integers import (
    count_set_bits,
    integer_sqrt,
    is_happy,
    is_palindrome_number,
    minimize_xor,
)


@pytest.mark.parametrize("x", [0, 7, 121, 1221, 12321])
def test_palindromes_are_recognised(x):
    assert is_palindrome_number(x)


@pytest.mark.parametrize("x", [10, 123, -121, 1231])
def test_non_palindromes_are_rejected(x):
    assert not is_palindrome_number(x)


def test_mirrored_numbers_are_palindromes():
    for n in range(1, 500):
        text = str(n)
        assert is_palindrome_number(int(text + text[::-1]))
        assert is_palindrome_number(int(text + text[-2::-1]))


def test_integer_sqrt_brackets_the_root():
    for x in range(3000):
        root = integer_sqrt(x)
        assert root * root <= x < (root + 1) ** 2


def test_integer_sqrt_of_perfect_squares():
    for k in range(200):
        assert integer_sqrt(k * k) == k


def test_integer_sqrt_of_int_max():
    x = 2**31 - 1
    root = integer_sqrt(x)
    assert root * root <= x < (root + 1) ** 2


def test_integer_sqrt_of_negative_is_zero():
    assert integer_sqrt(-9) == 0


@pytest.mark.parametrize("k", range(40))
def test_count_set_bits_of_all_ones(k):
    assert count_set_bits((1 << k) - 1) == k


def test_count_set_bits_adds_over_disjoint_bits():
    for high in range(64):
        for low in range(64):
            combined = (high << 6) | low
            assert count_set_bits(combined) == count_set_bits(high) + count_set_bits(low)


def test_count_set_bits_of_non_positive():
    assert count_set_bits(0) == 0
    assert count_set_bits(-7) == 0


@pytest.mark.parametrize("n", [1, 7, 10, 19, 100, 1000])
def test_happy_numbers(n):
    assert is_happy(n)


@pytest.mark.parametrize("n", [0, 2, 4, 20])
def test_unhappy_numbers(n):
    assert not is_happy(n)


def test_happiness_ignores_digit_order_and_sign():
    for n in range(10, 1000):
        assert is_happy(n) == is_happy(int(str(n)[::-1]))
        assert is_happy(-n) == is_happy(n)


def test_minimize_xor_keeps_popcount_and_is_optimal():
    for num1 in range(32):
        for num2 in range(32):
            result = minimize_xor(num1, num2)
            wanted = count_set_bits(num2)
            assert count_set_bits(result) == wanted
            best = min(y ^ num1 for y in range(128) if count_set_bits(y) == wanted)
            assert result ^ num1 == best


def test_minimize_xor_examples():
    assert minimize_xor(3, 5) == 3
    assert minimize_xor(1, 12) == 3
    assert minimize_xor(0, 7) == 7


def test_minimize_xor_rejects_negatives():
    with pytest.raises(ValueError):
        minimize_xor(-1, 3)