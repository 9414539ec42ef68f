import pytest

from algopad.bits import (
    add_binary,
    count_bits,
    find_the_difference,
    hamming_weight,
    reverse_bits,
    single_number,
)


@pytest.mark.parametrize("n", [0, 2, 5, 64])
def test_count_bits_invariants(n):
    bits = count_bits(n)
    assert len(bits) == n + 1
    assert bits[0] == 0
    for i in range(1, n + 1):
        assert bits[i] == bits[i >> 1] + (i & 1)


def test_count_bits_powers_of_two():
    bits = count_bits(1024)
    for k in range(11):
        assert bits[1 << k] == 1


@pytest.mark.parametrize("a, b", [("11", "1"), ("1010", "1011"), ("0", "0"), ("1", "111")])
def test_add_binary_value(a, b):
    result = add_binary(a, b)
    assert int(result, 2) == int(a, 2) + int(b, 2)
    assert len(result) in (max(len(a), len(b)), max(len(a), len(b)) + 1)


def test_add_binary_keeps_width():
    assert add_binary("00", "0") == "00"


def test_add_binary_example():
    assert add_binary("11", "1") == "100"


def test_add_binary_empty():
    assert add_binary("", "") == ""


def test_find_the_difference():
    s = "abcd"
    assert find_the_difference(s, "ab" + "e" + "cd") == "e"
    assert find_the_difference("", "y") == "y"


def test_hamming_weight():
    for k in range(32):
        assert hamming_weight((1 << k) - 1) == k
    assert hamming_weight(-3) == -hamming_weight(3)


@pytest.mark.parametrize("n", [0, 1, 43261596, 4294967293, 2**31])
def test_reverse_bits_involution(n):
    assert reverse_bits(reverse_bits(n)) == n


def test_reverse_bits_single_bit():
    for k in range(32):
        assert reverse_bits(1 << k) == 1 << (31 - k)


def test_single_number():
    a, b, c = 4, 1, 2
    assert single_number([a, b, a, c, b]) == c
    assert single_number([c]) == c