import pytest

from combivec.builder import VectorBuilder


@pytest.fixture
def epu8():
    return VectorBuilder()


def test_id(epu8):
    assert epu8.id() == tuple(range(16))


def test_rev_is_reversed_id(epu8):
    assert epu8.rev() == tuple(reversed(epu8.id()))


def test_cycles_are_inverse_permutations(epu8):
    left = epu8.left_cycle()
    right = epu8.right_cycle()
    assert sorted(left) == list(epu8.id())
    assert sorted(right) == list(epu8.id())
    assert tuple(left[right[i]] for i in range(16)) == epu8.id()


def test_left_cycle_entries(epu8):
    left = epu8.left_cycle()
    assert all(left[i] == (i - 1) % 16 for i in range(16))


def test_left_dup(epu8):
    v = epu8.left_dup()
    assert v[:15] == tuple(range(1, 16))
    assert v[15] == 15


def test_right_dup(epu8):
    v = epu8.right_dup()
    assert v[0] == 0
    assert v[1:] == tuple(range(15))


def test_popcount(epu8):
    assert epu8.popcount() == (0, 1, 1, 2, 1, 2, 2, 3, 1, 2, 2, 3, 2, 3, 3, 4)


def test_popcount_matches_bin_count_large():
    b = VectorBuilder(size=32)
    assert all(b.popcount()[i] == bin(i).count("1") for i in range(32))


def test_from_list_pads_with_default(epu8):
    v = epu8.from_list([1, 2], 7)
    assert v[:2] == (1, 2)
    assert v[2:] == (7,) * 14


def test_from_list_full(epu8):
    values = list(range(15, -1, -1))
    assert epu8.from_list(values, 0) == epu8.rev()


def test_from_list_too_long(epu8):
    with pytest.raises(ValueError):
        epu8.from_list(range(17), 0)


def test_constant(epu8):
    assert epu8.constant(5) == (5,) * 16


def test_constant_wraps(epu8):
    assert epu8.constant(256) == epu8.constant(0)
    assert epu8.constant(-1) == (255,) * 16


def test_from_function(epu8):
    assert epu8.from_function(lambda i: 2 * i) == tuple(2 * i for i in range(16))


def test_other_size():
    b = VectorBuilder(size=32, elem_bits=16)
    assert b.id() == tuple(range(32))
    assert b.rev()[0] == 31
    assert b.left_dup()[31] == 31


def test_invalid_size():
    with pytest.raises(ValueError):
        VectorBuilder(size=0)