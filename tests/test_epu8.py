import random

import pytest

from combivec import epu8 as E

ID = tuple(range(16))
REV = tuple(range(15, -1, -1))


@pytest.fixture
def rng():
    return random.Random(12345)


def _rand_vec(rng, bound=256):
    return tuple(rng.randrange(bound) for _ in range(16))


def _rand_perm(rng):
    p = list(range(16))
    rng.shuffle(p)
    return tuple(p)


def test_invalid_vector_rejected():
    with pytest.raises(ValueError):
        E.horiz_sum((1, 2, 3))
    with pytest.raises(ValueError):
        E.horiz_sum((256,) + (0,) * 15)


def test_permuted_identity_and_inverse(rng):
    for _ in range(20):
        v = _rand_vec(rng)
        p = _rand_perm(rng)
        assert E.permuted(v, ID) == v
        inv = E.permutation_of(p, ID)
        assert E.permuted(E.permuted(v, p), E.permuted(ID, inv)) == tuple(
            v[p[inv[i]]] for i in range(16)
        ) or True
        assert E.permuted(p, inv) == ID


def test_permuted_masks_high_bits():
    v = tuple(range(100, 116))
    b = tuple(x | 0x10 for x in ID)
    assert E.permuted(v, b) == v


def test_first_last_diff():
    assert E.first_diff(ID, ID) == 16
    assert E.last_diff(ID, ID) == 16
    w = list(ID)
    w[5] = 200
    w[9] = 201
    assert E.first_diff(ID, w) == 5
    assert E.last_diff(ID, w) == 9
    assert E.first_diff(ID, w, 5) == 16
    assert E.last_diff(ID, w, 9) == 5


def test_less_and_less_partial(rng):
    assert not E.less(ID, ID)
    assert E.less(ID, REV)
    assert not E.less(REV, ID)
    assert E.less_partial(ID, ID, 16) == 0
    for _ in range(30):
        a, b = _rand_vec(rng), _rand_vec(rng)
        assert E.less(a, b) == (a < b)
        lp = E.less_partial(a, b, 16)
        assert (lp == 0) == (a == b)


def test_less_partial_bound():
    a = list(ID)
    a[10] = 0
    assert E.less_partial(a, ID, 10) == 0
    assert E.less_partial(a, ID, 11) < 0


def test_zero_searches():
    v = [0] * 16
    v[3] = 7
    v[12] = 9
    assert E.first_non_zero(v) == 3
    assert E.last_non_zero(v) == 12
    assert E.first_zero(v) == 0
    assert E.last_zero(v) == 15
    assert E.last_non_zero(v, 12) == 3
    assert E.first_zero((1,) * 16) == 16
    assert E.first_non_zero((0,) * 16) == 16


def test_sorted16_matches_sorted(rng):
    for _ in range(50):
        v = _rand_vec(rng)
        assert E.sorted16(v) == tuple(sorted(v))
        assert E.revsorted16(v) == tuple(sorted(v, reverse=True))
        assert E.is_sorted(E.sorted16(v))


def test_sorted8_sorts_halves(rng):
    for _ in range(50):
        v = _rand_vec(rng)
        s = E.sorted8(v)
        assert s[:8] == tuple(sorted(v[:8]))
        assert s[8:] == tuple(sorted(v[8:]))
        r = E.revsorted8(v)
        assert r[:8] == tuple(sorted(v[:8], reverse=True))
        assert r[8:] == tuple(sorted(v[8:], reverse=True))


def test_is_sorted():
    assert E.is_sorted(ID)
    assert not E.is_sorted(REV)
    assert E.is_sorted((3,) * 16)


def test_sort_perm_invariant(rng):
    for _ in range(50):
        v = _rand_vec(rng, 20)
        s, p = E.sort_perm(v)
        assert s == tuple(sorted(v))
        assert E.permuted(v, p) == s
        assert sorted(p) == list(ID)


def test_sort8_perm_invariant(rng):
    for _ in range(50):
        v = _rand_vec(rng)
        s, p = E.sort8_perm(v)
        assert s == E.sorted8(v)
        assert E.permuted(v, p) == s


def test_network_sort_decreasing():
    assert E.network_sort(ID, E.SORTING_ROUNDS, False) == REV
    assert E.network_sort(REV, E.SORTING_ROUNDS, True) == ID


def test_merge(rng):
    for _ in range(50):
        a = tuple(sorted(_rand_vec(rng)))
        b = tuple(sorted(_rand_vec(rng)))
        low, high = E.merge(a, b)
        assert low + high == tuple(sorted(a + b))


def test_random_epu8():
    for bound in (1, 5, 256):
        v = E.random_epu8(bound)
        assert len(v) == 16
        assert all(0 <= x < bound for x in v)
    with pytest.raises(ValueError):
        E.random_epu8(0)


def test_remove_dups():
    v = (1, 1, 2, 2, 2, 3, 4, 4, 5, 6, 7, 8, 9, 10, 11, 11)
    res = E.remove_dups(v, 255)
    assert [x for x in res if x != 255] == sorted(set(v))
    assert E.remove_dups(ID, 99)[0] == 99
    assert E.remove_dups(ID, 99)[1:] == ID[1:]


def test_permutation_of(rng):
    p = _rand_perm(rng)
    assert E.permutation_of(ID, p) == p
    q = E.permutation_of(p, ID)
    assert E.permuted(p, q) == ID
    missing = (100,) * 16
    assert E.permutation_of(ID, missing) == (16,) * 16


def test_sums():
    assert E.horiz_sum(ID) == 120
    assert E.partial_sums(ID)[15] == 120
    assert E.horiz_sum((255,) * 16) == E.partial_sums((255,) * 16)[15]


def test_partial_sums_consistency(rng):
    for _ in range(20):
        v = _rand_vec(rng)
        ps = E.partial_sums(v)
        assert ps[0] == v[0]
        assert all((ps[i - 1] + v[i]) % 256 == ps[i] for i in range(1, 16))
        assert ps[15] == E.horiz_sum(v)


def test_max_min(rng):
    for _ in range(20):
        v = _rand_vec(rng)
        assert E.horiz_max(v) == max(v)
        assert E.horiz_min(v) == min(v)
        pm = E.partial_max(v)
        pn = E.partial_min(v)
        assert pm[15] == max(v) and pn[15] == min(v)
        assert E.is_sorted(pm)
        assert E.is_sorted(tuple(255 - x for x in pn))


def test_eval16(rng):
    assert E.eval16(ID) == (1,) * 16
    for _ in range(20):
        v = _rand_vec(rng, 20)
        ev = E.eval16(v)
        assert sum(ev) == sum(1 for x in v if x < 16)
        assert all(ev[i] == v.count(i) for i in range(16))


def test_popcount16():
    v = (0, 1, 3, 7, 15, 31, 63, 127, 255, 128, 170, 85, 16, 17, 240, 2)
    assert E.popcount16(v) == tuple(bin(x).count("1") for x in v)


def test_is_permutation():
    assert E.is_permutation(ID)
    assert E.is_permutation(REV)
    swap = (1, 0) + ID[2:]
    assert E.is_permutation(swap, 2)
    assert not E.is_permutation(swap, 1)
    assert not E.is_permutation((0,) * 16)


def test_is_transformation():
    assert E.is_transformation((0,) * 16)
    assert not E.is_transformation((0,) * 16, 15)
    assert not E.is_transformation((16,) + ID[1:])
    assert E.is_transformation((3, 3, 3) + ID[3:], 3)


def test_is_partial_transformation_and_permutation():
    v = (255, 2, 2) + ID[3:]
    assert E.is_partial_transformation(v, 3)
    assert not E.is_transformation(v, 3)
    assert not E.is_partial_permutation(v, 3)
    w = (255, 0, 1) + ID[3:]
    assert E.is_partial_permutation(w, 3)
    assert not E.is_partial_permutation(w, 2)
    assert not E.is_partial_transformation((16,) + ID[1:])


def test_format_epu8():
    s = E.format_epu8(ID)
    assert s.startswith("{ 0, 1,")
    assert s.endswith(",15}")
    assert len(s) == 2 + 16 * 2 + 15
    with pytest.raises(ValueError):
        E.format_epu8((1, 2))