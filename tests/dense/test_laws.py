"""
Algebraic laws checked over randomized inputs.

Inputs come from the seeded rng fixture, so failures are reproducible.
Dot products are cross-checked against numpy matmul.
"""

import numpy as np

from flatmatrix import (
    dot,
    empty,
    filled,
    from_flat,
    from_nested_lists,
    identity,
    initialize,
    map2,
    map_elements,
    size,
    to_flat_list,
    to_nested_lists,
    to_numpy,
    transpose,
    width,
)


class TestConstructionLaws:

    def test_filled_size_and_contents(self, random_triples):
        for r, c, v in random_triples:
            m = filled(r, c, v)
            assert size(m) == (r, c)
            flat = to_flat_list(m)
            assert len(flat) == r * c
            assert all(x == v for x in flat)

    def test_identity_size(self):
        for n in range(10):
            assert size(identity(n)) == (n, n)

    def test_zero_sized_constructors_agree(self):
        assert initialize(0, 0, lambda r, c: r) == empty()
        assert identity(0) == empty()


class TestMapLaws:

    def test_map_preserves_size(self, random_triples):
        for r, c, v in random_triples:
            assert size(map_elements(lambda x: x * 2, filled(r, c, v))) == (r, c)

    def test_map_of_filled(self, random_triples):
        for r, c, v in random_triples:
            assert map_elements(lambda x: x - 3, filled(r, c, v)) == filled(r, c, v - 3)

    def test_map2_of_filled(self, random_triples):
        for r, c, v in random_triples:
            result = map2(lambda a, b: a + b, filled(r, c, v), filled(r, c, 2 * v))
            assert result == filled(r, c, 3 * v)

    def test_map2_mismatch(self, random_triples):
        for r, c, v in random_triples:
            assert map2(lambda a, b: a + b, filled(r, c, v), filled(r + 1, c, v)) is None
            assert map2(lambda a, b: a + b, filled(r, c, v), filled(r, c + 1, v)) is None


class TestTransposeLaws:

    def test_involution(self, random_matrices):
        for m in random_matrices:
            assert transpose(transpose(m)) == m

    def test_swaps_size(self, random_matrices):
        for m in random_matrices:
            rows, cols = size(m)
            assert size(transpose(m)) == (cols, rows)

    def test_matches_numpy(self, random_matrices):
        for m in random_matrices:
            np.testing.assert_array_equal(to_numpy(transpose(m)), to_numpy(m).T)

    def test_identity_fixed(self):
        for n in range(8):
            assert transpose(identity(n)) == identity(n)


class TestDotLaws:

    def test_right_identity(self, random_matrices):
        for m in random_matrices:
            assert dot(m, identity(width(m))) == m

    def test_matches_numpy(self, random_matrices):
        for a in random_matrices:
            b = transpose(a)
            np.testing.assert_array_equal(
                to_numpy(dot(a, b)), to_numpy(a) @ to_numpy(b)
            )

    def test_transpose_of_product(self, random_matrices):
        # (AB)^T == B^T A^T
        for a in random_matrices:
            b = map_elements(lambda x: x + 1, transpose(a))
            assert transpose(dot(a, b)) == dot(transpose(b), transpose(a))

    def test_incompatible_is_none(self, rng):
        for _ in range(20):
            n, k, p = (int(d) for d in rng.integers(1, 6, size=3))
            assert dot(filled(n, k, 1), filled(k + 1, p, 1)) is None

    def test_filled_product(self, rng):
        for _ in range(20):
            n, k, p = (int(d) for d in rng.integers(0, 6, size=3))
            assert dot(filled(n, k, 2), filled(k, p, 3)) == filled(n, p, 6 * k)


class TestRoundTripLaws:

    def test_nested_lists(self, random_matrices):
        for m in random_matrices:
            assert from_nested_lists(to_nested_lists(m)) == m

    def test_flat_list(self, random_matrices):
        for m in random_matrices:
            rows, cols = size(m)
            assert from_flat(rows, cols, to_flat_list(m)) == m
