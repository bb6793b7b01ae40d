import pytest

from solver.consensus import (
    CONSENSUS,
    FIRST_K,
    ProblemInstance,
    best_fit,
    candidate_subsets,
    count_inliers,
    find_consensus,
    reconstruct_first_k,
    solve,
)
from solver.dealer import polynom, split_secret
from solver.errors import DegenerateInterpolation, InsufficientShares

CLEAN = [(1, 4), (2, 8), (3, 14)]


def test_clean_shares():
    assert best_fit(CLEAN, 3) == (3, 2)


def test_one_corrupted_share():
    shares = CLEAN + [(4, 99)]
    assert best_fit(shares, 3) == (3, 2)

    result = find_consensus(shares, 3)
    assert result.combination == (0, 1, 2)
    assert result.outliers == (4,)
    assert result.exact


def test_corrupted_share_first_in_list():
    shares = [(4, 99), (1, 4), (2, 8), (3, 14), (5, 32)]
    result = find_consensus(shares, 3)
    assert result.inliers == 4
    assert result.constant_term == 2
    assert result.combination == (1, 2, 3)
    assert result.outliers == (4,)


def test_consensus_with_dealer_shares():
    secret = 123456789123456789
    shares, corrupted_xs = split_secret(secret, n=7, k=3, corrupted=2)
    inliers, constant = best_fit(shares, 3)
    assert inliers == 5
    assert constant == secret
    assert find_consensus(shares, 3).outliers == tuple(corrupted_xs)


def test_tie_keeps_lexicographically_first_subset():
    # dos rectas, cada una con dos shares: todas las combinaciones empatan a 2
    shares = [(1, 10), (2, 20), (3, 7), (4, 9)]
    result = find_consensus(shares, 2)
    assert result.inliers == 2
    assert result.combination == (0, 1)
    assert result.constant_term == 0

    # invertir el orden cambia qué subconjunto es el primero
    reordered = [(3, 7), (4, 9), (1, 10), (2, 20)]
    assert best_fit(reordered, 2) == (2, 1)


def test_n_equal_k_is_accepted_without_consensus():
    result = find_consensus([(1, 1), (3, 2)], 2)
    assert result.inliers == 2
    assert result.constant_term == 0
    assert not result.exact


def test_insufficient_shares():
    with pytest.raises(InsufficientShares) as excinfo:
        best_fit(CLEAN, 4)
    assert excinfo.value.available == 3
    assert excinfo.value.required == 4


def test_non_positive_threshold():
    with pytest.raises(ValueError):
        best_fit(CLEAN, 0)


def test_duplicate_x_propagates():
    with pytest.raises(DegenerateInterpolation):
        best_fit([(1, 4), (1, 4), (2, 7)], 2)


def test_shares_are_not_mutated():
    shares = CLEAN + [(4, 99)]
    snapshot = list(shares)
    best_fit(shares, 3)
    assert shares == snapshot


def test_candidate_subsets_order_and_count():
    subsets = list(candidate_subsets(5, 3))
    assert len(subsets) == 10
    assert subsets[0] == (0, 1, 2)
    assert subsets[-1] == (2, 3, 4)
    assert subsets == sorted(subsets)


def test_count_inliers():
    assert count_inliers(CLEAN, CLEAN + [(4, 22), (5, 0)]) == 4


def test_first_k_uses_smallest_x():
    coeffs = [2, 1, 1]
    shares = [(9, 0), (3, polynom(3, coeffs)), (1, polynom(1, coeffs)), (2, polynom(2, coeffs))]
    assert reconstruct_first_k(shares, 3) == 2
    # la variante no robusta falla si el corrupto está entre los de menor x
    assert reconstruct_first_k([(1, 5), (2, 8), (3, 14), (4, 22)], 3) != 2


def test_solve_modes():
    instance = ProblemInstance(k=3, shares=[(4, 99), (3, 14), (2, 8), (1, 4), (5, 32)])
    assert isinstance(instance.shares, tuple)
    assert instance.n == 5

    robust = solve(instance, CONSENSUS)
    assert (robust.inliers, robust.constant_term) == (4, 2)
    assert robust.combination == (1, 2, 3)

    naive = solve(instance, FIRST_K)
    assert naive.constant_term == 2
    assert naive.combination == (1, 2, 3)
    assert naive.inliers == 4
    assert naive.outliers == (4,)

    with pytest.raises(ValueError):
        solve(instance, "ransac")


def test_single_extra_share_ties_on_first_combination():
    # con n = k + 1 todas las combinaciones empatan a k: gana la primera
    shares = [(4, 99), (3, 14), (2, 8), (1, 4)]
    result = find_consensus(shares, 3)
    assert result.inliers == 3
    assert result.combination == (0, 1, 2)
    assert result.constant_term != 2


def test_dealer_limit_always_recovers_secret():
    secret = 424242
    for _ in range(20):
        shares, corrupted_xs = split_secret(secret, n=5, k=3, corrupted=1)
        result = find_consensus(shares, 3)
        assert result.constant_term == secret
        assert result.inliers == 4
        assert result.outliers == tuple(corrupted_xs)
