"""Cross-checks the primary kernel against the row-accumulating reference."""

import numpy as np
import pytest

from algorithms.matrix_multiplication.reference import multiply_matrices_reference
from algorithms.matrix_multiplication.single_thread import multiply_matrices
from constants.params import SHAPE_KINDS
from performance_profiling.matrix_multiplication.matrix_generation import allocate_result, as_matrix, \
    filled_matrix, generate_case, generate_matrix

INT32 = np.iinfo(np.int32)


def both_results(A, B, dims):
    rows_a, cols_a, cols_b = dims
    C = allocate_result(rows_a, cols_b, dtype=A.dtype, fill=7)
    expected = allocate_result(rows_a, cols_b, dtype=A.dtype, fill=-7)
    multiply_matrices(A, B, C, rows_a, cols_a, cols_b)
    multiply_matrices_reference(A, B, expected, rows_a, cols_a, cols_b)
    return C, expected


def test_reference_rectangular():
    A = as_matrix([[1, 2, 3], [4, 5, 6]])
    B = as_matrix([[7, 8], [9, 10], [11, 12]])
    C = allocate_result(2, 2)
    multiply_matrices_reference(A, B, C, 2, 3, 2)
    np.testing.assert_array_equal(C, as_matrix([[58, 64], [139, 154]]))


@pytest.mark.parametrize("shape_kind", SHAPE_KINDS)
@pytest.mark.parametrize("seed", range(5))
def test_random_cases_match_reference(shape_kind, seed):
    rng = np.random.RandomState(seed)
    A, B, dims = generate_case(shape_kind, rng)
    C, expected = both_results(A, B, dims)
    np.testing.assert_array_equal(C, expected)


@pytest.mark.parametrize("seed", range(3))
def test_full_range_values_wrap_identically(seed):
    rng = np.random.RandomState(seed)
    A = generate_matrix(6, 9, rng, INT32.min, INT32.max)
    B = generate_matrix(9, 4, rng, INT32.min, INT32.max)
    C, expected = both_results(A, B, (6, 9, 4))
    np.testing.assert_array_equal(C, expected)


def test_overflow_near_int32_max_matches_reference():
    A = filled_matrix(3, 4, INT32.max - 3)
    B = as_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9], [1, 1, 1]])
    C, expected = both_results(A, B, (3, 4, 3))
    np.testing.assert_array_equal(C, expected)
    assert C.dtype == np.int32


@pytest.mark.parametrize("dims", [(0, 3, 2), (3, 0, 2), (3, 2, 0), (0, 0, 0)])
def test_degenerate_shapes_match_reference(dims):
    rows_a, cols_a, cols_b = dims
    rng = np.random.RandomState(1)
    A = generate_matrix(rows_a, cols_a, rng)
    B = generate_matrix(cols_a, cols_b, rng)
    C, expected = both_results(A, B, dims)
    assert C.shape == (rows_a, cols_b)
    np.testing.assert_array_equal(C, expected)
    np.testing.assert_array_equal(C, np.zeros((rows_a, cols_b), dtype=np.int32))
