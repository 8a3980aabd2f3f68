import numpy as np

from numba import njit


@njit
def multiply_matrices(A, B, C, rows_a, cols_a, cols_b):
    """
    Naive triple-loop product C = A x B, written into the caller's C.

    A is rows_a x cols_a, B is cols_a x cols_b and C is pre-sized
    rows_a x cols_b. Previous contents of C are overwritten. Each cell
    accumulates in C's own integer width, so overflow wraps the same way
    the elements do. Dimensions are trusted, nothing is validated here.
    """
    for i in range(rows_a):
        for j in range(cols_b):
            C[i, j] = 0
            for k in range(cols_a):
                C[i, j] += A[i, k] * B[k, j]


def single_threaded_multiply(A, B):
    """Checks the shapes, allocates the result in A's dtype and multiplies."""
    if A.ndim != 2 or B.ndim != 2:
        raise ValueError("Both operands must be 2-D matrices")

    m, n = A.shape
    nB, p = B.shape

    if n != nB:
        raise ValueError("Number of columns in A must be equal to the number of rows in B")

    C = np.empty((m, p), dtype=A.dtype)
    multiply_matrices(A, B, C, m, n, p)
    return C


# --- Example Usage ---
if __name__ == "__main__":
    A = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int32)
    B = np.array([[7, 8], [9, 10], [11, 12]], dtype=np.int32)
    C = single_threaded_multiply(A, B)
    print(C)
    print("Single-threaded multiplication complete.")
