def multiply_matrices_reference(A, B, C, rows_a, cols_a, cols_b):
    """
    Reference product used to cross-check multiply_matrices.

    Same contract as the primary routine, different nesting: every output
    row is zeroed and then receives A[i, k] * B[k, :] for k ascending
    (i-k-j order). Arithmetic stays in the element dtype, so each cell
    sees the same terms in the same order and wraps identically.
    """
    for i in range(rows_a):
        row = C[i, :cols_b]
        row[:] = 0
        for k in range(cols_a):
            row += A[i, k] * B[k, :cols_b]
