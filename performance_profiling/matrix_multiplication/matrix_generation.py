import numpy as np

from constants.params import DATA_TYPE, MIN_DIM, MAX_DIM, MIN_VALUE, MAX_VALUE, SHAPE_KINDS


def as_matrix(rows, dtype=DATA_TYPE):
    """
    Builds a row-major integer matrix from nested sequences.

    Every row must have the same length. An empty outer sequence gives a
    0x0 matrix. Anything that is not 2-D raises ValueError.
    """
    try:
        rows = [list(row) for row in rows]
    except TypeError:
        raise ValueError("Matrix rows must be sequences, got a 1-D input")
    if not rows:
        return np.zeros((0, 0), dtype=dtype)

    n_cols = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != n_cols:
            raise ValueError(f"Row {index} has {len(row)} columns, expected {n_cols}")

    matrix = np.array(rows, dtype=dtype)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")
    return np.ascontiguousarray(matrix)


def allocate_result(rows_a, cols_b, dtype=DATA_TYPE, fill=0):
    """Pre-sized output matrix for a rows_a x cols_b product."""
    return np.full((rows_a, cols_b), fill, dtype=dtype)


def generate_matrix(rows, cols, rng, low=MIN_VALUE, high=MAX_VALUE, dtype=DATA_TYPE):
    """Random matrix with values drawn uniformly from [low, high]."""
    return rng.randint(low, high + 1, size=(rows, cols), dtype=np.int64).astype(dtype)


def pick_dimensions(shape_kind, rng, low=MIN_DIM, high=MAX_DIM):
    """Returns (rows_a, cols_a, cols_b) for one of the SHAPE_KINDS."""
    if shape_kind not in SHAPE_KINDS:
        raise ValueError(f"Unknown shape kind '{shape_kind}', expected one of {', '.join(SHAPE_KINDS)}")

    rows_a = int(rng.randint(low, high + 1))
    if shape_kind in ("square", "square_rectangular"):
        cols_a = rows_a
    else:
        cols_a = int(rng.randint(low, high + 1))

    if shape_kind in ("square", "rectangular_square"):
        cols_b = cols_a
    else:
        cols_b = int(rng.randint(low, high + 1))

    return rows_a, cols_a, cols_b


def generate_case(shape_kind, rng, low=MIN_VALUE, high=MAX_VALUE, dtype=DATA_TYPE):
    """Random operands for one shape kind, plus their dimension triple."""
    rows_a, cols_a, cols_b = pick_dimensions(shape_kind, rng)
    A = generate_matrix(rows_a, cols_a, rng, low, high, dtype)
    B = generate_matrix(cols_a, cols_b, rng, low, high, dtype)
    return A, B, (rows_a, cols_a, cols_b)


def identity_matrix(n, dtype=DATA_TYPE):
    return np.eye(n, dtype=dtype)


def zero_matrix(rows, cols, dtype=DATA_TYPE):
    return np.zeros((rows, cols), dtype=dtype)


def filled_matrix(rows, cols, value, dtype=DATA_TYPE):
    return np.full((rows, cols), value, dtype=dtype)
