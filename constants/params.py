import numpy as np

RUNS = 11
RANDOM_SEED = 42

# Matrices are fixed-width signed integers; products wrap on overflow.
DATA_TYPE = np.int32

# Randomized verification cases
MIN_DIM = 1
MAX_DIM = 10
MIN_VALUE = -2
MAX_VALUE = 2

SHAPE_KINDS = (
    "rectangular",
    "square",
    "rectangular_square",
    "square_rectangular",
)

# Square benchmark sizes
SMALL_MATRIX_SIZE = 64
MID_MATRIX_SIZE = 128
BIG_MATRIX_SIZE = 256
