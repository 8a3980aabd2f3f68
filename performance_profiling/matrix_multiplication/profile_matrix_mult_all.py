import os
import time
import traceback
import platform
import argparse

import numpy as np
import psutil

from algorithms.matrix_multiplication.single_thread import multiply_matrices
from algorithms.matrix_multiplication.reference import multiply_matrices_reference
from constants.params import RUNS, RANDOM_SEED, DATA_TYPE, MIN_VALUE, MAX_VALUE, SHAPE_KINDS
from constants.string_constants import RESULTS_BASE_PATH, MATRIX_MULTIPLICATION_PATH, DATE_FORMAT, \
    VERIFICATION_STATS_FILE, VERIFICATION_HEADER, BENCHMARK_HEADER
from performance_profiling.matrix_multiplication.matrix_generation import allocate_result, generate_case, \
    generate_matrix
from utils.utils import write_result_header

IMPL_CONFIG = {
    "primary": {
        "file_suffix": 'cpu_single_thread_stats.txt',
        "func": multiply_matrices,
        "name_print": "CPU Single-Thread MM (Numba)"
    },
    "reference": {
        "file_suffix": 'reference_stats.txt',
        "func": multiply_matrices_reference,
        "name_print": "Reference MM (NumPy rows)"
    }
}


def warm_up():
    """Triggers Numba compilation so the first timed run is not a compile."""
    print("Info: Compiling the single-threaded kernel...")
    A = np.ones((2, 2), dtype=DATA_TYPE)
    C = allocate_result(2, 2)
    multiply_matrices(A, A, C, 2, 2, 2)


def profile_multiply(func, A, B, dims, name_print=""):
    """
    Runs one multiplication into a freshly allocated result and times it.

    Returns:
        (C, seconds), or (None, float('inf')) if the call raised.
    """
    rows_a, cols_a, cols_b = dims
    C = allocate_result(rows_a, cols_b, dtype=A.dtype)
    try:
        start_time = time.perf_counter()
        func(A, B, C, rows_a, cols_a, cols_b)
        end_time = time.perf_counter()
        return C, end_time - start_time
    except Exception as e:
        print(f"      Error during {name_print or 'multiplication'} profiling: {e}")
        traceback.print_exc()
        return None, float('inf')


def profile_and_save_stats(shape_kind: str, total_runs: int, seed: int = RANDOM_SEED):
    """
    Cross-checks the primary kernel against the reference on random cases
    of one shape kind and records timings plus the verdict per run.

    Returns:
        Number of runs whose results did not match (failed runs included).
    """
    print(f"\nInfo: Verifying Matrix Multiplication for shape kind: {shape_kind}")
    print(f"Parameters: Runs={total_runs}, Seed={seed}, Data Type={np.dtype(DATA_TYPE).name}")

    output_dir = os.path.join(RESULTS_BASE_PATH, MATRIX_MULTIPLICATION_PATH, shape_kind)
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, VERIFICATION_STATS_FILE)

    primary = IMPL_CONFIG["primary"]
    reference = IMPL_CONFIG["reference"]
    mismatches = 0

    try:
        with open(file_path, 'w') as file:
            write_result_header(file)
            file.write(VERIFICATION_HEADER)

            for run_number in range(1, total_runs + 1):
                rng = np.random.RandomState(seed + run_number)
                A, B, dims = generate_case(shape_kind, rng)
                rows_a, cols_a, cols_b = dims

                C, primary_time = profile_multiply(primary["func"], A, B, dims, primary["name_print"])
                expected, reference_time = profile_multiply(reference["func"], A, B, dims,
                                                            reference["name_print"])

                match = C is not None and expected is not None and np.array_equal(C, expected)
                if not match:
                    mismatches += 1

                timestamp = time.strftime(DATE_FORMAT)
                result_line = (f"{run_number},{timestamp},{rows_a},{cols_a},{cols_b},"
                               f"{primary_time:.6f},{reference_time:.6f},{match}\n")
                file.write(result_line)
                print(f"  Run {run_number}/{total_runs}: {rows_a}x{cols_a} * {cols_a}x{cols_b} "
                      f"-> {'OK' if match else 'MISMATCH'}")
    except IOError as e:
        print(f"Error writing results to {file_path}: {e}")
        return total_runs

    if mismatches:
        print(f"Info: {mismatches} of {total_runs} runs did not match the reference for {shape_kind}.")
    else:
        print(f"Info: All {total_runs} runs matched the reference for {shape_kind}.")
    return mismatches


def run_verification_suite(runs: int, seed: int = RANDOM_SEED, shape_kinds=SHAPE_KINDS):
    """Verifies every shape kind and returns the total number of mismatches."""
    warm_up()
    total_mismatches = 0
    for shape_kind in shape_kinds:
        total_mismatches += profile_and_save_stats(shape_kind, runs, seed)
    return total_mismatches


def benchmark_and_save_stats(matrix_dim: int, total_runs: int, seed: int = RANDOM_SEED):
    size_str = f"N{matrix_dim}"
    print(f"\nInfo: Profiling Matrix Multiplication for configuration: {size_str} ({matrix_dim}x{matrix_dim})")
    print(f"Parameters: Runs={total_runs}, Data Type={np.dtype(DATA_TYPE).name}")

    output_dir = os.path.join(RESULTS_BASE_PATH, MATRIX_MULTIPLICATION_PATH, str(matrix_dim))
    os.makedirs(output_dir, exist_ok=True)

    file_handles = {}
    dims = (matrix_dim, matrix_dim, matrix_dim)

    try:
        for key, config_item in IMPL_CONFIG.items():
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[key] = open(path, 'w')
            write_result_header(file_handles[key])
            file_handles[key].write(BENCHMARK_HEADER)

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            rng = np.random.RandomState(seed + run_number)
            A_np = generate_matrix(matrix_dim, matrix_dim, rng, MIN_VALUE, MAX_VALUE)
            B_np = generate_matrix(matrix_dim, matrix_dim, rng, MIN_VALUE, MAX_VALUE)
            data_size_mb_total = (A_np.nbytes + B_np.nbytes) / (1024 ** 2)

            for impl_key, config_item in IMPL_CONFIG.items():
                impl_name_print = config_item["name_print"]
                print(f"    Profiling {impl_name_print}...")
                _, exec_time = profile_multiply(config_item["func"], A_np, B_np, dims, impl_name_print)

                timestamp = time.strftime(DATE_FORMAT)
                if exec_time == float('inf'):
                    file_handles[impl_key].write(f"{run_number},{timestamp},inf,N/A,N/A\n")
                    continue

                gops = (2.0 * matrix_dim ** 3) / (exec_time * 1e9) if exec_time > 0 else 0.0
                result_line = (f"{run_number},{timestamp},{exec_time:.6f},"
                               f"{data_size_mb_total:.2f},{gops:.2f}\n")
                file_handles[impl_key].write(result_line)
                print(f"      {impl_name_print} Run {run_number}: {exec_time:.6f}s, GOPS: {gops:.2f}")
        print(f"  Finished all runs for {size_str}.")
    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh in file_handles.values():
            if not fh.closed:
                fh.close()


def run_matrix_multiplication_benchmark(size: int, runs: int, seed: int = RANDOM_SEED):
    try:
        print(f"CPU Info: {platform.processor()}")
        print(f"CPU Cores: {psutil.cpu_count(logical=False)} physical, {psutil.cpu_count(logical=True)} logical "
              f"(Note: both implementations use only one core)")
    except Exception as e_cpu_info:
        print(f"Could not get CPU info: {e_cpu_info}")

    warm_up()
    benchmark_and_save_stats(matrix_dim=size, total_runs=runs, seed=seed)


def build_parser():
    parser = argparse.ArgumentParser(description="Verifier and profiler for integer matrix multiplication.")
    parser.add_argument(
        "--shape",
        choices=SHAPE_KINDS + ("all",),
        default="all",
        help="Shape kind of the random cases to verify."
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of random cases per shape kind."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Base seed; run n uses seed + n."
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="If set, also times both implementations on size x size matrices."
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    selected_kinds = SHAPE_KINDS if args.shape == "all" else (args.shape,)
    failed = run_verification_suite(args.runs, args.seed, selected_kinds)

    if args.size is not None:
        if args.size >= 512:
            print(f"Note: For matrix dimension {args.size}, the reference implementation might be very slow.")
        run_matrix_multiplication_benchmark(size=args.size, runs=args.runs, seed=args.seed)

    print("\nMatrix Multiplication verification complete. Results saved to respective files.")
    raise SystemExit(1 if failed else 0)
