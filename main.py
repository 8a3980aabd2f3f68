import os
import time
import argparse

from constants.params import RUNS, RANDOM_SEED, SMALL_MATRIX_SIZE, MID_MATRIX_SIZE, BIG_MATRIX_SIZE
from performance_profiling.matrix_multiplication.profile_matrix_mult_all import run_verification_suite, \
    run_matrix_multiplication_benchmark
from utils.utils import get_cpu_info, get_formatted_elapsed_time, get_ram_info


def run_matrix_mult_suite(size, runs=RUNS, seed=RANDOM_SEED):
    print(f"--- Matrix Multiplication Suite: Size {size}, Runs {runs} ---")
    run_matrix_multiplication_benchmark(size=size, runs=runs, seed=seed)


def write_system_info(output_dir="results"):
    file_path = os.path.join(output_dir, "system_info.txt")
    os.makedirs(output_dir, exist_ok=True)
    try:
        with open(file_path, "w") as f:
            f.write(f"[System Info]\nCPU: {get_cpu_info()}\nRAM: {get_ram_info()}\n")
        print(f"System info successfully written to {file_path}")
    except IOError as e:
        print(f"Error writing system info to {file_path}: {e}")


def main(argv=None):
    main_parser = argparse.ArgumentParser(description="Main verification and benchmark runner script.")
    main_parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of random cases per shape kind and runs per benchmark size."
    )
    main_parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Base seed for the random cases."
    )
    main_parser.add_argument(
        "--skip_benchmark",
        action="store_true",
        help="If set, only runs the randomized verification against the reference."
    )
    main_args = main_parser.parse_args(argv)

    startTime = time.time()
    write_system_info()

    print("\nRunning randomized verification against the reference implementation...")
    mismatches = run_verification_suite(main_args.runs, main_args.seed)
    print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")

    if not main_args.skip_benchmark:
        for label, size in (("SMALL", SMALL_MATRIX_SIZE), ("MID", MID_MATRIX_SIZE), ("BIG", BIG_MATRIX_SIZE)):
            print(f"Running {label} Matrix multiplication benchmark...")
            run_matrix_mult_suite(size, runs=main_args.runs, seed=main_args.seed)
            print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")

    print(f"\nTotal time: {get_formatted_elapsed_time(startTime)}")
    if mismatches:
        print(f"Error: {mismatches} verification runs did not match the reference.")
        return 1
    print("All verification runs matched the reference.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
