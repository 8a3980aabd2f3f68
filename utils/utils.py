import time

import cpuinfo
import numba
import numpy as np
import psutil

from constants.params import DATA_TYPE


def get_cpu_info():
    """CPU brand string from py-cpuinfo, or the error text."""
    try:
        return cpuinfo.get_cpu_info()['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_ram_info():
    """Total and available RAM from psutil, or the error text."""
    try:
        ram = psutil.virtual_memory()
        return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"
    except Exception as e:
        return f"Error: {e}"


def get_toolchain_info():
    return f"NumPy {np.__version__}, Numba {numba.__version__}, Element Type {np.dtype(DATA_TYPE).name}"


def write_result_header(file):
    file.write(f"# CPU Info: {get_cpu_info()}\n")
    file.write(f"# RAM Info: {get_ram_info()}\n")
    file.write(f"# Toolchain: {get_toolchain_info()}\n")


def get_formatted_elapsed_time(start_time):
    """Seconds since start_time as HH:MM:SS."""
    return time.strftime("%H:%M:%S", time.gmtime(time.time() - start_time))
