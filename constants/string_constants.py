RESULTS_BASE_PATH = 'results/'
MATRIX_MULTIPLICATION_PATH = 'matrix_multiplication/'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VERIFICATION_STATS_FILE = 'verification_stats.txt'
VERIFICATION_HEADER = "Run,Timestamp,RowsA,ColsA,ColsB,Primary Time(s),Reference Time(s),Match\n"
BENCHMARK_HEADER = "Run,Timestamp,Time(s),Data Size (MB),GOPS\n"
