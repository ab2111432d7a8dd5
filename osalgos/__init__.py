"""Classic operating-system algorithms: CPU scheduling, the Banker's algorithm, threaded matrix multiplication and a fixed-record student file."""

__version__ = "0.1.0"
__all__ = ["scheduling", "bankers", "matmul", "studentdb", "forkdemo"]