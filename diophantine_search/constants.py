"""Package‑wide defaults and demo equations."""

# Moduli 2..DEFAULT_MAX_MODULUS-1 are tested by the necessity filter.
DEFAULT_MAX_MODULUS = 561

DEFAULT_LIMIT = 1_000_000
MIN_LIMIT = 2

# 840 = 3*5*7*8, 1104 = 16*3*23, 2431 = 11*13*17
DEFAULT_SCREENING_MODULI: tuple[int, ...] = (840, 1104, 2431)

# First x probed by the bracketing search when no lower bound is carried.
FIRST_X = 2

# Elapsed times above this many milliseconds are reported in whole seconds.
ELAPSED_SECONDS_THRESHOLD_MS = 10_000

# (A, n, B, C, m, D)
_DEMO_EQUATION = (6, 2, 2, 2, 3, 0)  # 6x^2 + 2 = 2y^3
_DEMO_MODULI_EQUATION = (6, 2, 32, 1, 3, 0)  # 6x^2 + 32 = y^3

__all__ = [
    "DEFAULT_MAX_MODULUS",
    "DEFAULT_LIMIT",
    "MIN_LIMIT",
    "DEFAULT_SCREENING_MODULI",
    "FIRST_X",
    "ELAPSED_SECONDS_THRESHOLD_MS",
    "_DEMO_EQUATION",
    "_DEMO_MODULI_EQUATION",
]
