import math


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up (12.5 -> 13), unlike the builtin's round-half-even."""
    return math.floor(value + 0.5)
