# core/utils.py

# Tolerance shared by every float comparison on tuples.
EPSILON = 0.00001

def equal(a: float, b: float) -> bool:
    """
    Returns True when two floats differ by less than EPSILON.
    """
    return abs(a - b) < EPSILON
