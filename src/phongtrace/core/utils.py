# core/utils.py
import math

from phongtrace.core.vector import Vector3

EPSILON = 1e-9


def nearly_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Tolerance-based equality, scaled by the magnitude of the operands.
    """
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    return abs(a - b) <= epsilon * max(1.0, abs(a), abs(b))


def less_than_or_nearly_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    return a < b or nearly_equal(a, b, epsilon)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
