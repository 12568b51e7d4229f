# core/__init__.py
from core.utils import EPSILON, equal
from core.tuple import Tuple, TupleType, point, vector, tuple4

__all__ = ["EPSILON", "equal", "Tuple", "TupleType", "point", "vector", "tuple4"]
