# core/tuple.py
import math
from enum import Enum
from typing import Iterator, Optional

import numpy as np

from core.utils import equal

POINT_W = 1.0
VECTOR_W = 0.0
INT64_MAX = 2 ** 63 - 1
INT64_MIN = -2 ** 63

class TupleType(Enum):
    POINT = "point"
    VECTOR = "vector"

class Tuple:
    """
    A homogeneous (x, y, z, w) tuple. w == 1 marks a point, anything else a
    vector. The classification is derived from w whenever a tuple is built
    and cannot be set on its own.
    """
    __slots__ = ("_x", "_y", "_z", "_w", "_tuple_type")

    def __init__(self, x: float, y: float, z: float, w: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self._w = float(w)
        self._tuple_type = self.decide_type(self._w)

    @staticmethod
    def decide_type(w: float) -> TupleType:
        return TupleType.POINT if equal(w, POINT_W) else TupleType.VECTOR

    @classmethod
    def from_array(cls, values) -> "Tuple":
        """
        Builds a tuple from any length-4 sequence or numpy array.
        """
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (4,):
            raise ValueError(f"Expected 4 components, got shape {values.shape}")
        return cls(*values.tolist())

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def w(self) -> float:
        return self._w

    @property
    def tuple_type(self) -> TupleType:
        return self._tuple_type

    def is_point(self) -> bool:
        return self._tuple_type is TupleType.POINT

    def is_vector(self) -> bool:
        return self._tuple_type is TupleType.VECTOR

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (equal(self.x, other.x) and equal(self.y, other.y) and
                equal(self.z, other.z) and equal(self.w, other.w))

    __hash__ = None

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y,
                     self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y,
                     self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.scalar_multiplication(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Tuple":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return self.scalar_division(other)
        return NotImplemented

    def scalar_multiplication(self, value: float) -> "Tuple":
        return Tuple(self.x * value, self.y * value,
                     self.z * value, self.w * value)

    def scalar_division(self, value: float) -> "Tuple":
        """
        Divides every component by value. Dividing by zero yields inf/nan
        components instead of raising.
        """
        if not isinstance(value, (int, float)):
            raise TypeError(f"Cannot divide a tuple by {type(value).__name__}")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = self.as_array() / np.float64(value)
        return Tuple.from_array(result)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y +
                         self.z * self.z + self.w * self.w)

    def int_magnitude(self) -> int:
        """
        Magnitude truncated toward zero and saturated to the signed 64-bit
        range. NaN maps to 0.
        """
        length = self.magnitude()
        if math.isnan(length):
            return 0
        if length >= INT64_MAX:
            return INT64_MAX
        if length <= INT64_MIN:
            return INT64_MIN
        return int(length)

    def normalize(self) -> "Tuple":
        return self.scalar_division(self.magnitude())

    def dot(self, other: "Tuple") -> Optional[float]:
        """
        Dot product over x, y and z. Returns None when called on a point.
        """
        if self.is_point():
            return None
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Tuple") -> Optional["Tuple"]:
        """
        Cross product, always a vector. Returns None when called on a point.
        """
        if self.is_point():
            return None
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w}, {self.tuple_type.value})"

def point(x: float, y: float, z: float) -> Tuple:
    """
    Returns a tuple with w = 1.0.
    """
    return Tuple(x, y, z, POINT_W)

def vector(x: float, y: float, z: float) -> Tuple:
    """
    Returns a tuple with w = 0.0.
    """
    return Tuple(x, y, z, VECTOR_W)

def tuple4(x: float, y: float, z: float, w: float) -> Tuple:
    return Tuple(x, y, z, w)
