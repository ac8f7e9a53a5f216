# core/vector.py
import math
from numbers import Real
from typing import Union, overload

NEAR_ZERO_EPSILON = 1e-8


class Vector3:
    """
    A 3D vector supporting arithmetic, dot and cross products,
    and normalization.

    Operations never mutate; every operator returns a new vector.
    unit() requires a non-zero length: Python raises ZeroDivisionError
    for a zero vector, so callers must check near_zero() first when the
    vector may degenerate.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @overload
    def __add__(self, other: "Vector3") -> "Vector3": ...

    @overload
    def __add__(self, other: "Point3") -> "Point3": ...

    def __add__(self, other):
        if type(other) is Vector3:
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: "Vector3") -> "Vector3":
        if type(other) is Vector3:
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: float) -> "Vector3":
        # Scaling only; component-wise products belong to Color
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, t: float) -> "Vector3":
        if isinstance(t, Real):
            return self * (1.0 / t)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if type(other) is not Vector3:
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((Vector3, self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> "Vector3":
        """
        Returns the vector scaled to unit length.
        """
        return self / self.length()

    def near_zero(self, epsilon: float = NEAR_ZERO_EPSILON) -> bool:
        """
        True when every component is smaller than epsilon in magnitude.
        """
        return abs(self.x) < epsilon and abs(self.y) < epsilon and abs(self.z) < epsilon

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Point3:
    """
    A position in 3D space.

    Points only support affine arithmetic:
    point - point -> Vector3, point +/- Vector3 -> Point3 and
    Vector3 + point -> Point3. Adding two points is rejected with a
    TypeError.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: Vector3) -> "Point3":
        if type(other) is Vector3:
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __radd__(self, other: Vector3) -> "Point3":
        return self.__add__(other)

    @overload
    def __sub__(self, other: "Point3") -> Vector3: ...

    @overload
    def __sub__(self, other: Vector3) -> "Point3": ...

    def __sub__(self, other):
        if type(other) is Point3:
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if type(other) is Vector3:
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if type(other) is not Point3:
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((Point3, self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def to_vector(self) -> Vector3:
        """Displacement of this point from the origin."""
        return Vector3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Point3({self.x}, {self.y}, {self.z})"


class Color:
    """
    Linear RGB color with float components.

    Components are unbounded during accumulation; clamping and gamma
    correction only happen when a pixel is quantized to bytes.
    Multiplying two colors attenuates component-wise.
    """
    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __add__(self, other: "Color") -> "Color":
        if type(other) is Color:
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __mul__(self, other: Union["Color", float]) -> "Color":
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        if type(other) is Color:
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, t: float) -> "Color":
        if isinstance(t, Real):
            return self * (1.0 / t)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if type(other) is not Color:
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((Color, self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def lerp(self, other: "Color", t: float) -> "Color":
        """Blend toward other: t=0 gives self, t=1 gives other."""
        return self * (1.0 - t) + other * t

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
