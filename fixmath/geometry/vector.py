"""2D and 3D vectors of FixedValue components.

Thin compositions over FixedValue arithmetic. Magnitude goes through the
shared integer square root, so it is as deterministic as the scalar sqrt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from fixmath.engine.sqrt import magnitude
from fixmath.fixed import FixedValue


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector."""

    x: FixedValue
    y: FixedValue

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    UNIT_X: ClassVar[Vec2]
    UNIT_Y: ClassVar[Vec2]

    @classmethod
    def of(cls, x: int, y: int) -> Vec2:
        """Create from integer components."""
        return cls(FixedValue.from_int(x), FixedValue.from_int(y))

    def __pos__(self) -> Vec2:
        return self

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, FixedValue):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, FixedValue):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, scalar: object) -> Vec2:
        if not isinstance(scalar, FixedValue):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec2:
        """Divide each component.

        Raises:
            DivideByZero: If scalar is zero
        """
        if not isinstance(scalar, FixedValue):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def dot(self, other: Vec2) -> FixedValue:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> FixedValue:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> FixedValue:
        return magnitude((self.x, self.y))

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        if self.x.raw == 0 and self.y.raw == 0:
            return Vec2.ZERO
        m = self.magnitude()
        return Vec2(self.x / m, self.y / m)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Vec2.ZERO = Vec2(FixedValue.ZERO, FixedValue.ZERO)
Vec2.ONE = Vec2(FixedValue.ONE, FixedValue.ONE)
Vec2.UNIT_X = Vec2(FixedValue.ONE, FixedValue.ZERO)
Vec2.UNIT_Y = Vec2(FixedValue.ZERO, FixedValue.ONE)


@dataclass(frozen=True)
class Vec3:
    """Immutable 3D vector."""

    x: FixedValue
    y: FixedValue
    z: FixedValue

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    UNIT_X: ClassVar[Vec3]
    UNIT_Y: ClassVar[Vec3]
    UNIT_Z: ClassVar[Vec3]

    @classmethod
    def of(cls, x: int, y: int, z: int) -> Vec3:
        """Create from integer components."""
        return cls(FixedValue.from_int(x), FixedValue.from_int(y), FixedValue.from_int(z))

    @classmethod
    def from_vec2(cls, v: Vec2) -> Vec3:
        """Lift a 2D vector into the z = 0 plane."""
        return cls(v.x, v.y, FixedValue.ZERO)

    def __pos__(self) -> Vec3:
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, FixedValue):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, FixedValue):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, scalar: object) -> Vec3:
        if not isinstance(scalar, FixedValue):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec3:
        if not isinstance(scalar, FixedValue):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> FixedValue:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> FixedValue:
        return magnitude((self.x, self.y, self.z))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        if self.x.raw == 0 and self.y.raw == 0 and self.z.raw == 0:
            return Vec3.ZERO
        m = self.magnitude()
        return Vec3(self.x / m, self.y / m, self.z / m)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


Vec3.ZERO = Vec3(FixedValue.ZERO, FixedValue.ZERO, FixedValue.ZERO)
Vec3.ONE = Vec3(FixedValue.ONE, FixedValue.ONE, FixedValue.ONE)
Vec3.UNIT_X = Vec3(FixedValue.ONE, FixedValue.ZERO, FixedValue.ZERO)
Vec3.UNIT_Y = Vec3(FixedValue.ZERO, FixedValue.ONE, FixedValue.ZERO)
Vec3.UNIT_Z = Vec3(FixedValue.ZERO, FixedValue.ZERO, FixedValue.ONE)
