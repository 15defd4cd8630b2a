"""Affine transforms built from FixedValue matrices.

Transform2 is a 2x3 matrix and Transform3 a 3x4 matrix; the implicit last row
is (0, ..., 0, 1). Compose with `@` (left operand applied last) and apply to a
vector with `apply` or `@`. Rotation builders read cos/sin from a FixMath
instance, the process default unless one is passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from fixmath.fixed import FixedValue
from fixmath.fixmath import FixMath, get_default_math
from fixmath.geometry.vector import Vec2, Vec3

_0 = FixedValue.ZERO
_1 = FixedValue.ONE


def _cos_sin(degrees: FixedValue, math: FixMath | None) -> tuple[FixedValue, FixedValue]:
    math = math or get_default_math()
    return math.cos(degrees), math.sin(degrees)


@dataclass(frozen=True)
class Transform2:
    """2D affine transform [[m11, m12, m13], [m21, m22, m23]]."""

    m11: FixedValue
    m12: FixedValue
    m13: FixedValue
    m21: FixedValue
    m22: FixedValue
    m23: FixedValue

    IDENTITY: ClassVar[Transform2]

    @classmethod
    def rotation(cls, degrees: FixedValue, math: FixMath | None = None) -> Transform2:
        """Counter-clockwise rotation about the origin."""
        cos, sin = _cos_sin(degrees, math)
        return cls(cos, -sin, _0, sin, cos, _0)

    @classmethod
    def scaling(cls, scale: Vec2) -> Transform2:
        return cls(scale.x, _0, _0, _0, scale.y, _0)

    @classmethod
    def translation(cls, delta: Vec2) -> Transform2:
        return cls(_1, _0, delta.x, _0, _1, delta.y)

    @classmethod
    def compose(
        cls,
        position: Vec2,
        scale: Vec2,
        rotation: FixedValue,
        math: FixMath | None = None,
    ) -> Transform2:
        """Rotate, then scale, then translate."""
        return cls.rotation(rotation, math).scale(scale).translate(position)

    def __matmul__(self, other: object) -> Transform2 | Vec2:
        if isinstance(other, Vec2):
            return self.apply(other)
        if not isinstance(other, Transform2):
            return NotImplemented
        return Transform2(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m11 * other.m13 + self.m12 * other.m23 + self.m13,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.m21 * other.m13 + self.m22 * other.m23 + self.m23,
        )

    def apply(self, vec: Vec2) -> Vec2:
        return Vec2(
            self.m11 * vec.x + self.m12 * vec.y + self.m13,
            self.m21 * vec.x + self.m22 * vec.y + self.m23,
        )

    def rotate(self, degrees: FixedValue, math: FixMath | None = None) -> Transform2:
        return Transform2.rotation(degrees, math) @ self  # type: ignore[return-value]

    def scale(self, scale: Vec2) -> Transform2:
        return Transform2(
            self.m11 * scale.x, self.m12 * scale.x, self.m13 * scale.x,
            self.m21 * scale.y, self.m22 * scale.y, self.m23 * scale.y,
        )

    def translate(self, delta: Vec2) -> Transform2:
        return Transform2(
            self.m11, self.m12, self.m13 + delta.x,
            self.m21, self.m22, self.m23 + delta.y,
        )

    def __str__(self) -> str:
        return f"[[{self.m11}, {self.m12}, {self.m13}], [{self.m21}, {self.m22}, {self.m23}]]"


Transform2.IDENTITY = Transform2(_1, _0, _0, _0, _1, _0)


@dataclass(frozen=True)
class Transform3:
    """3D affine transform, rows (m11..m14), (m21..m24), (m31..m34)."""

    m11: FixedValue
    m12: FixedValue
    m13: FixedValue
    m14: FixedValue
    m21: FixedValue
    m22: FixedValue
    m23: FixedValue
    m24: FixedValue
    m31: FixedValue
    m32: FixedValue
    m33: FixedValue
    m34: FixedValue

    IDENTITY: ClassVar[Transform3]

    @classmethod
    def rotation_x(cls, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        cos, sin = _cos_sin(degrees, math)
        return cls(
            _1, _0, _0, _0,
            _0, cos, -sin, _0,
            _0, sin, cos, _0,
        )

    @classmethod
    def rotation_y(cls, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        cos, sin = _cos_sin(degrees, math)
        return cls(
            cos, _0, sin, _0,
            _0, _1, _0, _0,
            -sin, _0, cos, _0,
        )

    @classmethod
    def rotation_z(cls, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        cos, sin = _cos_sin(degrees, math)
        return cls(
            cos, -sin, _0, _0,
            sin, cos, _0, _0,
            _0, _0, _1, _0,
        )

    @classmethod
    def rotation(cls, degrees: Vec3, math: FixMath | None = None) -> Transform3:
        """Rotate about X, then Y, then Z (angles taken from the vector)."""
        return (
            cls.rotation_x(degrees.x, math)
            .rotate_y(degrees.y, math)
            .rotate_z(degrees.z, math)
        )

    @classmethod
    def scaling(cls, scale: Vec3) -> Transform3:
        return cls(
            scale.x, _0, _0, _0,
            _0, scale.y, _0, _0,
            _0, _0, scale.z, _0,
        )

    @classmethod
    def translation(cls, delta: Vec3) -> Transform3:
        return cls(
            _1, _0, _0, delta.x,
            _0, _1, _0, delta.y,
            _0, _0, _1, delta.z,
        )

    @classmethod
    def compose(
        cls,
        position: Vec3,
        scale: Vec3,
        rotation: Vec3,
        math: FixMath | None = None,
    ) -> Transform3:
        """Rotate (X, Y, Z), then scale, then translate."""
        return cls.rotation(rotation, math).scale(scale).translate(position)

    def rows(self) -> tuple[tuple[FixedValue, ...], ...]:
        return (
            (self.m11, self.m12, self.m13, self.m14),
            (self.m21, self.m22, self.m23, self.m24),
            (self.m31, self.m32, self.m33, self.m34),
        )

    def __matmul__(self, other: object) -> Transform3 | Vec3:
        if isinstance(other, Vec3):
            return self.apply(other)
        if not isinstance(other, Transform3):
            return NotImplemented

        a = self.rows()
        b = other.rows()
        entries = []
        for i in range(3):
            for j in range(4):
                total = a[i][0] * b[0][j] + a[i][1] * b[1][j] + a[i][2] * b[2][j]
                if j == 3:
                    total = total + a[i][3]
                entries.append(total)
        return Transform3(*entries)

    def apply(self, vec: Vec3) -> Vec3:
        return Vec3(
            self.m11 * vec.x + self.m12 * vec.y + self.m13 * vec.z + self.m14,
            self.m21 * vec.x + self.m22 * vec.y + self.m23 * vec.z + self.m24,
            self.m31 * vec.x + self.m32 * vec.y + self.m33 * vec.z + self.m34,
        )

    def rotate(self, degrees: Vec3, math: FixMath | None = None) -> Transform3:
        """Apply the X, Y, Z rotation of `degrees` after this transform."""
        return self.rotate_x(degrees.x, math).rotate_y(degrees.y, math).rotate_z(degrees.z, math)

    def rotate_x(self, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        return Transform3.rotation_x(degrees, math) @ self  # type: ignore[return-value]

    def rotate_y(self, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        return Transform3.rotation_y(degrees, math) @ self  # type: ignore[return-value]

    def rotate_z(self, degrees: FixedValue, math: FixMath | None = None) -> Transform3:
        return Transform3.rotation_z(degrees, math) @ self  # type: ignore[return-value]

    def scale(self, scale: Vec3) -> Transform3:
        factors = (scale.x, scale.y, scale.z)
        return Transform3(*(m * factors[i] for i, row in enumerate(self.rows()) for m in row))

    def translate(self, delta: Vec3) -> Transform3:
        return Transform3(
            self.m11, self.m12, self.m13, self.m14 + delta.x,
            self.m21, self.m22, self.m23, self.m24 + delta.y,
            self.m31, self.m32, self.m33, self.m34 + delta.z,
        )

    def __str__(self) -> str:
        return "[" + ", ".join("[" + ", ".join(str(m) for m in row) + "]" for row in self.rows()) + "]"


Transform3.IDENTITY = Transform3(
    _1, _0, _0, _0,
    _0, _1, _0, _0,
    _0, _0, _1, _0,
)
