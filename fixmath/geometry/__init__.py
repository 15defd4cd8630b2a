"""Vectors and affine transforms over FixedValue."""

from fixmath.geometry.transform import Transform2, Transform3
from fixmath.geometry.vector import Vec2, Vec3

__all__ = ["Transform2", "Transform3", "Vec2", "Vec3"]
