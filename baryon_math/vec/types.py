from __future__ import annotations

from baryon_math.vec.engine import VecBase, vector
from baryon_math.vec.ops import ArithmeticOps


@vector
class Vec2(ArithmeticOps, VecBase):
    """A 2d vector."""
    x: float = 0.0
    y: float = 0.0


@vector
class Vec3(ArithmeticOps, VecBase):
    """A 3d vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@vector
class Vec4(ArithmeticOps, VecBase):
    """
    A 3d homogeneous vector.

    `w` is commonly the homogeneous coordinate (1.0 for points, 0.0 for
    directions), but no operation gives it a special meaning.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


__all__ = ["Vec2", "Vec3", "Vec4"]
