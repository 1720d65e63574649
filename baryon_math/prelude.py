"""Convenience re-exports: ``from baryon_math.prelude import *``."""
from baryon_math.vec.types import Vec2, Vec3, Vec4

__all__ = ["Vec2", "Vec3", "Vec4"]
