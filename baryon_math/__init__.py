"""
baryon_math
===========

Lightweight linear algebra primitives for the baryon engine: fixed-size float32
vectors (Vec2, Vec3, Vec4) with elementwise arithmetic.
"""
import logging

from .vec import Vec2, Vec3, Vec4
from .config import FloatAction, FloatPolicy, DEFAULT_POLICY, current_policy, float_policy
from . import prelude

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vec2", "Vec3", "Vec4",
    "FloatAction", "FloatPolicy", "DEFAULT_POLICY", "current_policy", "float_policy",
    "prelude",
    "__version__",
]
