from .shape import Shape, SCALAR, SCALAR_SIZE, SUPPORTED_SIZES
from .engine import VecBase, vector
from .ops import ArithmeticOps
from .types import Vec2, Vec3, Vec4
from .layout import pack, records, unpack
