from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
import math
from typing import ClassVar, Iterator, Tuple, Type, TypeVar, dataclass_transform

import numpy as np

from baryon_math.config import current_policy
from baryon_math.utils.types import BinaryFn, FloatArray, FoldFn, Scalar, T, UnaryFn, is_real
from baryon_math.vec.shape import SCALAR, Shape

V = TypeVar("V", bound="VecBase")


def to_scalar(value, name: str = "component") -> np.float32:
    """
    Round a real number to the float32 storage type.

    NaN and +/-inf pass through; finite values outside the float32 range become
    +/-inf. Non-real inputs (str, complex, None, vectors...) raise TypeError.
    """
    if not is_real(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    with current_policy().errstate():
        try:
            return SCALAR(value)
        except OverflowError:
            # ints too large for a double
            return SCALAR(math.inf if value > 0 else -math.inf)


class VecBase:
    """
    Shape-generic elementwise engine shared by all vector types.

    Concrete types are declared with the `vector` decorator, which turns the
    class body's field annotations into a frozen slotted dataclass and binds the
    resulting `Shape`. Everything here only relies on that shape, so the same code
    serves every component count.

    Components are stored as numpy.float32. Callbacks passed to `map`,
    `zip_with`, `zip_with_scalar` and `fold` receive numpy.float32 scalars and
    run under the active float policy (see `baryon_math.config`).
    """
    __slots__ = ()

    _shape: ClassVar[Shape]

    # numpy scalars and arrays must defer to our reflected operators instead of
    # broadcasting over the vector as a sequence.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in self._shape.fields:
            object.__setattr__(self, name, to_scalar(getattr(self, name), name))

    ############################
    # CONSTRUCTION
    ############################

    @classmethod
    def shape(cls) -> Shape:
        return cls._shape

    @classmethod
    def new(cls: Type[V], *components: Scalar) -> V:
        """Create a vector from exactly one scalar per field, in declaration order."""
        if len(components) != cls._shape.size:
            raise TypeError(
                f"{cls.__name__}.new() takes {cls._shape.size} components, got {len(components)}."
            )
        return cls(*components)

    @classmethod
    def zero(cls: Type[V]) -> V:
        """Create a vector filled with zeros."""
        return cls()

    @classmethod
    def one(cls: Type[V]) -> V:
        """Create a vector filled with ones."""
        return cls(*([1.0] * cls._shape.size))

    @classmethod
    def unit(cls: Type[V], axis: str) -> V:
        """Unit vector along `axis`: 1.0 on that field, 0.0 everywhere else."""
        cls._shape.index(axis)
        return cls(**{axis: 1.0})

    ############################
    # ELEMENTWISE OPERATIONS
    ############################

    def map(self: V, f: UnaryFn) -> V:
        """Apply `f` to every component."""
        with current_policy().errstate():
            return type(self)(*[f(c) for c in self])

    def zip_with(self: V, other: V, f: BinaryFn) -> V:
        """Zip a pair of vectors of the same shape element-wise with `f`."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"{type(self).__name__}.zip_with expects a {type(self).__name__}, "
                f"got {type(other).__name__}."
            )
        with current_policy().errstate():
            return type(self)(*[f(a, b) for a, b in zip(self, other)])

    def zip_with_scalar(self: V, scalar: Scalar, f: BinaryFn) -> V:
        """Zip a vector element-wise with a broadcast scalar: f(component, scalar)."""
        s = to_scalar(scalar, "scalar")
        with current_policy().errstate():
            return type(self)(*[f(c, s) for c in self])

    def fold(self, init: T, f: FoldFn) -> T:
        """Reduce the components left to right, starting from `init`."""
        with current_policy().errstate():
            return reduce(f, self, init)

    ############################
    # SEQUENCE VIEW & LAYOUT
    ############################

    def components(self) -> Tuple[np.float32, ...]:
        return self._shape.components(self)

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self._shape.components(self))

    def __len__(self) -> int:
        return self._shape.size

    def __getitem__(self, index):
        return self._shape.components(self)[index]

    def as_array(self) -> FloatArray:
        """Return the components as a new (N,) float32 array."""
        return np.array(self.components(), dtype=SCALAR)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        arr = self.as_array()
        return arr if dtype is None else arr.astype(dtype)

    def to_bytes(self) -> bytes:
        """
        Pack the vector as N consecutive float32 in field order (native byte order),
        i.e. its in-memory layout as seen by foreign code or a GPU buffer.
        """
        return self.as_array().tobytes()

    @classmethod
    def from_bytes(cls: Type[V], data: bytes, offset: int = 0) -> V:
        """Unpack a vector from N native-order float32 starting at `offset`."""
        n = cls._shape.nbytes
        if offset < 0 or memoryview(data).nbytes - offset < n:
            raise ValueError(f"Not enough bytes to unpack {cls.__name__}. Need {n} from offset {offset}.")
        return cls(*np.frombuffer(data, dtype=SCALAR, count=cls._shape.size, offset=offset))

    ############################
    # COMPARISON
    ############################

    def __eq__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        # Component-wise IEEE-754 equality, NaN != NaN.
        return all(bool(a == b) for a, b in zip(self, other))

    def _partial_cmp(self, other):
        """
        Lexicographic comparison over fields in declaration order.

        Returns -1, 0 or 1, or None when the first non-equal pair of fields is
        unordered (a NaN is involved).
        """
        for a, b in zip(self, other):
            if a < b:
                return -1
            if a > b:
                return 1
            if not a == b:
                return None
        return 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._partial_cmp(other) == -1

    def __le__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._partial_cmp(other) in (-1, 0)

    def __gt__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._partial_cmp(other) == 1

    def __ge__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._partial_cmp(other) in (1, 0)

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={float(c)!r}" for name, c in zip(self._shape.fields, self))
        return f"{type(self).__name__}({body})"


def _unit_constructor(axis: str) -> classmethod:
    def unit_axis(cls):
        return cls.unit(axis)

    unit_axis.__name__ = unit_axis.__qualname__ = f"unit_{axis}"
    unit_axis.__doc__ = f"Get the unit vector for the {axis} axis."
    return classmethod(unit_axis)


@dataclass_transform(frozen_default=True)
def vector(cls: type) -> type:
    """
    Class decorator instantiating the elementwise engine for one shape.

    The decorated class declares its components as float fields with a 0.0
    default, in layout order::

        @vector
        class Vec2(ArithmeticOps, VecBase):
            x: float = 0.0
            y: float = 0.0

    The class becomes a frozen, slotted dataclass (so instances hold exactly
    those fields), gets its `Shape` bound, and gains one ``unit_<axis>()``
    constructor per field.
    """
    klass = dataclass(frozen=True, slots=True, eq=False, repr=False)(cls)
    klass._shape = Shape.from_dataclass(klass)
    for axis in klass._shape.fields:
        setattr(klass, f"unit_{axis}", _unit_constructor(axis))
    return klass
