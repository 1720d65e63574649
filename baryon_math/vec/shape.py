from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
from operator import attrgetter
from typing import Callable, Tuple

import numpy as np

SCALAR = np.float32
SCALAR_SIZE: int = np.dtype(SCALAR).itemsize  # 4 bytes
SUPPORTED_SIZES: Tuple[int, ...] = (2, 3, 4)


@dataclass(frozen=True, slots=True)
class Shape:
    """
    Field layout of a fixed-size vector type.

    Parameters
    ----------
    name : str
        Name of the vector type (e.g. "Vec3").
    fields : tuple of str
        Component names in declaration order (e.g. ("x", "y", "z")).

    Attributes
    ----------
    dtype : numpy.dtype
        Packed structured dtype with one float32 member per field, in declaration
        order, at offsets 0, 4, 8, ... (no padding). Its itemsize is 4 * size.

    Notes
    -----
    Every elementwise operation walks `fields` in this order and builds its
    result in the same order.
    """
    name: str
    fields: Tuple[str, ...]
    dtype: np.dtype = field(init=False, repr=False, compare=False)
    _getter: Callable = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Shape.name must be a non-empty string.")

        names = tuple(self.fields)
        if len(names) not in SUPPORTED_SIZES:
            raise ValueError(
                f"Shape {self.name!r} must have {SUPPORTED_SIZES} fields, got {len(names)}."
            )
        for n in names:
            if not isinstance(n, str) or not n.isidentifier():
                raise ValueError(f"Shape {self.name!r}: invalid field name {n!r}.")
        if len(set(names)) != len(names):
            raise ValueError(f"Shape {self.name!r}: duplicate field names in {names}.")

        object.__setattr__(self, "fields", names)
        object.__setattr__(
            self, "dtype", np.dtype({"names": list(names), "formats": [SCALAR] * len(names)})
        )
        object.__setattr__(self, "_getter", attrgetter(*names))

    @property
    def size(self) -> int:
        """Number of components."""
        return len(self.fields)

    @property
    def nbytes(self) -> int:
        return self.size * SCALAR_SIZE

    def index(self, axis: str) -> int:
        """
        Position of `axis` in the field order.

        Raises
        ------
        ValueError
            If the shape has no field called `axis`.
        """
        try:
            return self.fields.index(axis)
        except ValueError as e:
            raise ValueError(f"{self.name} has no axis {axis!r}. Available: {list(self.fields)}") from e

    def components(self, obj) -> Tuple:
        """Read the fields of `obj` as a tuple, in declaration order."""
        return self._getter(obj)

    @classmethod
    def from_dataclass(cls, klass: type) -> "Shape":
        return cls(name=klass.__name__, fields=tuple(f.name for f in dataclass_fields(klass)))
