from __future__ import annotations

from typing import TypeVar

import numpy as np

from baryon_math.utils.types import Scalar, is_real

V = TypeVar("V", bound="ArithmeticOps")


class ArithmeticOps:
    """
    Arithmetic operators derived from the elementwise engine.

    Mixed into every vector type next to `VecBase`:

    - ``a + b``, ``a - b``: `zip_with` with numpy.add / numpy.subtract
    - ``-a``: `map` with numpy.negative
    - ``a * s``, ``s * a``: `zip_with_scalar` with numpy.multiply
    - ``a / s``: `zip_with_scalar` with numpy.divide (x / 0.0 gives inf or nan)

    The compound forms compute the binary result and rebind the name; the
    original value is never modified. An operand of another vector shape, or a
    non-real scalar, makes the operator return NotImplemented, so Python raises
    TypeError.
    """
    __slots__ = ()

    def __add__(self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.zip_with(other, np.add)

    def __sub__(self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.zip_with(other, np.subtract)

    def __neg__(self: V) -> V:
        return self.map(np.negative)

    def __mul__(self: V, scalar: Scalar) -> V:
        if not is_real(scalar):
            return NotImplemented
        return self.zip_with_scalar(scalar, np.multiply)

    def __rmul__(self: V, scalar: Scalar) -> V:
        if not is_real(scalar):
            return NotImplemented
        return self.zip_with_scalar(scalar, np.multiply)

    def __truediv__(self: V, scalar: Scalar) -> V:
        if not is_real(scalar):
            return NotImplemented
        return self.zip_with_scalar(scalar, np.divide)

    def __iadd__(self: V, other: V) -> V:
        return self.__add__(other)

    def __isub__(self: V, other: V) -> V:
        return self.__sub__(other)

    def __imul__(self: V, scalar: Scalar) -> V:
        return self.__mul__(scalar)

    def __itruediv__(self: V, scalar: Scalar) -> V:
        return self.__truediv__(scalar)
