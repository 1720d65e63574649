from __future__ import annotations

from typing import Callable, TypeVar, Union
import numbers

import numpy as np
from numpy.typing import NDArray

Scalar = Union[float, np.floating]
FloatArray = NDArray[np.float32]

T = TypeVar("T")

UnaryFn = Callable[[np.float32], Scalar]
BinaryFn = Callable[[np.float32, np.float32], Scalar]
FoldFn = Callable[[T, np.float32], T]


def is_real(value) -> bool:
    """True for Python and numpy real numbers (bool included, complex excluded)."""
    return isinstance(value, numbers.Real)


__all__ = [
    "Scalar", "FloatArray",
    "UnaryFn", "BinaryFn", "FoldFn",
    "is_real",
]
