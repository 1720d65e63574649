from __future__ import annotations

import logging
from typing import Iterable, List, Type, TypeVar, Union

import numpy as np
from numpy.lib import recfunctions as rfn

from baryon_math.utils.types import FloatArray
from baryon_math.vec.engine import VecBase
from baryon_math.vec.shape import SCALAR

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=VecBase)

BufferLike = Union[bytes, bytearray, memoryview, np.ndarray]

############################
# BATCH PACKING
############################

def pack(cls: Type[V], vectors: Iterable[V]) -> FloatArray:
    """
    Pack vectors into a flat float32 buffer.

    Parameters
    ----------
    cls : vector type
        Expected shape of every element (e.g. Vec3).
    vectors : iterable of `cls`
        Vectors to pack, in order.

    Returns
    -------
    out : (M, N) ndarray of float32
        C-contiguous; row i holds the components of vectors[i] in field order, so
        ``out.tobytes()`` is M back-to-back vectors exactly as foreign code or a
        GPU vertex buffer expects them.

    Raises
    ------
    TypeError
        If an element is not a `cls` instance.
    """
    items = list(vectors)
    n = cls.shape().size
    out = np.empty((len(items), n), dtype=SCALAR)
    for i, v in enumerate(items):
        if not isinstance(v, cls):
            raise TypeError(f"pack({cls.__name__}) got a {type(v).__name__} at index {i}.")
        out[i] = v.components()
    logger.debug("packed %d %s into %d bytes", len(items), cls.__name__, out.nbytes)
    return out


def records(cls: Type[V], vectors: Iterable[V]) -> np.ndarray:
    """
    Pack vectors into a structured array with named fields.

    Returns
    -------
    out : (M,) ndarray with dtype ``cls.shape().dtype``
        Same memory as `pack`, with fields addressable by name (``out["x"]``).
    """
    return pack(cls, vectors).view(cls.shape().dtype).reshape(-1)


def unpack(cls: Type[V], data: BufferLike) -> List[V]:
    """
    Rebuild vectors from a flat float32 buffer.

    Parameters
    ----------
    cls : vector type
        Shape of the vectors stored in `data`.
    data : bytes-like or ndarray
        - bytes / bytearray / memoryview: back-to-back native-order float32
        - structured ndarray (e.g. from `records`): one record per vector
        - any other array_like: shape (..., N) or flat with a multiple of N values

    Returns
    -------
    list of `cls`

    Raises
    ------
    ValueError
        If the number of float32 values is not a multiple of N.
    """
    shape = cls.shape()
    if isinstance(data, (bytes, bytearray, memoryview)):
        nbytes = memoryview(data).nbytes
        if nbytes % shape.nbytes:
            raise ValueError(
                f"Buffer of {nbytes} bytes is not a whole number of {cls.__name__} ({shape.nbytes} bytes)."
            )
        arr = np.frombuffer(data, dtype=SCALAR)
    elif isinstance(data, np.ndarray) and data.dtype.names is not None:
        if data.dtype.names != shape.fields:
            raise ValueError(f"Structured array fields {data.dtype.names} do not match {cls.__name__} {shape.fields}.")
        arr = rfn.structured_to_unstructured(data, dtype=SCALAR)
    else:
        arr = np.asarray(data, dtype=SCALAR)

    if arr.size % shape.size:
        raise ValueError(f"Expected a multiple of {shape.size} values for {cls.__name__}, got {arr.size}.")
    rows = arr.reshape(-1, shape.size)
    logger.debug("unpacking %d %s", rows.shape[0], cls.__name__)
    return [cls(*row) for row in rows]


__all__ = ["pack", "records", "unpack"]
