"""
Typed buffer - fixed-length, fixed-element-kind contiguous storage backing a vector.
No bounds checking at this layer; Vector owns that.
"""

from typing import Any, Iterable, Optional

import numpy as np

from ..core.config import get_default_element_kind
from ..core.errors import InvalidArgumentError, SizeMismatchError


def resolve_element_kind(kind: Any = None) -> np.dtype:
    """
    Resolve an element kind (name, type or dtype) to a numpy dtype.

    Args:
        kind: numpy dtype, scalar type, dtype string, or None for the configured default

    Returns:
        The resolved real numeric dtype
    """
    if kind is None:
        kind = get_default_element_kind()

    try:
        dtype = np.dtype(kind)
    except TypeError as e:
        raise InvalidArgumentError(f"invalid element kind: {kind!r}") from e

    if dtype.kind not in "iuf":
        raise InvalidArgumentError(f"element kind must be a real numeric type: {dtype}")
    return dtype


def allocate(length: int, element_kind: Any = None) -> np.ndarray:
    """Allocate a zero-initialized buffer."""
    if length < 0:
        raise InvalidArgumentError(f"invalid size: {length}")
    return np.zeros(length, dtype=resolve_element_kind(element_kind))


def copy(buffer: np.ndarray) -> np.ndarray:
    """New buffer with identical element values and kind."""
    return np.array(buffer, dtype=buffer.dtype, copy=True, order="C")


def adopt(store: Any) -> np.ndarray:
    """
    Adopt an externally owned contiguous numeric store by reference.

    1-D C-contiguous ndarrays are used as-is; other buffer-protocol objects
    (array.array, memoryview) are viewed without copying. The element kind is
    inferred from the store.
    """
    if isinstance(store, np.ndarray):
        buffer = store
    else:
        buffer = np.asarray(memoryview(store))

    if buffer.ndim != 1:
        raise InvalidArgumentError(f"expected a 1-D store, got {buffer.ndim} dimensions")
    if not buffer.flags.c_contiguous:
        raise InvalidArgumentError("expected a contiguous store")
    resolve_element_kind(buffer.dtype)
    return buffer


def from_sequence(values: Iterable[Any], element_kind: Any = None) -> np.ndarray:
    """Copy a plain ordered sequence into a new buffer."""
    return np.array(list(values), dtype=resolve_element_kind(element_kind)).reshape(-1)


def flatten(data: Any, rows: int, cols: int, element_kind: Any = None) -> np.ndarray:
    """Flatten a matrix payload row-major into a new buffer of length rows*cols."""
    flat = np.array(data, dtype=resolve_element_kind(element_kind), order="C").ravel(order="C")
    if flat.shape[0] != rows * cols:
        raise SizeMismatchError(flat.shape[0], rows * cols)
    return flat


def concat(head: np.ndarray, tail: np.ndarray, element_kind: Optional[np.dtype] = None) -> np.ndarray:
    """New buffer holding head followed by tail, in head's kind unless given."""
    dtype = head.dtype if element_kind is None else resolve_element_kind(element_kind)
    l1, l2 = head.shape[0], tail.shape[0]

    data = np.empty(l1 + l2, dtype=dtype)
    data[:l1] = head
    data[l1:] = tail
    return data
