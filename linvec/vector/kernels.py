"""
Portable kernels - explicit loops over the typed buffer.
Always available; used whenever the accelerated path is absent or fails.
"""

import math
from typing import Any, Callable

import numpy as np

from ..core.errors import EmptyReductionError, SizeMismatchError
from .backend import IKernelProvider

# Sentinel for "no initial value"; 0 and None are valid initial values
MISSING = object()


def as_number(value: Any):
    """Unwrap numpy scalars to the matching Python number."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def bin_op(dst: np.ndarray, src: np.ndarray, op: Callable[[Any, Any, int], Any]) -> np.ndarray:
    """
    Combine src into dst element-wise, in place, low index to high.

    Args:
        dst: Buffer written in place
        src: Buffer read from, same length as dst
        op: Called as op(dst[i], src[i], i)

    Returns:
        dst
    """
    l1, l2 = dst.shape[0], src.shape[0]
    if l1 != l2:
        raise SizeMismatchError(l1, l2)

    with np.errstate(all="ignore"):
        for i in range(l1):
            dst[i] = op(dst[i], src[i], i)
    return dst


def each(buf: np.ndarray, fn: Callable[[Any, int, np.ndarray], Any]) -> np.ndarray:
    """Call fn(value, index, buf) for every element in index order."""
    with np.errstate(all="ignore"):
        for i in range(buf.shape[0]):
            fn(buf[i], i, buf)
    return buf


def reduce(buf: np.ndarray, fn: Callable[[Any, Any, int, np.ndarray], Any], initial: Any = MISSING):
    """Left fold of fn(acc, value, index, buf); needs an initial value when buf is empty."""
    length = buf.shape[0]
    if length == 0 and initial is MISSING:
        raise EmptyReductionError()

    i = 0
    if initial is MISSING:
        value = buf[0]
        i = 1
    else:
        value = initial

    with np.errstate(all="ignore"):
        for i in range(i, length):
            value = fn(value, buf[i], i, buf)
    return value


class FallbackKernels(IKernelProvider):
    """Pure loop implementations of the vector primitives."""

    name = "portable"

    def scaled_add(self, dst: np.ndarray, src: np.ndarray, factor=1) -> None:
        if factor == 1:
            bin_op(dst, src, lambda a, b, _: a + b)
        elif factor == -1:
            bin_op(dst, src, lambda a, b, _: a - b)
        else:
            bin_op(dst, src, lambda a, b, _: a + factor * b)

    def scale_in_place(self, buf: np.ndarray, scalar) -> None:
        def multiply(value, i, data):
            data[i] = value * scalar

        each(buf, multiply)

    def dot(self, a: np.ndarray, b: np.ndarray):
        if a.shape[0] != b.shape[0]:
            raise SizeMismatchError(a.shape[0], b.shape[0])

        # Python numbers, so integer kinds cannot wrap
        result = 0
        for i in range(a.shape[0]):
            result += as_number(a[i]) * as_number(b[i])
        return result

    def norm2(self, buf: np.ndarray) -> float:
        # hypot rescales internally, matching ?nrm2 on large magnitudes
        return math.hypot(*(float(buf[i]) for i in range(buf.shape[0])))

    def argmax_abs(self, buf: np.ndarray) -> int:
        if buf.shape[0] == 0:
            return -1

        # strict > keeps the first index on ties
        index, largest = 0, abs(float(buf[0]))
        for i in range(1, buf.shape[0]):
            magnitude = abs(float(buf[i]))
            if magnitude > largest:
                index, largest = i, magnitude
        return index
