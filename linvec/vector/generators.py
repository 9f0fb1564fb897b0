"""
Generators - buffers built from constants, per-index functions, uniform samples and ranges.
Vector exposes these as classmethods; this module only deals in typed buffers.
"""

import math
import numbers
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from ..core.errors import InvalidArgumentError
from .buffer import allocate, resolve_element_kind


def _check_count(count) -> int:
    if isinstance(count, bool) or not isinstance(count, numbers.Real):
        raise InvalidArgumentError(f"invalid size: {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"invalid size: {count}")
    if count != int(count):
        raise InvalidArgumentError(f"size must be integral: {count}")
    return int(count)


def fill_buffer(count, value: Union[Any, Callable[[int], Any]] = None,
                element_kind: Any = None) -> Optional[np.ndarray]:
    """
    Build a buffer of count elements from a constant or a per-index function.

    Args:
        count: Number of elements, must be >= 0
        value: Constant, or callable invoked as value(i); None means 0
        element_kind: Element kind of the new buffer, default when None

    Returns:
        The filled buffer, or None when count is 0
    """
    count = _check_count(count)
    if count == 0:
        return None

    if value is None:
        value = 0.0

    data = allocate(count, element_kind)
    if callable(value):
        for i in range(count):
            data[i] = value(i)
    else:
        data[:] = value
    return data


def random_buffer(count, deviation=1, mean=0, element_kind: Any = None,
                  rng: Union[None, int, np.random.Generator] = None) -> Optional[np.ndarray]:
    """Fill with deviation * uniform[0, 1) + mean per element."""
    if deviation is None:
        deviation = 1
    if mean is None:
        mean = 0

    generator = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    return fill_buffer(count, lambda _: deviation * generator.random() + mean, element_kind)


def _is_element_kind(arg) -> bool:
    if isinstance(arg, np.dtype):
        return True
    return isinstance(arg, type) and not issubclass(arg, bool) and issubclass(arg, (np.generic, float, int))


def parse_range_args(args: Tuple[Any, ...], element_kind: Any = None):
    """
    Resolve (start, end) or (start, step, end), optionally followed by an element kind.

    Returns:
        (start, step, end, element_kind)
    """
    args = list(args)
    if args and _is_element_kind(args[-1]):
        element_kind = args.pop()

    if len(args) == 2:
        start, end = args
        step = 1
    elif len(args) == 3:
        start, step, end = args
    else:
        raise InvalidArgumentError("invalid range")

    for arg in (start, step, end):
        if isinstance(arg, bool) or not isinstance(arg, numbers.Real) or not math.isfinite(arg):
            raise InvalidArgumentError(f"invalid range bound: {arg!r}")
    return start, step, end, element_kind


def range_buffer(*args, element_kind: Any = None) -> np.ndarray:
    """
    Ascending or descending arithmetic range over [start, end).

    A descending range swaps the bounds and stores end - i + start while i walks
    the ascending span, so range(2, .5, 0) gives [2, 1.5, 1, .5].
    """
    start, step, end, element_kind = parse_range_args(args, element_kind)

    backwards = False
    if end - start < 0:
        start, end = end, start
        backwards = True

    if step <= 0 or step > end - start:
        raise InvalidArgumentError("invalid range")

    data = allocate(math.ceil((end - start) / step), resolve_element_kind(element_kind))
    i, j = start, 0
    while i < end and j < data.shape[0]:
        data[j] = end - i + start if backwards else i
        i += step
        j += 1
    return data
