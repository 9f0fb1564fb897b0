"""
Vector value type - one-dimensional numeric container over an exclusively owned typed buffer.
Arithmetic primitives go through the process-wide kernel dispatcher.
"""

import array
import math
import numbers
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List

import numpy as np

from ..core.errors import EmptyReductionError, OutOfBoundsError, SizeMismatchError
from . import buffer
from . import kernels
from .dispatch import get_dispatcher
from .generators import fill_buffer, random_buffer, range_buffer
from .kernels import MISSING, as_number
from .types import MatrixLike, SourceKind


def classify_source(source: Any) -> SourceKind:
    """Resolve the construction variant for a Vector source."""
    if source is None:
        return SourceKind.EMPTY
    if isinstance(source, Vector):
        return SourceKind.VECTOR
    if isinstance(source, (np.ndarray, array.array, memoryview)):
        return SourceKind.BUFFER
    if isinstance(source, MatrixLike):
        return SourceKind.MATRIX
    if isinstance(source, Sequence) and not isinstance(source, (str, bytes, bytearray)):
        return SourceKind.SEQUENCE
    return SourceKind.EMPTY


class Vector:
    """One-dimensional numeric vector.

    Construction from another Vector copies its values, from a matrix-like object
    flattens it row-major, from a plain sequence copies it into the default
    element kind, and from an ndarray or buffer-protocol store adopts it by
    reference. Anything else yields an empty vector.

    Mutating operations work in place and return the vector, so calls chain:
    ``Vector([1, 2]).add(Vector([3, 4])).scale(2)``.
    """

    __hash__ = None

    def __init__(self, source: Any = None):
        self.data = buffer.allocate(0)

        kind = classify_source(source)
        if kind is SourceKind.VECTOR:
            self.combine(source)
        elif kind is SourceKind.MATRIX:
            self.data = buffer.flatten(source.data, source.rows, source.cols, source.element_kind)
        elif kind is SourceKind.SEQUENCE:
            self.data = buffer.from_sequence(source)
        elif kind is SourceKind.BUFFER:
            self.data = buffer.adopt(source)

    @property
    def length(self) -> int:
        return self.data.shape[0]

    @property
    def element_kind(self) -> np.dtype:
        return self.data.dtype

    def _require_same_length(self, other: "Vector") -> None:
        if self.length != other.length:
            raise SizeMismatchError(self.length, other.length)

    # Element-wise arithmetic

    def bin_op(self, other: "Vector", op: Callable[[Any, Any, int], Any]) -> "Vector":
        """
        Combine other into this vector element-wise, in place.

        Args:
            other: Vector of the same length
            op: Called as op(a, b, index) for each index, low to high

        Returns:
            self
        """
        self._require_same_length(other)
        if not self.length:
            return self

        kernels.bin_op(self.data, other.data, op)
        return self

    def add(self, other: "Vector") -> "Vector":
        """Add other to this vector in place."""
        self._require_same_length(other)
        if self.length:
            get_dispatcher().scaled_add(self.data, other.data, 1)
        return self

    def subtract(self, other: "Vector") -> "Vector":
        """Subtract other from this vector in place."""
        self._require_same_length(other)
        if self.length:
            get_dispatcher().scaled_add(self.data, other.data, -1)
        return self

    def scale(self, scalar) -> "Vector":
        """Multiply every element by scalar in place."""
        if self.length:
            get_dispatcher().scale_in_place(self.data, scalar)
        return self

    def normalize(self) -> "Vector":
        """Scale by the reciprocal of the magnitude; a zero vector becomes non-finite."""
        with np.errstate(divide="ignore"):
            factor = np.divide(1.0, self.magnitude())
        return self.scale(float(factor))

    def project(self, other: "Vector") -> "Vector":
        """
        Project this vector onto other.

        Note that other is scaled in place and returned; this vector is untouched.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            factor = np.divide(self.dot(other), other.dot(other))
        return other.scale(float(factor))

    # Reductions

    def dot(self, other: "Vector"):
        self._require_same_length(other)
        if not self.length:
            return 0
        return as_number(get_dispatcher().dot(self.data, other.data))

    def magnitude(self) -> float:
        """Euclidean length (L2 norm); 0 for an empty vector."""
        if not self.length:
            return 0
        return float(get_dispatcher().norm2(self.data))

    def angle(self, other: "Vector") -> float:
        """Angle to other in radians; nan when either magnitude is 0."""
        with np.errstate(divide="ignore", invalid="ignore"):
            cosine = np.float64(self.dot(other)) / self.magnitude() / other.magnitude()
            return float(np.arccos(cosine))

    def equals(self, other: "Vector") -> bool:
        if self.length != other.length:
            return False

        i = 0
        while i < self.length and self.data[i] == other.data[i]:
            i += 1
        return i == self.length

    def min(self):
        return as_number(self.reduce(lambda acc, item, *_: acc if acc < item else item, math.inf))

    def max(self):
        """True maximum element; -inf for an empty vector."""
        return as_number(self.reduce(lambda acc, item, *_: item if acc < item else acc, -math.inf))

    def argmax_abs(self) -> int:
        """Index of the first element with the largest magnitude; -1 when empty."""
        if not self.length:
            return -1
        return int(get_dispatcher().argmax_abs(self.data))

    def max_abs(self):
        """Element with the largest magnitude, keeping its sign."""
        if not self.length:
            raise EmptyReductionError()
        return as_number(self.data[self.argmax_abs()])

    # Indexing

    def check(self, index) -> int:
        """Validate index against the current length and return it as an int."""
        if (isinstance(index, bool) or not isinstance(index, numbers.Real)
                or not math.isfinite(index) or index < 0 or index > self.length - 1
                or index != int(index)):
            raise OutOfBoundsError(index, self.length)
        return int(index)

    def get(self, index):
        return self.data[self.check(index)]

    def set(self, index, value) -> "Vector":
        self.data[self.check(index)] = value
        return self

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.set(index, value)

    @property
    def x(self):
        return self.get(0)

    @x.setter
    def x(self, value):
        self.set(0, value)

    @property
    def y(self):
        return self.get(1)

    @y.setter
    def y(self, value):
        self.set(1, value)

    @property
    def z(self):
        return self.get(2)

    @z.setter
    def z(self, value):
        self.set(2, value)

    @property
    def w(self):
        return self.get(3)

    @w.setter
    def w(self, value):
        self.set(3, value)

    # Composition

    def combine(self, other: "Vector") -> "Vector":
        """
        Append other's elements to this vector.

        A new buffer is allocated in this vector's element kind; an empty vector
        adopts a copy of other's buffer and element kind instead.
        """
        if not other.length:
            return self
        if not self.length:
            self.data = buffer.copy(other.data)
            return self

        self.data = buffer.concat(self.data, other.data)
        return self

    def push(self, value) -> "Vector":
        return self.combine(Vector([value]))

    def copy(self) -> "Vector":
        return Vector(self)

    # Functional traversal

    def map(self, fn: Callable[[Any, int, np.ndarray], Any]) -> "Vector":
        """New vector of fn(value, index, buffer) per element; buffer is the new vector's."""
        mapped = Vector(self)
        data = mapped.data
        for i in range(self.length):
            data[i] = fn(data[i], i, data)
        return mapped

    def each(self, fn: Callable[[Any, int, np.ndarray], Any]) -> "Vector":
        kernels.each(self.data, fn)
        return self

    def reduce(self, fn: Callable[[Any, Any, int, np.ndarray], Any], initial: Any = MISSING):
        """
        Left fold over the elements.

        Args:
            fn: Called as fn(acc, value, index, buffer)
            initial: Starting accumulator; the first element when omitted

        Raises:
            EmptyReductionError: vector is empty and no initial value was given
        """
        return kernels.reduce(self.data, fn, initial)

    # Generators

    @classmethod
    def fill(cls, count, value=0, element_kind=None) -> "Vector":
        """
        Vector of count elements holding value, or value(i) when callable.

        Raises:
            InvalidArgumentError: count is negative or not integral
        """
        data = fill_buffer(count, value, element_kind)
        return cls() if data is None else cls(data)

    @classmethod
    def zeros(cls, count, element_kind=None) -> "Vector":
        return cls.fill(count, 0, element_kind)

    @classmethod
    def ones(cls, count, element_kind=None) -> "Vector":
        return cls.fill(count, 1, element_kind)

    @classmethod
    def random(cls, count, deviation=1, mean=0, element_kind=None, rng=None) -> "Vector":
        """Vector of deviation * uniform[0, 1) + mean samples."""
        data = random_buffer(count, deviation, mean, element_kind, rng)
        return cls() if data is None else cls(data)

    @classmethod
    def range(cls, *args, element_kind=None) -> "Vector":
        """
        Range over [start, end) given as (start, end) or (start, step, end).

        A trailing numpy type selects the element kind. Descending ranges are
        detected from the bounds.

        Raises:
            InvalidArgumentError: wrong arity, non-positive step, or step larger than the span
        """
        return cls(range_buffer(*args, element_kind=element_kind))

    # Conversion

    def to_list(self) -> List[Any]:
        return self.data.tolist()

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self.equals(other)
        return NotImplemented

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r}, element_kind={self.element_kind})"
