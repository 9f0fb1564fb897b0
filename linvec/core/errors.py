"""
Error kinds raised by vector operations.
Public errors also subclass the matching builtin so callers can catch either.
"""


class VectorError(Exception):
    """Base class for all linvec errors."""


class SizeMismatchError(VectorError, ValueError):
    """Binary operation on vectors of unequal length."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"sizes do not match: {left} != {right}")


class OutOfBoundsError(VectorError, IndexError):
    """Index is not finite, negative, or past the end of the vector."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index out of bounds: {index!r} (length {length})")


class InvalidArgumentError(VectorError, ValueError):
    """Invalid generator count, range arguments or element kind."""


class EmptyReductionError(VectorError, ValueError):
    """Reduction of an empty vector with no initial value."""

    def __init__(self):
        super().__init__("reduce of empty vector with no initial value")


class BackendUnavailableError(VectorError, ImportError):
    """Accelerated backend could not be loaded."""


class UnsupportedOperationError(VectorError):
    """Accelerated backend refuses the given buffers; the portable kernel runs instead."""
