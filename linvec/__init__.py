"""
linvec - one-dimensional numeric vectors with an optional BLAS-accelerated path
and portable fallback kernels.
"""

from .core.config import VERSION as __version__
from .core.errors import (
    VectorError,
    SizeMismatchError,
    OutOfBoundsError,
    InvalidArgumentError,
    EmptyReductionError,
)
from .vector import Vector, backend_info
from .registry import register_global

__all__ = [
    'Vector',
    'backend_info',
    'register_global',
    'VectorError',
    'SizeMismatchError',
    'OutOfBoundsError',
    'InvalidArgumentError',
    'EmptyReductionError',
]
