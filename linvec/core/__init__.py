"""
Core configuration and error kinds shared by the vector package.
"""

from .errors import (
    VectorError,
    SizeMismatchError,
    OutOfBoundsError,
    InvalidArgumentError,
    EmptyReductionError,
    BackendUnavailableError,
    UnsupportedOperationError,
)

__all__ = [
    'VectorError',
    'SizeMismatchError',
    'OutOfBoundsError',
    'InvalidArgumentError',
    'EmptyReductionError',
    'BackendUnavailableError',
    'UnsupportedOperationError',
]
