"""
Shared types for the vector package - element kinds, construction sources and
the matrix collaborator boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

import numpy as np

# The concrete numeric representation of a buffer's elements
ElementKind = np.dtype


class SourceKind(Enum):
    """Construction variant resolved once when a Vector is built."""

    EMPTY = "empty"
    VECTOR = "vector"
    MATRIX = "matrix"
    SEQUENCE = "sequence"
    BUFFER = "buffer"


@runtime_checkable
class MatrixLike(Protocol):
    """Matrix collaborator consumed by the Vector constructor.

    Vector only flattens these row-major; it never imports matrix algorithms.
    """

    element_kind: Any
    data: Any
    rows: int
    cols: int


@dataclass
class BackendInfo:
    """Result of the one-time acceleration backend probe."""

    name: str
    """Name of the provider serving the accelerated path"""

    available: bool
    """Whether an accelerated provider is in use"""

    reason: Optional[str] = None
    """Why the accelerated provider is unavailable, when it is"""
