"""
Vector package - typed buffer, acceleration backend, portable kernels and the Vector type.
"""

# Package initialization for vector module
from .types import BackendInfo, MatrixLike, SourceKind
from .backend import IKernelProvider, BlasBackend, load_accelerated, probe_backend
from .kernels import FallbackKernels
from .dispatch import KernelDispatcher, get_dispatcher, set_dispatcher, reset_dispatcher, backend_info
from .vector import Vector, classify_source

__all__ = [
    'BackendInfo',
    'MatrixLike',
    'SourceKind',
    'IKernelProvider',
    'BlasBackend',
    'load_accelerated',
    'probe_backend',
    'FallbackKernels',
    'KernelDispatcher',
    'get_dispatcher',
    'set_dispatcher',
    'reset_dispatcher',
    'backend_info',
    'Vector',
    'classify_source',
]
