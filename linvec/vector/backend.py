"""
Acceleration backend - optional BLAS provider for the five vector primitives.
Probed once per process; absence is recorded, never raised.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..core.config import BACKEND_MODES, backend_notice_enabled, debug_enabled, get_backend_mode
from ..core.errors import BackendUnavailableError, SizeMismatchError, UnsupportedOperationError
from .types import BackendInfo
from util.logging import logger, log_backend_notice, log_backend_probe

# Routine prefix per supported element kind
_BLAS_PREFIX = {np.dtype(np.float32): "s", np.dtype(np.float64): "d"}


class IKernelProvider(ABC):
    """Abstract interface for providers of the vector primitives."""

    name = "abstract"

    @abstractmethod
    def scaled_add(self, dst: np.ndarray, src: np.ndarray, factor=1) -> None:
        """dst[i] += factor * src[i] for all i."""
        pass

    @abstractmethod
    def scale_in_place(self, buf: np.ndarray, scalar) -> None:
        """buf[i] *= scalar for all i."""
        pass

    @abstractmethod
    def dot(self, a: np.ndarray, b: np.ndarray):
        """Sum of a[i] * b[i]."""
        pass

    @abstractmethod
    def norm2(self, buf: np.ndarray) -> float:
        """Euclidean norm, 0 for an empty buffer."""
        pass

    @abstractmethod
    def argmax_abs(self, buf: np.ndarray) -> int:
        """Index of the first element with the largest magnitude."""
        pass


class BlasBackend(IKernelProvider):
    """BLAS level-1 provider backed by scipy.linalg.blas."""

    name = "blas"

    def __init__(self):
        """
        Load the BLAS bindings.

        Raises:
            BackendUnavailableError: scipy is not installed or exposes no BLAS
        """
        try:
            from scipy.linalg import blas
            self.blas = blas
        except ImportError as e:
            raise BackendUnavailableError(f"scipy.linalg.blas not available: {e}") from e

    def _routine(self, template: str, *buffers: np.ndarray):
        """Pick the s/d variant of a routine, refusing anything BLAS can't do in place."""
        kinds = {buf.dtype for buf in buffers}
        if len(kinds) != 1:
            raise UnsupportedOperationError(f"mixed element kinds: {sorted(str(k) for k in kinds)}")

        kind = kinds.pop()
        if kind not in _BLAS_PREFIX:
            raise UnsupportedOperationError(f"unsupported element kind: {kind}")

        for buf in buffers:
            if buf.ndim != 1 or not buf.flags.c_contiguous or not buf.flags.writeable:
                raise UnsupportedOperationError("buffer must be 1-D, contiguous and writeable")

        return getattr(self.blas, template.format(p=_BLAS_PREFIX[kind]))

    def scaled_add(self, dst: np.ndarray, src: np.ndarray, factor=1) -> None:
        if dst.shape[0] != src.shape[0]:
            raise SizeMismatchError(dst.shape[0], src.shape[0])
        axpy = self._routine("{p}axpy", src, dst)

        result = axpy(src, dst, a=factor)
        if result is not dst:
            np.copyto(dst, result)

    def scale_in_place(self, buf: np.ndarray, scalar) -> None:
        scal = self._routine("{p}scal", buf)

        result = scal(scalar, buf)
        if result is not buf:
            np.copyto(buf, result)

    def dot(self, a: np.ndarray, b: np.ndarray):
        if a.shape[0] != b.shape[0]:
            raise SizeMismatchError(a.shape[0], b.shape[0])
        return float(self._routine("{p}dot", a, b)(a, b))

    def norm2(self, buf: np.ndarray) -> float:
        if buf.shape[0] == 0:
            return 0.0
        return float(self._routine("{p}nrm2", buf)(buf))

    def argmax_abs(self, buf: np.ndarray) -> int:
        index = int(self._routine("i{p}amax", buf)(buf))
        if not 0 <= index < buf.shape[0]:
            raise UnsupportedOperationError(f"iamax returned index {index} for length {buf.shape[0]}")
        return index


def load_accelerated(mode: str) -> Tuple[Optional[IKernelProvider], BackendInfo]:
    """
    Probe for an accelerated provider according to the backend mode.

    Args:
        mode: auto|blas|portable

    Returns:
        (provider or None, probe info). Never raises for a missing backend.
    """
    if mode not in BACKEND_MODES:
        logger.warning(f"Invalid LINVEC_BACKEND: {mode}, using auto")
        mode = "auto"

    if mode == "portable":
        return None, BackendInfo(name="portable", available=False, reason="disabled by LINVEC_BACKEND=portable")

    try:
        provider = BlasBackend()
    except BackendUnavailableError as e:
        if mode == "blas":
            logger.warning(f"LINVEC_BACKEND=blas but BLAS is unavailable: {e}")
        return None, BackendInfo(name="portable", available=False, reason=str(e))

    return provider, BackendInfo(name=provider.name, available=True)


def probe_backend(mode: str = None) -> Tuple[Optional[IKernelProvider], BackendInfo]:
    """Run the backend probe and emit the one-time diagnostics."""
    logger.set_debug(debug_enabled())
    provider, info = load_accelerated(mode or get_backend_mode())

    log_backend_probe("blas", info.available, info.reason)
    if not info.available and backend_notice_enabled():
        log_backend_notice(info.reason)

    return provider, info
