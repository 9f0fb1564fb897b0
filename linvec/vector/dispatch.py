"""
Kernel dispatch - try the accelerated provider, re-run on the portable kernel on failure.
The process-wide dispatcher is probed at most once and is read-only afterwards.
"""

import threading
from typing import Optional

import numpy as np

from .backend import IKernelProvider, probe_backend
from .kernels import FallbackKernels
from .types import BackendInfo
from util.logging import log_backend_fallback


class KernelDispatcher:
    """Selects between an accelerated provider and the portable kernels per call.

    Mutating primitives snapshot the destination before the accelerated attempt
    and restore it before the portable kernel runs, so a provider that writes
    part of the buffer and then raises leaves no trace. The two paths never
    interleave on a single call.
    """

    def __init__(self, accelerated: Optional[IKernelProvider] = None,
                 fallback: Optional[IKernelProvider] = None,
                 info: Optional[BackendInfo] = None):
        self.accelerated = accelerated
        self.fallback = fallback if fallback is not None else FallbackKernels()
        if info is None:
            info = BackendInfo(
                name=accelerated.name if accelerated is not None else self.fallback.name,
                available=accelerated is not None
            )
        self.info = info

    @property
    def accelerated_available(self) -> bool:
        return self.accelerated is not None

    def _mutate(self, primitive: str, buf: np.ndarray, *args) -> None:
        if self.accelerated is not None:
            snapshot = buf.copy()
            try:
                getattr(self.accelerated, primitive)(buf, *args)
                return
            except Exception as e:
                if buf.flags.writeable:
                    np.copyto(buf, snapshot)
                log_backend_fallback(primitive, self.accelerated.name, e)

        getattr(self.fallback, primitive)(buf, *args)

    def _compute(self, primitive: str, *args):
        if self.accelerated is not None:
            try:
                return getattr(self.accelerated, primitive)(*args)
            except Exception as e:
                log_backend_fallback(primitive, self.accelerated.name, e)

        return getattr(self.fallback, primitive)(*args)

    def scaled_add(self, dst: np.ndarray, src: np.ndarray, factor=1) -> None:
        self._mutate("scaled_add", dst, src, factor)

    def scale_in_place(self, buf: np.ndarray, scalar) -> None:
        self._mutate("scale_in_place", buf, scalar)

    def dot(self, a: np.ndarray, b: np.ndarray):
        return self._compute("dot", a, b)

    def norm2(self, buf: np.ndarray) -> float:
        return self._compute("norm2", buf)

    def argmax_abs(self, buf: np.ndarray) -> int:
        return self._compute("argmax_abs", buf)


_dispatcher: Optional[KernelDispatcher] = None
_lock = threading.Lock()


def get_dispatcher() -> KernelDispatcher:
    """Get the process-wide dispatcher, probing the backend on first use."""
    global _dispatcher

    if _dispatcher is None:
        with _lock:
            if _dispatcher is None:
                accelerated, info = probe_backend()
                _dispatcher = KernelDispatcher(accelerated, info=info)
    return _dispatcher


def set_dispatcher(dispatcher: KernelDispatcher) -> None:
    """Install a dispatcher explicitly, replacing any probed one."""
    global _dispatcher

    with _lock:
        _dispatcher = dispatcher


def reset_dispatcher() -> None:
    """Forget the probed dispatcher so the next call probes again."""
    set_dispatcher(None)


def backend_info() -> BackendInfo:
    """Report which provider serves the accelerated path."""
    return get_dispatcher().info
