"""
Shared fixtures - explicit dispatchers for forcing the portable or BLAS path.
"""

import pytest

from linvec.vector import FallbackKernels, KernelDispatcher, reset_dispatcher, set_dispatcher


@pytest.fixture(autouse=True)
def reset_backend():
    """Reset the process-wide dispatcher between tests."""
    reset_dispatcher()
    yield
    reset_dispatcher()


@pytest.fixture
def portable():
    """Install a dispatcher with no accelerated provider."""
    dispatcher = KernelDispatcher(accelerated=None, fallback=FallbackKernels())
    set_dispatcher(dispatcher)
    return dispatcher


@pytest.fixture
def blas():
    """Install a dispatcher that goes through scipy BLAS first."""
    pytest.importorskip("scipy.linalg")
    from linvec.vector import BlasBackend

    dispatcher = KernelDispatcher(accelerated=BlasBackend())
    set_dispatcher(dispatcher)
    return dispatcher


@pytest.fixture(params=["portable", "blas"])
def either_path(request):
    """Run a test once per execution path."""
    return request.getfixturevalue(request.param)
