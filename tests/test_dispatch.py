"""
Kernel dispatch - selection policy, clean fallback and the process-wide handle.
"""

from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from linvec import SizeMismatchError, Vector
from linvec.vector import (
    BackendInfo,
    FallbackKernels,
    KernelDispatcher,
    backend_info,
    get_dispatcher,
    set_dispatcher,
)


class FailingProvider(FallbackKernels):
    """Accelerated provider whose every call raises."""

    name = "failing"

    def scaled_add(self, dst, src, factor=1):
        raise RuntimeError("native call failed")

    def scale_in_place(self, buf, scalar):
        raise RuntimeError("native call failed")

    def dot(self, a, b):
        raise TypeError("wrong argument shape")

    def norm2(self, buf):
        raise ValueError("unsupported element kind")

    def argmax_abs(self, buf):
        raise RuntimeError("native call failed")


class PartialWriteProvider(FallbackKernels):
    """Accelerated provider that corrupts part of the buffer before failing."""

    name = "partial"

    def scaled_add(self, dst, src, factor=1):
        dst[0] = 999
        raise RuntimeError("failed halfway")

    def scale_in_place(self, buf, scalar):
        buf[:] = -1
        raise RuntimeError("failed halfway")


class TestSelectionPolicy:
    """Test accelerated-first selection with portable fallback."""

    def test_accelerated_path_used_when_it_succeeds(self):
        """Test the accelerated provider serves calls that succeed."""
        accelerated = MagicMock(wraps=FallbackKernels())
        fallback = MagicMock(wraps=FallbackKernels())
        set_dispatcher(KernelDispatcher(accelerated=accelerated, fallback=fallback))

        v = Vector([1, 2]).add(Vector([3, 4]))

        assert v.to_list() == [4, 6]
        accelerated.scaled_add.assert_called_once()
        fallback.scaled_add.assert_not_called()

    def test_failures_fall_back_silently(self):
        """Test a failing provider falls back to the portable kernels."""
        set_dispatcher(KernelDispatcher(accelerated=FailingProvider()))

        with patch("linvec.vector.dispatch.log_backend_fallback") as log_fallback:
            a = Vector([1, 2, 3])
            b = Vector([4, 5, 6])

            assert Vector(a).add(b).to_list() == [5, 7, 9]
            assert Vector(a).subtract(b).to_list() == [-3, -3, -3]
            assert Vector(a).scale(2).to_list() == [2, 4, 6]
            assert a.dot(b) == 32
            assert Vector([3, 4]).magnitude() == 5
            assert Vector([1, -4, 4]).argmax_abs() == 1

        assert log_fallback.call_count == 6

    def test_partial_write_is_undone_before_fallback(self):
        """Test a partial write by the failing provider is undone."""
        set_dispatcher(KernelDispatcher(accelerated=PartialWriteProvider()))

        assert Vector([1, 2, 3]).add(Vector([1, 1, 1])).to_list() == [2, 3, 4]
        assert Vector([1, 2, 3]).subtract(Vector([1, 1, 1])).to_list() == [0, 1, 2]
        assert Vector([1, 2, 3]).scale(3).to_list() == [3, 6, 9]

    def test_fallback_runs_once_on_original_inputs(self):
        """Test the fallback runs once on the original inputs."""
        fallback = MagicMock(wraps=FallbackKernels())
        set_dispatcher(KernelDispatcher(accelerated=PartialWriteProvider(), fallback=fallback))

        Vector([1.0, 2.0]).scale(2)

        fallback.scale_in_place.assert_called_once()

    def test_size_checked_before_any_backend_attempt(self):
        """Test size checks run before either path."""
        accelerated = MagicMock(wraps=FallbackKernels())
        set_dispatcher(KernelDispatcher(accelerated=accelerated))

        with pytest.raises(SizeMismatchError):
            Vector([1, 2]).add(Vector([1]))
        with pytest.raises(SizeMismatchError):
            Vector([1, 2]).dot(Vector([1]))

        accelerated.scaled_add.assert_not_called()
        accelerated.dot.assert_not_called()

    def test_empty_magnitude_skips_dispatch(self):
        """Test the magnitude of an empty vector never dispatches."""
        accelerated = MagicMock(wraps=FallbackKernels())
        fallback = MagicMock(wraps=FallbackKernels())
        set_dispatcher(KernelDispatcher(accelerated=accelerated, fallback=fallback))

        assert Vector().magnitude() == 0
        accelerated.norm2.assert_not_called()
        fallback.norm2.assert_not_called()

    def test_fallback_errors_propagate(self):
        """Test errors from the portable kernels propagate."""
        fallback = MagicMock()
        fallback.dot.side_effect = SizeMismatchError(1, 2)
        dispatcher = KernelDispatcher(accelerated=None, fallback=fallback)

        with pytest.raises(SizeMismatchError):
            dispatcher.dot(np.zeros(1), np.zeros(2))


class TestDispatcherInfo:
    """Test dispatcher reporting."""

    def test_info_without_accelerated(self):
        """Test the backend info when only the portable kernels exist."""
        dispatcher = KernelDispatcher()

        assert dispatcher.accelerated_available is False
        assert dispatcher.info.name == "portable"

    def test_info_with_accelerated(self):
        """Test the backend info names the accelerated provider."""
        dispatcher = KernelDispatcher(accelerated=FailingProvider())

        assert dispatcher.accelerated_available is True
        assert dispatcher.info == BackendInfo(name="failing", available=True)


class TestProcessWideHandle:
    """Test lazy, at-most-once probing."""

    def test_probes_once(self):
        """Test the process-wide dispatcher probes only once."""
        info = BackendInfo(name="portable", available=False, reason="test")

        with patch("linvec.vector.dispatch.probe_backend", return_value=(None, info)) as probe:
            first = get_dispatcher()
            second = get_dispatcher()
            Vector([1.0]).scale(2)

        assert first is second
        probe.assert_called_once()
        assert backend_info() is info

    def test_portable_mode_from_environment(self, monkeypatch):
        """Test portable mode from the environment disables acceleration."""
        monkeypatch.setenv("LINVEC_BACKEND", "portable")

        assert get_dispatcher().accelerated_available is False
        assert Vector([1, 2]).add(Vector([1, 1])).to_list() == [2, 3]

    def test_set_dispatcher_replaces_probe(self):
        """Test an installed dispatcher replaces the probed one."""
        dispatcher = KernelDispatcher()
        set_dispatcher(dispatcher)

        with patch("linvec.vector.dispatch.probe_backend") as probe:
            assert get_dispatcher() is dispatcher

        probe.assert_not_called()
