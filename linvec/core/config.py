"""
Runtime configuration - environment driven, read once per process at module level.
Getter functions re-read the environment so tests can override values dynamically.
"""

import os

# Backend selection: auto probes BLAS, blas requires it, portable disables acceleration
BACKEND_MODE = os.getenv("LINVEC_BACKEND", "auto").lower()  # auto|blas|portable
BACKEND_MODES = ("auto", "blas", "portable")

# Element kind used when a vector is built from a plain sequence or a generator
DEFAULT_ELEMENT_KIND = os.getenv("LINVEC_DEFAULT_ELEMENT_KIND", "float64")

# One-shot diagnostic notice when the accelerated path is unavailable
BACKEND_NOTICE = os.getenv("LINVEC_BACKEND_NOTICE", "true").lower() == "true"

DEBUG = os.getenv("LINVEC_DEBUG", "false").lower() == "true"

# Version string
VERSION = "1.0.0"


def get_backend_mode():
    """Get backend mode (auto|blas|portable)."""
    return os.getenv("LINVEC_BACKEND", "auto").lower()


def get_default_element_kind():
    """Get the default element kind name."""
    return os.getenv("LINVEC_DEFAULT_ELEMENT_KIND", "float64")


def backend_notice_enabled():
    """Check if the backend-unavailable notice should be emitted."""
    return os.getenv("LINVEC_BACKEND_NOTICE", "true").lower() == "true"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("LINVEC_DEBUG", "false").lower() == "true"


def validate_backend_config():
    """Validate backend configuration and return any issues."""
    issues = []

    mode = get_backend_mode()
    if mode not in BACKEND_MODES:
        issues.append(f"Invalid LINVEC_BACKEND: {mode}")

    kind = get_default_element_kind()
    try:
        import numpy as np
        dtype = np.dtype(kind)
        if dtype.kind not in "iuf":
            issues.append(f"LINVEC_DEFAULT_ELEMENT_KIND must be a real numeric type: {kind}")
    except TypeError:
        issues.append(f"Invalid LINVEC_DEFAULT_ELEMENT_KIND: {kind}")

    return issues
