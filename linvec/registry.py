"""
Optional global registration - publishes the Vector type into a host namespace.
Explicitly invoked; importing linvec never touches any namespace.
"""

import sys
from collections.abc import MutableMapping
from typing import Any, Union

from .vector import Vector
from util.logging import log_registration


def register_global(namespace: Union[None, MutableMapping[str, Any], Any] = None, name: str = "Vector") -> bool:
    """
    Publish Vector into a namespace on a best-effort basis.

    Args:
        namespace: Module, object or dict to publish into; defaults to __main__
        name: Attribute name to publish under

    Returns:
        True if published, False when no namespace exists or it refuses the name
    """
    if namespace is None:
        namespace = sys.modules.get("__main__")
    if namespace is None:
        log_registration(name, "__main__", status="skipped")
        return False

    label = getattr(namespace, "__name__", type(namespace).__name__)
    try:
        if isinstance(namespace, MutableMapping):
            namespace[name] = Vector
        else:
            setattr(namespace, name, Vector)
    except (AttributeError, TypeError) as e:
        log_registration(name, label, status=f"skipped: {type(e).__name__}")
        return False

    log_registration(name, label)
    return True
