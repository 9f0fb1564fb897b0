"""
Structured logging for backend probing, fallback and registration events.
Diagnostic only - nothing here changes the result of a vector operation.
"""

import logging
from typing import Any, Dict


class StructuredLogger:
    """Structured logger for backend probe, fallback and registration operations."""

    def __init__(self, name: str = "linvec"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def set_debug(self, enabled: bool) -> None:
        """Switch between INFO and DEBUG levels."""
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_backend_probe(self, backend: str, available: bool, reason: str = None):
        """Log the result of the one-time backend probe."""
        details = {"backend": backend}
        if reason:
            details["reason"] = reason[:100] + "..." if len(reason) > 100 else reason

        status = "available" if available else "unavailable"
        self.log_operation("backend.probe", status, details, level=logging.DEBUG)

    def log_backend_notice(self, reason: str):
        """Log the once-per-process notice that the accelerated path is off."""
        self.log_operation("backend.notice", "portable", {
            "message": "accelerated backend unavailable, using portable kernels",
            "reason": reason,
        })

    def log_backend_fallback(self, primitive: str, backend: str, error: BaseException):
        """Log an accelerated call that failed and was re-run on the portable kernel."""
        details = {
            "primitive": primitive,
            "backend": backend,
            "error": f"{type(error).__name__}: {str(error)[:100]}"
        }
        self.log_operation(f"kernel.{primitive}", "fallback", details, level=logging.DEBUG)

    def log_registration(self, name: str, namespace: str, status: str = "success"):
        """Log a global namespace registration attempt."""
        self.log_operation("registry.publish", status, {"name": name, "namespace": namespace},
                           level=logging.DEBUG)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

# Global logger instance
logger = StructuredLogger()


def log_backend_probe(backend: str, available: bool, reason: str = None):
    """Log the result of the one-time backend probe."""
    logger.log_backend_probe(backend, available, reason)

def log_backend_notice(reason: str):
    """Log the once-per-process notice that the accelerated path is off."""
    logger.log_backend_notice(reason)

def log_backend_fallback(primitive: str, backend: str, error: BaseException):
    """Log an accelerated call that failed and was re-run on the portable kernel."""
    logger.log_backend_fallback(primitive, backend, error)

def log_registration(name: str, namespace: str, status: str = "success"):
    """Log a global namespace registration attempt."""
    logger.log_registration(name, namespace, status)
