"""Error taxonomy and diagnostic reporting.

Shape problems are never raised. The failing operation reports them through
logging and then falls back to a safe value (a null sentinel, ``0.0``,
``False``, or an untouched target).
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Kinds of recoverable failure reported by zetaml operations."""

    DIMENSION_MISMATCH = "DimensionMismatch"
    SHAPE_ERROR = "ShapeError"


def report_error(kind: ErrorKind, operation: str, message: str) -> None:
    """Log a diagnostic naming the failing operation.

    Args:
        kind: Category of the failure
        operation: Name of the operation that detected it
        message: Description of the mismatch
    """
    logger.warning(f"zetaml: {operation}(): {kind.value}: {message}")


def report_dimension_mismatch(operation: str, message: str) -> None:
    """Shorthand for reporting a ``DimensionMismatch``."""
    report_error(ErrorKind.DIMENSION_MISMATCH, operation, message)


def report_shape_error(operation: str, message: str) -> None:
    """Shorthand for reporting a ``ShapeError``."""
    report_error(ErrorKind.SHAPE_ERROR, operation, message)
