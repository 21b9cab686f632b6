"""Custom exceptions for polyinterp."""
import logging

logger = logging.getLogger(__name__)


class InterpolationError(Exception):
    """Base exception for all interpolation-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InterpolationError raised: %s", message)


class InvalidInputError(InterpolationError, ValueError):
    """Exception raised when a node set violates the input contract of a formula."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InvalidInputError raised: %s", message)


class UnknownMethodError(InterpolationError, ValueError):
    """Exception raised for an interpolation method tag outside the supported set."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("UnknownMethodError raised: %s", message)
