#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.
"""

from typing import Any, Optional


class ServiceException(Exception):
    """Base exception for matching service errors."""
    pass


class InvalidMatchInputError(ServiceException):
    """Raised when a candidate, criteria or argument breaks the input contract."""

    def __init__(self, message: str, item: Optional[Any] = None):
        super().__init__(message)
        self.item = item
