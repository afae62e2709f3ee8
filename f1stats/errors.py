"""Exceptions raised by the f1stats services"""

from typing import Optional


class F1StatsError(Exception):
    """Base class for f1stats errors"""


class F1ApiError(F1StatsError):
    """The F1 REST API failed or returned an unusable response"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ImageLookupError(F1StatsError):
    """Network, timeout or parse failure while looking up a driver image"""
