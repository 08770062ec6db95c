"""Logging infrastructure shared by the SDK and its tests.

This package is framework-agnostic. It must NEVER import from ``telegram_sdk/``.
"""

from core.logger import SDKLogger

__all__ = [
    "SDKLogger",
]
