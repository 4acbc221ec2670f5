"""API modules for the Paradex auth client."""

from .base import BaseAPIClient

__all__ = ["BaseAPIClient"]
