"""Aggregates package.

All aggregates are defined in this package. They are re-exported here to
provide a single, convenient import path.
"""

from .short_url import ShortUrl, Status

__all__ = ["ShortUrl", "Status"]
