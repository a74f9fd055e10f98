"""CLI helpers for SHORTKIT.

Message emitters that write to stderr with emoji→ASCII fallbacks, the parser
for ``-L NAME=LEVEL`` logger overrides, and database URL display.
"""

from .db_url import display_url
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["display_url", "error", "parse_log_level", "success", "warn"]
