"""SHORTKIT

The domain core of a URL-shortening service. It owns the rules that decide how
a short URL is created, edited, given a short code, and judged active, plus the
pluggable strategies that turn raw tag and domain references into entities.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
