"""HTTP-facing helpers (ASGI middleware)."""

from .path_version import DEFAULT_API_VERSION, PathVersionMiddleware, versioned_path

__all__ = ["DEFAULT_API_VERSION", "PathVersionMiddleware", "versioned_path"]
