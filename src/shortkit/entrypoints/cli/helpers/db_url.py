"""Display helpers for database URLs."""

from sqlalchemy.engine import make_url


def display_url(url: str) -> str:
    """Render `url` for humans, with any password masked as ``***``."""
    return make_url(url).render_as_string(hide_password=True)
