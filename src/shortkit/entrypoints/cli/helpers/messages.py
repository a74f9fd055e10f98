"""Terminal message helpers for the SHORTKIT CLI.

Messages go to stderr so stdout stays machine-readable (generated codes,
resolved ids). Emojis fall back to ASCII markers on terminals that cannot
encode them.
"""

import click

# (emoji, ascii fallback, colour)
_STYLES = {
    "warn": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}


def _glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` if stderr can encode it, else `fallback`."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def _emit(kind: str, msg: str) -> None:
    emoji, fallback, colour = _STYLES[kind]
    click.secho(f"{_glyph(emoji, fallback)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    _emit("error", msg)
