"""Terminal message helpers for the EXAMPORTAL CLI.

Small helpers for rendering user-visible notices with emoji to ASCII fallbacks.
Notices write to stderr so stdout stays free for data (e.g. ``--json`` output).
"""

from __future__ import annotations

from typing import NamedTuple

import click


class Glyph(NamedTuple):
    """A marker with an ASCII stand-in for terminals that cannot encode it."""

    emoji: str
    fallback: str


CAUTION = Glyph("⚠️", "[!]")  # pragma: no mutate
SUCCESS = Glyph("✅", "[OK]")  # pragma: no mutate
ERROR = Glyph("❌", "[X]")  # pragma: no mutate
REDIRECT = Glyph("➡️", "[->]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so tests (and redirected output)
    see the current encoding.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def render_glyph(glyph: Glyph) -> str:
    """Return the emoji when stderr can encode it, else the ASCII fallback."""
    return glyph.emoji if _supports_character(glyph.emoji) else glyph.fallback


def _emit(glyph: Glyph, msg: str, color: str) -> None:
    click.secho(f"{render_glyph(glyph)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will delete every stored record.``
    """
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Registered for Algebra I.``
    """
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Please login to access this page.``
    """
    _emit(ERROR, msg, "red")


def redirect(target: str, delay: float = 0.0) -> None:
    """Emit a cyan line announcing where the user is being sent.

    Example:
        ``➡️  Redirecting to login.html in 2s``
    """
    suffix = f" in {delay:g}s" if delay > 0 else ""
    _emit(REDIRECT, f"Redirecting to {target}{suffix}", "cyan")
