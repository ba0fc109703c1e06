"""Notices for the person at the terminal.

Notices go to stderr; stdout carries only the test report. Glyphs degrade to
ASCII when stderr cannot encode the emoji.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """``⚠️`` if stderr can show it, else ``[!]``."""
    return "⚠️" if _supports_character("⚠️") else "[!]"  # pragma: no mutate


def warn(msg: str) -> None:
    """Print `msg` to stderr in bold yellow, behind the caution glyph.

    Example:
        ``⚠️  No test cases were registered by the given targets.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)
