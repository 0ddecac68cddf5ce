"""Canonical form of a public interface dump."""

from __future__ import annotations

from apibump.config.constants import DEFAULT_COMMENT_MARKER

InterfaceSnapshot = tuple[str, ...]


def split_lines(text: str) -> InterfaceSnapshot:
    """Split text on ``\\n`` the way a shell command substitution captures it.

    Trailing newlines are dropped, every other line (blank ones included) is
    kept. A ``\\r`` stays part of its line, as it does for ``diff``.
    """
    text = text.rstrip("\n")
    if not text:
        return ()
    return tuple(text.split("\n"))


def normalize_interface(
    text: str, *, comment_marker: str = DEFAULT_COMMENT_MARKER
) -> InterfaceSnapshot:
    """Drop comment lines from an interface dump.

    A line is a comment when it starts with ``comment_marker`` at column 0.
    Indented comments are API text as far as the diff is concerned.
    """
    return tuple(line for line in split_lines(text) if not line.startswith(comment_marker))
