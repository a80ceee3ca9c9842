"""Case-insensitive prefix/suffix stripping and first/last substring splits."""

from __future__ import annotations

from typing import Tuple


def has_prefix(s: str, prefix: str) -> bool:
    """Return True if *s* starts with *prefix*, ignoring case."""
    if len(s) < len(prefix):
        return False
    return s[: len(prefix)].lower() == prefix.lower()


def remove_prefix(s: str, prefix: str) -> str:
    """Strip *prefix* (case-insensitive) from *s*; no-op when absent."""
    if has_prefix(s, prefix):
        return s[len(prefix):]
    return s


def remove_suffix(s: str, suffix: str) -> str:
    """Strip one trailing ``/`` and then *suffix* (case-insensitive).

    ``"repo.git/"`` and ``"repo.GIT"`` both become ``"repo"``.
    """
    if s.endswith("/"):
        s = s[:-1]
    if not suffix or len(s) < len(suffix):
        return s
    if s[-len(suffix):].lower() == suffix.lower():
        return s[: -len(suffix)]
    return s


def cut(s: str, sep: str) -> Tuple[str, str, bool]:
    """Split at the first *sep*. Not found → ``(s, "", False)``."""
    before, found, after = s.partition(sep)
    return before, after, bool(found)


def last_cut(s: str, sep: str) -> Tuple[str, str, bool]:
    """Split at the last *sep*. Not found → ``("", s, False)``.

    The whole string lands in *after* so an un-slashed remainder reads as
    a bare repo name with no parent path.
    """
    before, found, after = s.rpartition(sep)
    return before, after, bool(found)
