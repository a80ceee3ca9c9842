"""Git URL parser — classifies the address form and takes it apart.

Supported forms (see ``git help clone``, section GIT URLS)::

    ssh://[user@]host.xz[:port]/path/to/repo.git
    git://host.xz[:port]/path/to/repo.git
    http[s]://host.xz[:port]/path/to/repo.git
    ftp[s]://host.xz[:port]/path/to/repo.git
    [user@]host.xz:path/to/repo.git

A trailing ``/`` and a ``.git`` suffix are dropped before splitting, so
``repo``, ``repo.git`` and ``repo.git/`` all yield the same components.
"""

from __future__ import annotations

import re

from giturl.core.lexer import cut, has_prefix, last_cut, remove_prefix, remove_suffix
from giturl.core.models import GIT_SUFFIX, MAX_PORT, GitURL
from giturl.core.schemes import (
    FALLBACK_SCHEME,
    MISSING_PATH,
    PREFIXED_SCHEMES,
    SchemeSpec,
)

_PORT_RE = re.compile(r"[0-9]+")


class InvalidURLError(Exception):
    """Raised when a string cannot be parsed as a git URL."""

    def __init__(self, reason: str, raw: str = "") -> None:
        super().__init__(f"invalid url, {reason}")
        self.reason = reason
        self.raw = raw


def classify(raw: str) -> SchemeSpec:
    """Pick the scheme whose prefix *raw* starts with; scp shorthand otherwise."""
    for scheme in PREFIXED_SCHEMES:
        if has_prefix(raw, scheme.prefix):
            return scheme
    return FALLBACK_SCHEME


def parse_port(text: str, raw: str = "") -> int:
    """Parse a decimal port that fits in 16 bits."""
    if not _PORT_RE.fullmatch(text):
        raise InvalidURLError(f"illegal port '{text}'", raw)
    port = int(text)
    if port > MAX_PORT:
        raise InvalidURLError(f"illegal port '{text}'", raw)
    return port


def parse_with(raw: str, scheme: SchemeSpec) -> GitURL:
    """Parse *raw* using the rules of *scheme*."""
    rest = remove_suffix(raw, GIT_SUFFIX)
    if scheme.prefix is not None:
        rest = remove_prefix(rest, scheme.prefix)

    user = ""
    if scheme.has_user:
        head, tail, found = cut(rest, "@")
        if found:
            user, rest = head, tail

    before, rest, found = cut(rest, scheme.separator)
    if not found:
        raise InvalidURLError(scheme.missing_separator, raw)

    port = scheme.default_port
    host = before
    if scheme.has_port:
        host, port_text, found = cut(before, ":")
        if found:
            port = parse_port(port_text, raw)

    path, repo, _ = last_cut(rest, "/")
    if not repo:
        raise InvalidURLError(MISSING_PATH, raw)

    return GitURL(
        protocol=scheme.protocol,
        port=port,
        user=user,
        host=host,
        path=path,
        repo=repo,
        raw=raw,
    )


def parse(raw: str) -> GitURL:
    """Parse *raw* into a :class:`GitURL`. Raises :class:`InvalidURLError`."""
    return parse_with(raw, classify(raw))
