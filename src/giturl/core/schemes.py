"""Per-scheme parsing table.

Every supported address form is parsed by the same routine; the rows below
hold the only things that differ between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from giturl.core.models import DEFAULT_PORTS, Protocol

MISSING_PATH = "missing path to repo"
EXPECTED_COLON = "expected ':'"


@dataclass(frozen=True, slots=True)
class SchemeSpec:
    """How to take apart one address form."""

    protocol: Protocol
    prefix: Optional[str]  # None for the scp shorthand
    default_port: int
    has_user: bool  # split a leading ``user@``
    separator: str  # between host[:port] and the repo path
    has_port: bool  # ``host:port`` syntax recognised
    missing_separator: str  # error reason when ``separator`` is absent


def _url_scheme(protocol: Protocol, *, has_user: bool = False) -> SchemeSpec:
    return SchemeSpec(
        protocol=protocol,
        prefix=f"{protocol.value}://",
        default_port=DEFAULT_PORTS[protocol],
        has_user=has_user,
        separator="/",
        has_port=True,
        missing_separator=MISSING_PATH,
    )


SSH = _url_scheme(Protocol.SSH, has_user=True)
GIT = _url_scheme(Protocol.GIT)
HTTP = _url_scheme(Protocol.HTTP)
HTTPS = _url_scheme(Protocol.HTTPS)
FTP = _url_scheme(Protocol.FTP)
FTPS = _url_scheme(Protocol.FTPS)

SCP = SchemeSpec(
    protocol=Protocol.SCP,
    prefix=None,
    default_port=DEFAULT_PORTS[Protocol.SCP],
    has_user=True,
    separator=":",
    has_port=False,
    missing_separator=EXPECTED_COLON,
)

# Order matters: the scp shorthand accepts anything and must stay last.
PREFIXED_SCHEMES: Tuple[SchemeSpec, ...] = (SSH, GIT, HTTP, HTTPS, FTP, FTPS)
FALLBACK_SCHEME = SCP
