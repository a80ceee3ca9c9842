"""Data models for parsed git URLs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Protocol(str, Enum):
    SSH = "ssh"
    GIT = "git"
    HTTP = "http"
    HTTPS = "https"
    FTP = "ftp"
    FTPS = "ftps"
    SCP = "scp"


IMPLICIT_USER = ""
DEFAULT_USER = "git"

IMPLICIT_PORT = 0
MAX_PORT = 65535

DEFAULT_SSH_PORT = 22
DEFAULT_GIT_PORT = 9418
DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443
DEFAULT_FTP_PORT = 21
DEFAULT_FTPS_PORT = 990

GIT_SUFFIX = ".git"

DEFAULT_PORTS: dict[Protocol, int] = {
    Protocol.SSH: DEFAULT_SSH_PORT,
    Protocol.GIT: DEFAULT_GIT_PORT,
    Protocol.HTTP: DEFAULT_HTTP_PORT,
    Protocol.HTTPS: DEFAULT_HTTPS_PORT,
    Protocol.FTP: DEFAULT_FTP_PORT,
    Protocol.FTPS: DEFAULT_FTPS_PORT,
    Protocol.SCP: DEFAULT_SSH_PORT,  # scp shorthand is an ssh alias
}


def default_port_for(protocol: Protocol) -> int:
    """Return the conventional port for *protocol*."""
    return DEFAULT_PORTS[Protocol(protocol)]


@dataclass(frozen=True, slots=True)
class GitURL:
    """A git remote address decomposed into its components.

    Built only by :func:`giturl.core.parser.parse`; read-only afterwards.
    ``port`` is ``0`` when no port should be rendered, ``user`` is ``""``
    when none was given and ``path`` is ``""`` for a repo at the root.
    """

    protocol: Protocol
    port: int
    user: str
    host: str
    path: str
    repo: str
    raw: str

    def __str__(self) -> str:
        return self.raw

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable dict of every field."""
        data = asdict(self)
        data["protocol"] = self.protocol.value
        return data

    # --- formatting (see giturl.core.formatter) ---

    def to_ssh_format(self, user: str, port: int, with_suffix: bool) -> str:
        from giturl.core.formatter import to_ssh_format

        return to_ssh_format(self, user, port, with_suffix)

    def to_git_format(self, port: int, with_suffix: bool) -> str:
        from giturl.core.formatter import to_git_format

        return to_git_format(self, port, with_suffix)

    def to_http_format(self, port: int, is_secure: bool, with_suffix: bool) -> str:
        from giturl.core.formatter import to_http_format

        return to_http_format(self, port, is_secure, with_suffix)

    def to_ftp_format(self, port: int, is_secure: bool, with_suffix: bool) -> str:
        from giturl.core.formatter import to_ftp_format

        return to_ftp_format(self, port, is_secure, with_suffix)

    def to_scp_format(self, user: str, with_suffix: bool) -> str:
        from giturl.core.formatter import to_scp_format

        return to_scp_format(self, user, with_suffix)

    def to_format(
        self,
        protocol: Protocol,
        *,
        user: Optional[str] = None,
        port: Optional[int] = None,
        with_suffix: bool = False,
    ) -> str:
        """Render in *protocol*'s form; ``None`` overrides keep this URL's values."""
        from giturl.core.formatter import to_format

        return to_format(
            self,
            protocol,
            user=self.user if user is None else user,
            port=self.port if port is None else port,
            with_suffix=with_suffix,
        )
