"""giturl — parse git remote addresses and convert between their forms."""

from giturl.core.formatter import (
    to_format,
    to_ftp_format,
    to_git_format,
    to_http_format,
    to_scp_format,
    to_ssh_format,
)
from giturl.core.models import (
    DEFAULT_FTP_PORT,
    DEFAULT_FTPS_PORT,
    DEFAULT_GIT_PORT,
    DEFAULT_HTTP_PORT,
    DEFAULT_HTTPS_PORT,
    DEFAULT_SSH_PORT,
    DEFAULT_USER,
    IMPLICIT_PORT,
    IMPLICIT_USER,
    GitURL,
    Protocol,
    default_port_for,
)
from giturl.core.parser import InvalidURLError, parse

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_FTPS_PORT",
    "DEFAULT_FTP_PORT",
    "DEFAULT_GIT_PORT",
    "DEFAULT_HTTPS_PORT",
    "DEFAULT_HTTP_PORT",
    "DEFAULT_SSH_PORT",
    "DEFAULT_USER",
    "GitURL",
    "IMPLICIT_PORT",
    "IMPLICIT_USER",
    "InvalidURLError",
    "Protocol",
    "__version__",
    "default_port_for",
    "parse",
    "to_format",
    "to_ftp_format",
    "to_git_format",
    "to_http_format",
    "to_scp_format",
    "to_ssh_format",
]
