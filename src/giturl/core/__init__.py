"""Parsing and formatting engine."""

from giturl.core.formatter import (
    to_format,
    to_ftp_format,
    to_git_format,
    to_http_format,
    to_scp_format,
    to_ssh_format,
)
from giturl.core.models import GitURL, Protocol, default_port_for
from giturl.core.parser import InvalidURLError, classify, parse

__all__ = [
    "GitURL",
    "InvalidURLError",
    "Protocol",
    "classify",
    "default_port_for",
    "parse",
    "to_format",
    "to_ftp_format",
    "to_git_format",
    "to_http_format",
    "to_scp_format",
    "to_ssh_format",
]
