"""Render a :class:`GitURL` back into one of the address forms.

All formatters are total: a port of ``0`` drops the ``:port`` segment and an
empty user drops ``user@``. Host, path and repo always come from the URL.
"""

from __future__ import annotations

from giturl.core.models import GIT_SUFFIX, IMPLICIT_PORT, IMPLICIT_USER, GitURL, Protocol


def _user_part(user: str) -> str:
    return f"{user}@" if user != IMPLICIT_USER else ""


def _host_part(url: GitURL, port: int) -> str:
    if port != IMPLICIT_PORT:
        return f"{url.host}:{port}"
    return url.host


def _repo_path(url: GitURL, with_suffix: bool) -> str:
    """``path/repo[.git]``, or just ``repo[.git]`` for a repo at the root."""
    repo_path = f"{url.path}/{url.repo}" if url.path else url.repo
    if with_suffix:
        repo_path += GIT_SUFFIX
    return repo_path


def _url_form(prefix: str, url: GitURL, user: str, port: int, with_suffix: bool) -> str:
    return f"{prefix}{_user_part(user)}{_host_part(url, port)}/{_repo_path(url, with_suffix)}"


# format: ssh://[user@]host.xz[:port]/path/to/repo.git
def to_ssh_format(url: GitURL, user: str, port: int, with_suffix: bool) -> str:
    return _url_form("ssh://", url, user, port, with_suffix)


# format: git://host.xz[:port]/path/to/repo.git
def to_git_format(url: GitURL, port: int, with_suffix: bool) -> str:
    return _url_form("git://", url, IMPLICIT_USER, port, with_suffix)


# format: http[s]://host.xz[:port]/path/to/repo.git
def to_http_format(url: GitURL, port: int, is_secure: bool, with_suffix: bool) -> str:
    prefix = "https://" if is_secure else "http://"
    return _url_form(prefix, url, IMPLICIT_USER, port, with_suffix)


# format: ftp[s]://host.xz[:port]/path/to/repo.git
def to_ftp_format(url: GitURL, port: int, is_secure: bool, with_suffix: bool) -> str:
    prefix = "ftps://" if is_secure else "ftp://"
    return _url_form(prefix, url, IMPLICIT_USER, port, with_suffix)


# format: [user@]host.xz:path/to/repo.git
def to_scp_format(url: GitURL, user: str, with_suffix: bool) -> str:
    return f"{_user_part(user)}{url.host}:{_repo_path(url, with_suffix)}"


def to_format(
    url: GitURL,
    protocol: Protocol,
    *,
    user: str = IMPLICIT_USER,
    port: int = IMPLICIT_PORT,
    with_suffix: bool = False,
) -> str:
    """Render *url* in *protocol*'s form.

    Overrides the target form cannot express are ignored: only ssh and scp
    carry a user, and scp carries no port.
    """
    protocol = Protocol(protocol)
    if protocol is Protocol.SSH:
        return to_ssh_format(url, user, port, with_suffix)
    if protocol is Protocol.GIT:
        return to_git_format(url, port, with_suffix)
    if protocol in (Protocol.HTTP, Protocol.HTTPS):
        return to_http_format(url, port, protocol is Protocol.HTTPS, with_suffix)
    if protocol in (Protocol.FTP, Protocol.FTPS):
        return to_ftp_format(url, port, protocol is Protocol.FTPS, with_suffix)
    return to_scp_format(url, user, with_suffix)
