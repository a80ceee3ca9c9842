"""Shared test fixtures: sample URLs and an isolated working directory."""

from __future__ import annotations

from pathlib import Path

import pytest

SSH_URL = "ssh://git@gitlab.com/charlie/wto/bomb.git"
GIT_URL = "git://gitlab.com:12345/charlie/wto/bomb.git"
HTTP_URL = "http://gitlab.com/charlie/wto/bomb.git"
HTTPS_URL = "https://gitlab.com/charlie/wto/bomb.git"
FTP_URL = "ftp://gitlab.com/charlie/wto/bomb.git"
FTPS_URL = "ftps://gitlab.com/charlie/wto/bomb.git"
SCP_URL = "git@gitlab.com:charlie/wto/bomb.git"


@pytest.fixture
def sample_urls() -> dict[str, str]:
    """One well-formed URL per address form."""
    return {
        "ssh": SSH_URL,
        "git": GIT_URL,
        "http": HTTP_URL,
        "https": HTTPS_URL,
        "ftp": FTP_URL,
        "ftps": FTPS_URL,
        "scp": SCP_URL,
    }


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run with cwd set to an empty temp dir and no GITURL_* env vars."""
    for name in (
        "GITURL_FORMAT",
        "GITURL_TARGET",
        "GITURL_PORT_POLICY",
        "GITURL_USER",
        "GITURL_WITH_SUFFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
