"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]
PortPolicy = Literal["implicit", "default", "source"]

OUTPUT_FORMATS = ("terminal", "json")
PORT_POLICIES = ("implicit", "default", "source")
TARGETS = ("ssh", "git", "http", "https", "ftp", "ftps", "scp")


@dataclass
class ConvertConfig:
    target: str = "https"  # default --to for `giturl convert`
    with_suffix: bool = True
    port_policy: PortPolicy = "implicit"  # implicit | default | source
    user: Optional[str] = None  # None keeps the parsed user


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_raw: bool = True


@dataclass
class GitURLConfig:
    version: str = "1.0"
    convert: ConvertConfig = field(default_factory=ConvertConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
