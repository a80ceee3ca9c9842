"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from giturl.config.defaults import DEFAULT_TOML
from giturl.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, workdir: Path):
        cfg = load_config(workdir)
        assert cfg.convert.target == "https"
        assert cfg.convert.with_suffix is True
        assert cfg.convert.port_policy == "implicit"
        assert cfg.convert.user is None
        assert cfg.output.format == "terminal"

    def test_starter_template_loads(self, workdir: Path):
        (workdir / ".giturl.toml").write_text(DEFAULT_TOML)
        cfg = load_config(workdir)
        assert cfg.convert.target == "https"
        assert cfg.output.show_raw is True

    def test_custom_toml(self, workdir: Path):
        (workdir / ".giturl.toml").write_text(
            'version = "1.0"\n'
            "[convert]\n"
            'target = "scp"\n'
            "with_suffix = false\n"
            'user = "deploy"\n'
            "[output]\n"
            'format = "json"\n'
        )
        cfg = load_config(workdir)
        assert cfg.convert.target == "scp"
        assert cfg.convert.with_suffix is False
        assert cfg.convert.user == "deploy"
        assert cfg.output.format == "json"

    def test_unknown_keys_ignored(self, workdir: Path):
        (workdir / ".giturl.toml").write_text('[convert]\nbogus = 1\ntarget = "git"\n')
        cfg = load_config(workdir)
        assert cfg.convert.target == "git"

    def test_config_override_path(self, workdir: Path):
        custom = workdir / "custom.toml"
        custom.write_text('[convert]\nport_policy = "source"\n')
        cfg = load_config(workdir, config_override=str(custom))
        assert cfg.convert.port_policy == "source"

    def test_missing_override_raises(self, workdir: Path):
        with pytest.raises(ConfigError):
            load_config(workdir, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, workdir: Path):
        (workdir / ".giturl.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(workdir)

    @pytest.mark.parametrize(
        "body",
        [
            '[convert]\ntarget = "svn"\n',
            '[convert]\nport_policy = "random"\n',
            '[output]\nformat = "sarif"\n',
            '[convert]\nwith_suffix = "yes"\n',
            "convert = 3\n",
        ],
    )
    def test_invalid_values_raise(self, workdir: Path, body):
        (workdir / ".giturl.toml").write_text(body)
        with pytest.raises(ConfigError):
            load_config(workdir)


class TestEnvVarOverrides:
    def test_format_override(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("GITURL_FORMAT", "json")
        assert load_config(workdir).output.format == "json"

    def test_target_override(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("GITURL_TARGET", "SSH")
        assert load_config(workdir).convert.target == "ssh"

    def test_port_policy_override(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("GITURL_PORT_POLICY", "default")
        assert load_config(workdir).convert.port_policy == "default"

    def test_user_override_may_be_empty(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("GITURL_USER", "")
        assert load_config(workdir).convert.user == ""

    @pytest.mark.parametrize("value, expected", [("0", False), ("no", False), ("TRUE", True)])
    def test_with_suffix_override(self, workdir: Path, monkeypatch, value, expected):
        monkeypatch.setenv("GITURL_WITH_SUFFIX", value)
        assert load_config(workdir).convert.with_suffix is expected

    def test_env_beats_file(self, workdir: Path, monkeypatch):
        (workdir / ".giturl.toml").write_text('[output]\nformat = "terminal"\n')
        monkeypatch.setenv("GITURL_FORMAT", "json")
        assert load_config(workdir).output.format == "json"

    def test_invalid_env_ignored(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("GITURL_FORMAT", "xml")
        monkeypatch.setenv("GITURL_WITH_SUFFIX", "maybe")
        cfg = load_config(workdir)
        assert cfg.output.format == "terminal"
        assert cfg.convert.with_suffix is True
