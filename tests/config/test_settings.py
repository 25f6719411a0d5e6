"""Tests for Base95Settings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from base95.config.settings import Base95Settings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = Base95Settings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.chain.steps == 30
        assert settings.simulate.inserts == 1000

    def test_frozen(self, tmp_path: Path) -> None:
        settings = Base95Settings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "base95.toml"
        toml.write_text('[chain]\ntoward = "one"\nsteps = 4\n')
        settings = Base95Settings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.chain.toward == "one"
        assert settings.chain.steps == 4
        assert settings.simulate.inserts == 1000

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "base95.toml").write_text("[simulate]\nseed = 11\n")
        sub = tmp_path / "sub" / "deep"
        sub.mkdir(parents=True)
        assert Base95Settings.from_cli(start=sub).simulate.seed == 11

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[chain]\nsteps = 2\n")
        settings = Base95Settings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.chain.steps == 2
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = Base95Settings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.chain.steps == 30

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "base95.toml").write_text("[chain\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            Base95Settings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = Base95Settings.from_cli(start=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "base95.toml").write_text("quiet = true\n")
        assert Base95Settings.from_cli(start=tmp_path).quiet is True
        assert Base95Settings.from_cli(start=tmp_path, quiet=False).quiet is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BASE95_VERBOSE", "true")
        assert Base95Settings.from_cli(start=tmp_path).verbose is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "base95.toml").write_text("[chain]\nsteps = 4\n")
        monkeypatch.setenv("BASE95_CHAIN__STEPS", "12")
        assert Base95Settings.from_cli(start=tmp_path).chain.steps == 12
