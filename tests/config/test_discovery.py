"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from base95.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from base95.config.models import Base95Config


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[chain]\nsteps = 3\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config() == config_file.resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == Base95Config()

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "x.toml"
        path.write_text('[chain]\ntoward = "one"\n[simulate]\nseed = 9\n')
        cfg = load_config(path)
        assert cfg.chain.toward == "one"
        assert cfg.simulate.seed == 9
        assert cfg.simulate.inserts == 1000

    def test_discovered(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[chain]\nsteps = 7\n")
        assert load_config(cwd=tmp_path).chain.steps == 7
