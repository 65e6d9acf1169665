"""CLI tests for configuration commands."""

import os
from pathlib import Path
from typing import Any

from click.testing import CliRunner

from fsentry.cli import cli
from fsentry.config import ConfigManager


def _env_with_home(tmp_path: Path) -> dict[str, Any]:
    env = dict(os.environ)
    env["HOME"] = str(tmp_path)
    return env


def _config_path(tmp_path: Path) -> Path:
    return tmp_path / ".fsentry" / "config.yaml"


def test_config_view_creates_and_displays_config(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(cli, ["config", "view"], env=env)

    assert result.exit_code == 0
    assert "classification:" in result.output
    assert _config_path(tmp_path).exists()


def test_config_set_updates_value_and_writes_diff(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(
        cli, ["config", "set", "classification.sample_size_bytes", "--value", "4096"], env=env
    )

    assert result.exit_code == 0
    assert "4096" in result.output

    manager = ConfigManager(config_path=_config_path(tmp_path))
    config = manager.load(include_env=False)
    assert config.classification.sample_size_bytes == 4096


def test_config_set_same_value_reports_no_change(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)
    args = ["config", "set", "logging.level", "--value", "WARNING"]

    runner.invoke(cli, args, env=env)
    result = runner.invoke(cli, args, env=env)

    assert result.exit_code == 0
    assert "No changes applied" in result.output


def test_config_set_rejects_invalid_value(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(
        cli, ["config", "set", "classification.sample_size_bytes", "--value", "0"], env=env
    )

    assert result.exit_code != 0
    assert "Invalid configuration values" in result.output


def test_config_edit_applies_changes(tmp_path: Path, monkeypatch) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    manager = ConfigManager(config_path=_config_path(tmp_path))
    manager.ensure_exists()

    def _mock_edit(text: str, **_: Any) -> str:
        return text.replace("sample_size_bytes: 1024", "sample_size_bytes: 256")

    monkeypatch.setattr("fsentry.cli.click.edit", _mock_edit)

    result = runner.invoke(cli, ["config", "edit"], env=env)

    assert result.exit_code == 0
    assert "updated" in result.output.lower()

    config = manager.load(include_env=False)
    assert config.classification.sample_size_bytes == 256


def test_config_view_env_prints_assignments(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)
    env["FSENTRY__CLASSIFICATION__EXTRA_LABELS"] = "{tar.zst: Tar Zstandard Archive}"

    result = runner.invoke(cli, ["config", "view", "--env"], env=env)

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "FSENTRY__CLASSIFICATION__SAMPLE_SIZE_BYTES=1024" in lines
    assert "FSENTRY__CLASSIFICATION__EXTRA_LABELS={tar.zst: Tar Zstandard Archive}" in lines
