from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from pretty_json_log import cli as cli_module
from pretty_json_log import config as config_module
from pretty_json_log.config import PrettyJsonLogConfig


def test_defaults_cover_common_field_names() -> None:
    config = PrettyJsonLogConfig()

    assert config.time_keys == ("time", "ts", "timestamp", "@timestamp")
    assert config.level_keys == ("level", "severity", "lvl")
    assert config.message_keys == ("message", "msg")
    assert config.display_time_format == "%Y-%m-%d %H:%M:%S.%f"


def test_key_lists_are_trimmed_and_ordered() -> None:
    config = PrettyJsonLogConfig(level_field_key=" lvl , level,, severity ")

    assert config.level_keys == ("lvl", "level", "severity")


def test_config_is_immutable() -> None:
    config = PrettyJsonLogConfig()

    with pytest.raises(AttributeError):
        config.time_field_key = "other"  # type: ignore[misc]


def test_from_env_prefers_explicit_then_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config_module.ENV_TIME_FIELD_KEY, "when")
    monkeypatch.setenv(config_module.ENV_LEVEL_FIELD_KEY, "sev")
    monkeypatch.setenv(config_module.ENV_OUTPUT_TIME_FMT, "{t}")

    config = PrettyJsonLogConfig.from_env(level_field_key="lvl")

    assert config.time_keys == ("when",)
    assert config.level_keys == ("lvl",)
    assert config.message_keys == ("message", "msg")
    assert config.display_time_format == "%H:%M:%S"


def test_from_env_ignores_blank_environment_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config_module.ENV_MESSAGE_FIELD_KEY, "  ")

    assert PrettyJsonLogConfig.from_env().message_field_key == config_module.DEFAULT_MESSAGE_FIELD_KEY


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "yes", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert config_module.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text(f"{config_module.ENV_MESSAGE_FIELD_KEY}=body\n")
    monkeypatch.chdir(nested)

    loaded = config_module.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ[config_module.ENV_MESSAGE_FIELD_KEY] == "body"

    os.environ.pop(config_module.ENV_MESSAGE_FIELD_KEY, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(f"{config_module.ENV_MESSAGE_FIELD_KEY}=body\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(config_module.ENV_MESSAGE_FIELD_KEY, "text")

    assert config_module.enable_dotenv() is not None
    assert os.environ[config_module.ENV_MESSAGE_FIELD_KEY] == "text"


def test_cli_uses_values_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(f"{config_module.ENV_MESSAGE_FIELD_KEY}=body\n")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli_module.cli, ["--use-dotenv"], input=json.dumps({"body": "hello"}) + "\n")

    os.environ.pop(config_module.ENV_MESSAGE_FIELD_KEY, None)
    assert result.exit_code == 0
    assert result.stdout.rstrip() == "EMPTY TIME  hello"
