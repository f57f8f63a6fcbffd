from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from pretty_json_log import config as config_module
from pretty_json_log.adapters.console.rich_console import RichConsoleAdapter

_ENV_VARS = (
    config_module.ENV_TIME_FIELD_KEY,
    config_module.ENV_LEVEL_FIELD_KEY,
    config_module.ENV_MESSAGE_FIELD_KEY,
    config_module.ENV_OUTPUT_TIME_FMT,
    config_module.ENV_LEVEL_STYLES,
    config_module.DOTENV_ENV_VAR,
    "FORCE_COLOR",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shells and CI colour toggles from leaking into tests."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def record_console() -> Console:
    """Colourless Rich console writing into memory."""

    return Console(
        file=StringIO(),
        record=True,
        width=80,
        color_system=None,
        highlight=False,
        markup=False,
        emoji=False,
    )


@pytest.fixture
def console_adapter(record_console: Console) -> RichConsoleAdapter:
    return RichConsoleAdapter(console=record_console)
