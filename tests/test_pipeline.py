"""End-to-end behaviour of the reader -> queue -> printer pipeline."""

from __future__ import annotations

import json
import os
import signal
import sys
import threading
import time
from datetime import datetime, timezone
from io import BytesIO, StringIO, TextIOWrapper

import pytest
from rich.console import Console
from rich.text import Text

from pretty_json_log import PrettyJsonLog, PrettyJsonLogConfig
from pretty_json_log.adapters.console.rich_console import RichConsoleAdapter


class _SlowConsole:
    """Console double that records lines and lags behind the reader."""

    def __init__(self, delay: float = 0.0, gate: threading.Event | None = None) -> None:
        self.delay = delay
        self.gate = gate
        self.lines: list[str] = []

    def _wait(self) -> None:
        if self.gate is not None:
            assert self.gate.wait(timeout=5.0)
        if self.delay:
            time.sleep(self.delay)

    def emit(self, line: Text) -> None:
        self._wait()
        self.lines.append(line.plain)

    def passthrough(self, raw: str) -> None:
        self._wait()
        self.lines.append(raw)


class _BlockingStream:
    """Binary stream yielding ``lines`` and then blocking like an idle pipe."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = [f"{line}\n".encode() for line in lines]
        self.exhausted = threading.Event()
        self._closed = threading.Event()

    def readline(self) -> bytes:
        if self._lines:
            return self._lines.pop(0)
        self.exhausted.set()
        self._closed.wait(timeout=5.0)
        return b""

    def close(self) -> None:
        self._closed.set()


def _run(text: str, *, console=None, **config: str) -> list[str]:
    if console is None:
        buffer = StringIO()
        adapter = RichConsoleAdapter(console=Console(file=buffer, color_system=None, width=80))
        PrettyJsonLog(PrettyJsonLogConfig(**config), console=adapter).run(StringIO(text), install_signal_handlers=False)
        return buffer.getvalue().splitlines()
    PrettyJsonLog(PrettyJsonLogConfig(**config), console=console).run(StringIO(text), install_signal_handlers=False)
    return console.lines


def _run_bytes(data: bytes) -> bytes:
    raw = BytesIO()
    out = TextIOWrapper(raw, encoding="utf-8")
    adapter = RichConsoleAdapter(console=Console(file=out, color_system=None, width=80))
    PrettyJsonLog(console=adapter).run(BytesIO(data), install_signal_handlers=False)
    out.flush()
    return raw.getvalue()


@pytest.mark.parametrize(
    "line",
    [
        "plain text line",
        "[1, 2, 3]",
        "42",
        '"quoted"',
        "{not json}",
        "  leading spaces [red]kept[/red]\t",
    ],
)
def test_non_object_lines_pass_through_unchanged(line: str) -> None:
    assert _run(f"{line}\n") == [line]


def test_object_without_known_keys_renders_sentinels() -> None:
    assert _run('{"pid": 7}\n') == ["EMPTY TIME  null pid=7"]


def test_undecodable_bytes_pass_through_byte_for_byte() -> None:
    assert _run_bytes(b"caf\xe9 plain text\nnext\n") == b"caf\xe9 plain text\nnext\n"


def test_undecodable_bytes_inside_objects_render_as_replacement_characters() -> None:
    output = _run_bytes(b'{"msg": "caf\xe9", "n": 1}\n')

    assert output.decode("utf-8") == "EMPTY TIME  caf\ufffd n=1\n"


def test_lone_surrogate_escapes_still_print_their_line() -> None:
    lines = _run('{"msg": "a\\ud800b", "n": 1}\nafter\n')

    assert lines == ["EMPTY TIME  a\ufffdb n=1", "after"]


def test_huge_exponent_level_renders_its_literal_text() -> None:
    lines = _run('{"level": 1e99999999, "msg": "x", "n": 1}\n')

    assert lines == ["EMPTY TIME 1e99999999 x n=1"]


def test_huge_exponent_time_renders_invalid_time() -> None:
    lines = _run('{"time": 1e99999999, "msg": "x"}\n')

    assert lines == ["INVALID TIME [number out of range: 1e99999999]  x time=1e99999999"]


def test_tabs_inside_values_are_written_as_tabs() -> None:
    assert _run('{"msg": "a\\tb", "n": 1}\n') == ["EMPTY TIME  a\tb n=1"]


def test_end_to_end_example() -> None:
    local = datetime.fromtimestamp(1700000000, tz=timezone.utc).astimezone().strftime("%Y-%m-%d %H:%M:%S")

    lines = _run(
        '{"time":1700000000,"level":30,"message":"started","pid":123}\n',
        time_field_key="time",
        level_field_key="level",
        message_field_key="message",
        output_time_fmt="{d} {t}",
    )

    assert lines == [f"{local}  INFO started pid=123"]


@pytest.mark.parametrize("count", [0, 1, 7, 250])
def test_lines_keep_order_behind_a_slow_consumer(count: int) -> None:
    payload = "".join(json.dumps({"msg": f"m{index}", "n": index}) + "\n" for index in range(count))
    console = _SlowConsole(delay=0.0005)

    lines = _run(payload, console=console)

    assert lines == [f"EMPTY TIME  m{index} n={index}" for index in range(count)]


def test_blank_only_input_produces_no_output() -> None:
    console = _SlowConsole()

    assert _run("\n   \n\t\n\n", console=console) == []


def test_mixed_input_interleaves_in_read_order() -> None:
    lines = _run('first\n{"msg": "second"}\n\nthird\n')

    assert [line.rstrip() for line in lines] == ["first", "EMPTY TIME  second", "third"]


def test_stop_request_drains_lines_already_queued() -> None:
    gate = threading.Event()
    console = _SlowConsole(gate=gate)
    stream = _BlockingStream([json.dumps({"msg": f"queued-{index}"}) for index in range(5)])
    app = PrettyJsonLog(console=console)

    runner = threading.Thread(target=app.run, args=(stream,), kwargs={"install_signal_handlers": False})
    runner.start()
    assert stream.exhausted.wait(timeout=5.0)

    app.request_stop()
    gate.set()
    runner.join(timeout=5.0)
    stream.close()

    assert not runner.is_alive()
    assert [line.strip() for line in console.lines] == [f"EMPTY TIME  queued-{index}" for index in range(5)]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signal delivery")
def test_termination_signal_triggers_graceful_shutdown() -> None:
    console = _SlowConsole()
    stream = _BlockingStream(["not json", json.dumps({"level": "error", "msg": "boom"})])
    previous = signal.getsignal(signal.SIGTERM)

    def _send_signal() -> None:
        if stream.exhausted.wait(timeout=5.0):
            os.kill(os.getpid(), signal.SIGTERM)

    killer = threading.Thread(target=_send_signal)
    killer.start()
    try:
        PrettyJsonLog(console=console).run(stream)
    finally:
        stream.close()
        killer.join(timeout=5.0)

    assert [line.strip() for line in console.lines] == ["not json", "EMPTY TIME ERROR boom"]
    assert signal.getsignal(signal.SIGTERM) is previous
