"""Static package metadata surfaced by the CLI banner and ``--version``."""

from __future__ import annotations

from typing import Callable

name = "pretty_json_log"
title = "Render JSON log lines as coloured, human-readable terminal output"
version = "0.1.0"
author = "pretty_json_log maintainers"
shell_command = "pretty-json-log"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (``print`` semantics by default).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for pretty_json_log:
    ...
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
