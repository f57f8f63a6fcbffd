"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write rendered lines to standard output through Rich so colour support is
detected (and overridable) in one place.

Contents
--------
* :class:`RichConsoleAdapter` - adapter constructed by :class:`PrettyJsonLog`.

System Role
-----------
Sole writer of the output stream. Formatted records go through Rich; lines that
were not JSON objects bypass Rich entirely so they reach the terminal byte for
byte.
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.segment import Segments
from rich.text import Text

from pretty_json_log.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Render styled lines with Rich and pass raw lines through untouched."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the console adapter with colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                file=sys.stdout,
                force_terminal=True if force_color else None,
                no_color=True if no_color else None,
                highlight=False,
                emoji=False,
                markup=False,
            )
        self._no_color = no_color

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, line: Text) -> None:
        """Print ``line`` on a single unwrapped row, tabs included.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=20)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit(Text("a line longer than\\ttwenty cells"))
        >>> console.export_text()
        'a line longer than\\ttwenty cells\\n'
        """
        if self._no_color:
            line = Text(line.plain)
        # Segments skip the tab expansion Rich applies when laying out Text.
        self._console.print(Segments(line.render(self._console, end="\n")), soft_wrap=True)

    def passthrough(self, raw: str) -> None:
        """Write ``raw`` verbatim, restoring any undecodable input bytes.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleAdapter(console=Console(file=buffer)).passthrough("[bold]not json[/]")
        >>> buffer.getvalue()
        '[bold]not json[/]\\n'
        """
        stream = self._console.file
        data = f"{raw}\n".encode("utf-8", "surrogateescape")
        binary = getattr(stream, "buffer", None)
        if binary is None:
            stream.write(data.decode("utf-8", "replace"))
            stream.flush()
            return
        stream.flush()
        binary.write(data)
        binary.flush()


__all__ = ["RichConsoleAdapter"]
