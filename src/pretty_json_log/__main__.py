"""``python -m pretty_json_log`` entry point delegating to :func:`pretty_json_log.cli.main`."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
