"""vbookreader CLI entry point.

Allows running via `python -m vbookreader` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

USAGE = "usage: vbookreader [--version] [--log FILE] [FILE]"


def _configure_logging(log_file: Optional[str]) -> None:
    # The screen is fullscreen, so logging only ever goes to a file
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, optional log file, optional filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    log_file = None
    if "--log" in args:
        i = args.index("--log")
        if i + 1 >= len(args):
            print(USAGE, file=sys.stderr)
            return 2
        log_file = args[i + 1]
        del args[i:i + 2]
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2
    _configure_logging(log_file)

    # Lazy import to avoid importing UI deps for --version
    from .app import ReaderApp
    app = ReaderApp()
    if args:
        app.load_file(args[0])
    else:
        app.load_cached()
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
