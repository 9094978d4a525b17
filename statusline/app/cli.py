"""status-line command.

Reads the session descriptor JSON on stdin and prints one status line.
Meant to be configured as the agent's statusLine command.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .. import __version__
from ..config import ConfigLoader
from ..core.composer import StatusLineComposer
from ..session.io import SnapshotInputError, emit_line, exit_error, log_debug, read_snapshot


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-line",
        description="Render a one-line status summary from agent session JSON on stdin",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output on stderr",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.statusline/config.json)",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.debug:
        os.environ["STATUSLINE_DEBUG"] = "1"

    try:
        snapshot = read_snapshot()
    except SnapshotInputError as e:
        exit_error(f"Error reading input: {e}")

    log_debug(f"Rendering for session={snapshot.session_id or '-'} cwd={snapshot.cwd or '-'}")

    config = ConfigLoader(config_path=parsed.config.expanduser() if parsed.config else None).config
    composer = StatusLineComposer.for_snapshot(snapshot, config)
    emit_line(composer.compose())
    return 0


if __name__ == "__main__":
    sys.exit(main())
