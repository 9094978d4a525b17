"""Session input handling for status-line."""

from .types import (
    Cost,
    InputSnapshot,
    Model,
    OutputStyle,
    Workspace,
)
from .io import (
    SnapshotInputError,
    emit_line,
    exit_error,
    log_debug,
    read_snapshot,
)

__all__ = [
    "Cost",
    "InputSnapshot",
    "Model",
    "OutputStyle",
    "Workspace",
    "SnapshotInputError",
    "emit_line",
    "exit_error",
    "log_debug",
    "read_snapshot",
]
