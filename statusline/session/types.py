"""Type definitions for the statusline input.

Based on the Claude Code statusline JSON payload. Every field is optional:
missing keys, nulls and values of the wrong type fall back to zero values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str(data: dict[str, Any], key: str) -> str:
    val = data.get(key)
    return val if isinstance(val, str) else ""


def _int(data: dict[str, Any], key: str) -> int:
    val = data.get(key)
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return 0
    return int(val)


def _float(data: dict[str, Any], key: str) -> float:
    val = data.get(key)
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return 0.0
    return float(val)


def _obj(data: dict[str, Any], key: str) -> dict[str, Any]:
    val = data.get(key)
    return val if isinstance(val, dict) else {}


@dataclass(frozen=True, slots=True)
class Model:
    id: str = ""
    display_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Model:
        return cls(id=_str(data, "id"), display_name=_str(data, "display_name"))


@dataclass(frozen=True, slots=True)
class Workspace:
    current_dir: str = ""
    project_dir: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Workspace:
        return cls(
            current_dir=_str(data, "current_dir"),
            project_dir=_str(data, "project_dir"),
        )


@dataclass(frozen=True, slots=True)
class OutputStyle:
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutputStyle:
        return cls(name=_str(data, "name"))


@dataclass(frozen=True, slots=True)
class Cost:
    """Session cost counters reported by the agent."""
    total_cost_usd: float = 0.0
    total_duration_ms: int = 0
    total_api_duration_ms: int = 0
    total_lines_added: int = 0
    total_lines_removed: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cost:
        return cls(
            total_cost_usd=_float(data, "total_cost_usd"),
            total_duration_ms=_int(data, "total_duration_ms"),
            total_api_duration_ms=_int(data, "total_api_duration_ms"),
            total_lines_added=_int(data, "total_lines_added"),
            total_lines_removed=_int(data, "total_lines_removed"),
        )


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Session descriptor, built once per invocation."""
    hook_event_name: str = ""
    session_id: str = ""
    transcript_path: str = ""
    cwd: str = ""
    model: Model = field(default_factory=Model)
    workspace: Workspace = field(default_factory=Workspace)
    version: str = ""
    output_style: OutputStyle = field(default_factory=OutputStyle)
    cost: Cost = field(default_factory=Cost)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InputSnapshot:
        """Create InputSnapshot from the decoded JSON payload."""
        return cls(
            hook_event_name=_str(data, "hook_event_name"),
            session_id=_str(data, "session_id"),
            transcript_path=_str(data, "transcript_path"),
            cwd=_str(data, "cwd"),
            model=Model.from_dict(_obj(data, "model")),
            workspace=Workspace.from_dict(_obj(data, "workspace")),
            version=_str(data, "version"),
            output_style=OutputStyle.from_dict(_obj(data, "output_style")),
            cost=Cost.from_dict(_obj(data, "cost")),
        )
