"""Token usage from the session transcript.

The transcript JSONL at `transcript_path` records every message of the
conversation. Assistant entries carry the API usage block; the most recent
one with non-zero counts describes how full the context window is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..session.io import log_debug
from ..utils.fs import read_lines

USAGE_FIELDS = (
    "input_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
    "output_tokens",
)


@dataclass(frozen=True, slots=True)
class TokenUsage:
    """Usage block of an assistant message."""

    input_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total(self) -> int:
        return (
            self.input_tokens
            + self.cache_creation_input_tokens
            + self.cache_read_input_tokens
            + self.output_tokens
        )

    @property
    def has_usage(self) -> bool:
        return any(getattr(self, name) > 0 for name in USAGE_FIELDS)


@dataclass(frozen=True, slots=True)
class TranscriptRecord:
    """One transcript line, reduced to the fields the counter reads."""

    type: str
    usage: TokenUsage


def _parse_usage(usage: Any) -> TokenUsage | None:
    if usage is None:
        return TokenUsage()
    if not isinstance(usage, dict):
        return None

    counts: dict[str, int] = {}
    for name in USAGE_FIELDS:
        val = usage.get(name)
        if val is None:
            counts[name] = 0
        elif isinstance(val, int) and not isinstance(val, bool):
            counts[name] = val
        else:
            return None
    return TokenUsage(**counts)


def parse_record(line: str) -> TranscriptRecord | None:
    """Parse a single JSONL line.

    Returns:
        TranscriptRecord, or None if the line is not a well-formed record
    """
    try:
        obj = json.loads(line)
    except (json.JSONDecodeError, RecursionError):
        return None
    if not isinstance(obj, dict):
        return None

    entry_type = obj.get("type")
    if entry_type is None:
        entry_type = ""
    if not isinstance(entry_type, str):
        return None

    message = obj.get("message")
    if message is None:
        return TranscriptRecord(type=entry_type, usage=TokenUsage())
    if not isinstance(message, dict):
        return None

    usage = _parse_usage(message.get("usage"))
    if usage is None:
        return None
    return TranscriptRecord(type=entry_type, usage=usage)


def compute_token_usage(transcript_path: Path | str) -> int:
    """Total tokens of the most recent assistant message with usage.

    Scans the transcript from the last line towards the first, skipping blank
    and malformed lines, and stops at the first assistant record with a
    non-zero usage field.

    Args:
        transcript_path: Transcript JSONL path (may be empty)

    Returns:
        input + cache creation + cache read + output tokens, or 0
    """
    if not transcript_path:
        return 0

    try:
        lines = read_lines(transcript_path)
    except OSError as e:
        log_debug(f"Unable to read transcript {transcript_path}: {e}")
        return 0

    for line in reversed(lines):
        line = line.strip()
        if not line:
            continue

        record = parse_record(line)
        if record is None:
            continue

        if record.type == "assistant" and record.usage.has_usage:
            return record.usage.total

    return 0
