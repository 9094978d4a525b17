"""Tests for the individual sections."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from statusline.config.types import Theme
from statusline.core.git import GitBranchResolver, GitRef
from statusline.core.paths import HOME_GLYPH
from statusline.sections import (
    ContextSection,
    GitBranchSection,
    PathSection,
    Section,
    context_color,
    format_size,
)
from statusline.sections.git import BRANCH_GLYPHS
from statusline.session.types import InputSnapshot

THEME = Theme()


class StaticResolver(GitBranchResolver):
    def __init__(self, ref: GitRef):
        super().__init__()
        self.ref = ref

    def resolve_ref(self, work_dir):
        return self.ref


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0"),
        (999, "999"),
        (1000, "1000"),
        (1999, "1999"),
        (2000, "2.0K"),
        (2001, "2.0K"),
        (2500, "2.5K"),
        (45_321, "45.3K"),
        (150_000, "150.0K"),
    ],
)
def test_format_size(size: int, expected: str):
    assert format_size(size) == expected


class TestContextColor:
    def test_at_limit_is_safe(self):
        assert context_color(90_000, THEME) == THEME.context_ok

    def test_over_limit_warns(self):
        assert context_color(90_001, THEME) == THEME.context_warning


class TestContextSection:
    def test_without_transcript(self):
        rendered = ContextSection(InputSnapshot(transcript_path="")).render()
        assert rendered == f"{THEME.context_ok}0/90k"

    def test_over_limit(self, tmp_path: Path):
        p = tmp_path / "t.jsonl"
        p.write_text(json.dumps({
            "type": "assistant",
            "message": {"usage": {"input_tokens": 5, "cache_read_input_tokens": 95_000}},
        }) + "\n", encoding="utf-8")
        rendered = ContextSection(InputSnapshot(transcript_path=str(p))).render()
        assert rendered == f"{THEME.context_warning}95.0K/90k"


class TestPathSection:
    def test_colored_path(self, tmp_path: Path):
        section = PathSection(InputSnapshot(cwd=str(tmp_path / "code")))
        assert section.render() == f"{THEME.path}{HOME_GLYPH} ~/code"


class TestGitBranchSection:
    def test_branch_is_decorated(self):
        section = GitBranchSection(InputSnapshot(), THEME, StaticResolver(GitRef("branch", "main")))
        assert section.render() == f"{THEME.git}{BRANCH_GLYPHS}main"

    def test_tag_is_plain(self):
        section = GitBranchSection(InputSnapshot(), THEME, StaticResolver(GitRef("tag", "v1")))
        assert section.render() == f"{THEME.git}tag:v1"

    def test_no_git(self, tmp_path: Path):
        section = GitBranchSection(InputSnapshot(cwd=str(tmp_path)))
        assert section.render() == f"{THEME.git}No Git"


def test_sections_satisfy_protocol():
    snapshot = InputSnapshot()
    for section in (PathSection(snapshot), GitBranchSection(snapshot), ContextSection(snapshot)):
        assert isinstance(section, Section)
