from __future__ import annotations

import json
from pathlib import Path

from statusline.config.loader import ConfigLoader
from statusline.config.types import StatuslineConfig, Theme, truecolor


def _write_global_config(tmp_home: Path, data) -> Path:
    cfg_dir = tmp_home / ".statusline"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def test_defaults_without_config_file():
    cfg = ConfigLoader().load()
    assert cfg == StatuslineConfig()
    assert cfg.git_timeout_seconds == 2.0


def test_global_config_overrides(tmp_path):
    _write_global_config(
        tmp_path,
        {
            "gitTimeoutSeconds": 0.5,
            "colors": {"path": "#FF0000", "contextWarning": "00ff00"},
        },
    )

    cfg = ConfigLoader().config
    assert cfg.git_timeout_seconds == 0.5
    assert cfg.theme.path == "\033[38;2;255;0;0m"
    assert cfg.theme.context_warning == "\033[38;2;0;255;0m"
    assert cfg.theme.git == Theme().git


def test_env_var_points_at_config(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"gitTimeoutSeconds": 5}), encoding="utf-8")
    monkeypatch.setenv("STATUSLINE_CONFIG", str(path))

    assert ConfigLoader().load().git_timeout_seconds == 5.0


def test_explicit_path_wins_over_global(tmp_path):
    _write_global_config(tmp_path, {"gitTimeoutSeconds": 5})
    explicit = tmp_path / "explicit.json"
    explicit.write_text(json.dumps({"gitTimeoutSeconds": 7}), encoding="utf-8")

    assert ConfigLoader(config_path=explicit).load().git_timeout_seconds == 7.0


def test_invalid_json_falls_back_to_defaults(tmp_path):
    cfg_dir = tmp_path / ".statusline"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text("{oops", encoding="utf-8")

    assert ConfigLoader().load() == StatuslineConfig()


def test_non_object_config_falls_back_to_defaults(tmp_path):
    _write_global_config(tmp_path, [1, 2, 3])
    assert ConfigLoader().load() == StatuslineConfig()


def test_mistyped_values_fall_back():
    cfg = StatuslineConfig.from_dict({
        "gitTimeoutSeconds": "slow",
        "colors": {"path": "blue", "git": 12},
    })
    assert cfg == StatuslineConfig()


def test_non_positive_timeout_disables_it():
    assert StatuslineConfig.from_dict({"gitTimeoutSeconds": 0}).git_timeout_seconds is None


def test_default_theme_matches_hex_palette():
    theme = Theme()
    assert truecolor("#0CA0D8") == theme.path
    assert truecolor("#14A5AE") == theme.git
    assert truecolor("#45F1C2") == theme.context_ok
    assert truecolor("#CD4277") == theme.context_warning
    assert truecolor("not-a-color") is None


def test_context_limit_is_not_configurable(tmp_path):
    _write_global_config(tmp_path, {"contextLimit": 150_000})
    cfg = ConfigLoader().load()
    assert cfg == StatuslineConfig()
    assert not hasattr(cfg, "context_limit")
