# tests/unit/test_config.py
from __future__ import annotations

import logging

from faults import Faults, FaultsConfig, load_config, validate_config
from faults.config import CONFIG_ENV_VAR


def write_yaml(tmp_path, text: str):
    path = tmp_path / "faults.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = FaultsConfig.default()

    assert config.allow_stack is False
    assert config.capture_exceptions is False
    assert config.to_dict() == {"allow_stack": False, "capture_exceptions": False}
    assert config.validate() == []


def test_load_from_yaml(tmp_path):
    path = write_yaml(tmp_path, "faults:\n  allow_stack: true\n  capture_exceptions: true\n")

    config = load_config(path)

    assert config.allow_stack is True
    assert config.capture_exceptions is True


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "nope.yml")

    assert config == FaultsConfig.default()


def test_env_var_path(tmp_path, monkeypatch):
    path = write_yaml(tmp_path, "faults:\n  allow_stack: true\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().allow_stack is True


def test_invalid_yaml_falls_back_to_defaults(tmp_path, caplog):
    path = write_yaml(tmp_path, "faults: [unclosed\n")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        config = load_config(path)

    assert config == FaultsConfig.default()
    assert any("Failed to load config" in r.getMessage() for r in caplog.records)


def test_bad_values_are_ignored(tmp_path):
    path = write_yaml(tmp_path, "faults:\n  allow_stack: 'yes'\n  capture_exceptions: true\n  extra: 1\n")

    config = load_config(path)

    assert config.allow_stack is False
    assert config.capture_exceptions is True


def test_validate_config_reports_issues():
    issues = validate_config({"faults": {"allow_stack": "yes", "extra": 1}, "other": {}})

    by_path = {issue.path: issue.level for issue in issues}
    assert by_path == {
        "other": "warn",
        "faults.allow_stack": "error",
        "faults.extra": "warn",
    }


def test_validate_config_rejects_non_mapping():
    issues = validate_config(["faults"])  # type: ignore[arg-type]

    assert len(issues) == 1
    assert issues[0].level == "error"


def test_faults_from_config():
    f = Faults.from_config(FaultsConfig(allow_stack=True, capture_exceptions=True))

    assert f.is_stacking()
    assert f.capture_exceptions

    # reset returns to non-stacking regardless of how it was built
    f.reset()
    assert not f.is_stacking()
    assert f.capture_exceptions


def test_non_utf8_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "faults.yml"
    path.write_bytes(b"faults:\n  allow_stack: \xff\xfe true\n")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        config = load_config(path)

    assert config == FaultsConfig.default()
    assert any("Failed to load config" in r.getMessage() for r in caplog.records)


def test_config_issues_are_logged(tmp_path, caplog):
    path = write_yaml(tmp_path, "faults:\n  allow_stack: 'yes'\n  extra: 1\n")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        load_config(path)

    messages = [r.getMessage() for r in caplog.records]
    assert any("Config issue" in m and "faults.allow_stack" in m for m in messages)
    assert any("Config issue" in m and "faults.extra" in m for m in messages)


def test_top_level_list_falls_back_with_warning(tmp_path, caplog):
    path = write_yaml(tmp_path, "- allow_stack\n- true\n")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        config = load_config(path)

    assert config == FaultsConfig.default()
    assert any("must be a mapping, got list" in r.getMessage() for r in caplog.records)


def test_top_level_scalar_falls_back_with_warning(tmp_path, caplog):
    path = write_yaml(tmp_path, "false\n")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        config = load_config(path)

    assert config == FaultsConfig.default()
    assert any("must be a mapping, got bool" in r.getMessage() for r in caplog.records)


def test_empty_file_uses_defaults_quietly(tmp_path, caplog):
    path = write_yaml(tmp_path, "")

    with caplog.at_level(logging.WARNING, logger="faults.config.loader"):
        config = load_config(path)

    assert config == FaultsConfig.default()
    assert caplog.records == []
