from __future__ import annotations

import errno
import io
import logging

import pytest
import yaml

from sm64config.cli import main
from sm64config.settings import CONFIG_FILENAME


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def run(*argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue()


def test_load_creates_file(dirs):
    code, out = run("load")
    assert code == 0
    assert out.startswith("created ")
    assert (dirs["preferred"] / CONFIG_FILENAME).exists()


def test_load_reports_problems(dirs):
    dirs["preferred"].mkdir(parents=True)
    (dirs["preferred"] / CONFIG_FILENAME).write_text("foo bar\nkey_a\n", encoding="utf-8")
    code, out = run("load")
    assert code == 0
    assert "unknown: 1, missing value: 1, invalid: 0" in out


def test_show_prints_effective_values(dirs):
    (dirs["base"] / CONFIG_FILENAME).write_text("fullscreen true\n", encoding="utf-8")
    code, out = run("show")
    assert code == 0
    assert out.splitlines()[0] == "fullscreen true"
    assert "key_a 38" in out.splitlines()


def test_show_yaml(dirs):
    code, out = run("show", "--yaml")
    assert code == 0
    data = yaml.safe_load(out)
    assert data["fullscreen"] is False
    assert data["key_a"] == 38
    assert list(data)[0] == "fullscreen"


def test_set_updates_file(dirs):
    assert run("set", "key_a", "40")[0] == 0
    assert run("set", "fullscreen", "true")[0] == 0
    text = (dirs["preferred"] / CONFIG_FILENAME).read_text(encoding="utf-8")
    assert "key_a 40\n" in text
    assert "fullscreen true\n" in text


def test_set_rejects_bad_input(dirs):
    assert run("set", "nope", "1")[0] == 1
    assert run("set", "key_a", "-1")[0] == 1
    assert run("set", "fullscreen", "yes")[0] == 1


def test_explicit_directories_and_file(tmp_path):
    config_dir = tmp_path / "cfg"
    code, out = run("--config-dir", str(config_dir), "--base-dir", str(tmp_path), "--file", "alt.txt", "save")
    assert code == 0
    assert (config_dir / "alt.txt").exists()


def test_paths_command(dirs):
    code, out = run("paths")
    assert code == 0
    assert f"preferred: {dirs['preferred']}" in out
    assert f"active: {dirs['base']}" in out


def test_unavailable_directory_exit_code(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    code, _ = run("--config-dir", str(blocker / "sm64pc"), "--base-dir", str(tmp_path), "save")
    assert code == errno.ENOENT


def test_log_level_from_environment(monkeypatch):
    from sm64config.logging_config import configure_logging

    monkeypatch.setenv("SM64_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG
