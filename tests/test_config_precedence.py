from __future__ import annotations

from pathlib import Path

import pytest

import project_config
from novus.cli import _build_parser, _solver_settings
from novus.filters import DEFAULT_FILTER_ORDER, FilterKind
from novus.settings import LoaderSettings, LoggingSettings, SolverSettings


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    for name in ("SUDOKU_CONFIG", "SUDOKU_MAX_UPDATES", "SUDOKU_TRACE_LEVEL", "SUDOKU_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    project_config.reload()
    yield
    project_config.reload()


def test_repository_config_defaults() -> None:
    settings = SolverSettings.load(env={})
    assert settings.filters == DEFAULT_FILTER_ORDER
    assert settings.max_updates == 10000
    assert settings.trace_level == "none"
    assert LoaderSettings.load(env={}).placeholder == "0"


def test_missing_config_file_falls_back_to_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_CONFIG", str(tmp_path / "absent.toml"))
    assert project_config.get_config() == {}
    assert SolverSettings.load(env={}) == SolverSettings()
    assert LoggingSettings.load(env={}).level == "WARNING"


def test_toml_values_are_read(tmp_path, monkeypatch) -> None:
    path = _write_config(
        tmp_path,
        '[solver]\nfilters = ["HiddenPair", "NakedSingle"]\nmax_updates = 50\n'
        'trace_level = "steps"\n[logging]\nlevel = "debug"\nlog_dir = "out"\n',
    )
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))

    settings = SolverSettings.load(env={})
    assert settings.filters == (FilterKind.HIDDEN_PAIR, FilterKind.NAKED_SINGLE)
    assert settings.max_updates == 50
    assert settings.trace_level == "steps"

    logging_settings = LoggingSettings.load(env={})
    assert logging_settings.level == "DEBUG"
    assert logging_settings.log_dir == Path("out")


def test_environment_overrides_toml(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, '[solver]\nmax_updates = 50\ntrace_level = "steps"\n')
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))

    env = {"SUDOKU_MAX_UPDATES": "7", "SUDOKU_TRACE_LEVEL": "FULL", "SUDOKU_LOG_LEVEL": "info"}
    settings = SolverSettings.load(env=env)
    assert settings.max_updates == 7
    assert settings.trace_level == "full"
    assert LoggingSettings.load(env=env).level == "INFO"


def test_invalid_environment_values_are_ignored(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, "[solver]\nmax_updates = 50\n")
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))

    settings = SolverSettings.load(env={"SUDOKU_MAX_UPDATES": "-3", "SUDOKU_TRACE_LEVEL": "loud"})
    assert settings.max_updates == 50
    assert settings.trace_level == "none"


def test_loader_strict_override(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, "[loader]\nstrict = true\n")
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    assert LoaderSettings.load(env={"SUDOKU_LOADER_STRICT": "off"}).strict is False


def test_cli_overrides_environment(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, '[solver]\nmax_updates = 50\ntrace_level = "steps"\n')
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    monkeypatch.setenv("SUDOKU_MAX_UPDATES", "7")

    argv = ["solve", "puzzles.txt", "--max-updates", "3", "--trace", "full"]
    args = _build_parser().parse_args(argv)
    settings = _solver_settings(args)
    assert settings.max_updates == 3
    assert settings.trace_level == "full"


def test_bad_filter_configuration_is_rejected(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, '[solver]\nfilters = ["NakedSingle", "Swordfish"]\n')
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    with pytest.raises(ValueError):
        SolverSettings.load(env={})
