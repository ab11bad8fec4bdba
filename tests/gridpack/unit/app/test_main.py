from __future__ import annotations

import io

import pytest

from gridpack import main as main_module
from gridpack.core.backends import GridBackend
from gridpack.infra.config import AppConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "GRIDPACK_BACKEND",
        "GRIDPACK_STORE_ROWS",
        "GRIDPACK_STORE_COLS",
        "GRIDPACK_PACK_ROWS",
        "GRIDPACK_PACK_COLS",
        "GRIDPACK_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


def test_resolve_config_applies_cli_overrides() -> None:
    args = main_module.build_parser().parse_args(["--backend", "indexed", "--pack-rows", "7"])
    config = main_module.resolve_config(args, AppConfig(pack_cols=4))
    assert config.backend is GridBackend.INDEXED
    assert config.pack_rows == 7
    assert config.pack_cols == 4
    assert config.store_rows == 10


def test_main_runs_benchmark(capsys) -> None:
    assert main_module.main(["--benchmark", "50", "--seed", "2", "--store-rows", "6", "--store-cols", "6"]) == 0
    output = capsys.readouterr().out
    assert "Benchmark results (dense, 6x6, 50 iterations)" in output


def test_main_runs_shell_with_env_config(monkeypatch, capsys) -> None:
    monkeypatch.setenv("GRIDPACK_PACK_ROWS", "1")
    monkeypatch.setenv("GRIDPACK_PACK_COLS", "3")
    monkeypatch.setattr("sys.stdin", io.StringIO("show pack\nexit\n"))
    assert main_module.main([]) == 0
    assert "| | | |\n" in capsys.readouterr().out


def test_main_rejects_unknown_backend() -> None:
    with pytest.raises(SystemExit):
        main_module.main(["--backend", "btree"])
