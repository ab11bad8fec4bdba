"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gridpack.core.backends import GridBackend

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.gridpack", ".env.gridpack.local")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable shell configuration."""

    backend: GridBackend = GridBackend.DENSE
    store_rows: int = 10
    store_cols: int = 10
    pack_rows: int = 5
    pack_cols: int = 5


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win when ``override_existing`` is set."""
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_app_config() -> AppConfig:
    """Build configuration from ``GRIDPACK_*`` env vars, falling back to defaults."""
    defaults = AppConfig()
    return AppConfig(
        backend=_backend("GRIDPACK_BACKEND", defaults.backend),
        store_rows=_int("GRIDPACK_STORE_ROWS", defaults.store_rows),
        store_cols=_int("GRIDPACK_STORE_COLS", defaults.store_cols),
        pack_rows=_int("GRIDPACK_PACK_ROWS", defaults.pack_rows),
        pack_cols=_int("GRIDPACK_PACK_COLS", defaults.pack_cols),
    )


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _backend(name: str, default: GridBackend) -> GridBackend:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return GridBackend(raw.strip().lower())
    except ValueError:
        return default


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
