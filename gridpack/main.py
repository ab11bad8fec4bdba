"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from gridpack.app.benchmark import format_report, run_benchmark
from gridpack.app.shell import ShellSession
from gridpack.core.backends import GridBackend
from gridpack.infra.config import AppConfig, load_app_config, load_default_env_files
from gridpack.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpack",
        description="Interactive shell for placing rectangular items on bounded grids.",
    )
    parser.add_argument("--backend", choices=[backend.value for backend in GridBackend], default=None)
    parser.add_argument("--store-rows", type=int, default=None)
    parser.add_argument("--store-cols", type=int, default=None)
    parser.add_argument("--pack-rows", type=int, default=None)
    parser.add_argument("--pack-cols", type=int, default=None)
    parser.add_argument(
        "--benchmark",
        type=int,
        default=None,
        metavar="ITERATIONS",
        help="Run the random workload benchmark on the store grid instead of the shell.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Benchmark RNG seed.")
    return parser


def resolve_config(args: argparse.Namespace, base: AppConfig) -> AppConfig:
    """Apply command-line overrides on top of env configuration."""
    overrides: dict[str, object] = {}
    if args.backend is not None:
        overrides["backend"] = GridBackend(args.backend)
    for key in ("store_rows", "store_cols", "pack_rows", "pack_cols"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    return replace(base, **overrides)  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the gridpack shell or benchmark."""
    args = build_parser().parse_args(argv)
    load_default_env_files(override_existing=False)
    setup_logging()
    config = resolve_config(args, load_app_config())
    logger.info(
        "gridpack_config backend=%s store=%dx%d pack=%dx%d",
        config.backend.value,
        config.store_rows,
        config.store_cols,
        config.pack_rows,
        config.pack_cols,
    )

    if args.benchmark is not None:
        report = run_benchmark(
            config.store_rows,
            config.store_cols,
            args.benchmark,
            backend=config.backend,
            seed=args.seed,
        )
        print(format_report(report))
        return 0

    ShellSession.from_config(config).run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
