"""Interactive shell over a set of named grids."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from gridpack.app.commands import HELP_TEXT, CommandParseError, CommandType, ShellCommand, parse_command
from gridpack.core.backends import create_grid
from gridpack.core.errors import GridError
from gridpack.core.grid import Grid
from gridpack.core.models import Item, Loc
from gridpack.core.transfer import transfer
from gridpack.infra.config import AppConfig

logger = logging.getLogger(__name__)

PROMPT = ">>> "


class UnknownGridError(GridError):
    """Shell command named a grid the session does not have."""


@dataclass(frozen=True, slots=True)
class ShellOutcome:
    message: str
    keep_running: bool = True


@dataclass(slots=True)
class ShellSession:
    """Named grids plus a catalog of created items that are not placed yet."""

    grids: dict[str, Grid]
    catalog: dict[str, Item] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: AppConfig) -> ShellSession:
        return cls(
            grids={
                "store": create_grid(config.store_rows, config.store_cols, config.backend),
                "pack": create_grid(config.pack_rows, config.pack_cols, config.backend),
            }
        )

    def execute(self, line: str) -> ShellOutcome:
        """Parse and run one command line, reporting failures as messages."""
        try:
            command = parse_command(line)
        except CommandParseError as exc:
            return ShellOutcome(str(exc))
        logger.debug("shell_command kind=%s", command.kind.value)
        try:
            return self._dispatch(command)
        except GridError as exc:
            logger.info("command_rejected kind=%s reason=%s", command.kind.value, exc)
            return ShellOutcome(str(exc))

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """Read commands until ``exit`` or end of input."""
        while True:
            stdout.write(PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                stdout.write("\n")
                return
            if not line.strip():
                continue
            outcome = self.execute(line)
            if outcome.message:
                stdout.write(outcome.message.rstrip("\n") + "\n")
            if not outcome.keep_running:
                return

    def _dispatch(self, command: ShellCommand) -> ShellOutcome:
        kind = command.kind
        if kind is CommandType.EXIT:
            return ShellOutcome("", keep_running=False)
        if kind is CommandType.HELP:
            return ShellOutcome(HELP_TEXT)
        if kind is CommandType.SHOW_ITEMS:
            return ShellOutcome(self._describe_catalog())
        if kind is CommandType.SHOW_GRID:
            return ShellOutcome(self._grid(command.grid).render())
        if kind is CommandType.NEW:
            return self._new_item(command)
        if kind is CommandType.ADD:
            return self._add(command)
        if kind is CommandType.REMOVE:
            return self._remove(command)
        if kind is CommandType.TRANSPOSE:
            grid = self._grid(command.grid)
            anchor = grid.transpose(_loc(command.loc))
            return ShellOutcome(f"Transposed item at {anchor} in {command.grid}.")
        if kind is CommandType.MOVE:
            grid = self._grid(command.grid)
            dst = _loc(command.dst)
            src = grid.move(_loc(command.loc), dst)
            logger.info("item_moved grid=%s src=%s dst=%s", command.grid, src, dst)
            return ShellOutcome(f"Moved item from {src} to {dst} in {command.grid}.")
        if kind is CommandType.TRANSFER:
            source = self._grid(command.grid)
            destination = self._grid(command.target_grid)
            dst = transfer(source, destination, _loc(command.loc), _loc(command.dst))
            logger.info("item_transferred src=%s dst=%s loc=%s", command.grid, command.target_grid, dst)
            return ShellOutcome(f"Transferred item from {command.grid} to {command.target_grid} at {dst}.")
        raise AssertionError(f"Unhandled command: {kind}")

    def _new_item(self, command: ShellCommand) -> ShellOutcome:
        name = command.name or ""
        if self._name_in_use(name):
            return ShellOutcome(f"An item named '{name}' already exists.")
        item = Item(rows=command.rows or 1, cols=command.cols or 1, symbol=command.symbol or "?", name=name)
        self.catalog[name] = item
        logger.info("item_created name=%s rows=%d cols=%d", name, item.rows, item.cols)
        return ShellOutcome(f"Created item '{name}' ({item.rows}x{item.cols} '{item.symbol}').")

    def _add(self, command: ShellCommand) -> ShellOutcome:
        grid = self._grid(command.grid)
        name = command.name or ""
        item = self.catalog.get(name)
        if item is None:
            return ShellOutcome(f"No unplaced item named '{name}'. Use 'show items' to list them.")
        loc = grid.add(item, _loc(command.loc))
        del self.catalog[name]
        logger.info("item_added grid=%s name=%s loc=%s", command.grid, name, loc)
        return ShellOutcome(f"Added '{name}' to {command.grid} at {loc}.")

    def _remove(self, command: ShellCommand) -> ShellOutcome:
        grid = self._grid(command.grid)
        loc = _loc(command.loc)
        removed = grid.remove(loc)
        if removed is None:
            return ShellOutcome(f"Nothing at {loc} in {command.grid}.")
        if removed.name is not None:
            self.catalog[removed.name] = removed.item
        logger.info("item_removed grid=%s name=%s anchor=%s", command.grid, removed.name, removed.anchor)
        return ShellOutcome(f"Removed {removed.item.label} from {command.grid} at {removed.anchor}.")

    def _grid(self, name: str | None) -> Grid:
        grid = self.grids.get(name or "")
        if grid is None:
            known = ", ".join(sorted(self.grids))
            raise UnknownGridError(f"Unknown grid: '{name}'. Known grids: {known}.")
        return grid

    def _name_in_use(self, name: str) -> bool:
        return name in self.catalog or any(name in grid for grid in self.grids.values())

    def _describe_catalog(self) -> str:
        if not self.catalog:
            return "No unplaced items."
        lines = [
            f"{name}: {item.rows}x{item.cols} '{item.symbol}'"
            for name, item in sorted(self.catalog.items())
        ]
        return "\n".join(lines)


def _loc(value: Loc | None) -> Loc:
    if value is None:
        raise AssertionError("Parser produced a command without a location.")
    return value
