"""Typed shell command model and line parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gridpack.core.models import Loc

HELP_TEXT = """Commands:
exit
help
show items
show <grid>
new <name> <rows> <cols> <symbol>
add <grid> <item_name> <row> <col>
remove <grid> <row> <col>
transpose <grid> <row> <col>
move <grid> <src_row> <src_col> <dst_row> <dst_col>
transfer <src_grid> <dst_grid> <row> <col> <dst_row> <dst_col>
"""


class CommandType(str, Enum):
    EXIT = "exit"
    HELP = "help"
    SHOW_ITEMS = "show_items"
    SHOW_GRID = "show_grid"
    NEW = "new"
    ADD = "add"
    REMOVE = "remove"
    TRANSPOSE = "transpose"
    MOVE = "move"
    TRANSFER = "transfer"


@dataclass(frozen=True, slots=True)
class ShellCommand:
    kind: CommandType
    grid: str | None = None
    target_grid: str | None = None
    name: str | None = None
    rows: int | None = None
    cols: int | None = None
    symbol: str | None = None
    loc: Loc | None = None
    dst: Loc | None = None


class CommandParseError(ValueError):
    """Raised for malformed shell input."""


_USAGE: dict[str, str] = {
    "show": "show items | show <grid>",
    "new": "new <name> <rows> <cols> <symbol>",
    "add": "add <grid> <item_name> <row> <col>",
    "remove": "remove <grid> <row> <col>",
    "transpose": "transpose <grid> <row> <col>",
    "move": "move <grid> <src_row> <src_col> <dst_row> <dst_col>",
    "transfer": "transfer <src_grid> <dst_grid> <row> <col> <dst_row> <dst_col>",
}


def parse_command(line: str) -> ShellCommand:
    """Parse one input line into a command."""
    tokens = line.split()
    if not tokens:
        raise CommandParseError("Empty command. Type 'help' for a list of commands.")
    verb, args = tokens[0].lower(), tokens[1:]

    if verb in ("exit", "help"):
        _expect_arity(verb, args, 0)
        return ShellCommand(CommandType(verb))
    if verb == "show":
        _expect_arity(verb, args, 1)
        if args[0] == "items":
            return ShellCommand(CommandType.SHOW_ITEMS)
        return ShellCommand(CommandType.SHOW_GRID, grid=args[0])
    if verb == "new":
        _expect_arity(verb, args, 4)
        return ShellCommand(
            CommandType.NEW,
            name=args[0],
            rows=_parse_index("rows", args[1]),
            cols=_parse_index("cols", args[2]),
            symbol=_parse_symbol(args[3]),
        )
    if verb == "add":
        _expect_arity(verb, args, 4)
        return ShellCommand(
            CommandType.ADD,
            grid=args[0],
            name=args[1],
            loc=_parse_loc(args[2], args[3]),
        )
    if verb in ("remove", "transpose"):
        _expect_arity(verb, args, 3)
        return ShellCommand(CommandType(verb), grid=args[0], loc=_parse_loc(args[1], args[2]))
    if verb == "move":
        _expect_arity(verb, args, 5)
        return ShellCommand(
            CommandType.MOVE,
            grid=args[0],
            loc=_parse_loc(args[1], args[2], prefix="src_"),
            dst=_parse_loc(args[3], args[4], prefix="dst_"),
        )
    if verb == "transfer":
        _expect_arity(verb, args, 6)
        return ShellCommand(
            CommandType.TRANSFER,
            grid=args[0],
            target_grid=args[1],
            loc=_parse_loc(args[2], args[3]),
            dst=_parse_loc(args[4], args[5], prefix="dst_"),
        )
    raise CommandParseError(f"Unknown command: '{tokens[0]}'. Type 'help' for a list of commands.")


def _expect_arity(verb: str, args: list[str], count: int) -> None:
    if len(args) == count:
        return
    usage = _USAGE.get(verb, verb)
    raise CommandParseError(f"'{verb}' takes {count} argument(s), got {len(args)}. Usage: {usage}")


def _parse_index(label: str, token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise CommandParseError(f"Invalid {label}: '{token}'. Expected a non-negative integer.")
    return int(token)


def _parse_loc(row: str, col: str, *, prefix: str = "") -> Loc:
    return Loc(_parse_index(f"{prefix}row", row), _parse_index(f"{prefix}col", col))


def _parse_symbol(token: str) -> str:
    if len(token) != 1:
        raise CommandParseError(f"Invalid symbol: '{token}'. Expected a single character.")
    return token
