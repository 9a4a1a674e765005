"""Loading and checking .ber map files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"
_TILES = frozenset({WALL, FLOOR, COLLECTIBLE, PLAYER, EXIT})


class MapError(Exception):
    """Raised when a map file is missing, malformed or unwinnable."""


@dataclass
class GameMap:
    """A rectangular grid of tiles with the counts of its special tiles."""

    rows: list[list[str]]
    collectibles: int = 0
    players: int = 0
    exits: int = 0
    start: tuple[int, int] = field(default=(0, 0))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def check_mapfile(path: str | Path) -> None:
    """Check that the map has a .ber name, can be opened and is not empty."""
    path = Path(path)
    if not str(path).endswith(".ber"):
        raise MapError("Only .ber extension is accepted for maps")
    try:
        with path.open("rb") as handle:
            first = handle.read(1)
    except OSError as exc:
        raise MapError("Map is not opened") from exc
    if not first:
        raise MapError("Empty map.")


def read_map_lines(path: str | Path) -> list[str]:
    """Return the lines of a map file without their newline characters."""
    text = Path(path).read_bytes().decode("latin-1")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def validate_map(rows: Sequence[str]) -> GameMap:
    """Check shape, tiles, walls and tile counts; return the map."""
    if not rows:
        raise MapError("Invalid map.")
    width = len(rows[0])
    height = len(rows)
    counts = {COLLECTIBLE: 0, PLAYER: 0, EXIT: 0}
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MapError("Invalid map.")
        for j, tile in enumerate(row):
            if tile not in _TILES:
                raise MapError("Invalid map.")
            on_border = i in (0, height - 1) or j in (0, width - 1)
            if on_border and tile != WALL:
                raise MapError("Invalid map.")
            if tile in counts:
                counts[tile] += 1
    if counts[COLLECTIBLE] == 0 or counts[PLAYER] != 1 or counts[EXIT] != 1:
        raise MapError("Invalid map.")
    return GameMap(
        rows=[list(row) for row in rows],
        collectibles=counts[COLLECTIBLE],
        players=counts[PLAYER],
        exits=counts[EXIT],
        start=find_player(rows),
    )


def find_player(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return (row, column) of the player, the last one if several, else (0, 0)."""
    position = (0, 0)
    for i, row in enumerate(rows):
        for j, tile in enumerate(row):
            if tile == PLAYER:
                position = (i, j)
    return position


def flood_fill(rows: Sequence[Sequence[str]], start: tuple[int, int]) -> int:
    """Count collectibles and exits reachable from ``start`` without crossing walls."""
    if not rows:
        return 0
    height = len(rows)
    width = len(rows[0])
    seen: set[tuple[int, int]] = set()
    stack = [start]
    reach = 0
    while stack:
        x, y = stack.pop()
        if not (0 <= x < height and 0 <= y < width) or (x, y) in seen:
            continue
        tile = rows[x][y]
        if tile == WALL:
            continue
        seen.add((x, y))
        if tile in (COLLECTIBLE, EXIT):
            reach += 1
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return reach


def check_reachable(game_map: GameMap) -> None:
    """Raise MapError unless every collectible and the exit can be reached."""
    reach = flood_fill(game_map.rows, find_player(game_map.rows))
    if reach != game_map.collectibles + 1:
        raise MapError("Invalid map.")


def load_map(path: str | Path) -> GameMap:
    """Read, check and return the map stored at ``path``."""
    check_mapfile(path)
    game_map = validate_map(read_map_lines(path))
    check_reachable(game_map)
    return game_map