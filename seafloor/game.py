"""Game state and player movement on a loaded map."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from seafloor.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, find_player

KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_ESCAPE = 65307


class Direction(Enum):
    """A step on the grid as (row offset, column offset)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)


_KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_RIGHT: Direction.RIGHT,
    KEY_LEFT: Direction.LEFT,
}


class Game:
    """A game in progress: the tiles, the player, the move count and the outcome."""

    def __init__(self, game_map: GameMap) -> None:
        self.rows = [list(row) for row in game_map.rows]
        self.collectibles_left = game_map.collectibles
        self.player = find_player(self.rows)
        self.moves = 0
        self.won = False

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def move(self, direction: Direction) -> bool:
        """Try to step the player one tile; return True if the player moved.

        Walls block the player, and so does the exit while collectibles remain.
        Stepping onto the exit with nothing left to collect wins the game.
        """
        d_row, d_col = direction.value
        row, col = self.player[0] + d_row, self.player[1] + d_col
        target = self.rows[row][col]

        if self.collectibles_left == 0 and target == EXIT:
            self.moves += 1
            print(f"You have moved {self.moves} times\nYou WON!")
            self.won = True
            self._step_to(row, col)
            return True

        if target == WALL or target == EXIT:
            return False
        if target == COLLECTIBLE:
            self.collectibles_left -= 1
        self._step_to(row, col)
        self.moves += 1
        if not self.won:
            print(f"You have moved {self.moves} times")
        return True

    def _step_to(self, row: int, col: int) -> None:
        old_row, old_col = self.player
        self.rows[row][col] = PLAYER
        self.rows[old_row][old_col] = FLOOR
        self.player = (row, col)

    def handle_key(self, keycode: int) -> bool:
        """React to a key; return True when the key asks to leave the game.

        Arrow keys move the player until the game is won; Escape quits.
        """
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is not None and not self.won:
            self.move(direction)
        return keycode == KEY_ESCAPE

    def tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, column, tile) for every tile, row by row."""
        for i, row in enumerate(self.rows):
            for j, tile in enumerate(row):
                yield i, j, tile