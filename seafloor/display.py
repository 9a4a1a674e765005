"""Drawing the game in a window and running it from the command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from seafloor.game import KEY_DOWN, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP, Game
from seafloor.image import Image
from seafloor.mapfile import COLLECTIBLE, EXIT, PLAYER, WALL, MapError, load_map
from seafloor.xpm import XpmError, read_xpm_file

TILE_SIZE = 32
SPRITE_NAMES = ("sea", "wall", "weed", "deadf", "alive", "character")
DEFAULT_IMAGE_DIR = "image"
WINDOW_TITLE = "seafloor"


class ImagesMissing(Exception):
    """Raised when a sprite file cannot be opened."""


def _sprite_path(image_dir: str | Path, name: str) -> Path:
    return Path(image_dir) / f"{name}.xpm"


def check_images(image_dir: str | Path = DEFAULT_IMAGE_DIR) -> None:
    """Check that every sprite file can be opened for reading and writing."""
    for name in SPRITE_NAMES:
        try:
            with _sprite_path(image_dir, name).open("r+b"):
                pass
        except OSError as exc:
            raise ImagesMissing("Image file(s) missing") from exc


def load_sprites(image_dir: str | Path = DEFAULT_IMAGE_DIR) -> dict[str, Image]:
    """Read every sprite file and return the images by sprite name."""
    return {name: read_xpm_file(_sprite_path(image_dir, name)) for name in SPRITE_NAMES}


def tile_sprite(tile: str, collectibles_left: int) -> tuple[str, ...]:
    """Return the sprite names drawn for a tile, bottom layer first."""
    if tile == WALL:
        return ("sea", "wall")
    if tile == COLLECTIBLE:
        return ("sea", "weed")
    if tile == EXIT:
        return ("sea", "deadf" if collectibles_left > 0 else "alive")
    if tile == PLAYER:
        return ("sea", "character")
    return ("sea",)


def _to_surface(pygame, image: Image):
    pixels = b"".join(
        (pixel & 0xFFFFFF).to_bytes(3, "big") for row in image.rows() for pixel in row
    )
    return pygame.image.frombuffer(pixels, (image.width, image.height), "RGB").copy()


def _draw(pygame, screen, game: Game, surfaces: dict) -> None:
    screen.fill((0, 0, 0))
    for row, col, tile in game.tiles():
        for name in tile_sprite(tile, game.collectibles_left):
            screen.blit(surfaces[name], (col * TILE_SIZE, row * TILE_SIZE))
    pygame.display.flip()


def _play(game: Game, sprites: dict[str, Image]) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE_SIZE, game.height * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        surfaces = {name: _to_surface(pygame, image) for name, image in sprites.items()}
        keys = {
            pygame.K_UP: KEY_UP,
            pygame.K_DOWN: KEY_DOWN,
            pygame.K_RIGHT: KEY_RIGHT,
            pygame.K_LEFT: KEY_LEFT,
            pygame.K_ESCAPE: KEY_ESCAPE,
        }
        _draw(pygame, screen, game, surfaces)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 1
            if event.type == pygame.KEYDOWN:
                code = keys.get(event.key)
                if code is not None and game.handle_key(code):
                    return 1
            _draw(pygame, screen, game, surfaces)
    finally:
        pygame.quit()


def run(mapfile: str | Path, image_dir: str | Path = DEFAULT_IMAGE_DIR) -> int:
    """Check the sprites and the map, then play; return the exit status."""
    try:
        check_images(image_dir)
        game_map = load_map(mapfile)
        sprites = load_sprites(image_dir)
    except (ImagesMissing, MapError, XpmError) as exc:
        print(f"Error\n{exc}")
        return 1
    return _play(Game(game_map), sprites)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game with the single map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nThe game requires a single argument.")
        return 1
    return run(args[0])