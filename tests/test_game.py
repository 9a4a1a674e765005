import pytest

from seafloor.game import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Direction,
    Game,
)
from seafloor.mapfile import validate_map


def make_game(*rows):
    return Game(validate_map(list(rows)))


@pytest.fixture
def corridor():
    return make_game("11111", "1PCE1", "11111")


def test_collect_then_win(corridor, capsys):
    assert corridor.handle_key(KEY_RIGHT) is False
    assert corridor.collectibles_left == 0
    assert corridor.player == (1, 2)
    corridor.handle_key(KEY_RIGHT)
    assert corridor.won is True
    assert corridor.player == (1, 3)
    out = capsys.readouterr().out
    assert out == "You have moved 1 times\nYou have moved 2 times\nYou WON!\n"


def test_wall_blocks(corridor, capsys):
    assert corridor.move(Direction.UP) is False
    assert corridor.moves == 0
    assert corridor.player == (1, 1)
    assert capsys.readouterr().out == ""


def test_exit_blocked_while_collectibles_remain():
    game = make_game("11111", "1PEC1", "11111")
    before = list(game.tiles())
    assert game.move(Direction.RIGHT) is False
    assert list(game.tiles()) == before
    assert game.won is False


def test_keys_ignored_after_win(corridor):
    corridor.handle_key(KEY_RIGHT)
    corridor.handle_key(KEY_RIGHT)
    moves = corridor.moves
    player = corridor.player
    corridor.handle_key(KEY_LEFT)
    assert corridor.moves == moves
    assert corridor.player == player


def test_escape_requests_quit(corridor):
    assert corridor.handle_key(KEY_ESCAPE) is True
    assert corridor.moves == 0


def test_other_keys_do_nothing(corridor):
    assert corridor.handle_key(ord("a")) is False
    assert corridor.player == (1, 1)


def test_down_and_up_leave_floor_behind():
    game = make_game("11111", "1P0C1", "10E01", "11111")
    assert game.handle_key(KEY_DOWN) is False
    assert game.player == (2, 1)
    assert game.rows[1][1] == "0"
    game.handle_key(KEY_UP)
    assert game.player == (1, 1)
    assert game.rows[2][1] == "0"


def test_tiles_invariants():
    game = make_game("11111", "1P0C1", "1C0E1", "11111")
    for key in (KEY_RIGHT, KEY_RIGHT, KEY_DOWN, KEY_LEFT, KEY_LEFT):
        game.handle_key(key)
    tiles = [tile for _, _, tile in game.tiles()]
    assert tiles.count("P") == 1
    assert tiles.count("C") == game.collectibles_left
    assert len(tiles) == game.width * game.height


def test_map_left_unchanged():
    game_map = validate_map(["11111", "1PCE1", "11111"])
    game = Game(game_map)
    game.move(Direction.RIGHT)
    assert game_map.rows[1] == list("1PCE1")
    assert game.rows[1] == list("10PE1")