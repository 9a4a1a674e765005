import pytest

from seafloor.mapfile import (
    GameMap,
    MapError,
    check_mapfile,
    check_reachable,
    find_player,
    flood_fill,
    load_map,
    read_map_lines,
    validate_map,
)

GOOD = ["1111111", "1P0C0E1", "1111111"]


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, newline="")
    return path


def test_load_valid_map(tmp_path):
    path = write(tmp_path, "level.ber", "\n".join(GOOD) + "\n")
    game_map = load_map(path)
    assert game_map.rows == [list(row) for row in GOOD]
    assert game_map.collectibles == 1
    assert game_map.players == 1
    assert game_map.exits == 1
    assert game_map.height == len(GOOD)
    assert game_map.width == len(GOOD[0])
    assert game_map.start == (1, 1)


def test_wrong_extension(tmp_path):
    path = write(tmp_path, "level.txt", "\n".join(GOOD))
    with pytest.raises(MapError, match="Only .ber extension"):
        check_mapfile(path)


def test_missing_file(tmp_path):
    with pytest.raises(MapError, match="Map is not opened"):
        check_mapfile(tmp_path / "absent.ber")


def test_empty_file(tmp_path):
    path = write(tmp_path, "empty.ber", "")
    with pytest.raises(MapError, match="Empty map."):
        check_mapfile(path)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ab\ncd\n", ["ab", "cd"]),
        ("ab\ncd", ["ab", "cd"]),
        ("ab\n\n", ["ab", ""]),
    ],
)
def test_read_map_lines(tmp_path, text, expected):
    path = write(tmp_path, "m.ber", text)
    assert read_map_lines(path) == expected


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["1111111", "1P0C0E1", "111111"],
        ["1111111", "1P0X0E1", "1111111"],
        ["1111111", "0P0C0E1", "1111111"],
        ["1111111", "1P0C0E0", "1111111"],
        ["1111111", "1P0C0E1", "1110111"],
        ["1111111", "1P000E1", "1111111"],
        ["1111111", "1PPC0E1", "1111111"],
        ["1111111", "1P0CEE1", "1111111"],
        ["1111111", "100C0E1", "1111111"],
    ],
)
def test_invalid_maps(rows):
    with pytest.raises(MapError, match="Invalid map."):
        validate_map(rows)


def test_find_player():
    assert find_player(GOOD) == (1, 1)
    assert find_player(["111", "101", "111"]) == (0, 0)


def test_flood_fill_counts_collectibles_and_exit():
    rows = ["1111111", "1P0C0E1", "1C11111", "1111111"]
    assert flood_fill(rows, find_player(rows)) == 3


def test_flood_fill_does_not_change_rows():
    rows = [list(row) for row in GOOD]
    flood_fill(rows, (1, 1))
    assert rows == [list(row) for row in GOOD]


def test_flood_fill_from_wall_reaches_nothing():
    assert flood_fill(GOOD, (0, 0)) == 0


def test_unreachable_collectible():
    game_map = validate_map(["1111111", "1P01C01", "1E01111", "1111111"])
    with pytest.raises(MapError, match="Invalid map."):
        check_reachable(game_map)


def test_reachable_map_passes_check():
    game_map = validate_map(GOOD)
    check_reachable(game_map)
    assert isinstance(game_map, GameMap) and game_map.collectibles == 1


def test_load_map_rejects_blocked_exit(tmp_path):
    path = write(tmp_path, "blocked.ber", "11111\n1PC11\n111E1\n11111\n")
    with pytest.raises(MapError):
        load_map(path)