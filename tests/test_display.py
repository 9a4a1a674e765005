import pytest

from seafloor.display import (
    SPRITE_NAMES,
    ImagesMissing,
    check_images,
    load_sprites,
    main,
    tile_sprite,
)

XPM = 'static char *x[] = {\n"2 1 1 1",\n"a c #FF0000",\n"aa"\n};\n'


def write_images(directory, names=SPRITE_NAMES):
    directory.mkdir(exist_ok=True)
    for name in names:
        (directory / f"{name}.xpm").write_text(XPM)


def test_check_images_missing(tmp_path):
    write_images(tmp_path / "image", SPRITE_NAMES[:-1])
    with pytest.raises(ImagesMissing, match="Image file"):
        check_images(tmp_path / "image")


def test_load_sprites(tmp_path):
    write_images(tmp_path / "image")
    check_images(tmp_path / "image")
    sprites = load_sprites(tmp_path / "image")
    assert set(sprites) == set(SPRITE_NAMES)
    assert sprites["wall"].get_pixel(0, 0) == 0xFF0000
    assert sprites["sea"].width == 2


@pytest.mark.parametrize(
    "tile, left, expected",
    [
        ("1", 0, ("sea", "wall")),
        ("C", 1, ("sea", "weed")),
        ("E", 1, ("sea", "deadf")),
        ("E", 0, ("sea", "alive")),
        ("P", 0, ("sea", "character")),
        ("0", 0, ("sea",)),
    ],
)
def test_tile_sprite(tile, left, expected):
    assert tile_sprite(tile, left) == expected


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nThe game requires a single argument.\n"


def test_main_images_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().out == "Error\nImage file(s) missing\n"


def test_main_rejects_extension(tmp_path, monkeypatch, capsys):
    write_images(tmp_path / "image")
    (tmp_path / "map.txt").write_text("111\n")
    monkeypatch.chdir(tmp_path)
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "Error\nOnly .ber extension is accepted for maps\n"


def test_main_empty_map(tmp_path, monkeypatch, capsys):
    write_images(tmp_path / "image")
    (tmp_path / "map.ber").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().out == "Error\nEmpty map.\n"


def test_main_invalid_map(tmp_path, monkeypatch, capsys):
    write_images(tmp_path / "image")
    (tmp_path / "map.ber").write_text("11111\n1P0E1\n11111\n")
    monkeypatch.chdir(tmp_path)
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map.\n"