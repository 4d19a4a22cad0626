import pytest

from cubscene.scene import (
    SceneError,
    count_lines,
    has_extension,
    load_textures,
    main,
    parse_colors,
    parse_scene,
    read_scene_lines,
)

SCENE = """NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111
101
111
"""

TEXTURES = [
    "textures/north.xpm",
    "textures/south.xpm",
    "textures/west.xpm",
    "textures/east.xpm",
]


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(SCENE)
    return path


@pytest.mark.parametrize("trailing", ["\n", ""])
def test_count_lines_counts_every_line(tmp_path, trailing):
    rows = ["a", "", "b", "c"]
    path = tmp_path / "rows.txt"
    path.write_text("\n".join(rows) + trailing)
    assert count_lines(path) == len(rows)


def test_count_lines_of_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    assert count_lines(path) == 0


def test_read_scene_lines_drops_blank_lines(scene_file):
    assert read_scene_lines(scene_file) == [
        line for line in SCENE.splitlines() if line
    ]


def test_short_scene_file_is_rejected(tmp_path):
    path = tmp_path / "short.cub"
    path.write_text("\n".join(["x"] * 6) + "\n")
    with pytest.raises(SceneError):
        read_scene_lines(path)


def test_missing_scene_file_is_rejected(tmp_path):
    with pytest.raises(SceneError):
        read_scene_lines(tmp_path / "absent.cub")


@pytest.mark.parametrize(
    ("text", "ext", "expected"),
    [
        ("NO ./a.xpm", ".xpm", True),
        ("NO ./a.png", ".xpm", False),
        ("", ".xpm", False),
        ("x.xpm.bak", ".xpm", True),
    ],
)
def test_has_extension(text, ext, expected):
    assert has_extension(text, ext) is expected


def test_load_textures_returns_paths_in_order(scene_file):
    assert load_textures(read_scene_lines(scene_file)) == TEXTURES


def test_texture_lines_need_slash_at_fifth_character():
    lines = ["NO textures/north.xpm", "SO ./s.xpm", "WE ./w.xpm", "EA ./e.xpm"]
    with pytest.raises(SceneError):
        load_textures(lines)


def test_five_textures_are_rejected():
    lines = [f"XX ./t{n}.xpm" for n in range(5)]
    with pytest.raises(SceneError):
        load_textures(lines)


def test_three_textures_are_rejected():
    lines = [f"XX ./t{n}.xpm" for n in range(3)]
    with pytest.raises(SceneError):
        load_textures(lines)


def test_parse_colors_reads_floor_and_ceiling(scene_file):
    assert parse_colors(read_scene_lines(scene_file)) == ((220, 100, 0), (225, 30, 0))


def test_parse_colors_allows_spaces_before_numbers():
    assert parse_colors(["F 10, 20,30", "C 1,2,3"]) == ((10, 20, 30), (1, 2, 3))


def test_colour_without_leading_digit_stays_black():
    assert parse_colors(["F none", "C 1,2,3"]) == ((0, 0, 0), (1, 2, 3))


@pytest.mark.parametrize(
    "lines",
    [
        ["C 1,2,3"],
        ["C 1,2,3", "F 1,2,3"],
        ["F 1,2", "C 1,2,3"],
    ],
)
def test_parse_colors_errors(lines):
    with pytest.raises(SceneError):
        parse_colors(lines)


def test_parse_scene(scene_file):
    scene = parse_scene(scene_file)
    assert scene.textures == tuple(TEXTURES)
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.path == str(scene_file)


def test_main_prints_colours(scene_file, capsys):
    assert main([str(scene_file)]) == 0
    assert capsys.readouterr().out.split() == ["220", "100", "0", "225", "30", "0"]


def test_main_without_argument_reports_usage(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_with_invalid_scene_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text("\n".join(["x"] * 8) + "\n")
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err