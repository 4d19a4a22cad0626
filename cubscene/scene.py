"""Loading of ``.cub`` scene description files."""

from __future__ import annotations

import os
import re
import string
import sys
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "SceneError",
    "SceneConfig",
    "count_lines",
    "read_scene_lines",
    "has_extension",
    "load_textures",
    "parse_colors",
    "parse_scene",
    "main",
]

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 960

MIN_SCENE_LINES = 7
TEXTURE_COUNT = 4
TEXTURE_EXTENSION = ".xpm"

RGB = tuple[int, int, int]

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class SceneError(Exception):
    """Raised when a scene file cannot be read or is invalid."""


@dataclass(frozen=True)
class SceneConfig:
    """What a scene file describes: its lines, wall textures and colours."""

    path: str
    lines: tuple[str, ...]
    textures: tuple[str, ...]
    floor: RGB
    ceiling: RGB


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as err:
        raise SceneError(f"cannot open {os.fspath(path)}: {err.strerror}") from err
    lines = data.decode("utf-8", errors="surrogateescape").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in the file, a final unterminated one included."""
    return len(_read_lines(path))


def read_scene_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the non-blank lines of a scene file, without line endings.

    The file must have at least seven lines, blank ones included.
    """
    lines = _read_lines(path)
    if len(lines) < MIN_SCENE_LINES:
        raise SceneError(
            f"scene file has {len(lines)} lines, at least {MIN_SCENE_LINES} needed"
        )
    return [line for line in lines if line and not line.startswith("\0")]


def has_extension(text: str, ext: str) -> bool:
    """Tell whether ``ext`` occurs anywhere in a non-empty ``text``."""
    return bool(text) and ext in text


def load_textures(lines: Sequence[str]) -> list[str]:
    """Collect the four texture paths from the scene lines.

    A texture line has ``/`` as its fifth character and mentions ``.xpm``;
    its path is everything from the sixth character on.
    """
    textures: list[str] = []
    for line in lines:
        if len(line) > 4 and line[4] == "/" and has_extension(line, TEXTURE_EXTENSION):
            if len(textures) >= TEXTURE_COUNT:
                raise SceneError("invalid texture: more than four texture lines")
            textures.append(line[5:])
    if len(textures) != TEXTURE_COUNT:
        raise SceneError(
            f"invalid texture: {len(textures)} texture lines, {TEXTURE_COUNT} needed"
        )
    return textures


def _parse_rgb(line: str) -> RGB:
    if len(line) <= 2 or line[2] not in string.digits:
        return (0, 0, 0)
    parts = [part for part in line[2:].split(",") if part]
    if len(parts) < 3:
        raise SceneError(f"colour needs three components: {line!r}")
    red, green, blue = (_atoi(part) for part in parts[:3])
    return (red, green, blue)


def parse_colors(lines: Sequence[str]) -> tuple[RGB, RGB]:
    """Read the floor colour line and the line after it as the ceiling colour.

    The floor line is the first line starting with ``F``.  A line whose
    third character is not a digit leaves its colour black.
    """
    start = next(
        (index for index, line in enumerate(lines) if line.startswith("F")), None
    )
    if start is None:
        raise SceneError("no floor colour line")
    pair = lines[start:start + 2]
    if len(pair) < 2:
        raise SceneError("no ceiling colour line after the floor colour")
    return _parse_rgb(pair[0]), _parse_rgb(pair[1])


def parse_scene(path: str | os.PathLike[str]) -> SceneConfig:
    """Read and check a scene file."""
    lines = read_scene_lines(path)
    textures = load_textures(lines)
    floor, ceiling = parse_colors(lines)
    return SceneConfig(
        path=os.fspath(path),
        lines=tuple(lines),
        textures=tuple(textures),
        floor=floor,
        ceiling=ceiling,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and print its colours."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: cubscene <scene.cub>", file=sys.stderr)
        return 1
    try:
        scene = parse_scene(args[0])
    except SceneError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    for value in (*scene.floor, *scene.ceiling):
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())