"""File helpers and texture import settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

IMPORT_SUFFIX = ".import"
DEFAULT_WRAP = 0x8370
DEFAULT_FORMAT = 0x1908
DEFAULT_FILTER = 0x2600


@dataclass(frozen=True)
class TextureConfig:
    """Wrap mode, pixel format and filter stored beside a texture file."""

    wrap: int
    format: int
    filter: int

    @classmethod
    def save(
        cls, path: str | os.PathLike[str], wrap: int, fmt: int, filter_: int
    ) -> TextureConfig:
        """Write the settings to '<path>.import' and return them."""
        config = cls(wrap, fmt, filter_)
        with open(os.fspath(path) + IMPORT_SUFFIX, "w", encoding="ascii") as fout:
            fout.write(f"{wrap} {fmt} {filter_}")
        return config

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> TextureConfig:
        """Read the settings stored in '<path>.import'."""
        with open(os.fspath(path) + IMPORT_SUFFIX, encoding="ascii") as fin:
            fields = fin.read().split()
        if len(fields) < 3:
            raise ValueError(f"incomplete texture config for {os.fspath(path)!r}")
        wrap, fmt, filter_ = (int(value) for value in fields[:3])
        return cls(wrap, fmt, filter_)


def get_file_contents(path: str | os.PathLike[str]) -> str:
    """Return the text of a file, or an empty string if it does not exist."""
    try:
        with open(path, encoding="utf-8") as fin:
            return fin.read()
    except FileNotFoundError:
        return ""


def import_textures(folder: str | os.PathLike[str]) -> None:
    """Write a default .import file for every .png entry in a folder."""
    with os.scandir(folder) as entries:
        for entry in entries:
            if entry.path.endswith(".png"):
                TextureConfig.save(
                    entry.path, DEFAULT_WRAP, DEFAULT_FORMAT, DEFAULT_FILTER
                )


def make_directory(path: str, name: str) -> str:
    """Create the directory named by path + name (joined without a separator).

    Returns an empty string when it was created, otherwise the path that
    could not be created.
    """
    full_path = path + name
    try:
        os.mkdir(full_path)
    except OSError:
        return full_path
    return ""