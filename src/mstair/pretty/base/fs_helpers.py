# File: src/mstair/pretty/base/fs_helpers.py
"""
Filesystem helpers shared by the logging layer and the option loader.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO

import dotenv


__all__ = [
    "fs_find_pyproject_toml",
    "fs_load_dotenv",
]

StrPath = str | os.PathLike[str]

_fs_pyproject_toml_cache: dict[Path, Path | None] = {}


def fs_find_pyproject_toml(*, start_dir: Path | None = None) -> Path | None:
    """
    Return the directory holding the nearest `pyproject.toml`, searching upward.

    :param start_dir: The directory to start searching from, default is the current working directory.
    :return: The project root directory, or None if no `pyproject.toml` is found.
    """
    start_dir = start_dir or Path.cwd()
    if start_dir not in _fs_pyproject_toml_cache:
        _fs_pyproject_toml_cache[start_dir] = next(
            (
                directory
                for directory in (start_dir, *start_dir.parents)
                if (directory / "pyproject.toml").is_file()
            ),
            None,
        )
    return _fs_pyproject_toml_cache[start_dir]


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    override: bool = False,
    encoding: str | None = "utf-8",
) -> bool:
    """
    Parse a .env file and load the variables found into the environment.

    If both `dotenv_path` and `stream` are `None`, `find_dotenv()` locates the
    file starting from the current working directory.

    :param logger: If supplied, dotenv reports missing files through it.
    :param dotenv_path: Absolute or relative path to the .env file.
    :param stream: Text stream with .env content, used if `dotenv_path` is `None`.
    :param override: Whether .env values replace variables already set.
    :return: True if at least one environment variable is set, else False.
    """
    verbose = False
    if logger is not None:
        dotenv.main.logger = logger
        verbose = True
    if dotenv_path is None and stream is None:
        dotenv_path = dotenv.find_dotenv(usecwd=True) or None
        if dotenv_path is None:
            return False
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        verbose=verbose,
        override=override,
        encoding=encoding,
    )


# End of file: src/mstair/pretty/base/fs_helpers.py
