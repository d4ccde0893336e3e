"""Discover Python executables along a search path.

Scans each directory in order for entries named ``python<major>`` or
``python<major>.<minor>``. Order matters: for otherwise equal candidates the
first one along the path wins, like a shell's `PATH` lookup.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from loguru import logger

from .exceptions import VersionParseError
from .version import DiscoveredVersion, parse_discovered

EXECUTABLE_PREFIX = "python"


@dataclass(frozen=True)
class Candidate:
    """A discovered version and the absolute path claiming it."""

    version: DiscoveredVersion
    path: Path


def split_search_path(value: str) -> List[Path]:
    """Split a `PATH`-style string, dropping empty and repeated entries."""
    directories = []
    seen = set()

    for entry in value.split(os.pathsep):
        if not entry or entry in seen:
            continue
        seen.add(entry)
        directories.append(Path(entry))

    return directories


def directory_contents(directory: Union[str, Path]) -> List[Path]:
    """List the direct entries of `directory` in enumeration order.

    A missing or unreadable directory yields no entries.
    """
    directory = Path(directory).absolute()
    try:
        with os.scandir(directory) as entries:
            return [directory / entry.name for entry in entries]
    except OSError as e:
        logger.debug("skipping {}: {}", directory, e)
        return []


def filter_python_executables(paths: Iterable[Path]) -> Iterator[Candidate]:
    """Yield a candidate for each path whose name carries a Python version.

    Names like ``python3-config``, ``python3.8m`` or a bare ``python`` are
    skipped.
    """
    for path in paths:
        name = path.name
        if not name.startswith(EXECUTABLE_PREFIX):
            continue

        try:
            version = parse_discovered(name[len(EXECUTABLE_PREFIX):])
        except VersionParseError:
            continue

        yield Candidate(version=version, path=path)


def iter_candidates(directories: Iterable[Union[str, Path]]) -> Iterator[Candidate]:
    """Yield candidates of every directory, in search-path order."""
    seen = set()

    for directory in directories:
        directory = Path(directory)
        if directory in seen:
            continue
        seen.add(directory)

        yield from filter_python_executables(directory_contents(directory))


def all_executables(
    directories: Iterable[Union[str, Path]],
) -> Dict[DiscoveredVersion, Path]:
    """Map every discovered version to its first regular file on the path."""
    executables = {}

    for candidate in iter_candidates(directories):
        if candidate.version in executables or not candidate.path.is_file():
            continue
        executables[candidate.version] = candidate.path

    return executables
