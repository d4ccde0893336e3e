"""Extract a requested Python version from a script's `#!` line.

A missing, unrecognized or malformed shebang is not an error: every function
here answers ``None`` and the launcher falls back to its other sources.
"""

import itertools
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from loguru import logger

from .exceptions import VersionParseError
from .version import MajorOnly, RequestedVersion, parse_requested

# Checked in order; the first prefix that matches wins.
ACCEPTED_PATHS = (
    "python",
    "/usr/bin/python",
    "/usr/local/bin/python",
    "/usr/bin/env python",
)

# Version assumed by an unversioned `python` shebang.
DEFAULT_SHEBANG_VERSION = MajorOnly(2)

_VERSION_CHARS = frozenset("0123456789.")

# Longest shebang line read, in bytes, after the `#!` marker.
MAX_SHEBANG_LENGTH = 4096

Shebang = Tuple[RequestedVersion, List[str]]


def find_shebang(stream: BinaryIO) -> Optional[str]:
    """Return the first line of `stream` without `#!` if it is a shebang.

    Whitespace between `#!` and the command is allowed and stripped, as is
    trailing whitespace and the line ending.
    """
    try:
        if stream.read(2) != b"#!":
            return None
        line = stream.readline(MAX_SHEBANG_LENGTH)
    except OSError as e:
        logger.debug("could not read shebang: {}", e)
        return None

    try:
        return line.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None


def split_shebang(line: str) -> Optional[Shebang]:
    """Split a shebang line into the requested version and its arguments.

    Only the interpreters in ``ACCEPTED_PATHS`` are recognized, e.g.
    ``/usr/local/bin/python3.7 -S`` gives ``(Exact(3, 7), ["-S"])``.
    """
    for accepted in ACCEPTED_PATHS:
        if not line.startswith(accepted):
            continue

        remainder = line[len(accepted):]
        fragment = "".join(
            itertools.takewhile(lambda c: c in _VERSION_CHARS, remainder)
        )
        if fragment:
            try:
                version = parse_requested(fragment)
            except VersionParseError:
                logger.debug("ignoring shebang with bad version: {!r}", line)
                return None
        else:
            version = DEFAULT_SHEBANG_VERSION

        return version, remainder[len(fragment):].split()

    return None


def parse_python_shebang(stream: BinaryIO) -> Optional[Shebang]:
    """Read and split the shebang of `stream`, if it names Python."""
    line = find_shebang(stream)
    if line is None:
        return None
    return split_shebang(line)


def shebang_from_path(path: Union[str, Path]) -> Optional[Shebang]:
    try:
        with open(path, "rb") as stream:
            return parse_python_shebang(stream)
    except OSError as e:
        logger.debug("could not open {} for its shebang: {}", path, e)
        return None
