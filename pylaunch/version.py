"""Requested and discovered Python versions.

A requested version is what the caller asked for (`py`, `py -3`, `py -3.6`).
A discovered version is what an installed executable's file name claims
(`python3`, `python3.6`). `MajorOnly` and `Exact` serve as both.
"""

import enum
import functools
import re
from dataclasses import dataclass
from typing import Tuple

from .exceptions import VersionParseError

_MAJOR_ONLY = re.compile(r"\A([0-9]+)\Z")
_EXACT = re.compile(r"\A([0-9]+)\.([0-9]+)\Z")


class VersionMatch(enum.Enum):
    """How well a discovered version satisfies a requested one."""

    NOT_AT_ALL = "not at all"
    LOOSELY = "loosely"
    EXACTLY = "exactly"


class RequestedVersion:
    """Base of the requested-version variants: AnyVersion, MajorOnly, Exact."""

    __slots__ = ()


@functools.total_ordering
class DiscoveredVersion:
    """Base of the discovered-version variants: MajorOnly, Exact.

    A missing minor sorts below every present minor of the same major, so
    ``Exact(3, 9) > Exact(3, 8) > MajorOnly(3) > Exact(2, 7)``.
    """

    __slots__ = ()

    def sort_key(self) -> Tuple[int, int]:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, DiscoveredVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class AnyVersion(RequestedVersion):
    """No constraint at all."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class MajorOnly(RequestedVersion, DiscoveredVersion):
    major: int

    def sort_key(self) -> Tuple[int, int]:
        return (self.major, -1)

    def __str__(self) -> str:
        return str(self.major)


@dataclass(frozen=True)
class Exact(RequestedVersion, DiscoveredVersion):
    major: int
    minor: int

    def sort_key(self) -> Tuple[int, int]:
        return (self.major, self.minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_requested(text: str) -> RequestedVersion:
    """Parse ``""``, ``"<major>"`` or ``"<major>.<minor>"``.

    Raises:
        VersionParseError: For anything else, e.g. ``"3.6.4"`` or ``"abc"``.
    """
    if text == "":
        return AnyVersion()
    return parse_discovered(text)


def parse_discovered(text: str) -> DiscoveredVersion:
    """Parse the version suffix of an executable name like ``python3.6``.

    Unlike :func:`parse_requested`, empty text is an error.
    """
    match = _MAJOR_ONLY.match(text)
    if match:
        return MajorOnly(int(match.group(1)))

    match = _EXACT.match(text)
    if match:
        return Exact(int(match.group(1)), int(match.group(2)))

    raise VersionParseError(f"invalid version: {text!r}")


def compatibility(
    discovered: DiscoveredVersion,
    requested: RequestedVersion,
) -> VersionMatch:
    """Classify how well `discovered` satisfies `requested`.

    An exact request is never loosely satisfied: only the same major.minor
    matches it.
    """
    if isinstance(requested, AnyVersion):
        return VersionMatch.LOOSELY

    if isinstance(requested, MajorOnly):
        if not isinstance(discovered, (MajorOnly, Exact)):
            raise TypeError(f"unknown discovered version: {discovered!r}")
        if discovered.major != requested.major:
            return VersionMatch.NOT_AT_ALL
        if isinstance(discovered, MajorOnly):
            return VersionMatch.EXACTLY
        return VersionMatch.LOOSELY

    if isinstance(requested, Exact):
        if isinstance(discovered, Exact) and discovered == requested:
            return VersionMatch.EXACTLY
        if isinstance(discovered, (MajorOnly, Exact)):
            return VersionMatch.NOT_AT_ALL
        raise TypeError(f"unknown discovered version: {discovered!r}")

    raise TypeError(f"unknown requested version: {requested!r}")
