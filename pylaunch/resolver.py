"""Pick the one executable that best satisfies a requested version.

Resolution runs in two phases. Scanning accumulates compatible candidates in
a table keyed by discovered version, first occurrence along the path winning.
An exact hit for an exact request ends the scan immediately. Selection then
takes the greatest version in the table, so ``py -3`` prefers ``python3.8``
over ``python3.6`` and both over a bare ``python3``.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from loguru import logger

from .discovery import iter_candidates
from .version import (
    DiscoveredVersion,
    Exact,
    RequestedVersion,
    VersionMatch,
    compatibility,
)

ResolutionTable = Dict[DiscoveredVersion, Path]


def find_executable(
    requested: RequestedVersion,
    directories: Iterable[Union[str, Path]],
) -> Optional[Path]:
    """Return the best executable for `requested`, or None if nothing fits."""
    found: ResolutionTable = {}

    for candidate in iter_candidates(directories):
        match = compatibility(candidate.version, requested)
        if match is VersionMatch.NOT_AT_ALL:
            continue

        if candidate.version in found:
            continue

        if not candidate.path.is_file():
            logger.debug("skipping {}: not a regular file", candidate.path)
            continue

        logger.debug("{} matches {!r} {}", candidate.path, str(requested), match.value)
        found[candidate.version] = candidate.path

        # Nothing can beat an exact hit for an exact request.
        if match is VersionMatch.EXACTLY and isinstance(requested, Exact):
            break

    return choose_executable(found)


def choose_executable(found: ResolutionTable) -> Optional[Path]:
    """Return the path stored under the greatest version."""
    if not found:
        return None

    return found[max(found)]
