"""pylaunch: Run the right Python interpreter on Unix.

Given an ambiguous request like "run Python 3", the launcher searches `PATH`
for ``pythonX`` and ``pythonX.Y`` executables, picks the best match and
replaces itself with it, forwarding every remaining argument.

Example:
    >>> from pylaunch import LauncherEnvironment, build_launch_request
    >>> request = build_launch_request(["-3", "-c", "print(1)"], LauncherEnvironment.from_environ())
    >>> request.argv
    ['/usr/bin/python3.12', '-c', 'print(1)']

Main Components:
    - build_launch_request: Decide which interpreter runs and with what arguments
    - find_executable: Resolve a requested version against a search path
    - list_interpreters: Discover every interpreter on the search path
    - exec_python: Replace the current process with the chosen interpreter
"""

from loguru import logger

__version__ = "0.1.0"

from .api import (
    activated_venv_executable,
    build_launch_request,
    exec_python,
    list_interpreters,
    version_from_flag,
)
from .env import LauncherEnvironment
from .exceptions import (
    LaunchError,
    LauncherError,
    NoExecutableFound,
    VersionParseError,
)
from .resolver import find_executable
from .result import LaunchRequest
from .version import (
    AnyVersion,
    Exact,
    MajorOnly,
    VersionMatch,
    compatibility,
    parse_discovered,
    parse_requested,
)

logger.disable("pylaunch")

__all__ = [
    "build_launch_request",
    "find_executable",
    "list_interpreters",
    "exec_python",
    "activated_venv_executable",
    "version_from_flag",
    "LauncherEnvironment",
    "LaunchRequest",
    "AnyVersion",
    "MajorOnly",
    "Exact",
    "VersionMatch",
    "compatibility",
    "parse_requested",
    "parse_discovered",
    "LauncherError",
    "VersionParseError",
    "NoExecutableFound",
    "LaunchError",
]
