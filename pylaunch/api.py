import os
import sys
from pathlib import Path
from typing import Dict, List, NoReturn, Optional, Tuple

from loguru import logger

from . import __version__
from .discovery import all_executables
from .env import LauncherEnvironment
from .exceptions import LaunchError, NoExecutableFound, VersionParseError
from .resolver import find_executable
from .result import LaunchRequest
from .shebang import shebang_from_path
from .version import (
    AnyVersion,
    DiscoveredVersion,
    MajorOnly,
    RequestedVersion,
    parse_requested,
)

HELP_TEMPLATE = """\
Python Launcher for Unix {version}

usage:
{launcher} [launcher-args] [python-args] script [script-args]

Launcher arguments:

-h/--help: This output
--list   : List all known interpreters
-X       : Launch the latest Python X version (e.g. `-3`)
-X.Y     : Launch the specified Python version (e.g. `-3.6`)

The following help text is from {executable}:
"""


def build_launch_request(
    args: List[str],
    environment: LauncherEnvironment,
) -> LaunchRequest:
    """Decide which interpreter to run and with which arguments.

    The first source that gives a definite answer wins; sources are never
    merged:

        1. A version flag as the first argument (`-3`, `-3.6`)
        2. An activated virtual environment, used without any resolution
        3. The shebang of the script named by the first argument
        4. The `PY_PYTHON` default
        5. Any version at all

    Args:
        args: Command-line arguments, without the launcher's own path
        environment: Search path and environment-provided preferences

    Returns:
        LaunchRequest with the executable and the arguments to forward

    Raises:
        NoExecutableFound: If no interpreter satisfies the request
    """
    args = list(args)
    prepended: List[str] = []
    requested = None
    source = None

    if args:
        requested = version_from_flag(args[0])
        if requested is not None:
            args.pop(0)
            requested = _refine_major_only(requested, environment)
            source = "flag"

    if requested is None:
        venv_executable = activated_venv_executable(environment)
        if venv_executable is not None:
            logger.debug("using virtual environment at {}", environment.virtual_env)
            return LaunchRequest(
                executable=venv_executable,
                args=args,
                source="virtual environment",
            )

    if requested is None:
        shebang = _script_shebang(args)
        if shebang is not None:
            requested, prepended = shebang
            source = "shebang"

    if requested is None:
        requested = _default_from_environment(environment)
        if requested is not None:
            source = "PY_PYTHON"

    if requested is None:
        requested = AnyVersion()
        source = "default"

    logger.debug("requested version {!r} from {}", str(requested), source)

    executable = find_executable(requested, environment.search_path)
    if executable is None:
        raise NoExecutableFound()

    return LaunchRequest(
        executable=executable,
        args=prepended + args,
        requested=requested,
        source=source,
    )


def version_from_flag(arg: str) -> Optional[RequestedVersion]:
    """Return the version named by a `-X` or `-X.Y` flag, else None."""
    if not arg.startswith("-") or arg == "-":
        return None

    try:
        return parse_requested(arg[1:])
    except VersionParseError:
        return None


def activated_venv_executable(environment: LauncherEnvironment) -> Optional[Path]:
    """Return the interpreter of the activated virtual environment.

    Only an existing regular file at `<VIRTUAL_ENV>/bin/python` counts.
    """
    if environment.virtual_env is None:
        return None

    executable = environment.virtual_env / "bin" / "python"
    if not executable.is_file():
        logger.debug("ignoring virtual environment: {} is not a file", executable)
        return None

    return executable


def list_interpreters(
    environment: LauncherEnvironment,
) -> Dict[DiscoveredVersion, Path]:
    """Discover every Python interpreter on the search path.

    Returns:
        Mapping of discovered version to the first executable found for it

    Raises:
        NoExecutableFound: If the search path holds no interpreter at all
    """
    executables = all_executables(environment.search_path)
    if not executables:
        raise NoExecutableFound("No Python executable found")

    return executables


def help_message(
    launcher_path: str,
    environment: LauncherEnvironment,
) -> Tuple[str, Path]:
    """Return the launcher usage text and the interpreter whose help follows it.

    Raises:
        NoExecutableFound: If no interpreter is available to describe
    """
    executable = find_executable(AnyVersion(), environment.search_path)
    if executable is None:
        raise NoExecutableFound()

    message = HELP_TEMPLATE.format(
        version=__version__,
        launcher=launcher_path,
        executable=executable,
    )
    return message, executable


def exec_python(request: LaunchRequest) -> NoReturn:
    """Replace the current process with the requested interpreter.

    Never returns on success.

    Raises:
        LaunchError: If the operating system refuses to run the executable
    """
    logger.debug("executing {}", request.argv)
    # exec discards unflushed output, e.g. the launcher help.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execv(request.executable, request.argv)
    except OSError as e:
        raise LaunchError(f"could not run {request.executable}: {e}") from e


# Internal helper functions


def _refine_major_only(
    requested: RequestedVersion,
    environment: LauncherEnvironment,
) -> RequestedVersion:
    """Apply `PY_PYTHON<major>` to a major-only request, if it is valid."""
    if not isinstance(requested, MajorOnly):
        return requested

    preferred = environment.major_defaults.get(requested.major)
    if preferred is None:
        return requested

    name = f"PY_PYTHON{requested.major}"
    refined = _parse_environment_version(name, preferred)
    if refined is None:
        return requested

    if isinstance(refined, AnyVersion) or refined.major != requested.major:
        logger.debug("ignoring {}={!r}: not a Python {} version", name, preferred, requested.major)
        return requested

    return refined


def _default_from_environment(
    environment: LauncherEnvironment,
) -> Optional[RequestedVersion]:
    """Return the `PY_PYTHON` preference, refined by `PY_PYTHON<major>`."""
    if environment.default_version is None:
        return None

    requested = _parse_environment_version("PY_PYTHON", environment.default_version)
    if requested is None:
        return None

    return _refine_major_only(requested, environment)


def _parse_environment_version(name: str, value: str) -> Optional[RequestedVersion]:
    try:
        return parse_requested(value)
    except VersionParseError:
        logger.debug("ignoring {}={!r}: not a version", name, value)
        return None


def _script_shebang(args: List[str]):
    """Return the shebang of the script named by the first argument, if any."""
    if not args or args[0].startswith("-"):
        return None

    script = Path(args[0])
    if not script.is_file():
        return None

    return shebang_from_path(script)
