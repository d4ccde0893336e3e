class LauncherError(Exception):
    """Base exception for all pylaunch errors."""


class VersionParseError(LauncherError, ValueError):
    """Raised when text does not follow the `<major>` or `<major>.<minor>` form."""


class NoExecutableFound(LauncherError):
    """Raised when no interpreter on the search path satisfies the request."""

    def __init__(self, message: str = "no Python executable found"):
        super().__init__(message)


class LaunchError(LauncherError):
    """Raised when replacing the current process with the interpreter fails."""
