import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from .discovery import split_search_path

_MAJOR_DEFAULT_VAR = re.compile(r"\APY_PYTHON([0-9]+)\Z")


@dataclass(frozen=True)
class LauncherEnvironment:
    """Process-environment inputs for one launcher invocation.

    Attributes:
        search_path: Directories to scan, in `PATH` order, without duplicates
        virtual_env: Root of the activated virtual environment (`VIRTUAL_ENV`)
        default_version: Preferred version when nothing else asks (`PY_PYTHON`)
        major_defaults: Preferred version per major (`PY_PYTHON3=3.6` etc)
        debug: Whether to emit debug logs (`PYLAUNCH_DEBUG`)
    """

    search_path: Tuple[Path, ...] = ()
    virtual_env: Optional[Path] = None
    default_version: Optional[str] = None
    major_defaults: Mapping[int, str] = field(default_factory=dict)
    debug: bool = False

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LauncherEnvironment":
        """Build the environment from `environ` (default: ``os.environ``).

        Empty variables count as unset.
        """
        if environ is None:
            environ = os.environ

        virtual_env = environ.get("VIRTUAL_ENV")
        return cls(
            search_path=tuple(split_search_path(environ.get("PATH", ""))),
            virtual_env=Path(virtual_env) if virtual_env else None,
            default_version=environ.get("PY_PYTHON") or None,
            major_defaults=_major_defaults(environ),
            debug=bool(environ.get("PYLAUNCH_DEBUG")),
        )


def _major_defaults(environ: Mapping[str, str]) -> Dict[int, str]:
    """Collect `PY_PYTHON<major>` variables keyed by major."""
    defaults = {}

    for name, value in environ.items():
        match = _MAJOR_DEFAULT_VAR.match(name)
        if match and value:
            defaults[int(match.group(1))] = value

    return defaults
