from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .version import RequestedVersion


@dataclass
class LaunchRequest:
    """The interpreter chosen for one invocation and what to pass it.

    Attributes:
        executable: Absolute path of the interpreter to run
        args: Arguments after the executable: shebang arguments, then the user's
        requested: Version that was resolved, None for a virtual environment
        source: What decided the version: "flag", "virtual environment",
            "shebang", "PY_PYTHON" or "default"
    """

    executable: Path
    args: List[str] = field(default_factory=list)
    requested: Optional[RequestedVersion] = None
    source: str = "default"

    @property
    def argv(self) -> List[str]:
        """Argument vector for exec, starting with the executable itself."""
        return [str(self.executable), *self.args]
