import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
from typer.core import TyperCommand

from .api import build_launch_request, exec_python, help_message, list_interpreters
from .env import LauncherEnvironment
from .exceptions import LauncherError
from .log import configure_logging
from .result import LaunchRequest
from .version import DiscoveredVersion

# Context meta key holding the argument vector as given, before Click parses it.
RAW_ARGS_KEY = "pylaunch.raw_args"

app = typer.Typer(
    name="py",
    help="Launch the Python interpreter best matching the requested version",
    add_completion=False,
)


class PassthroughCommand(TyperCommand):
    """Command that keeps its arguments exactly as given.

    Click drops a `--` it meets while still reading options, even with
    unknown options ignored; the interpreter must see it.
    """

    def parse_args(self, ctx, args):
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    "launch",
    cls=PassthroughCommand,
    add_help_option=False,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "allow_interspersed_args": False,
    },
)
def cli_launch(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Launcher flag, then arguments for the interpreter",
    ),
):
    """Run the Python interpreter best matching the requested version.

    Only the first argument is read by the launcher; the rest is passed
    through untouched.

    Examples:

        Run the newest Python 3:
        $ py -3

        Run Python 3.8 with arguments:
        $ py -3.8 -m http.server

        Run a script, honoring its shebang:
        $ py script.py arg1 arg2

        List every interpreter on PATH:
        $ py --list
    """
    launch(ctx.meta.get(RAW_ARGS_KEY, args or []))


def launch(args: List[str]) -> None:
    """Act on the launcher's argument vector, without the launcher's own path."""
    args = list(args)
    environment = LauncherEnvironment.from_environ()
    configure_logging(environment.debug)

    try:
        if args and args[0] in ("-h", "--help"):
            message, executable = help_message(_launcher_path(), environment)
            typer.echo(message)
            exec_python(LaunchRequest(executable=executable, args=["-h"]))
        elif args and args[0] == "--list":
            typer.echo(format_interpreter_table(list_interpreters(environment)), nl=False)
        else:
            exec_python(build_launch_request(args, environment))

    except LauncherError as e:
        typer.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    app()


def format_interpreter_table(executables: Dict[DiscoveredVersion, Path]) -> str:
    """Render discovered interpreters as a two-column table sorted by version."""
    rows = sorted(executables.items())
    width = max([len("Version")] + [len(str(version)) for version, _ in rows])

    # Two spaces between columns.
    lines = [
        f"{'Version':<{width}}  Path",
        f"{'=======':<{width}}  ====",
    ]
    lines.extend(f"{str(version):<{width}}  {path}" for version, path in rows)

    return "\n".join(lines) + "\n"


def _launcher_path() -> str:
    return sys.argv[0] if sys.argv else "py"


if __name__ == "__main__":
    main()
