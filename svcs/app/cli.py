"""SVCS command-line interface.

Commands: config, add, log, commit, checkout. Output is plain text on
stdout; every user-facing failure exits with 1.
"""

from __future__ import annotations

import argparse
import os
import sys
from enum import Enum

from .. import __version__
from ..core.controller import SvcsController
from ..core.errors import SvcsError, UsageError
from ..utils.env import get_repo_root, log_debug


class Command(str, Enum):
    """The fixed set of SVCS commands."""
    CONFIG = "config"
    ADD = "add"
    LOG = "log"
    COMMIT = "commit"
    CHECKOUT = "checkout"

    @property
    def help(self) -> str:
        return HELP_MESSAGES[self]


HELP_MESSAGES = {
    Command.CONFIG: "Get and set a username.",
    Command.ADD: "Add a file to the index.",
    Command.LOG: "Show commit logs.",
    Command.COMMIT: "Save changes.",
    Command.CHECKOUT: "Restore a file.",
}


class _Parser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting with 2."""

    def error(self, message):
        raise UsageError(f"Error: {message}", hint="Run 'svcs --help' to list the commands.")


def create_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="svcs",
        description="SVCS - a minimal local version control system",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )

    subparsers = parser.add_subparsers(dest="command")

    config = subparsers.add_parser(Command.CONFIG.value, help=Command.CONFIG.help)
    config.add_argument("name", nargs="*", help="Username to store")

    add = subparsers.add_parser(Command.ADD.value, help=Command.ADD.help)
    add.add_argument("paths", nargs="*", help="Files to track")

    subparsers.add_parser(Command.LOG.value, help=Command.LOG.help)

    commit = subparsers.add_parser(Command.COMMIT.value, help=Command.COMMIT.help)
    commit.add_argument("message", nargs="*", help="Commit message")

    checkout = subparsers.add_parser(Command.CHECKOUT.value, help=Command.CHECKOUT.help)
    checkout.add_argument("ref", nargs="?", help="Commit hash or 'latest'")

    return parser


def print_help() -> None:
    print("These are SVCS commands:")
    for command in Command:
        print(f"{command.value:<11} {command.help}")


def main(args: list[str] | None = None) -> int:
    argv = sys.argv[1:] if args is None else list(args)

    if not argv or argv[0] in ("-h", "--help"):
        print_help()
        return 0

    first = next((a for a in argv if not a.startswith("-")), None)
    if first is not None and first not in {c.value for c in Command}:
        print(f"'{first}' is not a SVCS command.")
        return 1

    try:
        parsed = create_parser().parse_args(argv)
    except SvcsError as e:
        _print_error(e)
        return 1

    if parsed.debug:
        os.environ["SVCS_DEBUG"] = "1"

    if not parsed.command:
        print_help()
        return 0

    command = Command(parsed.command)
    controller = SvcsController(project_root=get_repo_root())
    log_debug(f"{command.value} in {controller.project_root}")

    try:
        if command is Command.CONFIG:
            return cmd_config(parsed, controller)
        if command is Command.ADD:
            return cmd_add(parsed, controller)
        if command is Command.LOG:
            return cmd_log(controller)
        if command is Command.COMMIT:
            return cmd_commit(parsed, controller)
        if command is Command.CHECKOUT:
            return cmd_checkout(parsed, controller)
    except SvcsError as e:
        _print_error(e)
        return 1
    except OSError as e:
        print(f"Error: {e}")
        return 1

    print_help()
    return 1


def cmd_config(args: argparse.Namespace, controller: SvcsController) -> int:
    if args.name:
        name = controller.set_author(" ".join(args.name))
        print(f"The username is {name}.")
        return 0

    name = controller.get_author()
    if name is None:
        print("Please, tell me who you are.")
    else:
        print(f"The username is {name}.")
    return 0


def cmd_add(args: argparse.Namespace, controller: SvcsController) -> int:
    if not args.paths:
        tracked = controller.tracked_files()
        if not tracked:
            print(Command.ADD.help)
            return 0
        print("Tracked files:")
        for path in tracked:
            print(path)
        return 0

    for path in controller.add(args.paths):
        print(f"The file '{path}' is tracked.")
    return 0


def cmd_log(controller: SvcsController) -> int:
    entries = controller.list_log()
    if not entries:
        print("No commits yet.")
        return 0

    blocks = [
        f"commit {entry.commit_hash}\nAuthor: {entry.author}\n{entry.message}"
        for entry in entries
    ]
    print("\n\n".join(blocks))
    return 0


def cmd_commit(args: argparse.Namespace, controller: SvcsController) -> int:
    message = " ".join(args.message) if args.message else None
    controller.commit(message)
    print("Changes are committed.")
    return 0


def cmd_checkout(args: argparse.Namespace, controller: SvcsController) -> int:
    result = controller.checkout(args.ref)
    print(f"Switched to commit {result.commit_hash}.")
    return 0


def _print_error(error: SvcsError) -> None:
    print(error.message)
    if error.hint:
        print(error.hint)


if __name__ == "__main__":
    sys.exit(main())
