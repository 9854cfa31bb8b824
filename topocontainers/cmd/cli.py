from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence, cast

try:
    import coloredlogs

    HAS_COLOREDLOGS = True
except ModuleNotFoundError:
    HAS_COLOREDLOGS = False

log = logging.getLogger("cli")


def _get_first_docstring_line(obj: Any) -> Optional[str]:
    if obj.__doc__ is None:
        raise RuntimeError(f"{obj!r} lacks a docstring")
    try:
        return cast(str, obj.__doc__).strip().split("\n")[0].strip()
    except (AttributeError, IndexError):
        return None


class Fail(BaseException):
    """
    Failure that causes the program to exit with an error message.

    No stack trace is printed.
    """
    pass


class Success(BaseException):
    """
    Exception raised when a command has been successfully handled, and no
    further processing should happen
    """
    pass


class Command:
    """
    Base class for actions run from command line
    """

    NAME: Optional[str] = None

    def __init__(self, args: argparse.Namespace):
        if self.NAME is None:
            self.NAME = self.__class__.__name__.lower()
        self.args = args
        self.setup_logging()

    def setup_logging(self) -> None:
        FORMAT = "%(asctime)-15s %(levelname)s %(name)s %(message)s"
        if self.args.verbose:
            level = logging.INFO
        else:
            level = logging.WARN

        debug_loggers: list[str] = []
        if self.args.debug:
            level = logging.DEBUG
        elif self.args.debug_only:
            debug_loggers = [name.strip() for name in self.args.debug_only.split(",") if name.strip()]

        handler_level = logging.DEBUG if debug_loggers else level
        if HAS_COLOREDLOGS:
            coloredlogs.install(level=handler_level, fmt=FORMAT)
        else:
            logging.basicConfig(level=handler_level, stream=sys.stderr, format=FORMAT)

        if debug_loggers:
            logging.getLogger().setLevel(level)
            for name in debug_loggers:
                logging.getLogger(name).setLevel(logging.DEBUG)

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run not implemented")

    @classmethod
    def add_subparser(cls, subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
        if cls.NAME is None:
            cls.NAME = cls.__name__.lower()
        parser: argparse.ArgumentParser = subparsers.add_parser(
            cls.NAME,
            help=_get_first_docstring_line(cls),
        )
        parser.set_defaults(command=cls)
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="verbose output",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="debugging output",
        )
        parser.add_argument(
            "--debug-only",
            metavar="loggers",
            help="debugging output only for a comma-separated list of loggers"
                 " (toposort, merge, data, settings, command, ...)",
        )
        return parser


def run_command(parser: argparse.ArgumentParser, argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse the command line, and run the command it selects.

    Returns the exit code for the program: Fail is reported on stderr without
    a stack trace, and Success stops the command early without errors.
    """
    args = parser.parse_args(argv)

    command = getattr(args, "command", None)
    if command is None:
        parser.print_help()
        return 2

    try:
        handler = command(args)
        handler.run()
    except Success:
        log.debug("%s: stopped early", command.NAME)
    except Fail as e:
        print(e, file=sys.stderr)
        return 1
    return 0
