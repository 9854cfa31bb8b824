from __future__ import annotations

import argparse
from typing import Optional, Sequence

from . import demo, sort  # noqa: F401, registers commands
from .cli import run_command
from .command import COMMANDS


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort container contents according to ordering constraints.")
    parser.set_defaults(command=None)
    subparsers = parser.add_subparsers(help="sub-command help", dest="name")
    for cmd in COMMANDS:
        cmd.add_subparser(subparsers)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run_command(make_parser(), argv)
