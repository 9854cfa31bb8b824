from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from ..containers import CONTAINERS
from ..data import ProblemError, load_problem, result_document, write_data
from ..merge import CapacityError
from ..pretty import pformat
from ..toposort import CycleError
from ..utils import timings
from .command import Command, Fail, register

log = logging.getLogger("sort")

OUTPUT_FORMATS = ("pretty", "json", "yaml", "toml")


class ProblemCommand(Command):
    """
    Command working on a problem loaded from a data file
    """
    def __init__(self, *args: Any, **kw: Any):
        super().__init__(*args, **kw)
        if self.args.container:
            self.settings.CONTAINER = self.args.container
        if self.args.input_format:
            self.settings.INPUT_FORMAT = self.args.input_format

    def load_problem(self) -> Any:
        try:
            return load_problem(self.args.file, self.settings)
        except OSError as e:
            raise Fail(f"{self.args.file}: cannot read: {e.strerror}")
        except (ProblemError, NotImplementedError) as e:
            raise Fail(str(e))

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("file", help="json, yaml, or toml file with the items and constraints to sort")
        parser.add_argument("--container", choices=sorted(CONTAINERS),
                            help="container type, if not given in the file. Overrides settings.CONTAINER")
        parser.add_argument("--input-format", choices=("json", "yaml", "toml"),
                            help="format of the input file. Overrides settings.INPUT_FORMAT")
        parser.add_argument("--sort-keys", action="store_true",
                            help="visit unrelated keys in ascending order. Overrides settings.SORT_KEYS")
        return parser


@register
class Sort(ProblemCommand):
    """
    Print the items of a container in an order that respects its constraints
    """

    def run(self) -> None:
        container = self.load_problem()
        with timings("Sorted in %fs: %d items of a %s", len(container), container.__class__.__name__):
            try:
                result = container.sort()
            except CycleError as e:
                raise Fail("{}: {}: {}".format(self.args.file, e.args[0], pformat(e.args[1])))
            except CapacityError as e:
                raise Fail(f"{self.args.file}: {e}")

        fmt = self.args.format or self.settings.OUTPUT_FORMAT
        if fmt == "pretty":
            print(pformat(result))
        elif fmt in OUTPUT_FORMATS:
            write_data(sys.stdout, result_document(container, result), fmt)
        else:
            raise Fail(f"unsupported output format {fmt!r}")

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS,
                            help="output format. Overrides settings.OUTPUT_FORMAT")
        return parser


@register
class Linearize(ProblemCommand):
    """
    Print all the constrained keys in topological order, one per line
    """

    def run(self) -> None:
        container = self.load_problem()
        try:
            order = container.linearize()
        except CycleError as e:
            raise Fail("{}: {}: {}".format(self.args.file, e.args[0], pformat(e.args[1])))
        for key in order:
            print(pformat(key))
