from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Optional, Type

from ..settings import Settings

from . import cli

Fail = cli.Fail
Success = cli.Success

log = logging.getLogger("command")

COMMANDS: list[Type["Command"]] = []

# Settings files looked up in the current directory if --settings is not used
SETTINGS_FILES = [".topo.py", "topo_settings.py"]


def register(c: Type["Command"]) -> Type["Command"]:
    COMMANDS.append(c)
    return c


class Command(cli.Command):
    def __init__(self, args: argparse.Namespace):
        super().__init__(args)
        self.settings = Settings()

        settings_file = self.find_settings()
        if settings_file is not None:
            log.info("%s: loading settings", settings_file)
            try:
                self.settings.load(settings_file)
            except (OSError, ImportError, SyntaxError) as e:
                raise Fail(f"{settings_file}: cannot load settings: {e}")

        # Command line overrides for settings
        if getattr(self.args, "sort_keys", False):
            self.settings.SORT_KEYS = True

    def find_settings(self) -> Optional[str]:
        """
        Return the path of the settings file to load, if any
        """
        if self.args.settings:
            if not self.args.settings.endswith(".py"):
                log.warning("%s: settings file does not end in `.py`", self.args.settings)
            return os.path.abspath(self.args.settings)

        for relpath in SETTINGS_FILES:
            abspath = os.path.abspath(relpath)
            if os.path.isfile(abspath):
                return abspath
        return None

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("--settings", metavar="file.py",
                            help="python file with settings (default: {} in the current directory)".format(
                                " or ".join(SETTINGS_FILES)))
        return parser
