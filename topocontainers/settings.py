from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
import types
from typing import Any, Optional

log = logging.getLogger("settings")


class Settings:
    # If True, visit unrelated keys in ascending order when linearizing
    SORT_KEYS: bool

    # Container type used for data files that do not specify one
    CONTAINER: str

    # Format used to print sort results
    OUTPUT_FORMAT: str

    # Format of input data files. If None, guess it from the file extension
    INPUT_FORMAT: Optional[str]

    def __init__(self, default_settings: Optional[str] = "topocontainers.global_settings") -> None:
        if default_settings is not None:
            self.add_module(importlib.import_module(default_settings))

    def as_dict(self) -> dict[str, Any]:
        res = {}
        for setting in dir(self):
            if setting.isupper():
                res[setting] = getattr(self, setting)
        return res

    def add_module(self, mod: types.ModuleType) -> None:
        """
        Add uppercase settings from mod into this module
        """
        for setting in dir(mod):
            if setting.isupper():
                setattr(self, setting, getattr(mod, setting))

    def load(self, pathname: str) -> None:
        """
        Load settings from a python file, importing only uppercase symbols
        """
        log.debug("%s: loading settings", pathname)
        orig_dwb = sys.dont_write_bytecode
        try:
            sys.dont_write_bytecode = True
            spec = importlib.util.spec_from_file_location(
                "topocontainers.user_settings", pathname
            )
            if spec is None or spec.loader is None:
                raise ImportError(f"{pathname}: cannot load settings file")
            user_settings = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(user_settings)
        finally:
            sys.dont_write_bytecode = orig_dwb

        self.add_module(user_settings)
