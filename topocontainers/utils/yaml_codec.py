from __future__ import annotations

import io
from typing import IO, Any

import ruamel.yaml

# Safe loader: problem files only contain plain data
yaml_loader = ruamel.yaml.YAML(typ="safe", pure=True)

# Round-trip dumper, to keep mapping keys in the order they were sorted
yaml_dumper = ruamel.yaml.YAML(typ="rt", pure=True)
yaml_dumper.allow_unicode = True
yaml_dumper.default_flow_style = False
yaml_dumper.explicit_start = True  # type: ignore


def loads(string: str | bytes) -> Any:
    return yaml_loader.load(string)


def load(file: IO[str]) -> Any:
    return yaml_loader.load(file)


def dumps(data: Any) -> str:
    # YAML dump with unsorted keys
    with io.StringIO() as fd:
        yaml_dumper.dump(data, fd)
        return fd.getvalue()


def dump(data: Any, file: IO[str]) -> None:
    yaml_dumper.dump(data, file)
