from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping, Sequence
from typing import IO, TYPE_CHECKING, Any, Optional

from .containers import CONTAINERS, TopoSortDict, TopoSortMap
from .utils import yaml_codec

if TYPE_CHECKING:
    from .settings import Settings

log = logging.getLogger("data")


re_ext = re.compile(r"\.(json|toml|yaml|yml)$")


class ProblemError(ValueError):
    """
    A data file does not describe a valid sorting problem
    """
    def __init__(self, name: str, msg: str):
        super().__init__(f"{name}: {msg}")
        self.name = name


def guess_format(pathname: str) -> Optional[str]:
    """
    Return the data format of a file given its name, or None if it cannot be
    guessed
    """
    mo = re_ext.search(pathname)
    if mo is None:
        return None
    fmt = mo.group(1)
    if fmt == "yml":
        return "yaml"
    return fmt


def parse_data(fd: IO[str], fmt: str) -> Any:
    if fmt == "json":
        import json
        return json.load(fd)
    elif fmt == "toml":
        import toml
        return toml.load(fd)
    elif fmt == "yaml":
        return yaml_codec.load(fd)
    else:
        raise NotImplementedError("data format {} is not supported".format(fmt))


def write_data(fd: IO[str], data: Any, fmt: str) -> None:
    if fmt == "json":
        import json
        json.dump(data, fd, indent=2)
        fd.write("\n")
    elif fmt == "toml":
        import toml
        toml.dump(data, fd)
    elif fmt == "yaml":
        yaml_codec.dump(data, fd)
    else:
        raise NotImplementedError("data format {} is not supported".format(fmt))


def iter_constraints(name: str, constraints: Any) -> list[tuple[Any, Any]]:
    """
    Normalize the ``constraints`` element of a problem document into a list
    of ``(before, after)`` pairs.

    Constraints can be given as a mapping from a key to the list of keys that
    follow it, or as a list of pairs.
    """
    if constraints is None:
        return []

    res: list[tuple[Any, Any]] = []
    if isinstance(constraints, Mapping):
        for v, succ in constraints.items():
            if isinstance(succ, (str, bytes)) or not isinstance(succ, Sequence):
                # A single successor
                res.append((v, succ))
            else:
                for w in succ:
                    res.append((v, w))
    elif isinstance(constraints, Sequence) and not isinstance(constraints, str):
        for pair in constraints:
            if isinstance(pair, str) or not isinstance(pair, Sequence) or len(pair) != 2:
                raise ProblemError(name, f"constraint {pair!r} is not a [before, after] pair")
            res.append((pair[0], pair[1]))
    else:
        raise ProblemError(name, "constraints should be a mapping or a list of pairs")
    return res


def check_key(name: str, key: Any, what: str) -> None:
    """
    Raise ProblemError if key cannot be used to match container elements
    """
    try:
        hash(key)
    except TypeError:
        raise ProblemError(name, f"{what} {key!r} cannot be used as a key")


def build_container(doc: Any, settings: Settings, name: str = "<data>") -> Any:
    """
    Build a container with its constraints from a parsed problem document
    """
    if not isinstance(doc, Mapping):
        raise ProblemError(name, "problem document should be a mapping")

    container_type = doc.get("container") or settings.CONTAINER
    cls = CONTAINERS.get(container_type) if isinstance(container_type, str) else None
    if cls is None:
        raise ProblemError(name, f"unsupported container type {container_type!r}")

    sort_keys = doc.get("sort_keys", settings.SORT_KEYS or issubclass(cls, TopoSortMap))
    items = doc.get("items")
    container: Any
    if issubclass(cls, TopoSortDict):
        if items is None:
            items = {}
        if not isinstance(items, Mapping):
            raise ProblemError(name, f"items of a {container_type} container should be a mapping")
        container = cls(items, sort_keys=sort_keys)
    else:
        if items is None:
            items = []
        if isinstance(items, (str, Mapping)) or not isinstance(items, Sequence):
            raise ProblemError(name, f"items of a {container_type} container should be a list")
        for item in items:
            check_key(name, item, "item")
        container = cls(items, sort_keys=sort_keys)

    for v, w in iter_constraints(name, doc.get("constraints")):
        check_key(name, v, "constraint source")
        check_key(name, w, "constraint target")
        container.add_constraint(v, w)

    log.debug("%s: loaded %s container with %d items and %d constraints",
              name, container_type, len(container), len(container.constraints))
    return container


def load_problem(pathname: str, settings: Settings) -> Any:
    """
    Load a data file describing a container and its constraints
    """
    fmt = settings.INPUT_FORMAT or guess_format(pathname)
    if fmt is None:
        raise ProblemError(pathname, "cannot guess the file format from its extension")

    with open(pathname, "rt") as fd:
        doc = parse_data(fd, fmt)

    return build_container(doc, settings, name=os.path.basename(pathname))


def result_document(container: Any, result: list[Any]) -> dict[str, Any]:
    """
    Turn a sort result into plain data that can be written with write_data
    """
    if isinstance(container, TopoSortDict):
        return {"items": {k: v for k, v in result}}
    else:
        return {"items": list(result)}
