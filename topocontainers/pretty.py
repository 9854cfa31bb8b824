from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any


def pformat(value: Any) -> str:
    """
    Format a value the way container contents are usually written down:
    sequences as ``[a, b]``, tuples as ``(a, b)``, mappings as ``{a: b}``.

    Strings are not quoted, so that ``[("F", 5)]`` is rendered as
    ``[(F, 5)]``.
    """
    if isinstance(value, str):
        return value
    elif isinstance(value, tuple):
        return "(" + ", ".join(pformat(v) for v in value) + ")"
    elif isinstance(value, Mapping):
        return "{" + ", ".join(f"{pformat(k)}: {pformat(v)}" for k, v in value.items()) + "}"
    elif isinstance(value, Set):
        return "{" + ", ".join(pformat(v) for v in value) + "}"
    elif hasattr(value, "__iter__"):
        return "[" + ", ".join(pformat(v) for v in value) + "]"
    else:
        return str(value)
