from __future__ import annotations

from typing import Optional

# Default settings

# If True, keys without constraints between them are linearized in ascending
# key order. If False, they follow the order in which they were first used as
# the source of a constraint
SORT_KEYS: bool = False

# Container type used for data files that do not specify one.
# One of "dict", "map", "list", "array"
CONTAINER: str = "dict"

# Format used to print sort results: "pretty", "json", "yaml", or "toml"
OUTPUT_FORMAT: str = "pretty"

# Format of input data files: "json", "yaml", or "toml".
# If None, it is guessed from the file extension
INPUT_FORMAT: Optional[str] = None
