"""
Common utilities for drupal-testkit.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def jsonDumps(data: Any, compact: Optional[bool] = None, **kwargs) -> str:
    dumpKwargs = {
        "ensure_ascii": False,
        "default": str,
        "sort_keys": True,
    }

    if compact is None:
        # If indent is passed, then user want pretty-printed JSON,
        #  no need to use compact separators
        compact = "indent" not in kwargs

    if compact:
        dumpKwargs["separators"] = (",", ":")
    dumpKwargs.update(kwargs)
    return json.dumps(data, **dumpKwargs)


def shorten(text: str, maxLength: int = 200) -> str:
    """Cut text down to maxLength characters for log and error messages."""
    if len(text) <= maxLength:
        return text
    return text[: maxLength - 3] + "..."


def loadDotEnv(path: str = ".env", populateEnv: bool = True, override: bool = False) -> Dict[str, str]:
    """
    Simple dotenv file loader.
    Read file line by line and put key-value pairs into dictionary.

    Blank lines and lines starting with `#` are skipped, an optional `export `
    prefix is dropped and the value may itself contain `=`.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to populate environment variables (default True)
        override: Whether values from the file replace variables which are
            already set in the environment (default False)

    Returns:
        Dictionary of key-value pairs from .env file
    """
    ret: Dict[str, str] = {}
    with open(path, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export ") :]
            key, value = line.split("=", 1)
            ret[key.strip()] = value.strip().strip('"').strip("'")

    if populateEnv:
        for k, v in ret.items():
            if override or k not in os.environ:
                os.environ[k] = v
    logger.debug(f"Loaded {len(ret)} variable(s) from {path}")
    return ret
