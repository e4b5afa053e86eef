"""
Test resource exceptions.
"""

from typing import Sequence


class ExpectedJsonNotFoundError(FileNotFoundError):
    """Raised when no fixture file with the requested name exists below the search root.

    Attributes:
        name: Requested file name
        searchDirs: Directory names the file had to live under (may be empty)
        root: Directory the search started from
    """

    def __init__(self, name: str, searchDirs: Sequence[str] = (), root: str = ".") -> None:
        message = f"Could not locate file '{name}' below '{root}'"
        if searchDirs:
            message += f" in any of {list(searchDirs)}"
        super().__init__(message)
        self.name = name
        self.searchDirs = list(searchDirs)
        self.root = root
