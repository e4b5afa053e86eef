"""
Discovery of expected-value fixture files, dood!

Fixtures are looked up by bare file name so that tests find them no matter
which directory the test runner was started from. Directories are visited in
lexical order, depth first, and the first file with a matching name wins.
"""

import logging
import os
from typing import Iterator, List, Optional, Sequence, Tuple, Type, TypeVar

from drupal_testkit.expected.loader import fromFile

from .exceptions import ExpectedJsonNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _checkNoSeparator(value: str, what: str) -> None:
    for sep in _SEPARATORS:
        if sep in value:
            raise ValueError(f"Supplied {what} '{value}' must not contain path separator '{sep}'")


def _entries(root: str, relDir: str) -> Iterator[Tuple[str, bool]]:
    """(relative path, is directory) of every entry of relDir, sorted by name."""
    with os.scandir(os.path.join(root, relDir)) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        yield os.path.normpath(os.path.join(relDir, entry.name)), entry.is_dir(follow_symlinks=False)


def _pathContains(relPath: str, candidates: Sequence[str]) -> bool:
    return any(element in candidates for element in relPath.split(os.sep))


def _collectBaseDirs(root: str, searchDirs: Sequence[str]) -> List[str]:
    baseDirs: List[str] = []

    def visit(relDir: str) -> None:
        for relPath, isDir in _entries(root, relDir):
            if not isDir:
                continue
            if _pathContains(relPath, searchDirs):
                baseDirs.append(relPath)
            else:
                logger.debug(f"skipping dir: {relPath}")
                visit(relPath)

    visit(os.curdir)
    return baseDirs


def _search(root: str, relDir: str, name: str) -> Optional[str]:
    logger.debug(f"searching dir: {relDir}")
    for relPath, isDir in _entries(root, relDir):
        if isDir:
            found = _search(root, relPath, name)
            if found is not None:
                return found
        elif os.path.basename(relPath) == name:
            return relPath
    return None


def findExpectedJson(name: str, *searchDirs: str, root: str = os.curdir) -> str:
    """Find the fixture file called name.

    Args:
        name: Bare file name, e.g. `person-ansel-adams.json`
        *searchDirs: Optional directory names. If given, the file must have at
            least one of them as an ancestor
        root: Directory to search from (default: current directory)

    Returns:
        Path of the file relative to root, e.g. `testdata/taxonomy/person-ansel-adams.json`

    Raises:
        ValueError: If name or any of searchDirs contains a path separator
        ExpectedJsonNotFoundError: If no such file exists
    """
    _checkNoSeparator(name, "file name")
    for searchDir in searchDirs:
        _checkNoSeparator(searchDir, "search directory")

    baseDirs = _collectBaseDirs(root, searchDirs) if searchDirs else [os.curdir]
    for baseDir in baseDirs:
        found = _search(root, baseDir, name)
        if found is not None:
            logger.debug(f"Found {name} at {found}")
            return found

    raise ExpectedJsonNotFoundError(name, searchDirs, root)


def loadExpected(cls: Type[T], name: str, *searchDirs: str, root: str = os.curdir) -> T:
    """Find the fixture file called name and decode it into cls."""
    return fromFile(cls, os.path.join(root, findExpectedJson(name, *searchDirs, root=root)))
