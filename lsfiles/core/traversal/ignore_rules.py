# lsfiles/core/traversal/ignore_rules.py
import os
from typing import Iterable, Set

def resolve_ignored_entry(directory: str, entry: str) -> str:
    # absolute entries stand alone, relative ones hang off the scanned directory.
    if os.path.isabs(entry):
        return os.path.normpath(entry)
    return os.path.normpath(os.path.join(directory, entry))

def ignored_paths_for_directory(directory: str, ignored: Iterable[str]) -> Set[str]:
    """
    Returns the absolute paths that must be skipped while listing `directory`.

    Relative entries are resolved against `directory` itself rather than the
    traversal root, so a bare name such as ".git" is skipped at every level.
    """
    return {resolve_ignored_entry(directory, entry) for entry in ignored}

def extension_of(name: str) -> str:
    # "b.txt" -> "txt", "archive.tar.gz" -> "gz", ".bashrc" and "README" -> "".
    return os.path.splitext(name)[1][1:]

def extension_allowed(name: str, extensions: Iterable[str]) -> bool:
    # exact, case-sensitive match; an empty allow-list accepts everything.
    allowed = set(extensions)
    if not allowed:
        return True
    return extension_of(name) in allowed
