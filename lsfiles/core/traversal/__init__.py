# lsfiles/core/traversal/__init__.py
"""
Recursive file listing.

Walks a directory tree depth-first, skipping ignored paths, unreadable
entries and (by default) symbolic links, and keeps files whose extension
is on the allow-list.
"""
from .ignore_rules import ignored_paths_for_directory
from .walker import iter_files, list_files

__all__ = ["ignored_paths_for_directory", "iter_files", "list_files"]
