# lsfiles/core/traversal/walker.py
import os
from typing import Iterator, List, Optional, Set
import structlog

from lsfiles.config.settings import TraversalConfig
from lsfiles.core.traversal.ignore_rules import extension_allowed, ignored_paths_for_directory
from lsfiles.exceptions import TraversalError

log = structlog.get_logger(__name__)

def _is_readable(path: str) -> bool:
    # missing, race-deleted and permission-denied entries all count as absent.
    return os.access(path, os.F_OK | os.R_OK)

def _walk_directory(directory: str, config: TraversalConfig, allowed_extensions: Set[str]) -> Iterator[str]:
    try:
        entries = list(os.scandir(directory))
    except OSError as e:
        log.debug("directory_listing_failed_skipped", directory=directory, error=str(e))
        return
    yield from _walk_entries(directory, entries, config, allowed_extensions)

def _walk_entries(directory: str, entries: List[os.DirEntry], config: TraversalConfig, allowed_extensions: Set[str]) -> Iterator[str]:
    ignored = ignored_paths_for_directory(directory, config.ignored)

    for entry in entries:
        path = os.path.normpath(os.path.join(directory, entry.name))
        if path in ignored:
            log.debug("path_ignored", path=path)
            continue

        if not _is_readable(path):
            log.debug("path_unreadable_skipped", path=path)
            continue

        try:
            if entry.is_symlink() and not config.follow_symlinks:
                continue
            is_dir = entry.is_dir(follow_symlinks=config.follow_symlinks)
            is_file = not is_dir and entry.is_file(follow_symlinks=config.follow_symlinks)
        except OSError as e:
            log.debug("entry_stat_failed_skipped", path=path, error=str(e))
            continue

        if is_dir:
            yield from _walk_directory(path, config, allowed_extensions)
        elif is_file and extension_allowed(entry.name, allowed_extensions):
            yield path

def iter_files(root: str, config: Optional[TraversalConfig] = None) -> Iterator[str]:
    """
    Yields the absolute path of every file under `root`, depth-first.

    The root itself is never matched against the ignore list. Raises
    TraversalError when the root cannot be listed; any failure below the
    root only drops the affected entry.

    With follow_symlinks enabled a link cycle recurses until Python raises
    RecursionError; there is no cycle detection.
    """
    config = config or TraversalConfig()
    root = os.path.abspath(root)
    log.info("traversal_started", root=root, ignored=config.ignored, extensions=config.extensions,
             follow_symlinks=config.follow_symlinks)

    try:
        entries = list(os.scandir(root))
    except OSError as e:
        raise TraversalError(e.errno, f"cannot list root directory: {e.strerror or e}", root) from e

    yield from _walk_entries(root, entries, config, set(config.extensions))

def list_files(root: str, config: Optional[TraversalConfig] = None) -> List[str]:
    # eager form of iter_files; order follows directory enumeration.
    files = list(iter_files(root, config))
    log.info("traversal_complete", root=os.path.abspath(root), file_count=len(files))
    return files
