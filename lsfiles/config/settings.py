from dataclasses import dataclass, field
from typing import Any, List
import structlog

from lsfiles.exceptions import ConfigError

log = structlog.get_logger(__name__)

# version-control and dependency folders skipped unless told otherwise.
DEFAULT_IGNORED: List[str] = [".git", "node_modules"]

def require_str_list(key: str, value: Any) -> List[str]:
    # a bare string is iterable too; reject it rather than splitting it into characters.
    if (isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset))
            or not all(isinstance(v, str) for v in value)):
        raise ConfigError(f"'{key}' must be a list of strings, got {value!r}")
    return list(value)

def normalize_extension(ext: str) -> str:
    # accepts ".txt" as well as "txt"; case is preserved.
    if ext.startswith("."):
        return ext[1:]
    return ext

@dataclass
class TraversalConfig:
    """
    Settings for a single traversal.

    ignored: absolute paths, or names/relative paths resolved against each
        directory as it is scanned.
    extensions: accepted extensions without the leading dot. Empty accepts
        every file.
    follow_symlinks: descend into (and report) symbolic links.
    """
    ignored: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORED))
    extensions: List[str] = field(default_factory=list)
    follow_symlinks: bool = False

    def __post_init__(self):
        self.ignored = require_str_list("ignored", self.ignored)
        extensions = require_str_list("extensions", self.extensions)
        cleaned = [normalize_extension(e) for e in extensions]
        if cleaned != extensions:
            log.debug("extensions_leading_dot_stripped", extensions=cleaned)
        self.extensions = cleaned
