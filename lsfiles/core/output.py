import os
import sys
from pathlib import Path
from typing import Iterable, Optional
import structlog
from lsfiles.exceptions import OutputError

log = structlog.get_logger(__name__)

def format_paths(paths: Iterable[str], relative_to: Optional[str] = None, nul_separated: bool = False) -> str:
    # one path per line (or NUL-terminated), optionally relative to a base directory.
    if relative_to is not None:
        paths = [os.path.relpath(p, relative_to) for p in paths]
    separator = "\0" if nul_separated else "\n"
    return "".join(f"{p}{separator}" for p in paths)

def write_to_stdout(text_content: str):
    # writes text to standard output.
    try:
        sys.stdout.write(text_content)
        sys.stdout.flush()
    except UnicodeEncodeError as e:
        log.warning("stdout_write_failed_trying_binary_fallback", error=str(e))
        sys.stdout.buffer.write(text_content.encode("utf-8", errors="surrogateescape"))
        sys.stdout.buffer.flush()

def write_to_file(output_file_path: Path, text_content: str):
    # writes text content to the specified file path.
    log.info("writing_output_to_file", path=str(output_file_path))
    try:
        output_file_path.write_text(text_content, encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise OutputError(f"failed to write to file '{output_file_path}': {e}")
