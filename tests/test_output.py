import pytest
from pathlib import Path

from lsfiles.core.output import format_paths, write_to_file
from lsfiles.exceptions import OutputError

def test_format_paths_newline_terminated():
    assert format_paths(["/r/a.txt", "/r/b/c.md"]) == "/r/a.txt\n/r/b/c.md\n"

def test_format_paths_relative_and_nul():
    assert format_paths(["/r/a.txt", "/r/b/c.md"], relative_to="/r", nul_separated=True) == "a.txt\0b/c.md\0"

def test_format_paths_empty():
    assert format_paths([]) == ""

def test_write_to_file_missing_parent_raises(tmp_path: Path):
    with pytest.raises(OutputError):
        write_to_file(tmp_path / "missing" / "out.txt", "x\n")
