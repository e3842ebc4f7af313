import pytest
from pathlib import Path
from click.testing import CliRunner

from lsfiles import __version__
from lsfiles.cli.interface import main_cli

@pytest.fixture
def cli_project(tmp_path: Path) -> Path:
    """Creates a mock project for testing the CLI end-to-end."""
    proj_dir = tmp_path / "cli_proj"
    (proj_dir / "a").mkdir(parents=True)
    (proj_dir / ".git").mkdir()
    (proj_dir / "build").mkdir()

    (proj_dir / "a" / "b.txt").write_text("b")
    (proj_dir / "a" / "c.md").write_text("c")
    (proj_dir / ".git" / "x").write_text("x")
    (proj_dir / "build" / "out.txt").write_text("out")
    return proj_dir

def output_lines(result):
    return [line for line in result.stdout.splitlines() if line]

def test_cli_default_listing(cli_project: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(cli_project), "--no-config", "--sort"], catch_exceptions=False)

    assert result.exit_code == 0
    assert output_lines(result) == [
        str(cli_project / "a" / "b.txt"),
        str(cli_project / "a" / "c.md"),
        str(cli_project / "build" / "out.txt"),
    ]

def test_cli_relative_with_extension_and_ignore(cli_project: Path):
    runner = CliRunner()
    result = runner.invoke(
        main_cli,
        [str(cli_project), "--no-config", "--relative", "-e", "txt", "-x", "build"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert output_lines(result) == ["a/b.txt"]

def test_cli_no_default_ignores(cli_project: Path):
    runner = CliRunner()
    result = runner.invoke(
        main_cli,
        [str(cli_project), "--no-config", "--relative", "--sort", "--no-default-ignores"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert output_lines(result) == [".git/x", "a/b.txt", "a/c.md", "build/out.txt"]

def test_cli_nul_separated(cli_project: Path):
    runner = CliRunner()
    result = runner.invoke(
        main_cli,
        [str(cli_project), "--no-config", "--relative", "--sort", "-0", "-e", "md", "-e", "txt", "-x", "build"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert result.stdout == "a/b.txt\0a/c.md\0"

def test_cli_reads_project_config(cli_project: Path):
    (cli_project / ".lsfiles.toml").write_text('ignored = ["build", ".git"]\nextensions = ["txt"]\n')
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(cli_project), "--relative"], catch_exceptions=False)

    assert result.exit_code == 0
    assert output_lines(result) == ["a/b.txt"]

def test_cli_output_file_and_summary(cli_project: Path, tmp_path: Path):
    out_file = tmp_path / "listing.txt"
    runner = CliRunner()
    result = runner.invoke(
        main_cli,
        [str(cli_project), "--no-config", "--relative", "--sort", "-o", str(out_file), "--summary"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert out_file.read_text() == "a/b.txt\na/c.md\nbuild/out.txt\n"
    assert "files found: 3" in result.output

def test_cli_missing_root_exits_with_error(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(tmp_path / "nope"), "--no-config"])

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "cannot list root directory" in result.output

def test_cli_invalid_config_exits_with_error(cli_project: Path):
    (cli_project / ".lsfiles.toml").write_text('follow_symlinks = "sometimes"\n')
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(cli_project)])

    assert result.exit_code == 1
    assert "follow_symlinks" in result.output

def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(main_cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
