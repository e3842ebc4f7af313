# lsfiles/cli/interface.py
import sys
from pathlib import Path
from typing import Any, Dict, List

import click
from click_option_group import optgroup
from rich.console import Console as RichConsole
from rich.markup import escape
import structlog

from lsfiles import __version__ as app_version
from lsfiles.config.loader import build_config, load_and_merge_configs
from lsfiles.config.settings import DEFAULT_IGNORED, TraversalConfig
from lsfiles.core.output import format_paths, write_to_file, write_to_stdout
from lsfiles.core.traversal import list_files
from lsfiles.exceptions import LsFilesError
from lsfiles.logging_setup import configure_logging

log = structlog.get_logger(__name__)

def _resolve_ignored(file_values: Dict[str, Any], cli_ignored: List[str], no_default_ignores: bool) -> List[str]:
    # command-line entries extend whatever the config file (or the default) provides.
    if no_default_ignores:
        base: List[str] = []
    else:
        base = list(file_values.get("ignored", DEFAULT_IGNORED))
    return base + [entry for entry in cli_ignored if entry not in base]

def _print_summary(config: TraversalConfig, root: Path, files: List[str]):
    console = RichConsole(stderr=True, highlight=False)
    console.print("[cyan]--- listing summary ---[/cyan]")
    console.print(f"root: {escape(str(root))}")
    console.print(f"ignored: {escape(', '.join(config.ignored)) or '(none)'}")
    console.print(f"extensions: {escape(', '.join(config.extensions)) or '(all)'}")
    console.print(f"follow symlinks: {'yes' if config.follow_symlinks else 'no'}")
    console.print(f"[yellow]files found: {len(files):,}[/yellow]")

@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("root", type=click.Path(path_type=Path), default=".")
@optgroup.group("Filtering Options", help="Control which files and directories are listed.")
@optgroup.option("-x", "--ignore", "ignored", multiple=True, help="Name, relative path or absolute path to skip. Relative entries apply in every directory.")
@optgroup.option("--no-default-ignores", "no_default_ignores", is_flag=True, default=False, help=f"Do not skip {', '.join(DEFAULT_IGNORED)} (or the configured ignore list).")
@optgroup.option("-e", "--ext", "extensions", multiple=True, help="Accepted file extension, without the dot. Repeatable. Default: all.")
@optgroup.option("-L", "--follow-symlinks", "follow_symlinks", is_flag=True, default=False, help="Follow symbolic links. Cycles are not detected.")
@optgroup.group("Output Options", help="Control how the listing is written.")
@optgroup.option("--relative", "relative", is_flag=True, default=False, help="Print paths relative to ROOT instead of absolute.")
@optgroup.option("--sort", "sort_output", is_flag=True, default=False, help="Sort paths before printing.")
@optgroup.option("-0", "--null", "nul_separated", is_flag=True, default=False, help="Separate paths with NUL instead of newlines.")
@optgroup.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Path to write the listing to.")
@optgroup.option("--summary", "show_summary", is_flag=True, default=False, help="Print a summary to stderr.")
@optgroup.group("Application Behavior", help="Configuration files and logging.")
@optgroup.option("--no-config", "no_config", is_flag=True, default=False, help="Ignore .lsfiles.toml, lsfiles.toml, pyproject.toml and the user config.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="lsfiles", prog_name="lsfiles", help="Show version and exit.")
def main_cli(root: Path, **cli_params: Any):
    """lsfiles: recursively list the files under ROOT (default: current directory)."""

    log_level = "warning"
    if cli_params["verbosity_level"] == 1: log_level = "info"
    elif cli_params["verbosity_level"] >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, force_json_logs=cli_params["force_json_logs"])

    log.debug("cli_command_invoked", root=str(root), params=cli_params)

    try:
        root = root.absolute()
        file_values: Dict[str, Any] = {} if cli_params["no_config"] else load_and_merge_configs(root if root.is_dir() else None)

        overrides: Dict[str, Any] = {
            "ignored": _resolve_ignored(file_values, list(cli_params["ignored"]), cli_params["no_default_ignores"]),
            "extensions": list(cli_params["extensions"]) or None,
            "follow_symlinks": True if cli_params["follow_symlinks"] else None,
        }
        config = build_config(overrides, file_values)

        files = list_files(str(root), config)
        if cli_params["sort_output"]:
            files.sort()

        text = format_paths(
            files,
            relative_to=str(root) if cli_params["relative"] else None,
            nul_separated=cli_params["nul_separated"],
        )
        if cli_params["output_file"]:
            write_to_file(cli_params["output_file"], text)
            click.echo(f"Info: Output written to: {cli_params['output_file']}", err=True)
        else:
            write_to_stdout(text)

        if cli_params["show_summary"]:
            _print_summary(config, root, files)

    except LsFilesError as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
