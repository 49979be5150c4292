from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Callable

import click

from lintignore import __version__
from lintignore.config import load_options
from lintignore.errors import LintIgnoreError
from lintignore.ignored_paths import IgnoredPaths
from lintignore.reporters.json_reporter import render_check_json, render_files_json, render_rules_json
from lintignore.reporters.terminal import render_check, render_files, render_rules
from lintignore.scanner import scan_files


IGNORE_OPTIONS = [
    click.option("--cwd", type=click.Path(exists=True, file_okay=False), default=None,
                 help="Directory searched for .lintignore (default: current directory)"),
    click.option("--ignore-path", type=click.Path(), default=None, help="Use this ignore file instead of .lintignore"),
    click.option("--ignore-pattern", multiple=True, help="Extra pattern, applied after the ignore file"),
    click.option("--no-ignore", is_flag=True, help="Disable ignore-file, pattern and default rules"),
    click.option("--dotfiles", is_flag=True, help="Do not ignore dotfiles"),
    click.option("--verbose", is_flag=True, help="Show debug logging"),
]


def ignore_options(func: Callable) -> Callable:
    for option in reversed(IGNORE_OPTIONS):
        func = option(func)
    return func


def _build_ignored_paths(
    cwd: str | None,
    ignore_path: str | None,
    ignore_pattern: tuple[str, ...],
    no_ignore: bool,
    dotfiles: bool,
    verbose: bool,
) -> IgnoredPaths:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    project = Path(cwd) if cwd else Path.cwd()
    try:
        options = load_options(project)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Cannot load configuration from {project}: {e}") from e

    overrides: dict[str, object] = {}
    if ignore_path:
        overrides["ignore_path"] = str(Path(ignore_path).absolute())
    if ignore_pattern:
        overrides["ignore_pattern"] = options.patterns + list(ignore_pattern)
    if no_ignore:
        overrides["ignore"] = False
    if dotfiles:
        overrides["dotfiles"] = True

    try:
        options = dataclasses.replace(options, **overrides) if overrides else options
        return IgnoredPaths(options)
    except LintIgnoreError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
def main():
    """lintignore: decide which files a linter should skip."""
    pass


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--quiet", is_flag=True, help="Print nothing, only set the exit code")
@click.option("--fail-on-ignored", is_flag=True, help="Exit with code 1 if any path is ignored")
@ignore_options
def check(
    paths: tuple[str, ...],
    as_json: bool,
    quiet: bool,
    fail_on_ignored: bool,
    **kwargs,
):
    """Report whether each PATH is ignored."""
    ignored = _build_ignored_paths(**kwargs)

    try:
        results = {path: ignored.contains(path) for path in paths}
    except LintIgnoreError as e:
        raise click.ClickException(str(e)) from e

    if not quiet:
        if as_json:
            click.echo(render_check_json(results))
        else:
            render_check(results)

    if fail_on_ignored and any(results.values()):
        raise SystemExit(1)


@main.command(name="ls")
@click.argument("directory", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--ext", multiple=True, help="Only list files with this suffix (e.g. .py)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@ignore_options
def ls_files(directory: str, ext: tuple[str, ...], as_json: bool, **kwargs):
    """List the files under DIRECTORY that are not ignored."""
    root = Path(directory).absolute()
    if kwargs["cwd"] is None:
        kwargs["cwd"] = str(root)
    ignored = _build_ignored_paths(**kwargs)

    files = list(scan_files(root, ignored, suffixes=ext or None))

    if as_json:
        click.echo(render_files_json(files, root))
    else:
        render_files(files, root)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@ignore_options
def rules(as_json: bool, **kwargs):
    """Show the compiled rules in evaluation order."""
    ignored = _build_ignored_paths(**kwargs)

    if as_json:
        click.echo(render_rules_json(ignored))
    else:
        render_rules(ignored)
