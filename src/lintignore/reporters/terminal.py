from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lintignore.ignored_paths import IgnoredPaths

VERDICT_COLORS = {
    True: "red",
    False: "green",
}

VERDICT_LABELS = {
    True: "ignored",
    False: "included",
}


def render_check(
    results: dict[str, bool],
    console: Console | None = None,
) -> None:
    console = console or Console()
    for path, ignored in results.items():
        color = VERDICT_COLORS[ignored]
        console.print(f" [{color}]{VERDICT_LABELS[ignored]:<8}[/{color}]  {escape(path)}", highlight=False)

    total_ignored = sum(1 for ignored in results.values() if ignored)
    console.rule()
    console.print(f" {len(results)} paths checked, {total_ignored} ignored")


def render_files(
    files: list[Path],
    root: Path,
    console: Console | None = None,
) -> None:
    console = console or Console()
    for path in files:
        console.print(f" {escape(path.relative_to(root).as_posix())}", highlight=False)
    console.rule()
    console.print(f" {len(files)} files")


def render_rules(ignored: IgnoredPaths, console: Console | None = None) -> None:
    console = console or Console()

    console.print(f"\n[bold]lintignore[/bold] rules (base: {escape(ignored.base_dir)})\n")
    if ignored.ignore_file:
        console.print(f" Ignore file: {escape(ignored.ignore_file)}\n", highlight=False)

    if not ignored.rules:
        console.print("[dim]No rules: nothing is ignored.[/dim]\n")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Pattern")
    table.add_column("Negated")
    table.add_column("Anchored")
    for index, rule in enumerate(ignored.rules, start=1):
        table.add_row(
            str(index),
            escape(rule.source),
            "yes" if rule.negated else "",
            "yes" if rule.anchored else "",
        )
    console.print(table)
    console.print()
