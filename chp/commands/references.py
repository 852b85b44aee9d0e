"""Komenda: chp references - listuje referencje i ich HintPath z pliku projektu."""

from __future__ import annotations

import argparse
import pathlib

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hintpath import ProjectFile, ProjectFileError

console = Console(width=220)


def run(args: argparse.Namespace) -> None:
    project_path = pathlib.Path(args.project)
    if not project_path.is_file():
        console.print(f"[red]Brak pliku projektu:[/red] {escape(str(project_path))}")
        raise SystemExit(1)

    try:
        references = list(ProjectFile.from_file(project_path).references())
    except ProjectFileError as exc:
        console.print(f"[red]Błąd parsowania pliku projektu:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    if args.missing_only:
        references = [r for r in references if r.hint_path is None]

    if not references:
        console.print("[yellow]Brak referencji spełniających kryteria.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("REFERENCE", style="bold", no_wrap=True)
    table.add_column("HINTPATH",  no_wrap=True)

    for ref in references:
        hint = escape(ref.hint_path) if ref.hint_path is not None else "[red]—[/red]"
        table.add_row(escape(ref.id), hint)

    console.print(table)
    console.print(f"[dim]Łącznie: {len(references)}[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "references",
        help="Listuje referencje <Reference> i ich HintPath.",
    )
    p.add_argument(
        "project",
        metavar="PLIK_PROJEKTU",
        help="Ścieżka do pliku projektu (.csproj).",
    )
    p.add_argument(
        "--missing-only",
        action="store_true",
        help="Pokaż tylko referencje bez HintPath.",
    )
    p.set_defaults(func=run)
