"""Komenda: chp check - sprawdza HintPath wszystkich referencji w pliku projektu."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from rich.console import Console
from rich.markup import escape

from chp._config import (
    ENV_EXCLUDED_PREFIXES,
    ENV_KNOWN_PREFIXES,
    ENV_TREAT_AS_ERRORS,
    env_flag,
    env_str,
    split_prefixes,
)
from hintpath import FileSystemChecker, ProjectFile, ProjectFileError, Verifier, Violation

console     = Console()
err_console = Console(stderr=True)


def format_violation(
    violation: Violation,
    project_file: str,
    project_folder: str,
    excluded_prefixes: str,
    known_prefixes: str,
) -> str:
    """Linia logu dla jednego naruszenia (format zgodny z logiem zadania MSBuild)."""
    return (
        f"{violation.message} in .csproj {project_file}"
        f" for reference {violation.reference}"
        f" and HintPath {violation.hint_path or ''}."
        f" ProjectFolder {project_folder}."
        f" ExcludedReferencePrefixes {excluded_prefixes}."
        f" KnownHintPathPrefixes {known_prefixes}"
    )


def run(args: argparse.Namespace) -> None:
    # --- Plik projektu ---------------------------------------------------
    project_path = pathlib.Path(args.project)
    if not project_path.is_file():
        console.print(f"[red]Brak pliku projektu:[/red] {escape(str(project_path))}")
        raise SystemExit(1)

    try:
        project = ProjectFile.from_file(project_path)
    except ProjectFileError as exc:
        console.print(f"[red]Błąd parsowania pliku projektu:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    # --- Konfiguracja: CLI > zmienne środowiskowe > domyślne -------------
    excluded_raw = (
        args.excluded_prefixes
        if args.excluded_prefixes is not None
        else env_str(ENV_EXCLUDED_PREFIXES)
    )
    known_raw = (
        args.known_prefixes
        if args.known_prefixes is not None
        else env_str(ENV_KNOWN_PREFIXES)
    )
    treat_as_errors = (
        args.treat_warnings_as_errors
        if args.treat_warnings_as_errors is not None
        else env_flag(ENV_TREAT_AS_ERRORS)
    )
    project_folder = args.project_folder or str(project_path.parent)

    # --- Weryfikacja -----------------------------------------------------
    verifier   = Verifier(FileSystemChecker())
    violations = verifier.verify(
        project,
        project_folder,
        split_prefixes(excluded_raw),
        split_prefixes(known_raw),
        check_prefix=not args.skip_prefix_check,
    )

    level = "[red]error:[/red]" if treat_as_errors else "[yellow]warning:[/yellow]"
    for violation in violations:
        line = format_violation(
            violation, str(project_path), project_folder, excluded_raw, known_raw
        )
        err_console.print(f"{level} {escape(line)}", soft_wrap=True)

    continue_build = not (violations and treat_as_errors)

    # --- Podsumowanie ----------------------------------------------------
    if not violations:
        console.print(
            f"[green]OK[/green]  {escape(project_path.name)} - wszystkie HintPath poprawne."
        )
    else:
        colour = "red" if treat_as_errors else "yellow"
        console.print(
            f"[{colour}]Naruszeń: {len(violations)}[/{colour}]  {escape(project_path.name)}"
        )

    if args.json_output:
        out = {
            "project": str(project_path),
            "continue_build": continue_build,
            "violations": [
                {
                    "reference": v.reference,
                    "hint_path": v.hint_path,
                    "message":   str(v.message),
                }
                for v in violations
            ],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))

    if not continue_build:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza HintPath referencji w pliku projektu MSBuild.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Sprawdza każdą referencję <Reference> pliku projektu:

  1  brak HintPath          (missing HintPath)
  2  prefiks HintPath       (HintPath does not start with known prefix)
  3  id w HintPath          (HintPath does not contain reference id)
  4  plik istnieje na dysku (the file referenced by the HintPath does not exist)

Referencje, których id zaczyna się od wykluczonego prefiksu, są pomijane.
Naruszenia są ostrzeżeniami; z --treat-warnings-as-errors są błędami
i komenda kończy się kodem 1.

Zmienne środowiskowe (także z pliku .env):
  {ENV_EXCLUDED_PREFIXES}, {ENV_KNOWN_PREFIXES}, {ENV_TREAT_AS_ERRORS}

Przykłady:
  chp check src/App/App.csproj --known-prefixes '..\\packages\\'
  chp check App.csproj --excluded-prefixes "System,Microsoft." --treat-warnings-as-errors
  chp check App.csproj --skip-prefix-check --json-output
        """,
    )
    p.add_argument(
        "project",
        metavar="PLIK_PROJEKTU",
        help="Ścieżka do pliku projektu (.csproj).",
    )
    p.add_argument(
        "--project-folder", "-f",
        default=None,
        metavar="KATALOG",
        help="Katalog, względem którego rozwiązywane są HintPath (domyślnie: katalog pliku projektu).",
    )
    p.add_argument(
        "--excluded-prefixes", "-e",
        default=None,
        metavar="LISTA",
        help=f"Prefiksy id referencji pomijanych, rozdzielone przecinkami (domyślnie: ${ENV_EXCLUDED_PREFIXES}).",
    )
    p.add_argument(
        "--known-prefixes", "-k",
        default=None,
        metavar="LISTA",
        help=f"Dozwolone prefiksy HintPath, rozdzielone przecinkami (domyślnie: ${ENV_KNOWN_PREFIXES}).",
    )
    p.add_argument(
        "--skip-prefix-check",
        action="store_true",
        help="Wyłącza regułę prefiksu HintPath.",
    )
    p.add_argument(
        "--treat-warnings-as-errors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=f"Naruszenia jako błędy; kod wyjścia 1 (domyślnie: ${ENV_TREAT_AS_ERRORS}).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz naruszenia jako JSON na stdout.",
    )
    p.set_defaults(func=run)
