"""
chp - narzędzie CLI do sprawdzania HintPath w plikach projektu MSBuild.

Użycie:
  chp <komenda> [opcje]

Komendy:
  check        Sprawdza HintPath referencji (ostrzeżenia lub błąd buildu).
  references   Listuje referencje i ich HintPath.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 - wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from chp._config import load_env
from chp.commands import check as cmd_check
from chp.commands import references as cmd_references

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chp",
        description="checkhintpath - sprawdzanie HintPath referencji w plikach .csproj.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"chp {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_check.add_parser(subparsers)
    cmd_references.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
