"""Ustawienia hosta - domyślne wartości z zmiennych środowiskowych (opcjonalnie z pliku .env).

Zmienne środowiskowe:
  CHP_EXCLUDED_REFERENCE_PREFIXES   prefiksy id referencji pomijanych, rozdzielone przecinkami
  CHP_KNOWN_HINT_PATH_PREFIXES      dozwolone prefiksy HintPath, rozdzielone przecinkami
  CHP_TREAT_WARNINGS_AS_ERRORS      1/true/yes/on → naruszenia przerywają build
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

ENV_EXCLUDED_PREFIXES   = "CHP_EXCLUDED_REFERENCE_PREFIXES"
ENV_KNOWN_PREFIXES      = "CHP_KNOWN_HINT_PATH_PREFIXES"
ENV_TREAT_AS_ERRORS     = "CHP_TREAT_WARNINGS_AS_ERRORS"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env(path: str | pathlib.Path = ".env") -> None:
    """Wczytuje plik .env z katalogu roboczego (zmienne ustawione w środowisku mają pierwszeństwo)."""
    load_dotenv(pathlib.Path(path), override=False)


def split_prefixes(raw: str | None) -> list[str]:
    """'a, b ,c' → ['a', 'b', 'c']; pusty lub sam whitespace → []."""
    if raw is None or not raw.strip():
        return []
    return [part.strip() for part in raw.split(",")]


def env_str(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES
