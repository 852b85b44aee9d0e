"""
hintpath/verifier.py - weryfikacja HintPath dla referencji pliku projektu.

Verifier.verify(document, project_folder, excluded_prefixes, known_hint_path_prefixes)
    -> tuple[Violation, ...]

Reguły (per referencja, w tej kolejności):
  0 - wykluczenie         (id zaczyna się od wykluczonego prefiksu → pomiń)
  1 - brak HintPath       (jedno naruszenie, dalsze reguły pominięte)
  2 - prefiks HintPath    (musi zaczynać się od któregoś ze znanych prefiksów)
  3 - id w HintPath       (HintPath musi zawierać id referencji)
  4 - plik istnieje       (project_folder + HintPath sprawdzane przez FileExistenceChecker)

Reguły 2–4 są niezależne: jedna referencja może dać do trzech naruszeń.
"""

from __future__ import annotations

import os
from typing import Collection, Iterable, Protocol

from .types import Reference, Violation, ViolationKind


class FileExistenceChecker(Protocol):
    def exists(self, path: str) -> bool: ...


class ReferenceSource(Protocol):
    def references(self) -> Iterable[Reference]: ...


class FileSystemChecker:
    """Sprawdza istnienie pliku na dysku.

    HintPath w plikach MSBuild zapisywane są z separatorem '\\' - na systemach
    z innym separatorem zamieniamy go przed sprawdzeniem.
    """

    def exists(self, path: str) -> bool:
        if os.sep != "\\":
            path = path.replace("\\", os.sep)
        return os.path.isfile(path)


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _starts_with_any(value: str, prefixes: Iterable[str]) -> bool:
    return any(value.startswith(prefix) for prefix in prefixes)


# ---------------------------------------------------------------------------
# Verifier
# ---------------------------------------------------------------------------

class Verifier:
    """
    Weryfikator HintPath referencji.

    Użycie:
        verifier   = Verifier(FileSystemChecker())
        project    = ProjectFile.from_file("App.csproj")
        violations = verifier.verify(project, "src/App", ["System"], ["..\\packages\\"])
    """

    def __init__(self, file_checker: FileExistenceChecker) -> None:
        self._file_checker = file_checker

    def verify(
        self,
        document: ReferenceSource,
        project_folder: str,
        excluded_prefixes: Collection[str],
        known_hint_path_prefixes: Collection[str],
        *,
        check_prefix: bool = True,
    ) -> tuple[Violation, ...]:
        """
        Zwraca naruszenia w kolejności dokumentu, a w obrębie referencji
        w kolejności reguł (prefiks, id, istnienie pliku).

        Args:
            document:                 źródło referencji (np. ProjectFile)
            project_folder:           katalog, względem którego rozwiązywany jest HintPath
            excluded_prefixes:        prefiksy id referencji pomijanych w całości
            known_hint_path_prefixes: dozwolone prefiksy HintPath; pusty string
                                      wśród nich przepuszcza każdy HintPath
            check_prefix:             False wyłącza regułę prefiksu
        """
        violations: list[Violation] = []

        for reference in document.references():
            violations.extend(
                self._check_reference(
                    reference,
                    project_folder,
                    excluded_prefixes,
                    known_hint_path_prefixes,
                    check_prefix,
                )
            )

        return tuple(violations)

    # ------------------------------------------------------------------
    # Reguły dla pojedynczej referencji
    # ------------------------------------------------------------------

    def _check_reference(
        self,
        reference: Reference,
        project_folder: str,
        excluded_prefixes: Collection[str],
        known_hint_path_prefixes: Collection[str],
        check_prefix: bool,
    ) -> list[Violation]:
        ref_id    = reference.id
        hint_path = reference.hint_path

        if _starts_with_any(ref_id, excluded_prefixes):
            return []

        if hint_path is None:
            return [Violation(ref_id, None, ViolationKind.MISSING_HINT_PATH)]

        violations: list[Violation] = []

        if check_prefix and not _starts_with_any(hint_path, known_hint_path_prefixes):
            violations.append(
                Violation(ref_id, hint_path, ViolationKind.HINT_PATH_WITH_WRONG_PREFIX)
            )

        if ref_id not in hint_path:
            violations.append(
                Violation(ref_id, hint_path, ViolationKind.HINT_PATH_DOES_NOT_CONTAIN_REFERENCE_ID)
            )

        if not self._file_checker.exists(os.path.join(project_folder, hint_path)):
            violations.append(
                Violation(ref_id, hint_path, ViolationKind.HINT_PATH_DOES_NOT_EXIST_ON_FILE_SYSTEM)
            )

        return violations
