"""
hintpath - weryfikacja HintPath referencji w plikach projektu MSBuild.

Interfejs publiczny:
    Verifier           - silnik reguł (wykluczenie, brak HintPath, prefiks, id, istnienie pliku)
    FileSystemChecker  - produkcyjne sprawdzanie istnienia pliku
    ProjectFile        - plik .csproj wczytany przez lxml
    Violation, ViolationKind, Reference - typy wyniku

Typowe użycie:
    from hintpath import FileSystemChecker, ProjectFile, Verifier

    project    = ProjectFile.from_file("src/App/App.csproj")
    verifier   = Verifier(FileSystemChecker())
    violations = verifier.verify(project, "src/App", ["System"], ["..\\\\packages\\\\"])
    for v in violations:
        print(v.message, v.reference, v.hint_path)
"""

from .types import Reference, Violation, ViolationKind
from .project_file import MSBUILD_NAMESPACE, ProjectFile, ProjectFileError
from .verifier import FileExistenceChecker, FileSystemChecker, ReferenceSource, Verifier

__all__ = [
    "MSBUILD_NAMESPACE",
    "FileExistenceChecker",
    "FileSystemChecker",
    "ProjectFile",
    "ProjectFileError",
    "Reference",
    "ReferenceSource",
    "Verifier",
    "Violation",
    "ViolationKind",
]
