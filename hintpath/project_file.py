"""
hintpath/project_file.py - odczyt referencji z pliku projektu MSBuild (.csproj).

ProjectFile opakowuje drzewo lxml i wystawia je jako sekwencję Reference,
dzięki czemu Verifier nie zależy od API drzewa XML.

Kształt dokumentu:
  <Project xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
    <ItemGroup>
      <Reference Include="Foo">
        <HintPath>..\\packages\\Foo\\lib\\Foo.dll</HintPath>
      </Reference>
    </ItemGroup>
  </Project>
"""

from __future__ import annotations

import pathlib
from typing import Iterator

from lxml import etree

from .types import Reference

MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"

_REFERENCE_TAG = f"{{{MSBUILD_NAMESPACE}}}Reference"
_HINT_PATH_TAG = f"{{{MSBUILD_NAMESPACE}}}HintPath"
_INCLUDE_ATTR  = "Include"


class ProjectFileError(Exception):
    """Pliku projektu nie da się wczytać lub nie jest poprawnym XML."""


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


class ProjectFile:
    """
    Wczytany plik projektu.

    Użycie:
        project = ProjectFile.from_file("src/App/App.csproj")
        for ref in project.references():
            print(ref.id, ref.hint_path)
    """

    def __init__(self, tree: etree._ElementTree | etree._Element, path: str | None = None) -> None:
        self._tree = tree
        self.path  = path

    def references(self) -> Iterator[Reference]:
        """Zwraca referencje w kolejności dokumentu (na dowolnej głębokości)."""
        for element in self._tree.iter(_REFERENCE_TAG):
            yield Reference(
                id=element.get(_INCLUDE_ATTR, ""),
                hint_path=_hint_path_of(element),
            )

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "ProjectFile":
        """Parsuje plik projektu z dysku."""
        try:
            tree = etree.parse(str(path), _parser())
        except (OSError, etree.XMLSyntaxError) as exc:
            raise ProjectFileError(f"{path}: {exc}") from exc
        return cls(tree, str(path))

    @classmethod
    def from_string(cls, text: str) -> "ProjectFile":
        """Parsuje plik projektu podany jako tekst."""
        try:
            root = etree.fromstring(text.encode("utf-8"), _parser())
        except etree.XMLSyntaxError as exc:
            raise ProjectFileError(str(exc)) from exc
        return cls(root)


def _hint_path_of(element: etree._Element) -> str | None:
    child = element.find(_HINT_PATH_TAG)
    if child is None:
        return None
    # pusty <HintPath/> to obecny, ale pusty HintPath
    return child.text or ""
