"""Wspólne fikstury: budowanie plików projektu i atrapa sprawdzania plików."""

import pytest

from hintpath import MSBUILD_NAMESPACE, ProjectFile


class ProjectBuilder:
    """Składa minimalny plik .csproj z referencjami."""

    def __init__(self):
        self._groups: list[list[tuple[str, str | None]]] = []

    def with_references(self):
        self._groups.append([])
        return self

    def add_reference(self, include, hint_path=None):
        if not self._groups:
            self._groups.append([])
        self._groups[-1].append((include, hint_path))
        return self

    def text(self) -> str:
        parts = [f'<Project ToolsVersion="12.0" xmlns="{MSBUILD_NAMESPACE}">']
        for group in self._groups:
            parts.append("  <ItemGroup>")
            for include, hint_path in group:
                if hint_path is None:
                    parts.append(f'    <Reference Include="{include}" />')
                else:
                    parts.append(f'    <Reference Include="{include}">')
                    parts.append(f"      <HintPath>{hint_path}</HintPath>")
                    parts.append("    </Reference>")
            parts.append("  </ItemGroup>")
        parts.append("</Project>")
        return "\n".join(parts)

    def build(self) -> ProjectFile:
        return ProjectFile.from_string(self.text())


class StubFileChecker:
    """Zapamiętuje zapytania; domyślnie każdy plik istnieje."""

    def __init__(self, existing=True):
        self.existing = existing
        self.missing: set[str] = set()
        self.calls: list[str] = []

    def exists(self, path):
        self.calls.append(path)
        return self.existing and path not in self.missing


@pytest.fixture
def project_builder():
    return ProjectBuilder()


@pytest.fixture
def file_checker():
    return StubFileChecker()
