"""Testy komend CLI: chp check i chp references."""

import json

import pytest

from chp._config import ENV_EXCLUDED_PREFIXES, ENV_KNOWN_PREFIXES, ENV_TREAT_AS_ERRORS
from chp.cli import __version__, main
from chp.commands.check import format_violation
from hintpath import Violation, ViolationKind

HINT_PATH = "..\\..\\lib\\Foo\\Foo.dll"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in (ENV_EXCLUDED_PREFIXES, ENV_KNOWN_PREFIXES, ENV_TREAT_AS_ERRORS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_project(tmp_path, project_builder):
    """Zapisuje src/App/App.csproj i plik lib/Foo/Foo.dll obok."""
    (tmp_path / "lib" / "Foo").mkdir(parents=True)
    (tmp_path / "lib" / "Foo" / "Foo.dll").write_bytes(b"")
    project_dir = tmp_path / "src" / "App"
    project_dir.mkdir(parents=True)

    def write(*references):
        for include, hint_path in references:
            project_builder.add_reference(include, hint_path)
        path = project_dir / "App.csproj"
        path.write_text(project_builder.text(), encoding="utf-8")
        return path

    return write


class TestFormatViolation:

    def test_line_shape(self):
        violation = Violation("Foo", "..\\Foo.dll", ViolationKind.HINT_PATH_DOES_NOT_EXIST_ON_FILE_SYSTEM)

        line = format_violation(violation, "App.csproj", "src", "System", "..\\")

        assert line == (
            "the file referenced by the HintPath does not exist in .csproj App.csproj"
            " for reference Foo and HintPath ..\\Foo.dll. ProjectFolder src."
            " ExcludedReferencePrefixes System. KnownHintPathPrefixes ..\\"
        )

    def test_missing_hint_path_is_empty(self):
        violation = Violation("Foo", None, ViolationKind.MISSING_HINT_PATH)

        line = format_violation(violation, "App.csproj", "src", "", "")

        assert line.startswith("missing HintPath in .csproj App.csproj for reference Foo and HintPath . ")


class TestCheck:

    def test_clean_project(self, write_project, capsys):
        path = write_project(("Foo", HINT_PATH))

        main(["check", str(path), "--known-prefixes", "..\\..\\lib\\"])

        out, err = capsys.readouterr()
        assert "OK" in out
        assert err == ""

    def test_violations_are_warnings_by_default(self, write_project, capsys):
        path = write_project(("Foo", HINT_PATH), ("Bar", None))

        main(["check", str(path), "--skip-prefix-check"])

        out, err = capsys.readouterr()
        assert "warning:" in err
        assert f"missing HintPath in .csproj {path} for reference Bar and HintPath ." in err
        assert "Foo" not in err

    def test_treat_warnings_as_errors_fails_build(self, write_project, capsys):
        path = write_project(("Bar", None))

        with pytest.raises(SystemExit) as exc:
            main(["check", str(path), "--treat-warnings-as-errors"])

        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "error:" in err
        assert "missing HintPath" in err

    def test_treat_as_errors_without_violations_passes(self, write_project, capsys):
        path = write_project(("Foo", HINT_PATH))

        main(["check", str(path), "--skip-prefix-check", "--treat-warnings-as-errors"])

        assert capsys.readouterr().err == ""

    def test_treat_as_errors_from_environment(self, write_project, monkeypatch):
        monkeypatch.setenv(ENV_TREAT_AS_ERRORS, "true")
        path = write_project(("Bar", None))

        with pytest.raises(SystemExit) as exc:
            main(["check", str(path)])

        assert exc.value.code == 1

    def test_cli_option_overrides_environment(self, write_project, monkeypatch, capsys):
        monkeypatch.setenv(ENV_TREAT_AS_ERRORS, "1")
        path = write_project(("Bar", None))

        main(["check", str(path), "--no-treat-warnings-as-errors"])

        assert "warning:" in capsys.readouterr().err

    def test_excluded_prefixes_from_environment(self, write_project, monkeypatch, capsys):
        monkeypatch.setenv(ENV_EXCLUDED_PREFIXES, "System, Microsoft.")
        path = write_project(("System.Xml", None), ("Microsoft.CSharp", None))

        main(["check", str(path), "--treat-warnings-as-errors"])

        assert capsys.readouterr().err == ""

    def test_nonexistent_hint_path(self, write_project, capsys):
        path = write_project(("Baz", "..\\..\\lib\\Baz\\Baz.dll"))

        main(["check", str(path), "--known-prefixes", "..\\..\\lib\\"])

        err = capsys.readouterr().err
        assert "the file referenced by the HintPath does not exist" in err

    def test_explicit_project_folder(self, write_project, tmp_path, capsys):
        path = write_project(("Foo", "lib\\Foo\\Foo.dll"))

        main(["check", str(path), "--project-folder", str(tmp_path), "--known-prefixes", "lib"])

        assert capsys.readouterr().err == ""

    def test_json_output(self, write_project, capsys):
        path = write_project(("Foo", "c:\\elsewhere\\x.dll"))

        main(["check", str(path), "--known-prefixes", "..\\", "--json-output"])

        out = capsys.readouterr().out
        report = json.loads(out[out.index("{"):])
        assert report["continue_build"] is True
        assert [v["message"] for v in report["violations"]] == [
            "HintPath does not start with known prefix",
            "HintPath does not contain reference id",
            "the file referenced by the HintPath does not exist",
        ]
        assert {v["hint_path"] for v in report["violations"]} == {"c:\\elsewhere\\x.dll"}

    def test_missing_project_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path / "nope.csproj")])

        assert exc.value.code == 1

    def test_malformed_project_file(self, tmp_path):
        path = tmp_path / "Broken.csproj"
        path.write_text("<Project><ItemGroup></Project>", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["check", str(path)])

        assert exc.value.code == 1


class TestReferences:

    def test_lists_references(self, write_project, capsys):
        path = write_project(("Foo", HINT_PATH), ("Bar", None))

        main(["references", str(path)])

        out = capsys.readouterr().out
        assert "Foo" in out
        assert "Bar" in out
        assert "Łącznie: 2" in out

    def test_missing_only(self, write_project, capsys):
        path = write_project(("Foo", HINT_PATH), ("Bar", None))

        main(["references", str(path), "--missing-only"])

        out = capsys.readouterr().out
        assert "Bar" in out
        assert "Foo" not in out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
