"""Tests for the zc command-line entry point."""

import pytest

from zlang.compiler.main import cc_arguments, main, output_path


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "main.z").write_text("class A { int a; }\nint main() { return 0; }\n")
    return tmp_path


class TestHelpers:
    def test_output_path(self):
        assert output_path("main.z") == "main.c"
        assert output_path("src/app.z") == "src/app.c"

    def test_cc_arguments(self):
        args = cc_arguments(["-o", "prog", "util.z", "-lm"], "main.c")
        assert args == ["-o", "prog", "util.c", "-lm", "main.c"]


class TestMain:
    def test_writes_c_file(self, project, capsys):
        assert main(["--no-cc"]) == 0
        text = (project / "main.c").read_text()
        assert "typedef struct { int a;} A;" in text
        assert "main.c" in capsys.readouterr().out

    def test_custom_input(self, project):
        (project / "other.z").write_text("int x;\n")
        assert main(["-i", "other.z", "--no-cc"]) == 0
        assert (project / "other.c").read_text() == "int x;\n"

    def test_emit_c(self, project, capsys):
        assert main(["--emit-c"]) == 0
        assert "typedef struct" in capsys.readouterr().out
        assert not (project / "main.c").exists()

    def test_emit_tokens(self, project, capsys):
        assert main(["--emit-tokens"]) == 0
        assert "Token(IDENTIFIER, 'class')" in capsys.readouterr().out

    def test_emit_imports(self, project, capsys):
        (project / "lib.z").write_text("int lib;\n")
        (project / "main.z").write_text("#import <lib.z>\n")
        assert main(["--emit-imports", "--no-cc"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "lib.z"

    def test_missing_input(self, project, capsys):
        assert main(["-i", "nope.z", "--no-cc"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_import(self, project, capsys):
        (project / "main.z").write_text("#import <gone.z>\n")
        assert main(["--no-cc"]) == 1
        assert "error:" in capsys.readouterr().err
        assert not (project / "main.c").exists()

    def test_missing_compiler(self, project, capsys):
        assert main(["--cc", "definitely-not-a-compiler"]) == 1
        assert "not found" in capsys.readouterr().err
