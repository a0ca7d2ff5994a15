"""
Tests for the bundlecmd-run command line entry point.
"""

import os
from unittest.mock import patch

import pytest

from bundlecmd.cli_run import main

PACKAGE = """\
; demo package
[Install]
make /switch/demo/
copy /switch/app.nro /switch/demo/

[Remove]
delete /switch/demo/
"""


@pytest.fixture
def package_file(tmp_path):
    path = tmp_path / "package.ini"
    path.write_text(PACKAGE)
    return str(path)


@pytest.fixture
def cli_container(dependency_container):
    with patch("bundlecmd.cli_run.container", dependency_container):
        yield dependency_container


class TestCliRun:
    def test_check_dangerous(self, capsys):
        assert main(["--check", "/Nintendo/save/"]) == 0

        assert capsys.readouterr().out.strip() == (
            "sdmc:/Nintendo/save/: dangerous (ultra_protected_folder)"
        )

    def test_check_safe(self, capsys):
        assert main(["--check", "/switch/app.nro"]) == 0

        assert capsys.readouterr().out.strip() == "sdmc:/switch/app.nro: safe"

    def test_list_sections(self, cli_container, package_file, capsys):
        assert main([package_file, "--list"]) == 0

        assert capsys.readouterr().out.split() == ["Install", "Remove"]

    def test_list_sections_pretty(self, cli_container, package_file, capsys):
        assert main([package_file, "--list", "--pretty"]) == 0

        out = capsys.readouterr().out
        assert "Install" in out
        assert "Remove" in out

    def test_check_pretty(self, capsys):
        assert main(["--check", "/atmosphere/", "--pretty"]) == 0

        out = capsys.readouterr().out
        assert "dangerous" in out
        assert "protected_folder_root" in out

    def test_run_section(self, cli_container, package_file, local, capsys):
        assert main([package_file, "--section", "Install"]) == 0

        assert "Executed 2 commands from 'Install'" in capsys.readouterr().out
        assert os.path.isfile(local("switch/demo/app.nro"))

    def test_run_lines(self, cli_container, local, capsys):
        assert main(["--line", "make /switch/a/", "--line", "make /switch/b/"]) == 0

        assert "Executed 2 commands" in capsys.readouterr().out
        assert os.path.isdir(local("switch/a"))
        assert os.path.isdir(local("switch/b"))

    def test_unknown_section(self, cli_container, package_file, capsys):
        assert main([package_file, "--section", "Missing"]) == 1

        assert "Section 'Missing' not found" in capsys.readouterr().err

    def test_missing_package_argument(self, capsys):
        assert main([]) == 2

        assert "a package file or --line is required" in capsys.readouterr().err

    def test_invalid_decimal_operand_is_an_application_error(self, cli_container, capsys):
        assert main(["--line", "hex-by-decimal /switch/app.nro abc 1"]) == 1

        assert "Invalid decimal value 'abc'" in capsys.readouterr().err
