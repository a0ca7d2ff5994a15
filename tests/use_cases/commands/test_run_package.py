"""
Tests for the RunPackageUseCase.
"""

from unittest.mock import MagicMock

import pytest

from bundlecmd.entities.command import Command
from bundlecmd.exceptions import PackageError
from bundlecmd.use_cases.commands.execute_commands import ExecuteCommandsUseCase
from bundlecmd.use_cases.commands.parse_commands import ParseCommandsUseCase
from bundlecmd.use_cases.commands.run_package import RunPackageUseCase


@pytest.fixture
def parser():
    parser = MagicMock(spec=ParseCommandsUseCase)
    parser.load_package.return_value = {
        "Install": [Command.of("mkdir", "/a"), Command.of("cp", "/a", "/b")],
        "Remove": [Command.of("del", "/b")],
    }
    return parser


class TestRunPackageUseCase:
    def test_execute_section(self, parser, mock_logger):
        executor = MagicMock(spec=ExecuteCommandsUseCase)
        use_case = RunPackageUseCase(parser, executor, mock_logger)

        count = use_case.execute("/pkg/package.ini", "Install")

        assert count == 2
        parser.load_package.assert_called_once_with("/pkg/package.ini")
        executor.execute.assert_called_once_with(
            [Command.of("mkdir", "/a"), Command.of("cp", "/a", "/b")]
        )
        mock_logger.info.assert_called_once_with(
            "Running section 'Install' of /pkg/package.ini (2 commands)"
        )

    def test_missing_section(self, parser):
        executor = MagicMock(spec=ExecuteCommandsUseCase)
        use_case = RunPackageUseCase(parser, executor)

        with pytest.raises(PackageError, match="Section 'Nope' not found"):
            use_case.execute("/pkg/package.ini", "Nope")

        executor.execute.assert_not_called()

    def test_list_sections(self, parser):
        use_case = RunPackageUseCase(parser, MagicMock(spec=ExecuteCommandsUseCase))

        assert use_case.list_sections("/pkg/package.ini") == ["Install", "Remove"]

    def test_end_to_end_with_container(self, dependency_container, sdmc_root, local, tmp_path):
        package = tmp_path / "package.ini"
        package.write_text(
            "[Install]\n"
            "mkdir /switch/demo\n"
            "copy /switch/app.nro /switch/demo/\n"
            "set-ini-val /config/settings.ini general theme 'light'\n"
            "delete /Nintendo/save/slot0.bin\n"
        )

        count = dependency_container.get_run_package_use_case().execute(
            str(package), "Install"
        )

        assert count == 4
        with open(local("switch/demo/app.nro"), "rb") as f:
            assert f.read() == b"NRO0"
        with open(local("config/settings.ini")) as f:
            assert "theme='light'" in f.read()
        with open(local("Nintendo/save/slot0.bin"), "rb") as f:
            assert f.read() == b"\x00" * 8
