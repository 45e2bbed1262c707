"""
Tests for the atomic-shadcn command line entry point.
"""

import json
import sys

import pytest
from loguru import logger

from atomic_shadcn.cli import create_parser, main
from atomic_shadcn.config.config import configs

from conftest import BUTTON_TSX, write


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(configs, "ATOMIC_LOG_FILE", "")
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestParser:

    def test_add_requires_component(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["add"])

    def test_common_options_on_every_command(self):
        args = create_parser().parse_args(["uninstall", "card", "-C", "/tmp/app", "-v"])

        assert args.command == "uninstall"
        assert args.component == "card"
        assert args.project_root == "/tmp/app"
        assert args.verbose

    def test_skip_install_flag(self):
        args = create_parser().parse_args(["add", "dialog", "--skip-install"])
        assert args.skip_install


class TestMain:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: atomic-shadcn" in capsys.readouterr().out

    def test_mapping_json(self, project, capsys):
        assert main(["mapping", "--json", "-C", str(project)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert "button" in data["atoms"]

    def test_init_and_organize(self, project, layout):
        assert main(["init", "-C", str(project)]) == 0
        write(layout.component_file("button"), BUTTON_TSX)

        assert main(["organize", "-C", str(project)]) == 0
        assert (layout.components_path / "atoms" / "button.tsx").is_file()

    def test_invalid_component_id(self, project):
        assert main(["organize", "../button", "-C", str(project)]) == 1

    def test_missing_project_root(self, tmp_path):
        assert main(["debug", "-C", str(tmp_path / "missing")]) == 1
