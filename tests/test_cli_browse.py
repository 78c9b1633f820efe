"""
Tests for the command line browser.
"""

import os
from unittest.mock import patch

import pytest

from docbrowser import cli_browse


@pytest.fixture
def cli(dependency_container):
    """Run the CLI against the temporary root."""
    with patch("docbrowser.cli_browse.container", dependency_container):
        yield cli_browse.main


class TestCliBrowse:
    def test_ls_root_plain(self, cli, capsys):
        assert cli(["--plain", "ls"]) == 0

        assert capsys.readouterr().out.splitlines() == ["a.txt", "docs/"]

    def test_ls_with_filter(self, cli, capsys):
        assert cli(["--plain", "ls", "--filter", "DOC"]) == 0

        assert capsys.readouterr().out.splitlines() == ["docs/"]

    def test_ls_subdirectory_table(self, cli, capsys):
        assert cli(["ls", "docs"]) == 0

        out = capsys.readouterr().out
        assert "notes.md" in out
        assert "1 of 1 entries shown" in out

    def test_cat(self, cli, capsys):
        assert cli(["cat", "a.txt"]) == 0

        assert capsys.readouterr().out == "0123456789"

    def test_write_text(self, cli, temp_directory):
        assert cli(["write", "a.txt", "--text", "new"]) == 0

        with open(os.path.join(temp_directory, "a.txt")) as f:
            assert f.read() == "new"

    def test_cp_mv_rename_rm(self, cli, capsys, temp_directory):
        assert cli(["cp", "a.txt"]) == 0
        assert cli(["mv", "Copy of a.txt", "docs"]) == 0
        assert cli(["rename", "docs/Copy of a.txt", "b.txt"]) == 0
        assert os.path.isfile(os.path.join(temp_directory, "docs", "b.txt"))

        assert cli(["--plain", "rm", "docs"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "a.txt"

    def test_mkdir_in_subdirectory(self, cli, temp_directory):
        assert cli(["mkdir", "inner", "--in", "docs"]) == 0

        assert os.path.isdir(os.path.join(temp_directory, "docs", "inner"))

    def test_failure_exit_code(self, cli, capsys):
        assert cli(["mkdir", "docs"]) == 1

        assert "already exists" in capsys.readouterr().err

    def test_cat_binary_file(self, cli, capsys, temp_directory):
        with open(os.path.join(temp_directory, "blob.bin"), "wb") as f:
            f.write(b"\xff\xfe")

        assert cli(["cat", "blob.bin"]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_cat_prints_text_verbatim(self, cli, capsys, temp_directory):
        content = "hello :smile: [bold]x[/bold]\n"
        with open(os.path.join(temp_directory, "raw.txt"), "w", newline="") as f:
            f.write(content)

        assert cli(["cat", "raw.txt"]) == 0
        assert capsys.readouterr().out == content
