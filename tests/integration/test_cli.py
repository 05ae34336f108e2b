# Integration tests for the command line entry point

import pytest

from mdv.cli import main

from ..helpers import write


def run(repo_dir, *argv):
    return main(["--repo", str(repo_dir), *argv])


class TestCli:
    # Tests for mdv.cli.main()

    def test_init_add_commit_log(self, temp_dir, capsys):
        assert run(temp_dir, "init") == 0
        write(temp_dir, "a.txt", "x")
        assert run(temp_dir, "add", "a.txt") == 0
        assert run(temp_dir, "commit", "-m", "First", "--author", "Cli User") == 0
        out = capsys.readouterr().out
        assert "[main (root-commit)" in out

        assert run(temp_dir, "log") == 0
        out = capsys.readouterr().out
        assert "Author: Cli User" in out
        assert "    First" in out

    def test_errors_exit_nonzero(self, temp_dir, capsys):
        assert run(temp_dir, "status") == 1
        assert "fatal: Not a MDV repository" in capsys.readouterr().err

    def test_branch_on_empty_repository(self, temp_dir, capsys):
        run(temp_dir, "init")
        assert run(temp_dir, "branch", "feature") == 1
        assert "fatal:" in capsys.readouterr().err

    def test_merge_conflict_lists_paths(self, temp_dir, capsys):
        run(temp_dir, "init")
        write(temp_dir, "a.txt", "x")
        run(temp_dir, "add", "a.txt")
        run(temp_dir, "commit", "-m", "base")
        run(temp_dir, "branch", "feature")
        write(temp_dir, "a.txt", "y")
        run(temp_dir, "add", "a.txt")
        run(temp_dir, "commit", "-m", "feature")
        run(temp_dir, "checkout", "main")
        write(temp_dir, "a.txt", "z")
        run(temp_dir, "add", "a.txt")
        run(temp_dir, "commit", "-m", "main")
        capsys.readouterr()

        assert run(temp_dir, "merge", "feature", "main") == 1
        captured = capsys.readouterr()
        assert "\ta.txt" in captured.out
        assert "Merge conflict" in captured.err

    def test_cat_prints_content(self, temp_dir, capsysbinary):
        run(temp_dir, "init")
        write(temp_dir, "a.txt", "hello")
        run(temp_dir, "add", "a.txt")
        run(temp_dir, "commit", "-m", "base")
        capsysbinary.readouterr()
        assert run(temp_dir, "cat", "a.txt", "main") == 0
        assert capsysbinary.readouterr().out.endswith(b"hello")

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert "mdv" in capsys.readouterr().out

    def test_add_lists_newly_staged_paths(self, temp_dir, capsys):
        run(temp_dir, "init")
        write(temp_dir, "a.txt", "x")
        write(temp_dir, "src/b.txt", "y")
        capsys.readouterr()
        assert run(temp_dir, "add", "a.txt", "src") == 0
        assert capsys.readouterr().out.splitlines() == ["add 'a.txt'", "add 'src/b.txt'"]

        assert run(temp_dir, "add", "a.txt") == 0
        assert capsys.readouterr().out == ""

    def test_add_quiet(self, temp_dir, capsys):
        run(temp_dir, "init")
        write(temp_dir, "a.txt", "x")
        capsys.readouterr()
        assert run(temp_dir, "add", "-q", "a.txt") == 0
        assert capsys.readouterr().out == ""
