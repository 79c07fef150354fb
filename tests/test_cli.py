"""
Tests for the example copy CLI.
"""
from quarrel.core.cli import PARAM_HELP, CopyFilesCLI, main


class TestCopyFilesCLI:

    def test_define_options(self):
        cli = CopyFilesCLI()
        cli.define_options()
        canonical = [spec.canonical for spec in cli.params]
        assert len(canonical) == 11
        assert canonical[-1] == PARAM_HELP

    def test_copy_sources(self, capsys):
        assert main(["-v", "-R", "a.txt", "b.txt", "dest"]) == 0
        out = capsys.readouterr().out
        assert "Found option '-v'." in out
        assert "Found option '-R'." in out
        assert "Copying a.txt -> dest" in out
        assert "Copying b.txt -> dest" in out

    def test_missing_targets(self, capsys):
        assert main(["only-one"]) == 1
        out = capsys.readouterr().out
        assert "Missing parameters" in out
        assert "Usage parameters:" in out

    def test_help_exits_cleanly(self, capsys):
        assert main(["-h", "a", "b"]) == 0
        out = capsys.readouterr().out
        assert "Usage parameters:" in out
        assert "Copying" not in out

    def test_unknown_flag_fails(self, capsys):
        assert main(["-x", "a", "b"]) == 1
        assert "Copying" not in capsys.readouterr().out

    def test_end_of_options(self, capsys):
        assert main(["--", "-weird-name", "dest"]) == 0
        assert "Copying -weird-name -> dest" in capsys.readouterr().out
