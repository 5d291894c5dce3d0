import sys

from livecheck_cli import ui


def test_supports_color_env(monkeypatch):
    monkeypatch.setattr(sys.stdout, "isatty", lambda: True, raising=False)
    assert ui.supports_color() is True
    monkeypatch.setenv("NO_COLOR", "1")
    assert ui.supports_color() is False


def test_plain_output_without_tty(capsys):
    ui.warn("careful")
    ui.err("broken")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Warning: careful\nError: broken\n"
