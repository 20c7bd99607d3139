import io

import pytest

from uvsync.hooks.io import console


def test_say_prefixes_progress_mark() -> None:
    out = io.StringIO()
    console.say("Bash detected. Setting up hook...", file=out)
    assert out.getvalue() == "› Bash detected. Setting up hook...\n"


def test_banner_and_rule() -> None:
    out = io.StringIO()
    console.banner("Setting up", file=out)
    console.rule(file=out)
    assert out.getvalue().splitlines() == ["--- Setting up ---", "-" * console.RULE_WIDTH]


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console.error("cannot write ~/.bashrc")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: cannot write ~/.bashrc\n"
