import re
import time

import pytest

from librarykeeper import log as logmod

_LINE = re.compile(r"^(\x1b\[1;3\dm)\[(.+)\]: \x1b\[0m(.*)$")


def _parse(line):
    match = _LINE.match(line)
    assert match is not None, line
    return match.groups()


@pytest.mark.parametrize(
    "func, colour",
    [
        (logmod.log, "\x1b[1;34m"),
        (logmod.log_error, "\x1b[1;31m"),
        (logmod.log_warning, "\x1b[1;33m"),
    ],
)
def test_each_level_uses_its_colour(capsys, func, colour):
    func("Hello, World!")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    got_colour, _, message = _parse(lines[0])
    assert got_colour == colour
    assert message == "Hello, World!"


def test_timestamp_is_ctime_format(capsys):
    logmod.log("x")
    _, stamp, _ = _parse(capsys.readouterr().out.strip())
    parsed = time.strptime(stamp, "%a %b %d %H:%M:%S %Y")
    assert abs(time.mktime(parsed) - time.time()) < 120


def test_main_prints_three_messages(capsys):
    assert logmod.main() == 0
    lines = capsys.readouterr().out.splitlines()
    messages = [_parse(line)[2] for line in lines]
    assert messages == [
        "Hello, World!",
        "This is an error message!",
        "This is a warning message!",
    ]