"""
Test logging utils
"""

from jobmatch.services.logging_utils import log_section, prefixed_logger


def test_prefixed_logger_writes_to_stdout(capsys):
    log = prefixed_logger("[Test]")
    log("first\nsecond")
    log_section(log, "Title", width=3, char="-")

    assert capsys.readouterr().out.splitlines() == [
        "[Test] first",
        "[Test] second",
        "[Test] ---",
        "[Test] Title",
        "[Test] ---",
    ]


def test_disabled_logger_is_silent(capsys):
    prefixed_logger("[Test]", enabled=False)("hidden")
    assert capsys.readouterr().out == ""
