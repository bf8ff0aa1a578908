"""测试 core.log 日志"""
import pytest

from simplecheck.core import log


@pytest.fixture(autouse=True)
def _restore_level():
    level = log.get_level()
    yield
    log.set_level(level)


class TestLogger:
    """日志级别与输出流"""

    def test_default_level_hides_debug(self, capsys):
        log.set_level(log.WARN)
        log.logger.debug("hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_warn_goes_to_stderr(self, capsys):
        log.set_level(log.WARN)
        log.Logger("unit").warn("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[WARN] [unit] careful" in captured.err

    def test_debug_when_enabled(self, capsys):
        log.set_level(log.DEBUG)
        log.logger.debug("details")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[DEBUG] [simplecheck] details" in captured.err
