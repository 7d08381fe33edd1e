"""Tests for verlex utility modules."""

from verlex.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "verlex.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("verlex").name == "verlex"
        assert get_logger("verlex.lexer.core").name == "verlex.lexer.core"

    def test_no_handlers_installed(self) -> None:
        assert get_logger("verlex.lexer.reader").handlers == []
