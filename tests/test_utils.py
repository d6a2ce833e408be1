"""Tests for utility modules."""

import logging

import pytest

from tinta import TextStorage, parse


class TestGetLogger:
    """Namespaced standard library loggers."""

    def test_prefix_added(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("mymodule").name == "tinta.mymodule"

    def test_package_names_kept(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("tinta.lexer.core").name == "tinta.lexer.core"
        assert get_logger("tinta").name == "tinta"

    def test_same_logger_returned(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("x") is logging.getLogger("tinta.x")

    def test_no_handlers_configured(self) -> None:
        assert logging.getLogger("tinta").handlers == []


class TestDebugLogging:
    """Debug records emitted by the pipeline."""

    def test_assembler_logs_block_count(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tinta"):
            parse("# a\n\nb")
        assert any("Assembled 2 blocks" in record.getMessage() for record in caplog.records)

    def test_storage_logs_edits(self, caplog: pytest.LogCaptureFixture) -> None:
        storage = TextStorage(parse("abc"))
        with caplog.at_level(logging.DEBUG, logger="tinta.storage"):
            storage.delete(0, 1)
        assert [record.getMessage() for record in caplog.records] == ["delete 0..1 (-1)"]
