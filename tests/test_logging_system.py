import logging

from prefix_expression import parse_prefix, try_parse_prefix, ParserConfig
from prefix_expression.logging_system import (
    LogLevel, ParserLogger, configure_logging, get_logger, set_log_level,
    log_info, log_warning, log_debug
)


def messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == 'prefix_expression']


def test_get_logger_is_shared():
    assert get_logger() is get_logger()
    assert get_logger().log_level is LogLevel.MINIMAL


def test_rejected_input_logged_in_verbose_mode(caplog):
    configure_logging(LogLevel.VERBOSE)
    try_parse_prefix("(foo x y)")
    assert any("Rejected '(foo x y)'" in message and "foo" in message for message in messages(caplog))


def test_rejected_input_not_logged_when_disabled(caplog):
    configure_logging(LogLevel.VERBOSE)
    try_parse_prefix("(foo x y)", ParserConfig(log_failures=False))
    assert messages(caplog) == []


def test_rejections_hidden_below_verbose(caplog):
    configure_logging(LogLevel.DETAILED)
    try_parse_prefix("(+ x")
    assert messages(caplog) == []


def test_parse_summary_at_detailed_level(caplog):
    configure_logging(LogLevel.DETAILED)
    parse_prefix("+ x   y")
    assert messages(caplog) == ["Parsed '+ x   y' -> (+ x y) (3 nodes)"]


def test_level_gating(caplog):
    set_log_level(LogLevel.MINIMAL)
    log_info("hidden")
    log_debug("hidden too")
    log_warning("shown")
    assert messages(caplog) == ["shown"]

    set_log_level(LogLevel.DETAILED)
    log_info("now shown")
    assert messages(caplog)[-1] == "now shown"


def test_silent_has_no_console_handler(caplog):
    logger = configure_logging(LogLevel.SILENT)
    assert logger.logger.handlers == []
    logger.warning("nothing")
    logger.info("nothing either")
    assert messages(caplog) == []


def test_file_logging(tmp_path):
    log_file = tmp_path / "parser.log"
    logger = ParserLogger(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))
    logger.warning("boom")
    logger.close()
    assert "WARNING: boom" in log_file.read_text()
    assert logging.getLogger('prefix_expression').handlers == []


def test_info_only_at_detailed_and_above(caplog):
    logger = configure_logging(LogLevel.MINIMAL)
    assert not logger.enabled(LogLevel.DETAILED)
    log_info("hidden")
    logger.log_level = LogLevel.VERBOSE
    log_info("shown")
    log_debug("rejection detail")
    assert messages(caplog) == ["shown", "rejection detail"]
