import pickle

import pytest

from prefix_expression import ParseError, ParseErrorKind, ParseResult, ParserConfig, DEFAULT_CONFIG


def test_error_message_includes_symbol_and_position():
    error = ParseError(ParseErrorKind.UNACCEPTABLE_SYMBOL, position=3, symbol="foo")
    assert str(error) == "Unacceptable symbol 'foo' at position 3"


def test_error_message_with_detail():
    error = ParseError(ParseErrorKind.UNEXPECTED_END, position=4, detail="missing operand")
    assert str(error) == "Unexpected end of input at position 4: missing operand"
    assert str(ParseError(ParseErrorKind.EMPTY_INPUT)) == "Empty input"


def test_error_is_picklable():
    error = ParseError(ParseErrorKind.BARE_BRACKETS, position=0, symbol="(x)")
    restored = pickle.loads(pickle.dumps(error))
    assert (restored.kind, restored.position, restored.symbol) == (error.kind, 0, "(x)")


def test_result_defaults():
    result = ParseResult()
    assert result.ok
    assert result.unwrap() is None


def test_config_defaults():
    assert DEFAULT_CONFIG.max_depth == 200
    assert DEFAULT_CONFIG.log_failures is True


@pytest.mark.parametrize("max_depth", [0, -1, 2.5, True, "10"])
def test_config_rejects_bad_depth(max_depth):
    with pytest.raises(ValueError):
        ParserConfig(max_depth=max_depth)


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.max_depth = 5
