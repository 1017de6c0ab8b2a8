import logging

import pytest

from multierr import (
    MessageStyle,
    MultiError,
    combine,
    default_format_message,
    get_message_formatter,
    make_formatter,
    message_formatter,
    set_message_formatter,
)

oops = ValueError("oops")
whoops = ValueError("whoops")
whoopsie = ValueError("whoopsie")


@pytest.fixture(autouse=True)
def reset_formatter():
    set_message_formatter(None)
    yield
    set_message_formatter(None)


def test_three_errors_render_with_header_and_indices():
    err = None
    err = combine(err, oops)
    err = combine(err, whoops)
    err = combine(err, whoopsie)
    assert str(err) == "3 errors occurred:\n(1) oops\n(2) whoops\n(3) whoopsie"


def test_single_error_passes_through_unchanged():
    err = combine(None, oops)
    assert err is oops
    assert str(err) == "oops"


def test_multiline_messages_are_indented():
    nested = combine(ValueError("a"), ValueError("b"))
    err = combine(ValueError("first"), RuntimeError(str(nested)))
    assert str(err) == (
        "2 errors occurred:\n"
        "(1) first\n"
        "(2) 2 errors occurred:\n"
        "\t(1) a\n"
        "\t(2) b"
    )


def test_empty_message_falls_back_to_class_name():
    err = combine(ValueError(), KeyboardInterrupt())
    assert str(err) == "2 errors occurred:\n(1) ValueError\n(2) KeyboardInterrupt"


def test_custom_formatter_applies_at_render_time():
    err = combine(oops, whoops)

    def semicolons(errors):
        return "; ".join(str(error) for error in errors)

    previous = set_message_formatter(semicolons)
    assert previous is default_format_message
    assert get_message_formatter() is semicolons
    assert str(err) == "oops; whoops"

    set_message_formatter(None)
    assert get_message_formatter() is default_format_message
    assert str(err).startswith("2 errors occurred:")


def test_message_formatter_context_restores_previous(caplog):
    caplog.set_level(logging.DEBUG, logger="multierr.formatting")
    err = combine(oops, whoops)
    with message_formatter(lambda errors: f"{len(errors)} failures"):
        assert str(err) == "2 failures"
    assert get_message_formatter() is default_format_message
    assert any("Message formatter set" in record.message for record in caplog.records)


def test_default_formatter_called_directly():
    assert default_format_message([oops, whoops]) == "2 errors occurred:\n(1) oops\n(2) whoops"


def test_style_formatter():
    style = MessageStyle(header="{count} problems", item="- #{index}: {message}", indent="    ")
    formatter = make_formatter(style)
    assert formatter([oops, ValueError("x\ny")]) == "2 problems\n- #1: oops\n- #2: x\n    y"


def test_default_style_matches_default_formatter():
    errors = [oops, ValueError("multi\nline")]
    assert make_formatter(MessageStyle())(errors) == default_format_message(errors)


def test_style_from_env(monkeypatch):
    monkeypatch.setenv("MULTIERR_HEADER", "Failures ({count}):")
    monkeypatch.setenv("MULTIERR_INDENT", "  ")
    monkeypatch.delenv("MULTIERR_ITEM", raising=False)
    style = MessageStyle.from_env()
    assert style == MessageStyle(header="Failures ({count}):", indent="  ")

    with message_formatter(make_formatter(style)):
        assert str(MultiError([oops, ValueError("a\nb")])) == "Failures (2):\n(1) oops\n(2) a\n  b"


@pytest.mark.parametrize(
    "overrides",
    [{"header": "{n} errors"}, {"item": "{0}: {message}"}, {"item": "({index) {message}"}],
)
def test_style_rejects_bad_templates(overrides):
    with pytest.raises(ValueError, match="Invalid message style template"):
        MessageStyle(**overrides)


def test_style_from_env_rejects_bad_template(monkeypatch):
    monkeypatch.setenv("MULTIERR_HEADER", "{n} errors occurred:")
    with pytest.raises(ValueError, match="Invalid message style template"):
        MessageStyle.from_env()
