import threading

import pytest

from logfour.logerror import LogError, insert_args, last_error, set_last_error


def test_trailing_full_stop_is_removed():
    error = LogError("Found character '%1' where digit was expected.")
    assert error.message == "Found character '%1' where digit was expected"


def test_setting_message_cleans_it():
    error = LogError()
    error.message = "Invalid empty property name."
    assert error.message == "Invalid empty property name"


def test_empty_message_stays_empty():
    assert LogError("").message == ""


def test_create_drops_symbol_equal_to_code():
    error = LogError.create("message", 5, "5", "ctx")
    assert error.symbol == ""
    assert error.code == 5
    assert error.context == "ctx"


def test_create_keeps_symbolic_name():
    error = LogError.create("message", 7, "CONFIGURATOR_PROPERTY_ERROR", "Log4Qt::Factory")
    assert error.symbol == "CONFIGURATOR_PROPERTY_ERROR"


def test_create_with_none_symbol_and_context():
    error = LogError.create("message")
    assert error.symbol == ""
    assert error.context == ""


def test_message_with_args_substitutes_in_order():
    error = LogError("Property '%1' does not exist in class '%2'")
    error.add_arg("footer").add_arg("Log4Qt::Layout")
    assert error.message_with_args() == "Property 'footer' does not exist in class 'Log4Qt::Layout'"


def test_lshift_appends_args():
    error = LogError("Option %1 isn't a positive integer")
    result = error << -3
    assert result is error
    assert error.args == [-3]
    assert error.message_with_args() == "Option -3 isn't a positive integer"


def test_insert_args_lowest_placeholder_first():
    assert insert_args("%2 then %1", ["a", "b"]) == "b then a"


def test_insert_args_replaces_every_occurrence():
    assert insert_args("%1-%1", ["x"]) == "x-x"


def test_insert_args_without_placeholders_is_unchanged():
    assert insert_args("plain text", ["x"]) == "plain text"


def test_insert_args_booleans_as_words():
    assert insert_args("%1 %2", [True, False]) == "true false"


def test_insert_args_leaves_missing_placeholders():
    assert insert_args("%1 and %2", ["one"]) == "one and %2"


def test_clear_args_and_causing_errors():
    error = LogError("m").add_arg(1).add_causing_error(LogError("c"))
    error.clear_args()
    error.clear_causing_errors()
    assert error.args == []
    assert error.causing_errors == []


def test_is_empty():
    assert LogError().is_empty()
    assert not LogError("message").is_empty()
    assert not LogError("", 3).is_empty()


def test_str_message_only():
    assert str(LogError("Just a message")) == "Just a message"


def test_str_full_format():
    error = LogError("Unable to open file '%1'", 5, "OPEN_ERROR", "Log4Qt::FileAppender")
    error << "app.log"
    assert str(error) == "Unable to open file 'app.log' (Log4Qt::FileAppender::OPEN_ERROR, 5)"


def test_str_code_without_context():
    assert str(LogError("m", 4)) == "m (4)"


def test_str_context_without_code():
    assert str(LogError("m", 0, "", "ctx")) == "m (ctx)"


def test_str_with_causing_errors():
    error = LogError("Unable to set property value on object", 0, "", "Log4Qt::Factory")
    error.add_causing_error(LogError("first"))
    error.add_causing_error(LogError("second", 2))
    assert str(error) == (
        "Unable to set property value on object (Log4Qt::Factory): first, second (2)"
    )


def test_translated_message_without_catalogue():
    error = LogError("Value %1.").add_arg(9)
    assert error.translated_message() == error.message
    assert error.translated_message_with_args() == error.message_with_args()


def test_last_error_defaults_to_empty():
    results = []
    thread = threading.Thread(target=lambda: results.append(last_error()))
    thread.start()
    thread.join()
    assert results[0] == LogError()
    assert results[0].is_empty()


def test_set_last_error_round_trip_is_a_copy():
    error = LogError("stored", 11, "SYM", "ctx").add_arg("a")
    set_last_error(error)
    error.add_arg("b")
    stored = last_error()
    assert stored.args == ["a"]
    assert stored.message == "stored"
    stored.add_arg("c")
    assert last_error().args == ["a"]


def test_last_error_is_per_thread():
    set_last_error(LogError("main thread"))
    seen = []

    def worker():
        set_last_error(LogError("worker"))
        seen.append(last_error().message)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    assert seen == ["worker"]
    assert last_error().message == "main thread"


def test_equality_compares_all_fields():
    assert LogError("a", 1, "s", "c") == LogError("a.", 1, "s", "c")
    assert LogError("a", 1) != LogError("a", 2)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(LogError("a"))