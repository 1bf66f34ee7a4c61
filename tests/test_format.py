"""Unit tests for format_sql placeholder substitution."""

from __future__ import annotations

import tsqlstring
from tsqlstring.template.cursor import ArgumentCursor
from tsqlstring.template.substitute import format_sql


class _Named:
    def __init__(self, text: str) -> None:
        self._text = text

    def __str__(self) -> str:
        return self._text


def test_question_marks_take_list_values():
    assert format_sql("? and ?", ["a", "b"]) == "'a' and 'b'"


def test_double_question_marks_take_identifiers():
    sql = format_sql("SELECT * FROM ?? WHERE id = ?", ["table", 42])
    assert sql == "SELECT * FROM [table] WHERE id = 42"


def test_triple_question_marks_are_ignored():
    sql = format_sql("? or ??? and ?", ["foo", "bar", "fizz", "buzz"])
    assert sql == "'foo' or ??? and 'bar'"


def test_long_runs_are_ignored():
    assert format_sql("?????", ["a"]) == "?????"


def test_extra_placeholders_are_left_untouched():
    assert format_sql("? and ?", ["a"]) == "'a' and ?"
    assert format_sql("?? and ??", ["t"]) == "[t] and ??"


def test_extra_arguments_are_not_used():
    assert format_sql("? and ?", ["a", "b", "c"]) == "'a' and 'b'"


def test_question_marks_within_values_are_not_rescanned():
    assert format_sql("? and ?", ["hello?", "b"]) == "'hello?' and 'b'"
    assert format_sql("?? = ?", ["c??", "??"]) == "[c??] = '??'"


def test_none_values_leave_template_alone():
    assert format_sql("?", None, False) == "?"


def test_no_values_leave_template_alone():
    assert format_sql("SELECT ??") == "SELECT ??"
    assert format_sql("SELECT ?? FROM ?", []) == "SELECT ?? FROM ?"
    assert format_sql("SELECT ?", ()) == "SELECT ?"


def test_template_without_placeholders():
    assert format_sql("SELECT COUNT(*) FROM table", ["a", "b"]) == "SELECT COUNT(*) FROM table"


def test_tuple_arguments_are_positional():
    assert format_sql("?? = ?", ("id", 1)) == "[id] = 1"


def test_list_argument_expands_in_place():
    sql = format_sql("WHERE id IN (?)", [[1, 2, 3]])
    assert sql == "WHERE id IN (1, 2, 3)"


def test_multi_row_values():
    sql = format_sql("INSERT INTO ?? (a, b) VALUES ?", ["t", [[1, "x"], [2, "y"]]])
    assert sql == "INSERT INTO [t] (a, b) VALUES (1, 'x'), (2, 'y')"


def test_identifier_list_argument():
    sql = format_sql("SELECT ?? FROM ??", [["a", "t.b"], "dbo.t"])
    assert sql == "SELECT [a], [t].[b] FROM [dbo].[t]"


def test_mapping_argument_in_list():
    sql = format_sql("UPDATE ?? SET ? WHERE id = ?", ["users", {"name": "Bo", "age": 3}, 9])
    assert sql == "UPDATE [users] SET [name] = 'Bo', [age] = 3 WHERE id = 9"


def test_mapping_argument_in_list_stringified():
    sql = format_sql("SELECT ?", [{"a": 1}], stringify_objects=True)
    assert sql == "SELECT '{''a'': 1}'"


def test_null_argument_is_consumed():
    assert format_sql("? ?", [None, 1]) == "NULL 1"


def test_raw_argument():
    sql = format_sql("SET modified = ?", [tsqlstring.raw("GETDATE()")])
    assert sql == "SET modified = GETDATE()"


def test_time_zone_is_forwarded(utc_instant):
    assert format_sql("?", [utc_instant], time_zone="+01") == "'2012-05-07 12:42:03.002'"


# ---------------------------------------------------------------------------
# Single (non-list) argument
# ---------------------------------------------------------------------------


def test_mapping_is_converted_to_values():
    assert format_sql("?", {"hello": "world"}, False) == "[hello] = 'world'"


def test_mapping_is_stringified_on_request():
    assert format_sql("?", {"hello": "world"}, True) == "'{''hello'': ''world''}'"
    assert format_sql("?", _Named("hello"), True) == "'hello'"


def test_single_argument_fills_every_placeholder():
    assert format_sql("? = ? and ??? ", 5) == "5 = 5 and ??? "
    assert format_sql("SELECT ?? FROM ??", "users") == "SELECT [users] FROM [users]"


# ---------------------------------------------------------------------------
# Idempotence and cursor
# ---------------------------------------------------------------------------


def test_empty_arguments_are_identity():
    for template in ["", "?", "??", "???", "a ? b ?? c", "no placeholders"]:
        assert format_sql(template, []) == template


def test_package_level_format_alias():
    assert tsqlstring.format("? and ?", ["a", "b"]) == "'a' and 'b'"


def test_cursor_advance_returns_new_cursor():
    cursor = ArgumentCursor(["a", "b"])
    moved = cursor.advance()
    assert cursor.position == 0 and cursor.current == "a"
    assert moved.position == 1 and moved.current == "b"
    assert moved.advance().exhausted
    assert ArgumentCursor([]).exhausted
