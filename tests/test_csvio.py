import io

import pytest

from spotifind.csvio import (
    MAX_FIELDS,
    MAX_LINE_LENGTH,
    iter_csv_rows,
    parse_csv_line,
    split_string,
)


def test_plain_fields():
    assert parse_csv_line("id,title,album", ",") == ["id", "title", "album"]


def test_quoted_field_keeps_separator():
    assert parse_csv_line('"Rock, Pop",x', ",") == ["Rock, Pop", "x"]


def test_doubled_quotes_become_one():
    assert parse_csv_line('"say ""hi""",b', ",") == ['say "hi"', "b"]


def test_line_ending_is_dropped():
    assert parse_csv_line("a,b\r\n", ",") == ["a", "b"]


def test_trailing_separator_adds_no_field():
    assert parse_csv_line("a,b,", ",") == ["a", "b"]


def test_leading_separator_gives_empty_field():
    assert parse_csv_line(",a", ",") == ["", "a"]


def test_empty_line_has_no_fields():
    assert parse_csv_line("\n", ",") == []


def test_unterminated_quote_takes_rest():
    assert parse_csv_line('a,"b,c', ",") == ["a", "b,c"]


def test_other_separator():
    assert parse_csv_line("a;b,c", ";") == ["a", "b,c"]


def test_field_count_is_capped():
    line = ",".join(str(i) for i in range(MAX_FIELDS + 50))
    fields = parse_csv_line(line, ",")
    assert fields == [str(i) for i in range(MAX_FIELDS - 1)]


def test_separator_must_be_one_character():
    with pytest.raises(ValueError):
        parse_csv_line("a,b", ",,")


def test_iter_rows_reads_every_line():
    stream = io.StringIO('id,name\n1,"A, B"\n2,C\n')
    assert list(iter_csv_rows(stream, ",")) == [
        ["id", "name"],
        ["1", "A, B"],
        ["2", "C"],
    ]


def test_iter_rows_splits_long_lines():
    long_line = "x" * (MAX_LINE_LENGTH + 100)
    rows = list(iter_csv_rows(io.StringIO(long_line + "\n"), ","))
    assert len(rows[0][0]) == MAX_LINE_LENGTH - 1
    assert "".join(row[0] for row in rows if row) == long_line


def test_split_string_trims_spaces():
    assert split_string("Queen; David Bowie ;Freddie", ";") == [
        "Queen",
        "David Bowie",
        "Freddie",
    ]


def test_split_string_skips_empty_pieces():
    assert split_string(";;Queen;;", ";") == ["Queen"]


def test_split_string_any_delimiter_character():
    assert split_string("a,b;c", ",;") == ["a", "b", "c"]


def test_split_string_blank_piece_becomes_empty():
    assert split_string("a; ;b", ";") == ["a", "", "b"]


def test_split_string_empty_text():
    assert split_string("", ";") == []