import pytest

from microprints.csvline import CsvError, count_fields, parse_csv


def test_simple_fields():
    assert parse_csv("a,b,c") == ["a", "b", "c"]


def test_empty_line_has_one_empty_field():
    assert parse_csv("") == [""]
    assert count_fields("") == 1


def test_empty_fields_kept():
    assert parse_csv(",x,") == ["", "x", ""]


def test_quoted_comma():
    assert parse_csv('"x,y",z') == ["x,y", "z"]


def test_quoted_newline():
    assert parse_csv('"line1\nline2",tail') == ["line1\nline2", "tail"]


def test_doubled_quote():
    assert parse_csv('"say ""hi"""') == ['say "hi"']


def test_unterminated_quote_raises():
    with pytest.raises(CsvError):
        parse_csv('a,"b')
    with pytest.raises(CsvError):
        count_fields('"open')


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_csv('"')


@pytest.mark.parametrize(
    "line",
    ["a,b,c", '"x,y",z', ",,", 'one,"two ""2""",three', "solo"],
)
def test_count_matches_parse(line):
    assert len(parse_csv(line)) == count_fields(line)


@pytest.mark.parametrize("fields", [["a", "b"], ["x,y", "z"], ['q"uote', ""]])
def test_round_trip(fields):
    line = ",".join('"' + f.replace('"', '""') + '"' for f in fields)
    assert parse_csv(line) == fields