import pytest

from optionlab.filereader import read_file_into_string, string_to_double, string_to_int


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    content = "x,y\n1,2\n"
    path.write_text(content, encoding="utf-8")
    assert read_file_into_string(str(path)) == content


def test_read_missing_file_raises_and_logs(tmp_path, capsys):
    missing = tmp_path / "absent.csv"
    with pytest.raises(OSError, match="Could not open file"):
        read_file_into_string(str(missing))
    assert str(missing) in capsys.readouterr().out


@pytest.mark.parametrize("text, expected", [("3.25", 3.25), (" 42 ", 42.0), ("-0.5", -0.5), (".5", 0.5)])
def test_string_to_double_valid(text, expected):
    assert string_to_double(text) == expected


def test_string_to_double_exponent():
    assert string_to_double("1e3") == 1000.0


@pytest.mark.parametrize("text", ["abc", "", "   ", "inf", "nan"])
def test_string_to_double_invalid(text):
    with pytest.raises(ValueError, match="not a valid double"):
        string_to_double(text)


@pytest.mark.parametrize("text", ["1.5x", "1 2", "1_0"])
def test_string_to_double_trailing_characters(text):
    with pytest.raises(ValueError, match="after the double"):
        string_to_double(text)


@pytest.mark.parametrize("text, expected", [("17", 17), ("  -8", -8), ("+3 ", 3)])
def test_string_to_int_valid(text, expected):
    assert string_to_int(text) == expected


def test_string_to_int_fractional_rejected():
    with pytest.raises(ValueError, match="after the integer"):
        string_to_int("3.5")


@pytest.mark.parametrize("text", ["", "x1", "99999999999"])
def test_string_to_int_invalid(text):
    with pytest.raises(ValueError, match="not a valid integer"):
        string_to_int(text)