"""Tests for benfordstats/data_loader.py"""

import polars as pl
import pytest

from benfordstats.data_loader import (
    frequencies_from_counts,
    load_digit_table,
    load_frequencies,
)
from benfordstats.detectors import InvalidArgumentError


def test_load_frequencies_sorts_by_digit(digit_frequencies_csv, four_digit_frequencies):
    frequencies, sample_size = load_frequencies(digit_frequencies_csv)

    assert list(frequencies.index) == list(range(1, 10))
    assert frequencies.tolist() == pytest.approx(four_digit_frequencies)
    assert sample_size is None


def test_load_counts_normalises(digit_counts_csv):
    frequencies, sample_size = load_frequencies(digit_counts_csv)

    assert sample_size == 1000
    assert frequencies.sum() == pytest.approx(1.0)
    assert frequencies[1] == pytest.approx(0.301)
    assert frequencies[9] == pytest.approx(0.046)


def test_load_digit_table_verbose(digit_counts_csv, capsys):
    df = load_digit_table(digit_counts_csv, verbose=True)
    assert list(df.columns) == ["digit", "count"]
    assert "Loaded 9 digits" in capsys.readouterr().out


def test_load_digit_table_polars(digit_counts_csv):
    table = load_digit_table(digit_counts_csv, return_polars=True)
    assert isinstance(table, pl.DataFrame)
    assert table["digit"].to_list() == list(range(1, 10))


def test_missing_file(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        load_digit_table(tmp_path / "nope.csv")


def test_missing_value_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("digit,share\n" + "".join(f"{d},0.1\n" for d in range(1, 10)))
    with pytest.raises(ValueError, match="'frequency' or 'count'"):
        load_digit_table(path)


def test_incomplete_digits(tmp_path):
    path = tmp_path / "eight.csv"
    path.write_text("digit,frequency\n" + "".join(f"{d},0.125\n" for d in range(1, 9)))
    with pytest.raises(InvalidArgumentError, match="digits 1-9"):
        load_digit_table(path)


def test_zero_counts_rejected():
    with pytest.raises(InvalidArgumentError):
        frequencies_from_counts(pl.Series("count", [0.0] * 9))


def test_non_integer_digit_is_a_value_error(tmp_path):
    path = tmp_path / "words.csv"
    path.write_text("digit,frequency\none,0.3\n" + "".join(f"{d},0.1\n" for d in range(2, 10)))
    with pytest.raises(ValueError, match="could not parse"):
        load_digit_table(path)


def test_empty_digit_cell(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("digit,frequency\n,0.3\n" + "".join(f"{d},0.1\n" for d in range(2, 10)))
    with pytest.raises(InvalidArgumentError, match="empty cells"):
        load_digit_table(path)


def test_fractional_counts_keep_sample_size(tmp_path):
    path = tmp_path / "small.csv"
    path.write_text("digit,count\n" + "".join(f"{d},0.05\n" for d in range(1, 10)))

    frequencies, sample_size = load_frequencies(path)

    assert sample_size == pytest.approx(0.45)
    assert frequencies.tolist() == pytest.approx([1 / 9] * 9)
