import logging

import pytest

from openrm.readings import read_values


def test_reads_all_numbers(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3\n4.5 -6 7e1\n")
    assert read_values(path) == [1.0, 2.0, 3.0, 4.5, -6.0, 70.0]


def test_stops_at_first_non_number(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 x 3")
    assert read_values(path) == [1.0, 2.0]


def test_keeps_number_prefix_then_stops(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1.5abc 2")
    assert read_values(path) == [1.5]


def test_empty_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("")
    assert read_values(path) == []


def test_count_not_multiple_of_three_is_logged(tmp_path, caplog):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3 4")
    with caplog.at_level(logging.ERROR, logger="openrm.readings"):
        values = read_values(path)
    assert values == [1.0, 2.0, 3.0, 4.0]
    assert any("num error" in record.getMessage() for record in caplog.records)


def test_multiple_of_three_not_logged(tmp_path, caplog):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3")
    with caplog.at_level(logging.ERROR, logger="openrm.readings"):
        read_values(path)
    assert caplog.records == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "missing.txt")