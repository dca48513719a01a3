import re
import time

import pytest

from openrm import timer


def test_double_of_s_converts_nanoseconds():
    assert timer.get_double_of_s(0, 1_500_000_000) == pytest.approx(1.5)


def test_double_of_s_is_antisymmetric():
    start, end = 123_456_789, 987_654_321
    assert timer.get_double_of_s(start, end) == pytest.approx(
        -timer.get_double_of_s(end, start)
    )


def test_num_of_ms_truncates():
    assert timer.get_num_of_ms(0, 2_999_999) == 2


def test_num_of_ms_truncates_toward_zero_for_negative():
    assert timer.get_num_of_ms(7_500_000, 0) == -timer.get_num_of_ms(0, 7_500_000)


def test_num_of_us_relates_to_ms():
    start, end = 10, 10 + 42_000_000
    assert timer.get_num_of_us(start, end) == timer.get_num_of_ms(start, end) * 1000


def test_ull_round_trip():
    now = timer.get_time()
    assert timer.trans_ull_to_time(timer.trans_time_to_ull(now)) == now


def test_get_time_is_epoch_nanoseconds():
    reference = time.time_ns()
    value = timer.trans_time_to_ull(timer.get_time())
    assert abs(value - reference) < 5 * 1_000_000_000


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        timer.trans_ull_to_time(-1)


def test_negative_time_point_rejected():
    with pytest.raises(ValueError):
        timer.trans_time_to_ull(-5)


def test_time_str_format():
    text = timer.get_time_str()
    assert re.fullmatch(r"\d{8}", text)
    assert 1 <= int(text[:2]) <= 31
    assert int(text[2:4]) < 24


def test_ms_str_format():
    text = timer.get_ms_str()
    assert re.fullmatch(r"\d{11}", text)
    assert 1 <= int(text[:2]) <= 31
    assert int(text[6:8]) < 61