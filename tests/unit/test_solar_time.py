#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
真太阳时校正测试
"""

from datetime import datetime

import pytest

from lifekline.utils.solar_time import (
    calculate_true_solar_time,
    correct_to_true_solar_time,
    format_ymd_hms,
    longitude_delta_minutes,
)


class TestSolarTime:
    """经度时差校正测试"""

    def test_beijing_longitude(self):
        """东经 116.46 比标准经线慢 14.16 分钟"""
        correction = correct_to_true_solar_time(1990, 1, 1, 12, 0, 116.46)
        assert correction.delta_minutes == pytest.approx(-14.16)
        assert format_ymd_hms(correction.corrected) == "1990-01-01 11:45:50"
        assert format_ymd_hms(correction.local) == "1990-01-01 12:00:00"

    def test_standard_meridian_no_shift(self):
        """东经 120 度无校正"""
        local = datetime(2000, 3, 15, 12, 0)
        assert calculate_true_solar_time(local, 120.0) == local
        assert longitude_delta_minutes(120.0) == 0

    def test_east_of_meridian_is_later(self):
        """东经 135 快 60 分钟"""
        local = datetime(2000, 3, 15, 12, 0)
        assert calculate_true_solar_time(local, 135.0) == datetime(2000, 3, 15, 13, 0)

    @pytest.mark.parametrize("longitude", [87.62, 116.46, 120.0, 135.0])
    def test_correction_matches_true_solar_time(self, longitude):
        correction = correct_to_true_solar_time(2000, 3, 15, 12, 0, longitude)
        assert correction.corrected == calculate_true_solar_time(correction.local, longitude)
        assert correction.delta_minutes == longitude_delta_minutes(longitude)

    def test_day_rolls_back(self):
        """子夜出生、西部经度，校正后回到前一天"""
        correction = correct_to_true_solar_time(1990, 1, 2, 0, 0, 116.46)
        assert format_ymd_hms(correction.corrected) == "1990-01-01 23:45:50"

    def test_year_rolls_back(self):
        """元旦零点在乌鲁木齐校正到上一年"""
        correction = correct_to_true_solar_time(2001, 1, 1, 0, 10, 87.62)
        assert correction.corrected.year == 2000
        assert correction.corrected.month == 12

    def test_format_truncates_subseconds(self):
        """秒以下截断"""
        assert format_ymd_hms(datetime(2000, 1, 1, 1, 2, 3, 999999)) == "2000-01-01 01:02:03"
