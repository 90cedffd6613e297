#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生信息校验测试
"""

import pytest
from pydantic import ValidationError

from lifekline.models.birth import BirthInput, ExactTime, SegmentTime, parse_birth_input
from tests.fixtures.sample_data import BEIJING_NOON_1990, VALID_BIRTH_INPUTS, with_changes


def _error_locs(exc_info):
    return [tuple(err['loc']) for err in exc_info.value.errors()]


class TestBirthInputValid:
    """合法输入测试"""

    @pytest.mark.parametrize("raw", VALID_BIRTH_INPUTS)
    def test_valid_inputs(self, raw):
        birth = parse_birth_input(raw)
        assert isinstance(birth, BirthInput)

    def test_discriminated_time(self):
        """mode 决定时间类型"""
        exact = parse_birth_input(BEIJING_NOON_1990)
        assert isinstance(exact.time, ExactTime)
        segment = parse_birth_input(with_changes(BEIJING_NOON_1990, ['time'], {'mode': 'segment', 'label': '子时'}))
        assert isinstance(segment.time, SegmentTime)

    def test_strips_text_fields(self):
        raw = with_changes(BEIJING_NOON_1990, ['name'], '  张三  ')
        raw = with_changes(raw, ['location', 'city'], ' 北京 ')
        birth = parse_birth_input(raw)
        assert birth.name == '张三'
        assert birth.location.city == '北京'

    def test_leap_month_alias(self):
        """兼容 isLeapMonth 写法"""
        raw = with_changes(BEIJING_NOON_1990, ['calendar'], 'lunar')
        raw = with_changes(raw, ['date', 'isLeapMonth'], True)
        assert parse_birth_input(raw).date.is_leap_month is True

    def test_leap_feb_29(self):
        raw = with_changes(BEIJING_NOON_1990, ['date'], {'year': 2000, 'month': 2, 'day': 29})
        assert parse_birth_input(raw).date.day == 29

    def test_passthrough_model(self):
        birth = parse_birth_input(BEIJING_NOON_1990)
        assert parse_birth_input(birth) is birth

    def test_frozen(self):
        birth = parse_birth_input(BEIJING_NOON_1990)
        with pytest.raises(ValidationError):
            birth.name = '李四'


class TestBirthInputInvalid:
    """非法输入测试：错误定位到具体字段"""

    @pytest.mark.parametrize("path,value,loc", [
        (['name'], '   ', ('name',)),
        (['gender'], 'other', ('gender',)),
        (['calendar'], 'hijri', ('calendar',)),
        (['date', 'month'], 13, ('date', 'month')),
        (['date', 'day'], 0, ('date', 'day')),
        (['date', 'year'], 1700, ('date', 'year')),
        (['location', 'longitude'], 150.0, ('location', 'longitude')),
        (['location', 'longitude'], 60.0, ('location', 'longitude')),
        (['location', 'province'], '', ('location', 'province')),
        (['location'], ..., ('location',)),
    ])
    def test_field_errors(self, path, value, loc):
        with pytest.raises(ValidationError) as exc_info:
            parse_birth_input(with_changes(BEIJING_NOON_1990, path, value))
        assert loc in _error_locs(exc_info)

    def test_exact_hour_out_of_range(self):
        raw = with_changes(BEIJING_NOON_1990, ['time'], {'mode': 'exact', 'hour': 24, 'minute': 0})
        with pytest.raises(ValidationError) as exc_info:
            parse_birth_input(raw)
        assert any(loc[0] == 'time' and loc[-1] == 'hour' for loc in _error_locs(exc_info))

    def test_unknown_segment_label(self):
        raw = with_changes(BEIJING_NOON_1990, ['time'], {'mode': 'segment', 'label': '半夜'})
        with pytest.raises(ValidationError) as exc_info:
            parse_birth_input(raw)
        assert any(loc[0] == 'time' and loc[-1] == 'label' for loc in _error_locs(exc_info))

    def test_unknown_time_mode(self):
        raw = with_changes(BEIJING_NOON_1990, ['time'], {'mode': 'fuzzy'})
        with pytest.raises(ValidationError):
            parse_birth_input(raw)

    @pytest.mark.parametrize("year,month,day", [(1990, 2, 30), (2001, 2, 29), (1990, 4, 31)])
    def test_nonexistent_solar_date(self, year, month, day):
        raw = with_changes(BEIJING_NOON_1990, ['date'], {'year': year, 'month': month, 'day': day})
        with pytest.raises(ValidationError):
            parse_birth_input(raw)

    def test_lunar_day_30_passes_model_check(self):
        """农历日期存在性留给历法库判断"""
        raw = with_changes(BEIJING_NOON_1990, ['calendar'], 'lunar')
        raw = with_changes(raw, ['date'], {'year': 1990, 'month': 2, 'day': 30})
        assert parse_birth_input(raw).date.day == 30

    def test_extra_fields_ignored(self):
        """前端附带的未知字段不影响解析"""
        raw = with_changes(BEIJING_NOON_1990, ['nickname'], '小张')
        raw = with_changes(raw, ['location', 'district'], '朝阳')
        birth = parse_birth_input(raw)
        assert birth == parse_birth_input(BEIJING_NOON_1990)
        assert 'nickname' not in birth.model_dump()
