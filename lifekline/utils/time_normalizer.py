#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生时间归一化 - 把时辰/半日标签换成具体的时:分
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Union

from lifekline.models.birth import ExactTime, SegmentTime


@dataclass(frozen=True)
class NormalizedTime:
    hour: int
    minute: int
    note: Optional[str] = None


# 标签 -> (代表时, 代表分, 实际范围)
SEGMENT_TIME_TABLE = MappingProxyType({
    '子时': (0, 0, '23:00-01:00'),
    '丑时': (2, 0, '01:00-03:00'),
    '寅时': (4, 0, '03:00-05:00'),
    '卯时': (6, 0, '05:00-07:00'),
    '辰时': (8, 0, '07:00-09:00'),
    '巳时': (10, 0, '09:00-11:00'),
    '午时': (12, 0, '11:00-13:00'),
    '未时': (14, 0, '13:00-15:00'),
    '申时': (16, 0, '15:00-17:00'),
    '酉时': (18, 0, '17:00-19:00'),
    '戌时': (20, 0, '19:00-21:00'),
    '亥时': (22, 0, '21:00-23:00'),
    '上午': (10, 0, '06:00-12:00'),
    '下午': (16, 0, '12:00-18:00'),
})


def normalize_birth_time(time: Union[ExactTime, SegmentTime]) -> NormalizedTime:
    """
    归一化出生时间

    精确时间原样返回；时辰标签取表中代表时刻，并附说明，如 "子时(23:00-01:00, 取00:00)"。
    标签均已在 BirthInput 校验阶段限定，查表不会落空。
    """
    if time.mode == 'exact':
        return NormalizedTime(hour=time.hour, minute=time.minute)

    hour, minute, time_range = SEGMENT_TIME_TABLE[time.label]
    note = f"{time.label}({time_range}, 取{hour:02d}:{minute:02d})"
    return NormalizedTime(hour=hour, minute=minute, note=note)
