#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
数据模型 - 出生信息、命盘与K线的统一结构定义
"""

from .birth import (
    BirthDate,
    BirthInput,
    BirthLocation,
    ExactTime,
    SegmentTime,
    TIME_SEGMENT_LABELS,
    parse_birth_input,
)
from .paipan import (
    DayMaster,
    DayunPeriod,
    FourPillars,
    LunarInfo,
    OverallInfo,
    PaipanResult,
    PillarDetail,
    SolarInfo,
)
from .kline import DayunStage, Insight, KLineResult, YearKLine, YearPoint

__all__ = [
    'BirthDate',
    'BirthInput',
    'BirthLocation',
    'ExactTime',
    'SegmentTime',
    'TIME_SEGMENT_LABELS',
    'parse_birth_input',
    'DayMaster',
    'DayunPeriod',
    'FourPillars',
    'LunarInfo',
    'OverallInfo',
    'PaipanResult',
    'PillarDetail',
    'SolarInfo',
    'DayunStage',
    'Insight',
    'KLineResult',
    'YearKLine',
    'YearPoint',
]
