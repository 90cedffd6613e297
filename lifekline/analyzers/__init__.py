#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命局分析模块

- 日主强弱与喜忌
- 百年K线推演
- 大运阶段文案
"""

from .strength_analyzer import DayMasterStrengthAnalyzer, FavorableElements
from .kline_generator import KLineGenerator, generate_kline

__all__ = [
    'DayMasterStrengthAnalyzer',
    'FavorableElements',
    'KLineGenerator',
    'generate_kline',
]
