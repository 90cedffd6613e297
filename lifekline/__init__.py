#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
人生K线 - 八字排盘与百年K线推演

主要入口：
- compute_paipan: 出生信息 -> 八字命盘
- compute_life_kline: 出生信息 -> 命盘 + 百年K线
"""

from lifekline.services.life_kline_service import (
    LifeKlineService,
    compute_life_kline,
    compute_paipan,
)

__all__ = [
    'LifeKlineService',
    'compute_life_kline',
    'compute_paipan',
]

__version__ = '0.3.0'
