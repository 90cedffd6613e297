#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法库适配层

排盘核心只依赖 CalendarOracle 接口，具体历法库的方法差异全部收敛在适配器内。
"""

from .base import CalendarOracle, OracleReading, RawDayun, RawLuck, RawPillar
from .lunar_python_oracle import LunarPythonOracle


def create_oracle(name: str = 'lunar_python') -> CalendarOracle:
    """
    按名称创建历法适配器

    Args:
        name: lunar_python（完整能力）或 lunar_python_basic（不使用库内大运，走干支推排）
    """
    if name == 'lunar_python':
        return LunarPythonOracle()
    if name == 'lunar_python_basic':
        return LunarPythonOracle(native_luck=False)
    raise ValueError(f"未知的历法适配器: {name}")


__all__ = [
    'CalendarOracle',
    'OracleReading',
    'RawDayun',
    'RawLuck',
    'RawPillar',
    'LunarPythonOracle',
    'create_oracle',
]
