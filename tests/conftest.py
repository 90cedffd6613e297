#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 出生信息样例
- 假历法库（不依赖 lunar_python 的推排路径）
- 真实排盘结果
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from tests.fixtures.fake_oracle import FakeOracle  # noqa: E402
from tests.fixtures.sample_data import BEIJING_NOON_1990, FAKE_CHART_BIRTH  # noqa: E402


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_birth_input() -> Dict[str, Any]:
    """
    示例出生信息：1990-01-01 12:00 北京

    Returns:
        出生信息字典
    """
    return dict(BEIJING_NOON_1990)


@pytest.fixture(scope="function")
def fake_birth_input() -> Dict[str, Any]:
    """配合假历法库使用的出生信息（经度 120，无时差）"""
    return dict(FAKE_CHART_BIRTH)


# ==================== 历法库 Fixtures ====================

@pytest.fixture(scope="function")
def fake_oracle() -> FakeOracle:
    """固定四柱、不提供大运的假历法库"""
    return FakeOracle()


@pytest.fixture(scope="session")
def lunar_oracle():
    """lunar_python 适配器"""
    from lifekline.oracle import LunarPythonOracle
    return LunarPythonOracle()


# ==================== 结果 Fixtures ====================

@pytest.fixture(scope="function")
def fake_paipan(fake_oracle, fake_birth_input):
    """假历法库排出的命盘"""
    from lifekline.services.life_kline_service import LifeKlineService
    return LifeKlineService(oracle=fake_oracle).paipan(fake_birth_input)


@pytest.fixture(scope="session")
def beijing_paipan(lunar_oracle):
    """1990-01-01 12:00 北京 的真实命盘"""
    from lifekline.services.life_kline_service import LifeKlineService
    return LifeKlineService(oracle=lunar_oracle).paipan(dict(BEIJING_NOON_1990))


@pytest.fixture(scope="session")
def beijing_kline(beijing_paipan):
    """1990-01-01 12:00 北京 的百年K线"""
    from lifekline.analyzers.kline_generator import generate_kline
    return generate_kline(beijing_paipan)
