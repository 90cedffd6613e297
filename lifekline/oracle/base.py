#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法库接口定义

适配器把历法库的输出整理成下列只读快照，缺失字段一律为空串/空元组；
luck.dayun 为 None 表示该库不提供大运排布，由排盘核心按月柱推排。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class RawPillar:
    """历法库给出的单柱原始数据"""
    stem: str = ''
    branch: str = ''
    stem_ten_god: str = ''
    branch_ten_gods: Tuple[str, ...] = ()
    hidden_stems: Tuple[str, ...] = ()
    star_fortune: str = ''
    self_sitting: str = ''
    kongwang: str = ''
    nayin: str = ''


@dataclass(frozen=True)
class RawDayun:
    start_year: int
    end_year: int
    start_age: int
    end_age: int
    ganzhi: str = ''


@dataclass(frozen=True)
class RawLuck:
    """起运信息；任一字段为 None 表示历法库无法给出"""
    is_forward: Optional[bool] = None
    start_age: Optional[int] = None
    dayun: Optional[Tuple[RawDayun, ...]] = None


@dataclass(frozen=True)
class OracleReading:
    """一次查询的完整结果"""
    solar: datetime
    lunar_year: int
    lunar_month: int
    lunar_day: int
    is_leap_month: bool
    pillars: Mapping[str, RawPillar]
    luck: RawLuck = field(default_factory=RawLuck)

    def pillar(self, key: str) -> RawPillar:
        return self.pillars.get(key) or RawPillar()


class CalendarOracle(ABC):
    """历法库接口"""

    name = 'abstract'

    @abstractmethod
    def read(self, solar_time: datetime, gender: str, dayun_count: int = 11) -> OracleReading:
        """
        查询指定公历时刻的四柱与大运

        Args:
            solar_time: 已校正的公历时间
            gender: male/female（大运顺逆与男女有关）
            dayun_count: 需要的大运步数

        Returns:
            OracleReading
        """

    @abstractmethod
    def lunar_to_solar(self, year: int, month: int, day: int, is_leap_month: bool = False) -> date:
        """
        农历日期换算公历日期

        Raises:
            InvalidLunarDateError: 农历日期不存在
        """
