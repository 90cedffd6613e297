#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大运排布

优先使用历法库给出的起运年龄、顺逆与大运序列；历法库不支持时：
- 顺逆：阳干男、阴干女为顺，其余为逆（按日干阴阳）
- 起运：默认 1 岁
- 大运：从月柱干支起，每十年天干、地支各顺/逆推一位
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Literal, Optional

from lifekline.data.constants import EARTHLY_BRANCHES, HEAVENLY_STEMS, YANG_STEMS
from lifekline.models.paipan import DayunPeriod
from lifekline.oracle.base import RawLuck

logger = logging.getLogger(__name__)

Direction = Literal['顺', '逆']

DEFAULT_DAYUN_COUNT = 11
COVERED_AGES = 100
DEFAULT_BASE_GANZHI = '甲子'


@dataclass(frozen=True)
class LuckPillars:
    start_age: int
    direction: Direction
    dayun: List[DayunPeriod]


def luck_direction_by_rule(day_stem: str, gender: str) -> Direction:
    """阳干男、阴干女为顺，其余为逆"""
    is_yang = day_stem in YANG_STEMS
    if (is_yang and gender == 'male') or (not is_yang and gender == 'female'):
        return '顺'
    return '逆'


def next_ganzhi(ganzhi: str, step: int) -> str:
    """干支按十干、十二支各自循环前进 step 位（负数为后退）"""
    stem, branch = ganzhi[:1], ganzhi[1:]
    stem_index = HEAVENLY_STEMS.index(stem)
    branch_index = EARTHLY_BRANCHES.index(branch)
    return f"{HEAVENLY_STEMS[(stem_index + step) % 10]}{EARTHLY_BRANCHES[(branch_index + step) % 12]}"


def min_dayun_count(start_age: int) -> int:
    """起运后排到 100 岁所需的大运步数（不含童限）"""
    return max(1, math.ceil((COVERED_AGES - start_age + 1) / 10))


def _is_valid_ganzhi(ganzhi: str) -> bool:
    return len(ganzhi) == 2 and ganzhi[0] in HEAVENLY_STEMS and ganzhi[1] in EARTHLY_BRANCHES


class LuckPillarAssembler:
    """大运排布器"""

    def __init__(self, dayun_count: int = DEFAULT_DAYUN_COUNT):
        # 1 岁起运时需 10 步，历法库另含一段童限
        self.dayun_count = max(dayun_count, min_dayun_count(1) + 1)

    def assemble(self, luck: RawLuck, day_stem: str, gender: str,
                 month_ganzhi: str, birth_year: int) -> LuckPillars:
        """
        排大运

        Args:
            luck: 历法库起运信息（可能全部缺失）
            day_stem: 日干
            gender: male/female
            month_ganzhi: 月柱干支
            birth_year: 出生公历年

        Returns:
            LuckPillars
        """
        start_age = luck.start_age if luck.start_age is not None else 1
        if luck.is_forward is not None:
            direction: Direction = '顺' if luck.is_forward else '逆'
        else:
            direction = luck_direction_by_rule(day_stem, gender)

        dayun = self._from_oracle(luck) if luck.dayun is not None else []
        if dayun:
            logger.debug(f"使用历法库大运，共 {len(dayun)} 步")
            dayun = self._extend_to_cover(dayun, direction)
        else:
            logger.info(f"历法库未提供大运，按月柱{month_ganzhi}{direction}排")
            dayun = self.cycle_from_month(month_ganzhi, direction, start_age, birth_year)

        return LuckPillars(start_age=start_age, direction=direction, dayun=dayun)

    @staticmethod
    def _from_oracle(luck: RawLuck) -> List[DayunPeriod]:
        """历法库大运转模型，丢弃跨度为空的段（如出生当年即起运时的童限）"""
        periods = []
        for item in luck.dayun or ():
            if item.end_age < item.start_age:
                continue
            periods.append(DayunPeriod(
                start_year=item.start_year,
                end_year=item.end_year,
                start_age=item.start_age,
                end_age=item.end_age,
                ganzhi=item.ganzhi,
            ))
        return periods

    @staticmethod
    def _extend_to_cover(dayun: List[DayunPeriod], direction: Direction) -> List[DayunPeriod]:
        """历法库大运未排到 100 岁时，沿最后一步干支继续推排"""
        last = dayun[-1]
        if last.end_age >= COVERED_AGES or not _is_valid_ganzhi(last.ganzhi):
            return dayun
        step = 1 if direction == '顺' else -1
        periods = list(dayun)
        while last.end_age < COVERED_AGES:
            last = DayunPeriod(
                start_year=last.end_year + 1,
                end_year=last.end_year + 10,
                start_age=last.end_age + 1,
                end_age=last.end_age + 10,
                ganzhi=next_ganzhi(last.ganzhi, step),
            )
            periods.append(last)
        logger.warning(f"⚠️ 历法库大运只排到 {dayun[-1].end_age} 岁，已补排至 {last.end_age} 岁")
        return periods

    def cycle_from_month(self, month_ganzhi: Optional[str], direction: Direction,
                         start_age: int, birth_year: int) -> List[DayunPeriod]:
        """
        从月柱推排大运

        首步即月柱干支，之后每步进一位（逆排退一位）。
        起运晚于 1 岁时，前面补一段无干支的童限，保证 1 岁起连续覆盖。
        """
        base = month_ganzhi if month_ganzhi and _is_valid_ganzhi(month_ganzhi) else DEFAULT_BASE_GANZHI
        step = 1 if direction == '顺' else -1
        count = max(self.dayun_count, min_dayun_count(start_age))

        periods: List[DayunPeriod] = []
        if start_age > 1:
            periods.append(DayunPeriod(
                start_year=birth_year,
                end_year=birth_year + start_age - 2,
                start_age=1,
                end_age=start_age - 1,
                ganzhi='',
            ))

        ganzhi = base
        for i in range(count):
            if i > 0:
                ganzhi = next_ganzhi(ganzhi, step)
            s_age = start_age + i * 10
            s_year = birth_year + s_age - 1
            periods.append(DayunPeriod(
                start_year=s_year,
                end_year=s_year + 9,
                start_age=s_age,
                end_age=s_age + 9,
                ganzhi=ganzhi,
            ))
        return periods
