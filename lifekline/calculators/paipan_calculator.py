#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘主流程

时间归一化 -> 真太阳时校正 -> 历法库查询 -> 四柱组装 -> 日主强弱/喜忌 -> 大运排布

每次计算独立完成，计算器实例不保存任何跨请求状态。
"""

from __future__ import annotations

import logging
from datetime import date

from lifekline.analyzers.strength_analyzer import DayMasterStrengthAnalyzer
from lifekline.calculators.luck_pillars import DEFAULT_DAYUN_COUNT, LuckPillarAssembler
from lifekline.calculators.pillar_builder import build_four_pillars
from lifekline.data.constants import STEM_ELEMENTS
from lifekline.exceptions import OracleDataError
from lifekline.models.birth import BirthInput
from lifekline.models.paipan import (
    DayMaster,
    FourPillars,
    LunarInfo,
    OverallInfo,
    PaipanResult,
    SolarInfo,
)
from lifekline.oracle.base import CalendarOracle
from lifekline.utils.solar_time import correct_to_true_solar_time, format_ymd_hms
from lifekline.utils.time_normalizer import normalize_birth_time

logger = logging.getLogger(__name__)


class PaipanCalculator:
    """八字排盘计算器"""

    def __init__(self, oracle: CalendarOracle, dayun_count: int = DEFAULT_DAYUN_COUNT) -> None:
        self.oracle = oracle
        self.luck_assembler = LuckPillarAssembler(dayun_count)
        self.dayun_count = self.luck_assembler.dayun_count

    # === 公开方法 ==================================================================================

    def calculate(self, birth: BirthInput) -> PaipanResult:
        """
        执行排盘

        Args:
            birth: 已校验的出生信息

        Returns:
            PaipanResult

        Raises:
            InvalidLunarDateError: 农历日期不存在
            OracleDataError: 历法库未给出日柱
        """
        logger.info(
            f"🔍 开始排盘 - {birth.calendar} {birth.date.year}-{birth.date.month:02d}-{birth.date.day:02d}, "
            f"性别: {birth.gender}, 经度: {birth.location.longitude}"
        )

        # 1. 时间归一化
        normalized = normalize_birth_time(birth.time)

        # 2. 公历日期（农历先换算）+ 真太阳时
        civil_date = self._civil_date(birth)
        correction = correct_to_true_solar_time(
            civil_date.year, civil_date.month, civil_date.day,
            normalized.hour, normalized.minute,
            birth.location.longitude,
        )
        logger.debug(
            f"真太阳时: {format_ymd_hms(correction.local)} -> {format_ymd_hms(correction.corrected)} "
            f"({correction.delta_minutes:+.2f} 分钟)"
        )

        # 3. 历法库查询 + 四柱
        reading = self.oracle.read(correction.corrected, birth.gender, self.dayun_count)
        pillars = build_four_pillars(reading)
        day = pillars['day']
        if not day.stem or not day.branch:
            raise OracleDataError(f"历法库未返回日柱干支: {format_ymd_hms(correction.corrected)}")
        if day.stem not in STEM_ELEMENTS:
            raise OracleDataError(f"无法识别的日干: {day.stem}")
        day_element = STEM_ELEMENTS[day.stem]

        # 4. 日主强弱与喜忌
        hidden_stems = [stem for pillar in pillars.values() for stem in pillar.hidden_stems]
        strength = DayMasterStrengthAnalyzer.evaluate(day.stem, pillars['month'].branch, hidden_stems)
        elements = DayMasterStrengthAnalyzer.pick_favorable_elements(strength, day_element)

        # 5. 大运
        luck = self.luck_assembler.assemble(
            reading.luck,
            day_stem=day.stem,
            gender=birth.gender,
            month_ganzhi=pillars['month'].ganzhi,
            birth_year=correction.corrected.year,
        )

        result = PaipanResult(
            input=birth,
            solar=SolarInfo(
                ymd_hms=format_ymd_hms(correction.local),
                corrected_ymd_hms=format_ymd_hms(correction.corrected),
                longitude_delta_minutes=round(correction.delta_minutes, 1),
                time_note=normalized.note,
            ),
            lunar=LunarInfo(
                ymd=f"{reading.lunar_year}-{reading.lunar_month:02d}-{reading.lunar_day:02d}",
                is_leap_month=reading.is_leap_month,
            ),
            four_pillars=FourPillars(
                year=pillars['year'],
                month=pillars['month'],
                day=day,
                hour=pillars['hour'],
                day_master=DayMaster(stem=day.stem, element=day_element),
            ),
            overall=OverallInfo(
                day_master_strength=strength,
                favorable_elements=elements.favorable,
                unfavorable_elements=elements.unfavorable,
                start_luck_age=luck.start_age,
                luck_direction=luck.direction,
            ),
            dayun=luck.dayun,
        )

        logger.info(
            f"✅ 排盘完成 - 日主{day.stem}{day_element} {strength}, "
            f"喜{''.join(elements.favorable)} 忌{''.join(elements.unfavorable)}, "
            f"{luck.direction}排大运 {len(luck.dayun)} 步"
        )
        return result

    # === 内部方法 ==================================================================================

    def _civil_date(self, birth: BirthInput) -> date:
        """出生公历日期；农历输入经历法库换算"""
        if birth.calendar == 'lunar':
            solar_date = self.oracle.lunar_to_solar(
                birth.date.year, birth.date.month, birth.date.day,
                bool(birth.date.is_leap_month),
            )
            logger.debug(f"农历 {birth.date.year}-{birth.date.month:02d}-{birth.date.day:02d} -> 公历 {solar_date}")
            return solar_date
        return date(birth.date.year, birth.date.month, birth.date.day)
