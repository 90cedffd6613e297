#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
百年K线推演

逐年（虚岁 1~100）把命局、大运、流年三者的关系折算为 0~100 分：

    收盘 = 命局基础分×0.20 + 大运关系分×0.35 + 流年关系分×0.30 + 冲合分×0.10 + 格局分×0.05

开盘取上一年收盘（1 岁取命局基础分），高低点在开收盘外加波动幅度。
全部为离散查表与加权，同一命盘结果完全一致。
"""

import logging
import math
from dataclasses import dataclass
from typing import Collection, Iterable, List, Optional, Tuple

from lifekline.analyzers.stage_text import compose_stage_text
from lifekline.data.constants import (
    BRANCH_ELEMENTS,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    JIAZI_BASE_YEAR,
    STEM_ELEMENTS,
)
from lifekline.data.relations import is_branch_chong, is_branch_liuhe
from lifekline.models.kline import DayunStage, Insight, KLineResult, YearKLine, YearPoint
from lifekline.models.paipan import DayunPeriod, PaipanResult

logger = logging.getLogger(__name__)

TOTAL_YEARS = 100

WEIGHT_NATAL = 0.20
WEIGHT_LUCK = 0.35
WEIGHT_YEAR = 0.30
WEIGHT_CLASH = 0.10
WEIGHT_PATTERN = 0.05

BASE_SCORES = {'强': 80, '中': 70, '弱': 58}

DAY_BRANCH_CLASH_PENALTY = 18
SUIYUN_BINGLIN_SHIFT = 15
DAY_BRANCH_CLASH_VOLATILITY = 6
MAX_LUCK_VOLATILITY = 8
MAX_YEAR_VOLATILITY = 12

PEAK_COUNT = 6


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """四舍五入（.5 进位）"""
    return int(math.floor(value + 0.5))


def year_ganzhi(year: int) -> str:
    """按 1984 甲子年推算公历年的干支"""
    index = (year - JIAZI_BASE_YEAR) % 60
    return f"{HEAVENLY_STEMS[index % 10]}{EARTHLY_BRANCHES[index % 12]}"


@dataclass(frozen=True)
class RelationScore:
    label: str
    score: int


@dataclass(frozen=True)
class ClashFactor:
    score: int
    delta: int
    tags: Tuple[str, ...]
    chong: int = 0
    he: int = 0


def relation_score(favorable: Collection[str], unfavorable: Collection[str],
                   stem: str = '', branch: str = '') -> RelationScore:
    """
    干支与喜忌的关系分

    - 两个喜用：85
    - 两个忌：35
    - 仅一个喜用：75
    - 仅一个忌：50
    - 喜忌各一或都不沾：65
    """
    elements = []
    if stem:
        elements.append(STEM_ELEMENTS.get(stem, '土'))
    if branch:
        elements.append(BRANCH_ELEMENTS.get(branch, '土'))

    hit_fav = sum(1 for el in elements if el in favorable)
    hit_unfav = sum(1 for el in elements if el in unfavorable)

    if hit_fav >= 2:
        return RelationScore('favorable', 85)
    if hit_unfav >= 2:
        return RelationScore('unfavorable', 35)
    if hit_fav == 1 and hit_unfav == 0:
        return RelationScore('favorable', 75)
    if hit_unfav == 1 and hit_fav == 0:
        return RelationScore('unfavorable', 50)
    return RelationScore('neutral', 65)


def clash_factor(natal_branches: Iterable[str], luck_branch: str, year_branch: str) -> ClashFactor:
    """
    冲合分

    统计命局各支与流年支、命局各支与大运支、大运支与流年支之间的六冲与六合次数。
    冲优先于合判定。
    """
    he = 0
    chong = 0
    for branch in natal_branches:
        he += is_branch_liuhe(branch, year_branch) + is_branch_liuhe(branch, luck_branch)
        chong += is_branch_chong(branch, year_branch) + is_branch_chong(branch, luck_branch)
    he += is_branch_liuhe(luck_branch, year_branch)
    chong += is_branch_chong(luck_branch, year_branch)

    tags = []
    if he > 0:
        tags.append('合')
    if chong > 0:
        tags.append('冲')
    tags = tuple(tags)

    if chong >= 2:
        return ClashFactor(35, -15, tags, chong, he)
    if chong == 1:
        return ClashFactor(50, -10, tags, chong, he)
    if he >= 2:
        return ClashFactor(70, 5, tags, chong, he)
    if he == 1:
        return ClashFactor(65, 5, tags, chong, he)
    return ClashFactor(60, 0, tags, chong, he)


def adjust_year_factor(year_rel: RelationScore, year_gz: str, day_branch: str,
                       luck_gz: str) -> Tuple[float, List[str]]:
    """
    流年关系分的两项特别调整

    - 流年支冲日支：-18，标记"冲日支"
    - 流年干支与大运干支相同（岁运并临）：喜用 +15，否则 -15
    """
    factor = float(year_rel.score)
    tags = []
    if is_branch_chong(year_gz[1:], day_branch):
        factor = clamp(factor - DAY_BRANCH_CLASH_PENALTY)
        tags.append('冲日支')
    if luck_gz and luck_gz == year_gz:
        tags.append('岁运并临')
        shift = SUIYUN_BINGLIN_SHIFT if year_rel.label == 'favorable' else -SUIYUN_BINGLIN_SHIFT
        factor = clamp(factor + shift)
    return factor, tags


def pattern_score(paipan: PaipanResult) -> int:
    """
    格局平衡分（每张命盘只算一次）

    统计八字中出现的五行个数，最多与最少之差 <=1 为均衡 65；
    某五行 >=5 个为失衡 50；其余 60。
    """
    counts = {}
    for pillar in paipan.four_pillars.pillars():
        if pillar.stem:
            el = STEM_ELEMENTS.get(pillar.stem, '土')
            counts[el] = counts.get(el, 0) + 1
        if pillar.branch:
            el = BRANCH_ELEMENTS.get(pillar.branch, '土')
            counts[el] = counts.get(el, 0) + 1
    if not counts:
        return 60
    values = counts.values()
    spread = max(values) - min(values)
    if spread <= 1:
        return 65
    if max(values) >= 5:
        return 50
    return 60


class KLineGenerator:
    """百年K线生成器"""

    def __init__(self, paipan: PaipanResult):
        self.paipan = paipan
        self.base_score = BASE_SCORES[paipan.overall.day_master_strength]
        self.favorable = frozenset(paipan.overall.favorable_elements)
        self.unfavorable = frozenset(paipan.overall.unfavorable_elements)
        self.natal_branches = [p.branch for p in paipan.four_pillars.pillars() if p.branch]
        self.day_branch = paipan.four_pillars.day.branch
        self.pattern_score = pattern_score(paipan)
        self.first_year = self._first_solar_year()

    # === 公开方法 ==================================================================================

    def generate(self) -> KLineResult:
        """生成百年K线、大运阶段与整体洞察"""
        logger.info(
            f"🔍 开始推演K线 - 起始年 {self.first_year}, 基础分 {self.base_score}, 格局分 {self.pattern_score}"
        )

        years: List[YearKLine] = []
        prev_close = clamp(self.base_score)
        for age in range(1, TOTAL_YEARS + 1):
            line = self.build_year(age, prev_close)
            years.append(line)
            prev_close = line.close

        stages = self.build_stages(years)
        insight = self.build_insight(years)

        logger.info(f"✅ K线推演完成 - 总分 {insight.total_score}, 走势 {insight.overall_trend}")
        return KLineResult(years=years, dayun_stages=stages, insight=insight)

    def dayun_for_age(self, age: int) -> Optional[DayunPeriod]:
        """查找覆盖该年龄的大运；超出全部范围时取最后一步"""
        dayun = self.paipan.dayun
        for period in dayun:
            if period.contains(age):
                return period
        return dayun[-1] if dayun else None

    def build_year(self, age: int, prev_close: float) -> YearKLine:
        """推演单年"""
        year = self.first_year + age - 1
        gz = year_ganzhi(year)
        year_stem, year_branch = gz[:1], gz[1:]

        period = self.dayun_for_age(age)
        luck_gz = period.ganzhi if period else ''
        luck_stem, luck_branch = luck_gz[:1], luck_gz[1:]

        luck_rel = relation_score(self.favorable, self.unfavorable, luck_stem, luck_branch)
        year_rel = relation_score(self.favorable, self.unfavorable, year_stem, year_branch)
        clash = clash_factor(self.natal_branches, luck_branch, year_branch)

        year_factor, special_tags = adjust_year_factor(year_rel, gz, self.day_branch, luck_gz)
        tags = list(clash.tags) + special_tags

        close = clamp(
            self.base_score * WEIGHT_NATAL
            + luck_rel.score * WEIGHT_LUCK
            + year_factor * WEIGHT_YEAR
            + clash.score * WEIGHT_CLASH
            + self.pattern_score * WEIGHT_PATTERN
        )
        open_ = prev_close

        clashes_day = is_branch_chong(year_branch, self.day_branch)
        luck_vol = min(MAX_LUCK_VOLATILITY, round_half_up(abs(luck_rel.score - 65) / 5))
        year_vol = min(
            MAX_YEAR_VOLATILITY,
            round_half_up(abs(clash.delta) + (DAY_BRANCH_CLASH_VOLATILITY if clashes_day else 0)),
        )
        volatility = luck_vol + year_vol

        trend = 'up' if close >= open_ else 'down'
        return YearKLine(
            age=age,
            year=year,
            ganzhi=gz,
            open=open_,
            high=clamp(max(open_, close) + volatility),
            low=clamp(min(open_, close) - volatility),
            close=close,
            score=close,
            trend=trend,
            tags=tags,
            brief='上行' if trend == 'up' else '回撤',
        )

    def build_stages(self, years: List[YearKLine]) -> List[DayunStage]:
        """按大运汇总阶段分与文案"""
        ten_gods = self._ten_god_focus()
        strength = self.paipan.overall.day_master_strength
        stages = []
        for period in self.paipan.dayun:
            if not 1 <= period.start_age <= TOTAL_YEARS:
                continue
            covered = [y.score for y in years if period.contains(y.age)]
            avg = sum(covered) / len(covered) if covered else 60
            score = int(clamp(round_half_up(avg)))
            level = '偏强' if score >= 75 else '平稳' if score >= 60 else '偏弱'
            rel = relation_score(self.favorable, self.unfavorable, period.ganzhi[:1], period.ganzhi[1:])
            text = compose_stage_text(period.ganzhi, score, level, rel.label, ten_gods, strength)
            stages.append(DayunStage(
                start_age=period.start_age,
                end_age=period.end_age,
                ganzhi=period.ganzhi,
                score=score,
                level=level,
                summary=text.summary,
                advice=text.advice,
                risks=text.risks,
            ))
        return stages

    def build_insight(self, years: List[YearKLine]) -> Insight:
        """高低点、走势分段与总评"""
        # sorted 为稳定排序，同分保持年龄顺序
        peaks = sorted(years, key=lambda y: -y.score)[:PEAK_COUNT]
        troughs = sorted(years, key=lambda y: y.score)[:PEAK_COUNT]

        def mean(items: List[YearKLine]) -> float:
            return sum(y.score for y in items) / len(items)

        first_avg = mean(years[:34])
        mid_avg = mean(years[34:67])
        last_avg = mean(years[67:])
        if first_avg > mid_avg and first_avg > last_avg:
            overall_trend = '前高'
        elif mid_avg > first_avg and mid_avg > last_avg:
            overall_trend = '中高'
        elif last_avg > first_avg and last_avg > mid_avg:
            overall_trend = '后高'
        else:
            overall_trend = '波动'

        total_score = int(clamp(round_half_up(mean(years))))
        if total_score >= 75:
            summary = '整体偏强，波段与趋势并存'
        elif total_score >= 60:
            summary = '整体平稳，关键在于节奏'
        else:
            summary = '整体偏弱，需要以稳为先'

        return Insight(
            overall_trend=overall_trend,
            peaks=[self._point(y) for y in peaks],
            troughs=[self._point(y) for y in troughs],
            ten_god_focus=self._ten_god_focus(),
            total_score=total_score,
            summary=summary,
        )

    # === 内部方法 ==================================================================================

    def _first_solar_year(self) -> int:
        dayun = self.paipan.dayun
        if dayun and dayun[0].start_year:
            return dayun[0].start_year - (dayun[0].start_age - 1)
        return int(self.paipan.solar.corrected_ymd_hms[:4])

    def _ten_god_focus(self) -> List[str]:
        gods = [p.stem_ten_god for p in self.paipan.four_pillars.pillars() if p.stem_ten_god]
        return gods[:4]

    @staticmethod
    def _point(line: YearKLine) -> YearPoint:
        return YearPoint(age=line.age, year=line.year, score=line.score, ganzhi=line.ganzhi)


def generate_kline(paipan: PaipanResult) -> KLineResult:
    """由命盘生成百年K线"""
    return KLineGenerator(paipan).generate()
