#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日主强弱分析器 - 简化计分法

计分（累加，不是百分比）：
- 月令当旺五行 == 日主五行：+2
- 四柱藏干中有与日主同五行者：+2
- 月令五行属于日主的生扶集合（生我者或同我者）：+1

>=4 为强，>=2 为中，其余为弱。
此计分只保证内部一致，不等同于传统旺衰理论。
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Literal

from lifekline.calculators.element_relations import ELEMENT_RELATIONS
from lifekline.data.constants import MONTH_SEASON_ELEMENTS, STEM_ELEMENTS

logger = logging.getLogger(__name__)

Strength = Literal['强', '中', '弱']

STRONG_THRESHOLD = 4
MEDIUM_THRESHOLD = 2


@dataclass(frozen=True)
class FavorableElements:
    favorable: List[str]
    unfavorable: List[str]


class DayMasterStrengthAnalyzer:
    """日主强弱与喜忌分析器"""

    ELEMENT_RELATIONS = ELEMENT_RELATIONS

    @classmethod
    def support_elements(cls, element: str) -> List[str]:
        """生扶集合：生我者 + 同我者"""
        return [cls.ELEMENT_RELATIONS[element]['produced_by'], element]

    @classmethod
    def score_support(cls, day_stem: str, month_branch: str, hidden_stems: Iterable[str]) -> int:
        """
        计算日主得助分

        Args:
            day_stem: 日干
            month_branch: 月支
            hidden_stems: 四柱全部藏干

        Returns:
            0~5 的整数分
        """
        day_element = STEM_ELEMENTS.get(day_stem, '土')
        season_element = MONTH_SEASON_ELEMENTS.get(month_branch)
        score = 0

        if season_element == day_element:
            score += 2
        if any(STEM_ELEMENTS.get(stem) == day_element for stem in hidden_stems):
            score += 2
        if season_element and season_element in cls.support_elements(day_element):
            score += 1

        return score

    @staticmethod
    def classify(score: int) -> Strength:
        """按得助分判定强中弱"""
        if score >= STRONG_THRESHOLD:
            return '强'
        if score >= MEDIUM_THRESHOLD:
            return '中'
        return '弱'

    @classmethod
    def evaluate(cls, day_stem: str, month_branch: str, hidden_stems: Iterable[str]) -> Strength:
        """判定日主强弱"""
        hidden_stems = list(hidden_stems)
        score = cls.score_support(day_stem, month_branch, hidden_stems)
        strength = cls.classify(score)
        logger.debug(f"日主{day_stem} 月支{month_branch} 藏干{''.join(hidden_stems)} -> 得分{score} {strength}")
        return strength

    @classmethod
    def pick_favorable_elements(cls, strength: Strength, day_element: str) -> FavorableElements:
        """
        判定喜忌五行

        - 强：喜我生、我克（泄耗），忌同我、生我
        - 弱：喜同我、生我，忌我生、克我
        - 中：喜同我、我生，忌克我
        """
        relations = cls.ELEMENT_RELATIONS[day_element]

        if strength == '强':
            return FavorableElements(
                favorable=[relations['produces'], relations['controls']],
                unfavorable=[day_element, relations['produced_by']],
            )

        if strength == '弱':
            return FavorableElements(
                favorable=[day_element, relations['produced_by']],
                unfavorable=[relations['produces'], relations['controlled_by']],
            )

        return FavorableElements(
            favorable=[day_element, relations['produces']],
            unfavorable=[relations['controlled_by']],
        )
