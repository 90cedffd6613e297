#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱组装 - 历法库原始数据 -> PillarDetail

神煞只取两项固定标签：冲X（六冲对支）、煞Y（岁煞方位）。
"""

import logging
from typing import Dict, List

from lifekline.data.relations import BRANCH_CHONG, BRANCH_SHA_DIRECTION
from lifekline.models.paipan import PillarDetail
from lifekline.oracle.base import OracleReading, RawPillar

logger = logging.getLogger(__name__)

PILLAR_KEYS = ('year', 'month', 'day', 'hour')


def branch_deities(branch: str) -> List[str]:
    """按地支查冲、煞标签"""
    deities = []
    chong = BRANCH_CHONG.get(branch)
    if chong:
        deities.append(f"冲{chong}")
    sha = BRANCH_SHA_DIRECTION.get(branch)
    if sha:
        deities.append(f"煞{sha}")
    return deities


def build_pillar_detail(key: str, raw: RawPillar) -> PillarDetail:
    """
    组装单柱

    地支十神取历法库返回列表的第一项（本气），完整列表作为藏干十神保留；
    列表为空时退回天干十神。自坐缺失时用地支十神代替。
    """
    branch_ten_gods = list(raw.branch_ten_gods)
    branch_ten_god = branch_ten_gods[0] if branch_ten_gods else raw.stem_ten_god

    return PillarDetail(
        pillar=key,
        stem=raw.stem,
        branch=raw.branch,
        stem_ten_god=raw.stem_ten_god,
        branch_ten_god=branch_ten_god,
        hidden_stems=list(raw.hidden_stems),
        hidden_stem_ten_gods=branch_ten_gods,
        star_fortune=raw.star_fortune,
        self_sitting=raw.self_sitting or branch_ten_god,
        kongwang=raw.kongwang,
        nayin=raw.nayin,
        deities=branch_deities(raw.branch),
    )


def build_four_pillars(reading: OracleReading) -> Dict[str, PillarDetail]:
    """组装年月日时四柱"""
    pillars = {key: build_pillar_detail(key, reading.pillar(key)) for key in PILLAR_KEYS}
    logger.debug(
        "四柱: " + " ".join(f"{p.stem}{p.branch}" for p in pillars.values())
    )
    return pillars
