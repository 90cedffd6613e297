#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大运阶段文案

文案从固定短语池中按种子取用：种子 = 干支字符编码之和 + 阶段分数。
同一命盘永远得到同一段文字，不使用随机数。
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Sequence

SUMMARY_POOLS = MappingProxyType({
    '偏强': (
        '势能充沛，机会集中出现',
        '外部助力多，适合主动出击',
        '节奏顺畅，投入容易见到回报',
        '心气与运势同步抬升',
    ),
    '平稳': (
        '起伏不大，贵在持续积累',
        '大局稳定，细节决定成色',
        '守成有余，突破需要耐心',
        '进退有度，稳中可求小进',
    ),
    '偏弱': (
        '阻力偏多，宜收缩战线',
        '事倍功半，先求不失',
        '外部环境偏紧，需留足余量',
        '波折较多，重在调整心态',
    ),
})

RELATION_PHRASES = MappingProxyType({
    'favorable': ('运势五行得用，', '干支顺喜用之气，', '大运与命局相生，'),
    'neutral': ('运势五行喜忌参半，', '干支气势中平，', '大运与命局互有得失，'),
    'unfavorable': ('运势五行多犯忌神，', '干支与喜用相背，', '大运与命局相克，'),
})

ADVICE_POOLS = MappingProxyType({
    '偏强': ('把握节奏，顺势布局', '乘势扩张，但留好退路', '集中资源做最重要的事'),
    '平稳': ('稳健推进，重视复利', '深耕主业，积累口碑', '按部就班，定期复盘'),
    '偏弱': ('控制风险，先守后攻', '减少杠杆，保全实力', '修身养性，等待转机'),
})

STRENGTH_HINTS = MappingProxyType({
    '强': ('日主偏强，宜泄宜耗，把精力投向输出与合作', '身强能任财官，可适度承担更多责任'),
    '中': ('日主中和，顺其自然即可', '身势中平，重在取舍得当'),
    '弱': ('日主偏弱，宜借力贵人与团队', '身弱宜蓄，不宜孤军深入'),
})

TEN_GOD_HINTS = MappingProxyType({
    '比肩': '比肩透出，重视同伴协作',
    '劫财': '劫财透出，谨防合伙破财',
    '食神': '食神透出，可发挥才艺与口碑',
    '伤官': '伤官透出，表达需有分寸',
    '偏财': '偏财透出，机会多但需控制欲望',
    '正财': '正财透出，勤勉理财最见成效',
    '七杀': '七杀透出，压力亦是动力',
    '正官': '正官透出，守规矩得认可',
    '偏印': '偏印透出，适合钻研专门技艺',
    '正印': '正印透出，学习与长辈助力可期',
})

RISK_POOL = (
    '情绪波动',
    '决策保守',
    '健康透支',
    '人际摩擦',
    '财务周转',
    '冲动投资',
)


@dataclass(frozen=True)
class StageText:
    summary: str
    advice: str
    risks: List[str]


def text_seed(ganzhi: str, score: int) -> int:
    """干支字符编码之和 + 分数"""
    return sum(ord(ch) for ch in ganzhi) + int(score)


def pick(pool: Sequence[str], seed: int, offset: int = 0) -> str:
    """按种子取短语"""
    return pool[(seed + offset) % len(pool)]


def compose_stage_text(ganzhi: str, score: int, level: str, relation: str,
                       ten_gods: Sequence[str], strength: str) -> StageText:
    """
    生成大运阶段文案

    Args:
        ganzhi: 大运干支（童限为空）
        score: 阶段分数
        level: 偏强/平稳/偏弱
        relation: 大运与喜忌的关系 favorable/neutral/unfavorable
        ten_gods: 命局天干十神
        strength: 日主强弱
    """
    seed = text_seed(ganzhi, score)
    name = f"{ganzhi}运" if ganzhi else '童限'

    summary = f"{name}{level}：{pick(RELATION_PHRASES[relation], seed)}{pick(SUMMARY_POOLS[level], seed, 1)}"

    advice_parts = [pick(ADVICE_POOLS[level], seed), pick(STRENGTH_HINTS[strength], seed)]
    hinted = [god for god in ten_gods if god in TEN_GOD_HINTS]
    if hinted:
        advice_parts.append(TEN_GOD_HINTS[pick(hinted, seed)])
    advice = '；'.join(advice_parts)

    if level == '偏弱':
        risks = [pick(RISK_POOL, seed), pick(RISK_POOL, seed, 1)]
    elif level == '平稳' and relation == 'unfavorable':
        risks = [pick(RISK_POOL, seed)]
    else:
        risks = []

    return StageText(summary=summary, advice=advice, risks=risks)
