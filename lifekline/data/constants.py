#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
干支基础常量

所有表均为只读数据，运行期不会修改。
"""

from types import MappingProxyType

HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')
EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

FIVE_ELEMENTS = ('木', '火', '土', '金', '水')

# 天干五行
STEM_ELEMENTS = MappingProxyType({
    '甲': '木', '乙': '木',
    '丙': '火', '丁': '火',
    '戊': '土', '己': '土',
    '庚': '金', '辛': '金',
    '壬': '水', '癸': '水',
})

# 地支五行（本气）
BRANCH_ELEMENTS = MappingProxyType({
    '子': '水', '丑': '土', '寅': '木', '卯': '木',
    '辰': '土', '巳': '火', '午': '火', '未': '土',
    '申': '金', '酉': '金', '戌': '土', '亥': '水',
})

# 天干阴阳
STEM_YINYANG = MappingProxyType({
    '甲': '阳', '乙': '阴',
    '丙': '阳', '丁': '阴',
    '戊': '阳', '己': '阴',
    '庚': '阳', '辛': '阴',
    '壬': '阳', '癸': '阴',
})

YANG_STEMS = frozenset(stem for stem, yy in STEM_YINYANG.items() if yy == '阳')

# 月令当旺五行（按月支）
MONTH_SEASON_ELEMENTS = MappingProxyType({
    '寅': '木', '卯': '木', '辰': '土',
    '巳': '火', '午': '火', '未': '土',
    '申': '金', '酉': '金', '戌': '土',
    '亥': '水', '子': '水', '丑': '土',
})

# 六十甲子纪年锚点：1984 为甲子年
JIAZI_BASE_YEAR = 1984
