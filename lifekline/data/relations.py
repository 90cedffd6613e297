#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地支关系表：六冲、六合、煞方
"""

from types import MappingProxyType

# 地支六冲（双向）
BRANCH_CHONG = MappingProxyType({
    '子': '午', '午': '子',
    '丑': '未', '未': '丑',
    '寅': '申', '申': '寅',
    '卯': '酉', '酉': '卯',
    '辰': '戌', '戌': '辰',
    '巳': '亥', '亥': '巳',
})

# 地支六合（双向）
BRANCH_LIUHE = MappingProxyType({
    '子': '丑', '丑': '子',
    '寅': '亥', '亥': '寅',
    '卯': '戌', '戌': '卯',
    '辰': '酉', '酉': '辰',
    '巳': '申', '申': '巳',
    '午': '未', '未': '午',
})

# 岁煞方位：申子辰煞南，亥卯未煞西，寅午戌煞北，巳酉丑煞东
BRANCH_SHA_DIRECTION = MappingProxyType({
    '子': '南', '丑': '东', '寅': '北', '卯': '西',
    '辰': '南', '巳': '东', '午': '北', '未': '西',
    '申': '南', '酉': '东', '戌': '北', '亥': '西',
})


def is_branch_chong(a: str, b: str) -> bool:
    """两地支是否相冲"""
    return bool(a) and BRANCH_CHONG.get(a) == b


def is_branch_liuhe(a: str, b: str) -> bool:
    """两地支是否六合"""
    return bool(a) and BRANCH_LIUHE.get(a) == b
