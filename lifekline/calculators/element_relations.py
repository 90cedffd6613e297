#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系

生：木→火→土→金→水→木
克：木→土→水→火→金→木
"""

from types import MappingProxyType

# 五行 -> 我生 / 我克 / 生我 / 克我
ELEMENT_RELATIONS = MappingProxyType({
    '木': MappingProxyType({'produces': '火', 'controls': '土', 'produced_by': '水', 'controlled_by': '金'}),
    '火': MappingProxyType({'produces': '土', 'controls': '金', 'produced_by': '木', 'controlled_by': '水'}),
    '土': MappingProxyType({'produces': '金', 'controls': '水', 'produced_by': '火', 'controlled_by': '木'}),
    '金': MappingProxyType({'produces': '水', 'controls': '木', 'produced_by': '土', 'controlled_by': '火'}),
    '水': MappingProxyType({'produces': '木', 'controls': '火', 'produced_by': '金', 'controlled_by': '土'}),
})
