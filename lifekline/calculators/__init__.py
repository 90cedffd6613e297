#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘计算模块

- 五行生克关系
- 四柱组装
- 大运排布
- 排盘总流程
"""

from .element_relations import ELEMENT_RELATIONS

__all__ = [
    'ELEMENT_RELATIONS',
]
