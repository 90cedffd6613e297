#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""对外服务入口"""

from .life_kline_service import LifeKlineService, compute_life_kline, compute_paipan, to_json

__all__ = ['LifeKlineService', 'compute_life_kline', 'compute_paipan', 'to_json']
