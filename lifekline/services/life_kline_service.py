#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
人生K线服务 - 校验 -> 排盘 -> K线 一次完成

输出为纯 JSON 结构，不含当前时间、随机 ID 等字段，同一输入得到逐字节相同的结果，
可直接用于分享链接与缓存。
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

from lifekline.analyzers.kline_generator import generate_kline
from lifekline.calculators.luck_pillars import DEFAULT_DAYUN_COUNT
from lifekline.calculators.paipan_calculator import PaipanCalculator
from lifekline.config.env_config import EnvConfig
from lifekline.models.birth import parse_birth_input
from lifekline.models.kline import KLineResult
from lifekline.models.paipan import PaipanResult
from lifekline.oracle import CalendarOracle, create_oracle

logger = logging.getLogger(__name__)


class LifeKlineService:
    """人生K线服务"""

    def __init__(self, oracle: Optional[CalendarOracle] = None, dayun_count: int = DEFAULT_DAYUN_COUNT):
        self.oracle = oracle or create_oracle()
        self.dayun_count = dayun_count

    @classmethod
    def from_config(cls, config: EnvConfig) -> 'LifeKlineService':
        """按环境配置构造"""
        return cls(oracle=create_oracle(config.oracle_name), dayun_count=config.dayun_count)

    def paipan(self, raw: Any) -> PaipanResult:
        """
        排盘

        Raises:
            pydantic.ValidationError: 出生信息不合法（不会进入排盘）
            LifeKlineError: 农历日期不存在或历法库数据缺失
        """
        birth = parse_birth_input(raw)
        return PaipanCalculator(self.oracle, self.dayun_count).calculate(birth)

    def life_kline(self, raw: Any) -> Tuple[PaipanResult, KLineResult]:
        """排盘并推演百年K线"""
        paipan = self.paipan(raw)
        return paipan, generate_kline(paipan)


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(mode='json')


def compute_paipan(raw: Any, service: Optional[LifeKlineService] = None) -> Dict[str, Any]:
    """排盘，返回 {"paipan": {...}}"""
    service = service or LifeKlineService()
    return {'paipan': _dump(service.paipan(raw))}


def compute_life_kline(raw: Any, service: Optional[LifeKlineService] = None) -> Dict[str, Any]:
    """排盘 + K线，返回 {"paipan": {...}, "kline": {...}}"""
    service = service or LifeKlineService()
    paipan, kline = service.life_kline(raw)
    return {'paipan': _dump(paipan), 'kline': _dump(kline)}


def to_json(payload: Dict[str, Any], indent: Optional[int] = None) -> str:
    """确定性的 JSON 序列化（键排序、保留中文）"""
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=indent)
