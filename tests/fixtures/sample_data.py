#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试数据

提供标准化的出生信息样例，用于单元测试
"""

from typing import Any, Dict, List

# ==================== 有效输入 ====================

BEIJING_NOON_1990: Dict[str, Any] = {
    "name": "张三",
    "gender": "male",
    "calendar": "solar",
    "date": {"year": 1990, "month": 1, "day": 1},
    "time": {"mode": "exact", "hour": 12, "minute": 0},
    "location": {"province": "北京", "city": "北京", "longitude": 116.46},
}

FAKE_CHART_BIRTH: Dict[str, Any] = {
    "name": "李四",
    "gender": "male",
    "calendar": "solar",
    "date": {"year": 2000, "month": 3, "day": 15},
    "time": {"mode": "exact", "hour": 12, "minute": 0},
    "location": {"province": "江苏", "city": "连云港", "longitude": 120.0},
}

# 覆盖男女、公农历、时辰、东西部经度
VALID_BIRTH_INPUTS: List[Dict[str, Any]] = [
    BEIJING_NOON_1990,
    {
        "name": "王五",
        "gender": "female",
        "calendar": "solar",
        "date": {"year": 1987, "month": 1, "day": 7},
        "time": {"mode": "exact", "hour": 9, "minute": 55},
        "location": {"province": "上海", "city": "上海", "longitude": 121.47},
    },
    {
        "name": "赵六",
        "gender": "male",
        "calendar": "lunar",
        "date": {"year": 2000, "month": 5, "day": 15},
        "time": {"mode": "segment", "label": "午时"},
        "location": {"province": "四川", "city": "成都", "longitude": 104.07},
    },
    {
        "name": "孙七",
        "gender": "female",
        "calendar": "solar",
        "date": {"year": 2008, "month": 9, "day": 8},
        "time": {"mode": "segment", "label": "下午"},
        "location": {"province": "新疆", "city": "乌鲁木齐", "longitude": 87.62},
    },
]

# ==================== 无效输入（字段路径, 修改函数） ====================


def with_changes(base: Dict[str, Any], path: List[str], value: Any) -> Dict[str, Any]:
    """复制样例并改写某个字段；value 为 ... 时删除该字段"""
    data = {k: (dict(v) if isinstance(v, dict) else v) for k, v in base.items()}
    target = data
    for key in path[:-1]:
        target = target[key]
    if value is ...:
        target.pop(path[-1])
    else:
        target[path[-1]] = value
    return data
