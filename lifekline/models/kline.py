#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
K线数据模型 - 百年逐年K线、大运阶段与整体洞察
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class YearKLine(_FrozenModel):
    """单年K线"""
    age: int = Field(..., ge=1, le=100, description="虚岁")
    year: int = Field(..., description="公历年份")
    ganzhi: str = Field(..., description="流年干支")
    open: float = Field(..., ge=0, le=100)
    high: float = Field(..., ge=0, le=100)
    low: float = Field(..., ge=0, le=100)
    close: float = Field(..., ge=0, le=100)
    score: float = Field(..., ge=0, le=100, description="同 close")
    trend: Literal['up', 'down']
    tags: List[str] = Field(default_factory=list, description="合/冲/冲日支/岁运并临")
    brief: str = Field('', description="上行/回撤")


class DayunStage(_FrozenModel):
    """大运阶段小结"""
    start_age: int
    end_age: int
    ganzhi: str
    score: int = Field(..., ge=0, le=100, description="阶段收盘均分（取整）")
    level: Literal['偏强', '平稳', '偏弱']
    summary: str
    advice: str
    risks: List[str] = Field(default_factory=list)


class YearPoint(_FrozenModel):
    """高点/低点"""
    age: int
    year: int
    score: float
    ganzhi: str


class Insight(_FrozenModel):
    """整体洞察"""
    overall_trend: Literal['前高', '中高', '后高', '波动']
    peaks: List[YearPoint]
    troughs: List[YearPoint]
    ten_god_focus: List[str]
    total_score: int = Field(..., ge=0, le=100)
    summary: str


class KLineResult(_FrozenModel):
    """百年K线结果"""
    years: List[YearKLine]
    dayun_stages: List[DayunStage]
    insight: Insight
