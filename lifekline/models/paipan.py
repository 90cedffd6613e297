#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘数据模型 - 四柱、日主、整体判断与大运序列

构造后只读，可直接 JSON 序列化。
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .birth import BirthInput

Element = Literal['木', '火', '土', '金', '水']
PillarKey = Literal['year', 'month', 'day', 'hour']


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PillarDetail(_FrozenModel):
    """单柱详情"""
    pillar: PillarKey = Field(..., description="柱位", examples=['year'])
    stem: str = Field(..., description="天干", examples=['己'])
    branch: str = Field(..., description="地支", examples=['巳'])
    stem_ten_god: str = Field('', description="天干十神（主星）", examples=['正财'])
    branch_ten_god: str = Field('', description="地支主气十神", examples=['偏印'])
    hidden_stems: List[str] = Field(default_factory=list, description="藏干列表", examples=[['丙', '庚', '戊']])
    hidden_stem_ten_gods: List[str] = Field(default_factory=list, description="藏干十神（副星）", examples=[['偏印', '比肩', '正印']])
    star_fortune: str = Field('', description="地支十二星运", examples=['长生'])
    self_sitting: str = Field('', description="自坐", examples=['偏印'])
    kongwang: str = Field('', description="空亡", examples=['戌亥'])
    nayin: str = Field('', description="纳音", examples=['大林木'])
    deities: List[str] = Field(default_factory=list, description="神煞标签（冲X、煞Y）", examples=[['冲亥', '煞东']])

    @property
    def ganzhi(self) -> str:
        return f"{self.stem}{self.branch}"


class DayMaster(_FrozenModel):
    """日主"""
    stem: str = Field(..., description="日干", examples=['庚'])
    element: Element = Field(..., description="日干五行", examples=['金'])


class FourPillars(_FrozenModel):
    """四柱"""
    year: PillarDetail
    month: PillarDetail
    day: PillarDetail
    hour: PillarDetail
    day_master: DayMaster

    def pillars(self) -> List[PillarDetail]:
        """按年月日时顺序返回四柱"""
        return [self.year, self.month, self.day, self.hour]


class SolarInfo(_FrozenModel):
    """公历时间（校正前后）"""
    ymd_hms: str = Field(..., description="出生地钟表时间", examples=['1990-01-01 12:00:00'])
    corrected_ymd_hms: str = Field(..., description="真太阳时", examples=['1990-01-01 11:45:50'])
    longitude_delta_minutes: float = Field(..., description="经度时差（分钟，保留一位小数）", examples=[-14.2])
    time_note: Optional[str] = Field(None, description="时辰取值说明", examples=['子时(23:00-01:00, 取00:00)'])


class LunarInfo(_FrozenModel):
    """农历日期"""
    ymd: str = Field(..., description="农历年月日", examples=['1989-12-05'])
    is_leap_month: bool = Field(False, description="是否闰月")


class OverallInfo(_FrozenModel):
    """命局整体判断"""
    day_master_strength: Literal['强', '中', '弱'] = Field(..., description="日主强弱")
    favorable_elements: List[Element] = Field(..., description="喜用五行")
    unfavorable_elements: List[Element] = Field(..., description="忌讳五行")
    start_luck_age: int = Field(1, description="起运年龄（虚岁）")
    luck_direction: Literal['顺', '逆'] = Field(..., description="大运顺逆")


class DayunPeriod(_FrozenModel):
    """大运（十年一步）"""
    start_year: int = Field(..., description="起始年份", examples=[1998])
    end_year: int = Field(..., description="结束年份", examples=[2007])
    start_age: int = Field(..., description="起始年龄", examples=[9])
    end_age: int = Field(..., description="结束年龄", examples=[18])
    ganzhi: str = Field('', description="大运干支（起运前为空）", examples=['丙子'])

    def contains(self, age: int) -> bool:
        return self.start_age <= age <= self.end_age


class PaipanResult(_FrozenModel):
    """完整命盘"""
    input: BirthInput
    solar: SolarInfo
    lunar: LunarInfo
    four_pillars: FourPillars
    overall: OverallInfo
    dayun: List[DayunPeriod]
