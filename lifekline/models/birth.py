#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生信息模型 - 排盘前的唯一输入

所有字段在进入排盘流程前完成校验，校验失败抛出 pydantic.ValidationError，
errors() 中的 loc 指明具体出错字段。
"""

import calendar as _calendar
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

# 十二时辰 + 上午/下午
TIME_SEGMENT_LABELS = (
    '子时', '丑时', '寅时', '卯时', '辰时', '巳时',
    '午时', '未时', '申时', '酉时', '戌时', '亥时',
    '上午', '下午',
)

SegmentLabel = Literal[
    '子时', '丑时', '寅时', '卯时', '辰时', '巳时',
    '午时', '未时', '申时', '酉时', '戌时', '亥时',
    '上午', '下午',
]


class _FrozenModel(BaseModel):
    # 前端表单可能带额外字段，忽略
    model_config = ConfigDict(frozen=True, extra='ignore')


class BirthDate(_FrozenModel):
    """出生日期（公历或农历，由 BirthInput.calendar 决定）"""
    year: int = Field(..., ge=1800, le=2200, description="年", examples=[1990])
    month: int = Field(..., ge=1, le=12, description="月", examples=[1])
    day: int = Field(..., ge=1, le=31, description="日", examples=[1])
    is_leap_month: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices('is_leap_month', 'isLeapMonth'),
        description="是否闰月（仅农历有效）",
        examples=[False],
    )


class ExactTime(_FrozenModel):
    """精确到分钟的出生时间"""
    mode: Literal['exact'] = 'exact'
    hour: int = Field(..., ge=0, le=23, description="时", examples=[12])
    minute: int = Field(..., ge=0, le=59, description="分", examples=[0])


class SegmentTime(_FrozenModel):
    """只知道时辰或上/下午的出生时间"""
    mode: Literal['segment'] = 'segment'
    label: SegmentLabel = Field(..., description="时辰或半日标签", examples=['子时'])


BirthTime = Annotated[Union[ExactTime, SegmentTime], Field(discriminator='mode')]


class BirthLocation(_FrozenModel):
    """出生地（经度用于真太阳时校正）"""
    province: str = Field(..., description="省", examples=['北京'])
    city: str = Field(..., description="市", examples=['北京'])
    longitude: float = Field(..., ge=70, le=140, description="经度（东经）", examples=[116.46])

    @field_validator('province', 'city')
    @classmethod
    def validate_place(cls, v):
        """去除首尾空白后不能为空"""
        v = v.strip()
        if not v:
            raise ValueError('地点不能为空')
        return v


class BirthInput(_FrozenModel):
    """出生信息"""
    name: str = Field(..., description="姓名", examples=['张三'])
    gender: Literal['male', 'female'] = Field(..., description="性别：male(男) 或 female(女)", examples=['male'])
    calendar: Literal['solar', 'lunar'] = Field(..., description="历法：solar(公历) 或 lunar(农历)", examples=['solar'])
    date: BirthDate
    time: BirthTime
    location: BirthLocation

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """姓名去除首尾空白后不能为空"""
        v = v.strip()
        if not v:
            raise ValueError('姓名不能为空')
        return v

    @model_validator(mode='after')
    def validate_solar_date(self):
        """公历日期必须真实存在；农历日期由历法库在换算时校验"""
        if self.calendar == 'solar':
            _, days_in_month = _calendar.monthrange(self.date.year, self.date.month)
            if self.date.day > days_in_month:
                raise ValueError(
                    f'公历日期不存在: {self.date.year}-{self.date.month:02d}-{self.date.day:02d}'
                )
        return self


def parse_birth_input(raw: Any) -> BirthInput:
    """
    解析并校验出生信息

    Args:
        raw: dict 或已构造的 BirthInput

    Returns:
        BirthInput

    Raises:
        pydantic.ValidationError: 任一字段不合法
    """
    if isinstance(raw, BirthInput):
        return raw
    return BirthInput.model_validate(raw)
