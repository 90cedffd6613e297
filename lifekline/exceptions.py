#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘异常

均继承 ValueError，调用方按参数错误处理即可。
出生信息字段校验失败由 pydantic.ValidationError 报告，不在此定义。
"""


class LifeKlineError(ValueError):
    """排盘流程异常基类"""


class InvalidLunarDateError(LifeKlineError):
    """农历日期不存在（如该年没有对应闰月）"""


class OracleDataError(LifeKlineError):
    """历法库未返回日柱干支，无法排盘"""
