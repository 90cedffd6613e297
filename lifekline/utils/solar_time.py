#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
真太阳时校正

只按经度差校正：以东经120°（北京时间标准经线）为基准，每度4分钟。
不计均时差。
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

STANDARD_MERIDIAN = 120.0
MINUTES_PER_DEGREE = 4


@dataclass(frozen=True)
class SolarTimeCorrection:
    local: datetime
    corrected: datetime
    delta_minutes: float


def longitude_delta_minutes(longitude: float) -> float:
    """经度时差（分钟），东正西负"""
    return (longitude - STANDARD_MERIDIAN) * MINUTES_PER_DEGREE


def calculate_true_solar_time(local_time: datetime, longitude: float) -> datetime:
    """
    计算真太阳时

    真太阳时 = 钟表时间 + (经度 - 120) * 4 分钟

    Args:
        local_time: 出生地钟表时间（北京时间）
        longitude: 经度

    Returns:
        真太阳时时间对象
    """
    return local_time + timedelta(minutes=longitude_delta_minutes(longitude))


def correct_to_true_solar_time(year: int, month: int, day: int,
                               hour: int, minute: int,
                               longitude: float) -> SolarTimeCorrection:
    """按年月日时分与经度校正真太阳时，返回校正前后时间与时差"""
    local = datetime(year, month, day, hour, minute, 0)
    return SolarTimeCorrection(
        local=local,
        corrected=calculate_true_solar_time(local, longitude),
        delta_minutes=longitude_delta_minutes(longitude),
    )


def format_ymd_hms(dt: datetime) -> str:
    """格式化为 YYYY-MM-DD HH:MM:SS（秒以下截断）"""
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} {dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"

