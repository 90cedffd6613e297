#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
lunar_python 历法适配器

EightChar 各柱方法名形如 getYearGan / getTimeShiShenZhi，时柱前缀为 Time。
库版本之间方法不完全一致，逐个候选名探测，取不到的字段返回空值。
"""

import logging
from datetime import date, datetime
from typing import Any, Iterable, Optional, Sequence, Tuple

from lunar_python import Lunar, Solar

from lifekline.exceptions import InvalidLunarDateError
from .base import CalendarOracle, OracleReading, RawDayun, RawLuck, RawPillar

logger = logging.getLogger(__name__)

_MISSING = object()


def _probe(obj: Any, names: Sequence[str], *args: Any) -> Any:
    """依次尝试候选方法/属性，返回第一个可用值；都不可用返回 _MISSING"""
    if obj is None:
        return _MISSING
    for name in names:
        attr = getattr(obj, name, None)
        if attr is None:
            continue
        if not callable(attr):
            return attr
        try:
            return attr(*args)
        except Exception as e:
            logger.debug(f"⚠️ 历法库方法 {name} 调用失败: {e}")
    return _MISSING


def _as_str(value: Any) -> str:
    if value is _MISSING or value is None:
        return ''
    return str(value)


def _as_list(value: Any) -> Tuple[str, ...]:
    if value is _MISSING or value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    if isinstance(value, str) and value.strip():
        return tuple(value.split())
    return ()


def _as_int(value: Any) -> Optional[int]:
    if value is _MISSING or value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class LunarPythonOracle(CalendarOracle):
    """基于 lunar_python 的历法适配器"""

    name = 'lunar_python'

    PILLAR_PREFIXES = {
        'year': ('Year',),
        'month': ('Month',),
        'day': ('Day',),
        'hour': ('Time', 'Hour'),
    }

    def __init__(self, native_luck: bool = True, sect: Optional[int] = None):
        """
        Args:
            native_luck: 是否使用库内起运/大运；False 时交由排盘核心推排
            sect: 晚子时流派（1: 日柱算明天；2: 日柱算当天）；None 沿用库默认
        """
        self.native_luck = native_luck
        self.sect = sect
        if not native_luck:
            self.name = 'lunar_python_basic'

    # === 公开方法 ==================================================================================

    def read(self, solar_time: datetime, gender: str, dayun_count: int = 11) -> OracleReading:
        solar = Solar.fromYmdHms(
            solar_time.year, solar_time.month, solar_time.day,
            solar_time.hour, solar_time.minute, solar_time.second,
        )
        lunar = solar.getLunar()
        eight_char = lunar.getEightChar()
        if self.sect is not None:
            _probe(eight_char, ['setSect'], self.sect)

        pillars = {key: self._read_pillar(eight_char, prefixes) for key, prefixes in self.PILLAR_PREFIXES.items()}

        lunar_month = _as_int(_probe(lunar, ['getMonth'])) or 0
        luck = self._read_luck(eight_char, gender, dayun_count) if self.native_luck else RawLuck()

        return OracleReading(
            solar=solar_time,
            lunar_year=_as_int(_probe(lunar, ['getYear'])) or solar_time.year,
            lunar_month=abs(lunar_month),
            lunar_day=_as_int(_probe(lunar, ['getDay'])) or 0,
            is_leap_month=self._get_leap_month_status(lunar),
            pillars=pillars,
            luck=luck,
        )

    def lunar_to_solar(self, year: int, month: int, day: int, is_leap_month: bool = False) -> date:
        # lunar_python 以负数月份表示闰月
        lunar_month = -month if is_leap_month else month
        try:
            lunar = Lunar.fromYmd(year, lunar_month, day)
            solar = lunar.getSolar()
            result = date(solar.getYear(), solar.getMonth(), solar.getDay())
        except Exception as e:
            leap = '闰' if is_leap_month else ''
            raise InvalidLunarDateError(f"农历日期不存在: {year}年{leap}{month}月{day}日 ({e})") from e
        return result

    # === 内部方法 ==================================================================================

    def _read_pillar(self, eight_char: Any, prefixes: Iterable[str]) -> RawPillar:
        def probe(*suffixes: str) -> Any:
            return _probe(eight_char, [f"get{p}{s}" for p in prefixes for s in suffixes])

        return RawPillar(
            stem=_as_str(probe('Gan')),
            branch=_as_str(probe('Zhi')),
            stem_ten_god=_as_str(probe('ShiShenGan', 'ShiShen')),
            branch_ten_gods=_as_list(probe('ShiShenZhi')),
            hidden_stems=_as_list(probe('HideGan', 'HiddenGan', 'CangGan')),
            star_fortune=_as_str(probe('DiShi')),
            self_sitting=_as_str(probe('ZiZuo')),
            kongwang=_as_str(probe('XunKong', 'KongWang')),
            nayin=_as_str(probe('NaYin')),
        )

    def _read_luck(self, eight_char: Any, gender: str, dayun_count: int) -> RawLuck:
        yun = _probe(eight_char, ['getYun'], 1 if gender == 'male' else 0)
        if yun is _MISSING:
            logger.warning("⚠️ 历法库不支持起运计算，改用干支推排")
            return RawLuck()

        forward = _probe(yun, ['isForward'])
        dayun_list = _probe(yun, ['getDaYun'], dayun_count)
        dayun = None
        if dayun_list is not _MISSING and dayun_list is not None:
            dayun = tuple(self._read_dayun(item) for item in dayun_list)

        return RawLuck(
            is_forward=None if forward is _MISSING else bool(forward),
            start_age=self._first_luck_age(dayun),
            dayun=dayun,
        )

    @staticmethod
    def _read_dayun(item: Any) -> RawDayun:
        start_age = _as_int(_probe(item, ['getStartAge'])) or 1
        end_age = _as_int(_probe(item, ['getEndAge']))
        start_year = _as_int(_probe(item, ['getStartYear'])) or 0
        end_year = _as_int(_probe(item, ['getEndYear']))
        return RawDayun(
            start_year=start_year,
            end_year=end_year if end_year is not None else start_year + 9,
            start_age=start_age,
            end_age=end_age if end_age is not None else start_age + 9,
            ganzhi=_as_str(_probe(item, ['getGanZhi', 'getName'])),
        )

    @staticmethod
    def _first_luck_age(dayun: Optional[Tuple[RawDayun, ...]]) -> Optional[int]:
        """第一步有干支的大运起始年龄即起运年龄"""
        if not dayun:
            return None
        for item in dayun:
            if item.ganzhi:
                return item.start_age
        return None

    @staticmethod
    def _get_leap_month_status(lunar: Any) -> bool:
        """获取闰月状态 - 兼容不同版本"""
        flag = _probe(lunar, ['isLeap', 'isLeapMonth'])
        if isinstance(flag, bool):
            return flag
        month = _as_int(_probe(lunar, ['getMonth']))
        return month is not None and month < 0
