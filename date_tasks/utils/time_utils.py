# -*- coding: utf-8 -*-
"""
时间处理工具模块

提供日期字符串、datetime、毫秒时间戳与时区感知的 pandas Timestamp 之间的
统一转换，以及日历常量和闰年规则。

瞬时 (Instant) 约定：
- 内部统一表示为时区感知的 pd.Timestamp
- 整数输入按自 1970-01-01T00:00:00Z 起的毫秒数解释
- 朴素时间（无时区信息）按配置的本地时区解释，默认 UTC

星期约定：
- Python datetime.weekday(): 0 = 周一 ... 6 = 周日
- ISO 8601 isoweekday(): 1 = 周一 ... 7 = 周日
- 周日优先编号: 0 = 周日 ... 6 = 周六（星期名称表与周数公式使用）

月份约定：
- 对外接口中的月份一律为 1-based (1-12)
"""

from datetime import date, datetime
from typing import Optional, Union
import logging

import numpy as np
import pandas as pd

from ..config import get_config


logger = logging.getLogger(__name__)

# 常量定义
MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND  # 86,400,000
DAYS_PER_WEEK = 7

# 每月天数
DAYS_IN_MONTH_NORMAL = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
DAYS_IN_MONTH_LEAP = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# 星期名称（周日优先，与 to_sunday_first_weekday 的结果对应）
DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

# Python weekday() 编号
FRIDAY = 4

# 排班日期格式 DD-MM-YYYY
SCHEDULE_DATE_FORMAT = "%d-%m-%Y"

InstantLike = Union[str, int, np.integer, datetime, date, pd.Timestamp]


def is_leap_year(year: int) -> bool:
    """判断是否为闰年

    闰年规则：
    - 能被4整除且不能被100整除，或者
    - 能被400整除

    Args:
        year: 年份

    Returns:
        是否为闰年
    """
    if year % 4 == 0:
        if year % 100 != 0 or year % 400 == 0:
            return True
    return False


def days_in_month(month: int, year: int) -> int:
    """获取某年某月的天数

    Args:
        month: 月份 (1-12)
        year: 年份

    Returns:
        当月天数

    Raises:
        ValueError: 月份不在 1-12 范围内
    """
    validate_month(month)
    table = DAYS_IN_MONTH_LEAP if is_leap_year(year) else DAYS_IN_MONTH_NORMAL
    return table[month - 1]


def validate_month(month: int) -> None:
    """校验月份为 1-12"""
    if not 1 <= month <= 12:
        raise ValueError(f"月份必须在 1-12 之间: {month}")


def to_sunday_first_weekday(iso_weekday: int) -> int:
    """将 ISO 8601 星期几转换为周日优先编号

    ISO 8601 标准：
    - 1 = 周一
    - ...
    - 7 = 周日

    周日优先编号：
    - 0 = 周日
    - 1 = 周一
    - ...
    - 6 = 周六

    Args:
        iso_weekday: ISO 星期几 (1-7)

    Returns:
        周日优先的星期几 (0-6)
    """
    return iso_weekday % 7


def resolve_timezone(tz=None):
    """返回显式指定的时区，否则返回配置中的本地时区"""
    return tz or get_config().time.local_timezone


def to_instant(value: InstantLike, tz: Optional[str] = None) -> pd.Timestamp:
    """将各种日期输入统一转换为时区感知的 Timestamp

    没有时区信息的输入一律按 tz 解释，包括只有日期的 ISO 字符串
    (如 '2024-02-02')，而不是像 ISO 8601 纯日期的常见约定那样当作 UTC；
    仅在本地时区不是 UTC 时才有区别。

    Args:
        value: 日期字符串、毫秒时间戳、datetime/date 或 pandas Timestamp
        tz: 结果所在时区，默认使用配置的本地时区

    Returns:
        以 tz 表示的时区感知 Timestamp

    Raises:
        ValueError: 字符串无法解析或结果为 NaT
        TypeError: 不支持的输入类型
    """
    tz = resolve_timezone(tz)

    if value is pd.NaT:
        raise ValueError("日期不能为空 (NaT)")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("日期字符串不能为空")
        try:
            ts = pd.Timestamp(text)
        except ValueError as e:
            logger.warning(f"无法解析日期字符串: {value!r}")
            raise ValueError(f"无法解析日期: {value!r}") from e
    elif isinstance(value, (bool, np.bool_)):
        raise TypeError(f"不支持的日期类型: {type(value).__name__}")
    elif isinstance(value, (int, np.integer)):
        ts = pd.Timestamp(int(value), unit="ms", tz="UTC")
    elif isinstance(value, (datetime, date, pd.Timestamp)):
        ts = pd.Timestamp(value)
    else:
        raise TypeError(f"不支持的日期类型: {type(value).__name__}")

    if pd.isna(ts):
        raise ValueError(f"无效日期: {value!r}")

    if ts.tzinfo is None:
        return ts.tz_localize(tz)
    return ts.tz_convert(tz)


def instant_to_milliseconds(ts: pd.Timestamp) -> int:
    """时区感知 Timestamp 转为自纪元起的毫秒数"""
    # 按 Timestamp 自身精度向下取整到毫秒，不经纳秒换算
    # (1677-2262 年以外的日期由 pandas 以微秒精度表示)
    return int(ts.asm8.astype("datetime64[ms]").astype(np.int64))


def local_midnight(year: int, month: int, day: int, tz=None) -> pd.Timestamp:
    """构造指定时区某一天的零点"""
    return pd.Timestamp(year=year, month=month, day=day, tz=resolve_timezone(tz))


def parse_schedule_date(text: str) -> pd.Timestamp:
    """解析 DD-MM-YYYY 格式的排班日期

    Args:
        text: 日期字符串，例如 '01-01-2024'

    Returns:
        朴素的日期 Timestamp（零点）

    Raises:
        ValueError: 格式不正确
    """
    if not isinstance(text, str):
        raise TypeError(f"排班日期必须是字符串: {type(text).__name__}")
    try:
        return pd.to_datetime(text.strip(), format=SCHEDULE_DATE_FORMAT)
    except ValueError as e:
        logger.warning(f"排班日期格式错误: {text!r}")
        raise ValueError(f"排班日期必须为 DD-MM-YYYY 格式: {text!r}") from e


def format_schedule_date(ts: pd.Timestamp) -> str:
    """将日期格式化为 DD-MM-YYYY"""
    return ts.strftime(SCHEDULE_DATE_FORMAT)
