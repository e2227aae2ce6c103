# -*- coding: utf-8 -*-
"""
工具模块

包含：
- time_utils.py: 时间处理工具（瞬时转换、日历常量、闰年规则等）
"""

from .time_utils import (
    # 常量
    MS_PER_SECOND,
    MS_PER_DAY,
    DAYS_PER_WEEK,
    DAYS_IN_MONTH_NORMAL,
    DAYS_IN_MONTH_LEAP,
    DAY_NAMES,
    SCHEDULE_DATE_FORMAT,
    # 函数
    is_leap_year,
    days_in_month,
    validate_month,
    to_sunday_first_weekday,
    resolve_timezone,
    to_instant,
    instant_to_milliseconds,
    local_midnight,
    parse_schedule_date,
    format_schedule_date,
)

__all__ = [
    # 常量
    "MS_PER_SECOND",
    "MS_PER_DAY",
    "DAYS_PER_WEEK",
    "DAYS_IN_MONTH_NORMAL",
    "DAYS_IN_MONTH_LEAP",
    "DAY_NAMES",
    "SCHEDULE_DATE_FORMAT",
    # 函数
    "is_leap_year",
    "days_in_month",
    "validate_month",
    "to_sunday_first_weekday",
    "resolve_timezone",
    "to_instant",
    "instant_to_milliseconds",
    "local_midnight",
    "parse_schedule_date",
    "format_schedule_date",
]
