# -*- coding: utf-8 -*-
"""
日期工具库

包含：
- dates.py: 日期工具函数（时间戳转换、格式化、周末统计、闰年判断、排班生成）
- config.py: 配置管理（本地时区、日志）
- utils/time_utils.py: 底层时间处理工具
"""

from .config import Config, get_config, setup_logging
from .dates import (
    DatePeriod,
    date_to_timestamp,
    get_time,
    get_day_name,
    get_next_friday,
    get_count_days_in_month,
    get_count_days_on_period,
    is_date_in_period,
    format_date,
    get_count_weekends_in_month,
    get_week_number_by_date,
    get_next_friday_the_13th,
    get_quarter,
    get_work_schedule,
    is_leap_year,
)

__all__ = [
    # 配置
    "Config",
    "get_config",
    "setup_logging",
    # 类型
    "DatePeriod",
    # 函数
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
]
