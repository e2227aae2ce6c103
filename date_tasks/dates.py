# -*- coding: utf-8 -*-
"""
日期工具函数集

每个函数都是独立的纯计算：输入一个日期值，返回数字、字符串、布尔值或新的日期。
函数之间没有共享状态，可以安全地并发调用。

时间基准：
- UTC: get_day_name, format_date
- 本地时区 (配置项 DATE_TASKS_TZ，默认 UTC): get_time, get_next_friday,
  get_week_number_by_date, get_next_friday_the_13th, get_quarter, is_leap_year
- 与时区无关: get_count_days_in_month, get_count_weekends_in_month, get_work_schedule

月份参数一律为 1-based (1 = 一月 ... 12 = 十二月)。

错误处理：
- 无法解析的日期立即抛出 ValueError，不返回无效日期
- 类型不支持时抛出 TypeError
"""

from collections.abc import Mapping
from typing import List, NamedTuple, Optional, Tuple, Union
import logging
import math

import numpy as np
import pandas as pd

from .utils import time_utils
from .utils.time_utils import (
    DAY_NAMES,
    DAYS_PER_WEEK,
    FRIDAY,
    MS_PER_DAY,
    InstantLike,
    days_in_month,
    format_schedule_date,
    instant_to_milliseconds,
    local_midnight,
    parse_schedule_date,
    to_instant,
    to_sunday_first_weekday,
    validate_month,
)


logger = logging.getLogger(__name__)

# numpy 工作日掩码 (周一 ... 周日)，只有周六、周日有效
WEEKEND_MASK = "0000011"


class DatePeriod(NamedTuple):
    """闭区间日期范围

    Attributes:
        start: 开始日期（包含）
        end: 结束日期（包含）
    """
    start: InstantLike
    end: InstantLike


PeriodLike = Union[DatePeriod, Tuple[InstantLike, InstantLike], Mapping]


def _period_bounds(period: PeriodLike) -> Tuple[InstantLike, InstantLike]:
    """从 DatePeriod、二元组或 {'start', 'end'} 字典中取出边界"""
    if isinstance(period, Mapping):
        return period["start"], period["end"]
    start, end = period
    return start, end


def date_to_timestamp(date: InstantLike) -> int:
    """返回自 1970-01-01T00:00:00Z 起经过的毫秒数

    示例:
        '01 Jan 1970 00:00:00 UTC' => 0
        '04 Dec 1995 00:12:00 UTC' => 818035920000
    """
    return instant_to_milliseconds(to_instant(date))


def get_time(date: InstantLike, tz: Optional[str] = None) -> str:
    """返回本地时间的 hh:mm:ss 字符串（24 小时制，补零）

    示例:
        datetime(2023, 6, 1, 8, 20, 55) => '08:20:55'
        datetime(2015, 11, 20, 23, 15, 1) => '23:15:01'
    """
    return to_instant(date, tz).strftime("%H:%M:%S")


def get_day_name(date: InstantLike) -> str:
    """返回 UTC 日期对应的英文星期名称

    示例:
        '01 Jan 1970 00:00:00 UTC' => 'Thursday'
        '2024-01-30T00:00:00.000Z' => 'Tuesday'
    """
    ts = to_instant(date).tz_convert("UTC")
    return DAY_NAMES[to_sunday_first_weekday(ts.isoweekday())]


def get_next_friday(date: InstantLike, tz: Optional[str] = None) -> pd.Timestamp:
    """返回严格晚于给定日期的下一个周五

    给定日期本身是周五时返回 7 天后的周五。时刻（时分秒）保持不变；
    若该时刻在夏令时跳变中不存在，则顺延到跳变之后，重复的时刻取夏令时。

    示例:
        2024-02-03 (周六) => 2024-02-09
        2024-02-16 (周五) => 2024-02-23
    """
    ts = to_instant(date, tz)
    days_ahead = (FRIDAY - ts.weekday()) % DAYS_PER_WEEK or DAYS_PER_WEEK
    wall_time = ts.tz_localize(None) + pd.Timedelta(days=days_ahead)
    return wall_time.tz_localize(ts.tz, ambiguous=True, nonexistent="shift_forward")


def get_count_days_in_month(month: int, year: int) -> int:
    """返回某年某月的天数，二月按闰年规则计算

    Args:
        month: 月份 (1-12)
        year: 四位年份
    """
    return days_in_month(month, year)


def get_count_days_on_period(date_start: InstantLike, date_end: InstantLike) -> int:
    """返回两个日期之间的天数，包含首尾两天

    调用方需保证 date_start <= date_end。

    示例:
        '2024-02-01T00:00:00.000Z', '2024-02-02T00:00:00.000Z' => 2
        '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' => 12
    """
    start_ms = date_to_timestamp(date_start)
    end_ms = date_to_timestamp(date_end)
    return (end_ms - start_ms) // MS_PER_DAY + 1


def is_date_in_period(date: InstantLike, period: PeriodLike) -> bool:
    """判断日期是否落在闭区间 [start, end] 内"""
    start, end = _period_bounds(period)
    value = date_to_timestamp(date)
    return date_to_timestamp(start) <= value <= date_to_timestamp(end)


def format_date(date: InstantLike) -> str:
    """将日期格式化为 'M/D/YYYY, h:mm:ss AM/PM'（UTC，12 小时制）

    零点显示为 12 AM，正午显示为 12 PM。

    示例:
        '2024-02-01T15:00:00.000Z' => '2/1/2024, 3:00:00 PM'
        '1999-01-05T02:20:00.000Z' => '1/5/1999, 2:20:00 AM'
    """
    ts = to_instant(date).tz_convert("UTC")
    period = "AM" if ts.hour < 12 else "PM"
    hour = ts.hour % 12 or 12
    return (f"{ts.month}/{ts.day}/{ts.year}, "
            f"{hour}:{ts.minute:02d}:{ts.second:02d} {period}")


def get_count_weekends_in_month(month: int, year: int) -> int:
    """返回某年某月中周六和周日的总天数

    示例:
        5, 2022 => 9
        12, 2023 => 10
        1, 2024 => 8
    """
    validate_month(month)
    first_month = np.datetime64(f"{year:04d}-{month:02d}", "M")
    begin = first_month.astype("datetime64[D]")
    end = (first_month + 1).astype("datetime64[D]")
    return int(np.busday_count(begin, end, weekmask=WEEKEND_MASK))


def get_week_number_by_date(date: InstantLike, tz: Optional[str] = None) -> int:
    """返回日期在当年中的周数

    包含 1 月 1 日的那一周为第 1 周，周一为一周的第一天。

    计算公式：
        ceil((距上年 12 月 31 日零点的天数 + 该日的周日优先星期号) / 7)

    示例:
        2024-01-03 => 1
        2024-01-31 => 5
        2024-02-23 => 8
    """
    ts = to_instant(date, tz)
    jan_zero = local_midnight(ts.year - 1, 12, 31, ts.tz)
    elapsed_days = (ts - jan_zero) / pd.Timedelta(days=1)
    offset = to_sunday_first_weekday(jan_zero.isoweekday())
    return math.ceil((elapsed_days + offset) / DAYS_PER_WEEK)


def get_next_friday_the_13th(date: InstantLike, tz: Optional[str] = None) -> pd.Timestamp:
    """返回严格晚于给定日期的下一个“13 号星期五”（本地零点）

    示例:
        2024-01-13 => 2024-09-13
        2023-02-01 => 2023-10-13
    """
    ts = to_instant(date, tz)
    today = ts.normalize()
    year, month = ts.year, ts.month

    while True:
        candidate = local_midnight(year, month, 13, ts.tz)
        if candidate > today and candidate.weekday() == FRIDAY:
            logger.debug(f"{today.date()} 之后的 13 号星期五: {candidate.date()}")
            return candidate
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def get_quarter(date: InstantLike, tz: Optional[str] = None) -> int:
    """返回日期所在季度 (1-4)"""
    return to_instant(date, tz).quarter


def get_work_schedule(
    period: PeriodLike,
    count_work_days: int,
    count_off_days: int
) -> List[str]:
    """按“连续工作 N 天、休息 M 天”的循环生成排班表

    循环从区间第一天开始，区间首尾均包含。

    Args:
        period: 开始和结束日期，格式 'DD-MM-YYYY'
        count_work_days: 连续工作天数 (>= 1)
        count_off_days: 连续休息天数 (>= 0)

    Returns:
        工作日列表，格式 'DD-MM-YYYY'

    Raises:
        ValueError: 天数参数无效或日期格式错误

    示例:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
            => ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    if count_work_days < 1:
        raise ValueError(f"连续工作天数必须大于等于1: {count_work_days}")
    if count_off_days < 0:
        raise ValueError(f"连续休息天数不能为负数: {count_off_days}")

    start_text, end_text = _period_bounds(period)
    start = parse_schedule_date(start_text)
    end = parse_schedule_date(end_text)

    days = pd.date_range(start, end, freq="D")
    cycle = count_work_days + count_off_days
    work_mask = np.arange(len(days)) % cycle < count_work_days

    schedule = [format_schedule_date(day) for day in days[work_mask]]
    logger.debug(f"排班 {start_text} ~ {end_text} "
                 f"({count_work_days}/{count_off_days}): {len(schedule)} 个工作日")
    return schedule


def is_leap_year(date: InstantLike, tz: Optional[str] = None) -> bool:
    """判断日期所在年份是否为闰年

    示例:
        datetime(2024, 3, 1) => True
        datetime(2022, 3, 1) => False
    """
    return time_utils.is_leap_year(to_instant(date, tz).year)
