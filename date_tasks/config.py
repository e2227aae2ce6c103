# -*- coding: utf-8 -*-
"""
配置管理模块

集中管理日期工具的可配置参数。

“本地时间”类函数（get_time、get_quarter、get_next_friday 等）使用的时区
统一由这里决定，默认 UTC，保证结果在任何机器上可复现。

支持的环境变量:
- DATE_TASKS_TZ: 本地时区名称 (如 "Europe/Moscow")
- DATE_TASKS_LOG_LEVEL: 日志级别
"""

from dataclasses import dataclass, field
from typing import List
import logging
import os

import pandas as pd


ENV_TIMEZONE = "DATE_TASKS_TZ"
ENV_LOG_LEVEL = "DATE_TASKS_LOG_LEVEL"


@dataclass
class TimeConfig:
    """时间配置"""

    # 本地时区（朴素时间按此时区解释）
    local_timezone: str = "UTC"


@dataclass
class LoggingConfig:
    """日志配置"""

    # 日志级别
    log_level: str = "INFO"

    # 日志格式
    log_format: str = "%(asctime)s [%(levelname)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class Config:
    """主配置类

    使用示例:
        config = Config()
        config.time.local_timezone = "Asia/Shanghai"
        config.log.log_level = "DEBUG"
    """

    time: TimeConfig = field(default_factory=TimeConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """从环境变量创建配置"""
        config = cls()

        if timezone := os.getenv(ENV_TIMEZONE):
            config.time.local_timezone = timezone

        if log_level := os.getenv(ENV_LOG_LEVEL):
            config.log.log_level = log_level.upper()

        return config

    def validate(self) -> List[str]:
        """验证配置有效性

        Returns:
            错误信息列表，空列表表示配置有效
        """
        errors = []

        try:
            pd.Timestamp(0, tz=self.time.local_timezone)
        except (KeyError, ValueError, TypeError):
            errors.append(f"未知的时区: {self.time.local_timezone}")

        if not isinstance(logging.getLevelName(self.log.log_level.upper()), int):
            errors.append(f"未知的日志级别: {self.log.log_level}")

        return errors


# 默认配置实例
default_config = Config()


def get_config() -> Config:
    """获取配置实例

    优先尝试从环境变量加载，否则使用默认配置

    Returns:
        Config 实例
    """
    if any(os.getenv(key) for key in [ENV_TIMEZONE, ENV_LOG_LEVEL]):
        return Config.from_env()

    return default_config


def setup_logging(log_level: str = None) -> logging.Logger:
    """设置日志

    Args:
        log_level: 日志级别，默认取配置中的级别

    Returns:
        Logger 实例
    """
    config = get_config()
    level = log_level or config.log.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=config.log.log_format,
        datefmt=config.log.date_format
    )
    return logging.getLogger("date_tasks")
