# -*- coding: utf-8 -*-
"""
配置管理模块单元测试

测试 config.py 中的所有类和函数
"""

import pytest
import logging
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from date_tasks.config import (
    ENV_LOG_LEVEL,
    ENV_TIMEZONE,
    TimeConfig,
    LoggingConfig,
    Config,
    default_config,
    get_config,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """清除影响配置的环境变量"""
    monkeypatch.delenv(ENV_TIMEZONE, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


class TestTimeConfig:
    """测试 TimeConfig 类"""

    def test_default_values(self):
        """测试默认值"""
        config = TimeConfig()
        assert config.local_timezone == "UTC"

    def test_custom_values(self):
        """测试自定义值"""
        config = TimeConfig(local_timezone="Europe/Moscow")
        assert config.local_timezone == "Europe/Moscow"


class TestLoggingConfig:
    """测试 LoggingConfig 类"""

    def test_default_values(self):
        """测试默认值"""
        config = LoggingConfig()
        assert config.log_level == "INFO"
        assert config.log_format == "%(asctime)s [%(levelname)s] %(message)s"
        assert config.date_format == "%Y-%m-%d %H:%M:%S"


class TestConfig:
    """测试 Config 主类"""

    def test_default_values(self):
        """测试默认值"""
        config = Config()
        assert isinstance(config.time, TimeConfig)
        assert isinstance(config.log, LoggingConfig)

    def test_from_env(self, monkeypatch):
        """测试从环境变量创建配置"""
        monkeypatch.setenv(ENV_TIMEZONE, "Asia/Shanghai")
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")

        config = Config.from_env()
        assert config.time.local_timezone == "Asia/Shanghai"
        assert config.log.log_level == "DEBUG"

    def test_from_env_without_variables(self):
        """测试没有环境变量时使用默认值"""
        config = Config.from_env()
        assert config.time.local_timezone == "UTC"
        assert config.log.log_level == "INFO"

    def test_validate_default_is_valid(self):
        """测试默认配置有效"""
        assert Config().validate() == []

    def test_validate_with_unknown_timezone(self):
        """测试验证未知时区"""
        config = Config()
        config.time.local_timezone = "Mars/Olympus_Mons"
        errors = config.validate()
        assert any("未知的时区" in e for e in errors)

    def test_validate_with_unknown_log_level(self):
        """测试验证未知日志级别"""
        config = Config()
        config.log.log_level = "LOUD"
        errors = config.validate()
        assert any("未知的日志级别" in e for e in errors)


class TestDefaultConfig:
    """测试默认配置实例"""

    def test_default_config_exists(self):
        """测试默认配置存在"""
        assert default_config is not None
        assert isinstance(default_config, Config)


class TestGetConfig:
    """测试 get_config 函数"""

    def test_returns_default_when_no_env(self):
        """测试没有环境变量时返回默认配置"""
        assert get_config() is default_config

    def test_returns_env_config_when_env_set(self, monkeypatch):
        """测试设置环境变量时返回环境配置"""
        monkeypatch.setenv(ENV_TIMEZONE, "Europe/Berlin")
        config = get_config()
        assert config is not default_config
        assert config.time.local_timezone == "Europe/Berlin"


class TestSetupLogging:
    """测试 setup_logging 函数"""

    def test_returns_package_logger(self):
        """测试返回包级日志器"""
        logger = setup_logging("DEBUG")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "date_tasks"

    def test_uses_configured_level_by_default(self):
        """测试默认使用配置中的日志级别"""
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
