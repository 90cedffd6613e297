#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
环境配置

从环境变量读取配置，可选先加载 .env 文件。
配置只在入口处（命令行、服务构造）读取，排盘计算本身不读取任何全局状态。
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "LIFEKLINE_LOG_LEVEL"
ENV_ORACLE = "LIFEKLINE_ORACLE"
ENV_DAYUN_COUNT = "LIFEKLINE_DAYUN_COUNT"


class EnvConfig:
    """
    环境配置读取器

    用法：
        config = EnvConfig.load(".env")
        config.oracle_name
    """

    def __init__(self, environ: Optional[dict] = None):
        self._environ = environ if environ is not None else os.environ

    @classmethod
    def load(cls, env_file: Optional[Union[str, Path]] = None) -> 'EnvConfig':
        """
        加载 .env（存在时）后构造配置

        Args:
            env_file: .env 路径，默认当前目录下的 .env
        """
        from dotenv import load_dotenv

        env_path = Path(env_file) if env_file else Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logger.debug(f"✓ 已加载环境文件: {env_path}")
        return cls()

    def get_config(self, key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
        """
        获取配置值

        Raises:
            ValueError: required=True 且未设置
        """
        value = self._environ.get(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_int_config(self, key: str, default: int = 0) -> int:
        value = self._environ.get(key, str(default))
        try:
            return int(value)
        except ValueError:
            logger.warning(f"⚠️ 环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
            return default

    @property
    def log_level(self) -> str:
        return (self.get_config(ENV_LOG_LEVEL, "INFO") or "INFO").upper()

    @property
    def oracle_name(self) -> str:
        return self.get_config(ENV_ORACLE, "lunar_python") or "lunar_python"

    @property
    def dayun_count(self) -> int:
        count = self.get_int_config(ENV_DAYUN_COUNT, 11)
        return count if count > 0 else 11


def get_env_config(env_file: Optional[Union[str, Path]] = None) -> EnvConfig:
    """读取当前环境配置（每次调用重新读取）"""
    return EnvConfig.load(env_file)
