#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志工具

提供安全的日志输出，捕获 Broken pipe 等异常（命令行输出被管道截断时常见）。
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger("lifekline")


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """为 lifekline 包挂载日志输出，重复调用只调整级别"""
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    """
    try:
        if level == 'info':
            logger.info(message)
        elif level == 'warning':
            logger.warning(message)
        elif level == 'error':
            logger.error(message)
        elif level == 'debug':
            logger.debug(message)
        else:
            logger.info(message)
    except (BrokenPipeError, OSError):
        pass
