#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""配置管理"""

from .env_config import EnvConfig, get_env_config

__all__ = ['EnvConfig', 'get_env_config']
