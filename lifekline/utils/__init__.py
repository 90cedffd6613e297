#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""出生时间处理工具：时辰取值、真太阳时校正"""
