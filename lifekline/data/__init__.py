#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""干支、五行与地支关系的静态数据表"""
