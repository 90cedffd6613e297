#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口

用法：
    python -m lifekline birth.json            # 仅排盘
    python -m lifekline birth.json --kline    # 排盘 + 百年K线
    cat birth.json | python -m lifekline -
"""

import argparse
import json
import sys

from pydantic import ValidationError

from lifekline.bazi_logging import safe_log, setup_logging
from lifekline.config.env_config import get_env_config
from lifekline.exceptions import LifeKlineError
from lifekline.services.life_kline_service import (
    LifeKlineService,
    compute_life_kline,
    compute_paipan,
    to_json,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lifekline', description='八字排盘与百年K线')
    parser.add_argument('input', help='出生信息 JSON 文件路径，- 表示标准输入')
    parser.add_argument('--kline', action='store_true', help='同时输出百年K线')
    parser.add_argument('--indent', type=int, default=None, help='JSON 缩进')
    parser.add_argument('--env-file', default=None, help='.env 文件路径')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = get_env_config(args.env_file)
    setup_logging(config.log_level)

    try:
        if args.input == '-':
            raw = json.load(sys.stdin)
        else:
            with open(args.input, 'r', encoding='utf-8') as f:
                raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        safe_log('error', f"❌ 读取输入失败: {e}")
        return 2

    try:
        service = LifeKlineService.from_config(config)
        payload = compute_life_kline(raw, service) if args.kline else compute_paipan(raw, service)
    except ValidationError as e:
        for err in e.errors():
            loc = '.'.join(str(p) for p in err['loc'])
            safe_log('error', f"❌ 参数错误 {loc}: {err['msg']}")
        return 2
    except LifeKlineError as e:
        safe_log('error', f"❌ 排盘失败: {e}")
        return 1
    except ValueError as e:
        safe_log('error', f"❌ 配置错误: {e}")
        return 2

    print(to_json(payload, indent=args.indent))
    return 0


if __name__ == '__main__':
    sys.exit(main())
