#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
表格排版脚本
从文件或标准输入读取分隔文本，按列对齐后输出到标准输出

示例：
  printf 'name\tscore\nalice\t100\n' | python scripts/format_table.py --padding 2
  python scripts/format_table.py --input data.csv --delimiter , --right-columns 1,2
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Set

# 添加项目路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from src.tabular.common.config import get_config, init_config
from src.tabular.common.logger import setup_logger
from src.tabular.table import Buffer, Right, WriteError, create_options_from_dict


def parse_columns(spec: Optional[str]) -> Set[int]:
    """解析逗号分隔的列序号（从0开始）"""
    if not spec:
        return set()
    columns = set()
    for part in spec.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            columns.add(int(part))
        except ValueError:
            raise ValueError(f"列序号必须为整数，当前值: {part}")
    return columns


def build_table(lines: List[str], delimiter: str, options, right_columns: Set[int]) -> Buffer:
    """把文本行切分为单元格并填入表格

    Args:
        lines: 输入文本行（不含换行符）
        delimiter: 分隔符
        options: 表格配置
        right_columns: 强制右对齐的列序号

    Returns:
        填充好的表格

    Raises:
        ValueError: 分隔符为空
    """
    if not delimiter:
        raise ValueError("分隔符不能为空")
    table = Buffer(options)
    for line in lines:
        fields = line.split(delimiter)
        table.add_row(*[
            Right(value) if i in right_columns else value
            for i, value in enumerate(fields)
        ])
    logger.debug(f"读取 {len(table)} 行")
    return table


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(description="将分隔文本排版为对齐的表格")
    parser.add_argument('--input', type=str, default=None, help='输入文件，默认读取标准输入')
    parser.add_argument('--delimiter', type=str, default='\t', help='字段分隔符，默认制表符')
    parser.add_argument('--config', type=str, default=None, help='YAML 配置文件路径')
    parser.add_argument('--min-width', type=int, default=None, help='最小列宽')
    parser.add_argument('--padding', type=int, default=None, help='列间填充字符数')
    parser.add_argument('--pad-char', type=str, default=None, help='填充字符')
    parser.add_argument('--align-right', action='store_true', default=None, help='默认右对齐')
    parser.add_argument('--right-columns', type=str, default=None, help='强制右对齐的列序号，逗号分隔')
    parser.add_argument('--log-level', type=str, default=None, help='日志级别')
    args = parser.parse_args(argv)

    config = init_config(args.config) if args.config else get_config()
    setup_logger(
        log_level=args.log_level or config.get('log.level', 'WARNING'),
        log_file=config.get('log.file')
    )

    # 命令行参数优先于配置文件和环境变量
    table_config = config.table_section()
    for key in ('min_width', 'padding', 'pad_char', 'align_right'):
        value = getattr(args, key)
        if value is not None:
            table_config[key] = value
    options = create_options_from_dict(table_config)

    if not args.delimiter:
        logger.error("分隔符不能为空")
        return 1

    try:
        right_columns = parse_columns(args.right_columns)
        if args.input:
            with open(args.input, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        else:
            lines = sys.stdin.read().splitlines()
    except (OSError, ValueError) as e:
        logger.error(f"读取输入失败: {e}")
        return 1

    table = build_table(lines, args.delimiter, options, right_columns)

    try:
        table.write_to(sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except WriteError as e:
        logger.error(f"输出表格失败: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
