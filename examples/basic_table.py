#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
基础表格示例
右对齐数字表，以及包含中文和 ANSI 颜色的混合表格
"""

import sys
from pathlib import Path

# 添加项目路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.tabular import Buffer, Left, Options, Right

GREEN = '\x1b[32m'
RED = '\x1b[31m'
RESET = '\x1b[0m'


def power_table():
    """x, x², x³ 右对齐输出"""
    b = Buffer(Options(padding=2, pad_char=' ', align_right=True))
    b.add_row("x", "x²", "x³")
    for x in [0.0, 4.0, 8.0, 12.0]:
        b.add_row(x, x * x, x * x * x)
    b.write_to(sys.stdout.buffer)
    #  x   x²    x³
    #  0    0     0
    #  4   16    64
    #  8   64   512
    # 12  144  1728


def mixed_table():
    """中文宽字符与带颜色的单元格"""
    b = Buffer(Options(padding=2))
    b.add_row("代码", "名称", Right("涨跌幅"), "状态")
    b.add_row("000001.SZ", "平安银行", Right(f"{GREEN}+1.25%{RESET}"), Left("正常"))
    b.add_row("600000.SH", "浦发银行", Right(f"{RED}-0.80%{RESET}"), Left("停牌"))
    b.write_to(sys.stdout.buffer)


if __name__ == "__main__":
    power_table()
    sys.stdout.buffer.write(b'\n')
    mixed_table()
    sys.stdout.buffer.flush()
