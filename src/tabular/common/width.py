# 名称: width.py
# 说明: 计算文本在终端的显示宽度（使用 wcwidth，忽略 ANSI CSI 控制序列）

import re

from wcwidth import wcwidth

# ESC [ 参数字节(0x30-0x3F)* 中间字节(0x20-0x2F)* 结束字节(0x40-0x7E)
CSI_PATTERN = re.compile(r'\x1b\[[\x30-\x3f]*[\x20-\x2f]*[\x40-\x7e]')


def strip_escapes(s: str) -> str:
    """移除字符串中的 CSI 控制序列（颜色、样式等）。"""
    return CSI_PATTERN.sub('', s)


def char_width(ch: str) -> int:
    """返回单个码点的显示宽度：0、1 或 2。

    组合字符、零宽字符为0，控制字符（wcwidth 返回 -1）也按0计，
    东亚宽字符/全角字符为2，其余为1。
    """
    return max(wcwidth(ch), 0)


def display_width(s: str) -> int:
    """返回字符串在终端的显示宽度。

    先去掉 CSI 控制序列，再逐个码点累加宽度。
    注意显示宽度与字节长度无关，不可混用。

    Args:
        s: 待测量的文本

    Returns:
        显示宽度（列数）
    """
    return sum(char_width(ch) for ch in strip_escapes(s))
