"""
tabular - 终端纯文本表格排版
支持逐单元格对齐、最小列宽、列间填充，以及宽字符和 ANSI 控制序列的显示宽度计算
"""

__version__ = "0.1.0"
__author__ = "deltree-y"

from loguru import logger

from .table import Buffer, Left, Options, Right, WriteError, new

# 库默认不输出日志，由应用调用 setup_logger 启用
logger.disable("tabular")

__all__ = [
    "Buffer",
    "Left",
    "Options",
    "Right",
    "WriteError",
    "new",
]
