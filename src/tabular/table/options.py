"""表格配置

配置在表格创建后不可变。所有字段都有安全的默认值，非法取值按用法
钳制（负数视为0，空填充字符或宽度不为1的填充字符视为空格），不会报错。
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from ..common.width import char_width

DEFAULT_PAD_CHAR = " "


@dataclass(frozen=True)
class Options:
    """表格配置"""
    min_width: int = 0  # 每列内容的最小宽度（不含列间填充）
    padding: int = 0  # 相邻单元格之间的填充字符数
    pad_char: str = DEFAULT_PAD_CHAR  # 填充字符
    align_right: bool = False  # 未显式标记的单元格是否右对齐

    def __post_init__(self):
        # frozen dataclass 只能通过 object.__setattr__ 修正字段
        if self.min_width < 0:
            logger.debug(f"min_width={self.min_width} 小于0，按0处理")
            object.__setattr__(self, 'min_width', 0)
        if self.padding < 0:
            logger.debug(f"padding={self.padding} 小于0，按0处理")
            object.__setattr__(self, 'padding', 0)
        object.__setattr__(self, 'pad_char', _normalize_pad_char(self.pad_char))


def _normalize_pad_char(pad_char: Optional[str]) -> str:
    """空值或 NUL 视为空格，多字符只取第一个，显示宽度不为1的字符视为空格

    填充按字符个数计算列宽，宽字符或零宽字符会让各列错位。
    """
    if isinstance(pad_char, (bytes, bytearray)):
        pad_char = bytes(pad_char).decode('utf-8', errors='replace')
    if not pad_char or pad_char[0] == '\0':
        return DEFAULT_PAD_CHAR
    if len(pad_char) > 1:
        logger.debug(f"pad_char={pad_char!r} 超过一个字符，仅使用 {pad_char[0]!r}")
    ch = pad_char[0]
    if char_width(ch) != 1:
        logger.debug(f"pad_char={ch!r} 显示宽度为 {char_width(ch)}，按空格处理")
        return DEFAULT_PAD_CHAR
    return ch


def _to_int(value: Any, default: int = 0) -> int:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"无法解析整数配置 {value!r}，使用默认值 {default}")
        return default


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on', 'y')
    return bool(value)


def create_options_from_dict(config_dict: Optional[Dict[str, Any]]) -> Options:
    """从配置字典创建表格配置

    Args:
        config_dict: 配置字典（通常来自 YAML 的 table 段或环境变量），
            支持键 min_width / padding / pad_char / align_right

    Returns:
        Options 实例
    """
    config_dict = config_dict or {}
    return Options(
        min_width=_to_int(config_dict.get('min_width')),
        padding=_to_int(config_dict.get('padding')),
        pad_char=config_dict.get('pad_char') or DEFAULT_PAD_CHAR,
        align_right=_to_bool(config_dict.get('align_right', False))
    )
