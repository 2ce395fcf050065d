"""单元格对齐标记

Right(v) / Left(v) 是一次性的标记包装，只影响该单元格的对齐方式。
多层包装时以最外层标记为准，内层标记不起作用，但会被完整剥离，
最终对底层的具体值做格式化。
"""

from enum import Enum
from typing import Any, Tuple


class Alignment(Enum):
    """对齐方式"""
    LEFT = "left"
    RIGHT = "right"


class Aligned:
    """带对齐标记的值"""

    __slots__ = ('alignment', 'value')

    def __init__(self, alignment: Alignment, value: Any):
        self.alignment = alignment
        self.value = value

    def __repr__(self):
        name = 'Right' if self.alignment is Alignment.RIGHT else 'Left'
        return f"{name}({self.value!r})"


def Right(value: Any) -> Aligned:
    """标记该值右对齐"""
    return Aligned(Alignment.RIGHT, value)


def Left(value: Any) -> Aligned:
    """标记该值左对齐"""
    return Aligned(Alignment.LEFT, value)


def resolve_alignment(value: Any, default: Alignment) -> Tuple[Any, Alignment]:
    """解析单元格的对齐方式并剥离全部标记

    Args:
        value: 可能带有 Right/Left 标记的值
        default: 未标记时使用的对齐方式

    Returns:
        (底层具体值, 对齐方式)
    """
    if not isinstance(value, Aligned):
        return value, default

    alignment = value.alignment
    while isinstance(value, Aligned):
        value = value.value
    return value, alignment
