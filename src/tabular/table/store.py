"""行存储

按行累积单元格。所有单元格文本按 UTF-8 编码（孤立代理字符按 surrogateescape 还原为原始字节）后连续追加到同一个
bytearray 中，每个单元格只记录 (偏移, 字节长度)，不单独保存副本。
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Tuple

from ..common.fmt import format_value
from ..common.width import display_width
from .align import Alignment, resolve_alignment
from .options import Options


@dataclass
class Cell:
    """单元格元数据"""
    offset: int  # 文本在共享缓冲区中的起始偏移
    nbytes: int  # 文本字节长度（含控制序列）
    width: int  # 显示宽度（不含控制序列）
    right: bool  # 是否右对齐


class RowStore:
    """行存储

    负责格式化、测量并保存每一行的单元格
    """

    def __init__(self, options: Options):
        """初始化行存储

        Args:
            options: 表格配置
        """
        self.options = options
        self.buf = bytearray()
        self.rows: List[List[Cell]] = []

    def add_row(self, *values: Any) -> None:
        """添加一行

        每个值可以用 Right()/Left() 包装以覆盖默认对齐方式。

        Args:
            *values: 该行各单元格的值
        """
        default = Alignment.RIGHT if self.options.align_right else Alignment.LEFT
        row = []
        for v in values:
            v, alignment = resolve_alignment(v, default)
            s = format_value(v)
            data = s.encode('utf-8', errors='surrogateescape')
            row.append(Cell(
                offset=len(self.buf),
                nbytes=len(data),
                width=display_width(s),
                right=alignment is Alignment.RIGHT
            ))
            self.buf += data
        self.rows.append(row)

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """批量添加多行"""
        for row in rows:
            self.add_row(*row)

    def cell_bytes(self, c: Cell) -> bytes:
        """取出单元格的原始文本字节"""
        return bytes(self.buf[c.offset:c.offset + c.nbytes])

    def cells(self, row: List[Cell]) -> Iterator[Tuple[Cell, bytes]]:
        """遍历一行中的单元格及其文本字节"""
        for c in row:
            yield c, self.cell_bytes(c)

    def __len__(self) -> int:
        return len(self.rows)
