"""表格缓冲区

按行缓存文本并输出为对齐的纯文本表格。与 tab-stop 式排版相比：

- 以行和单元格为单位组织，而不是以制表符分隔的文本
- 填充插在单元格之间，而不是每个单元格之后
- 最小宽度不计入填充
- 每行最后一个单元格之后不输出任何填充
- 支持逐单元格右对齐

示例:
    >>> b = Buffer(Options(padding=2, pad_char='.'))
    >>> b.add_row("this", "is", Right("a"), "test")
    >>> b.add_row(1, 2, Right(True), False)
    >>> print(b.render(), end='')
    this..is.....a..test
    1.....2...true..false
"""

import io
from typing import Any, Iterable, Optional

from loguru import logger

from ..common.config import Config, get_config
from .layout import LayoutEngine
from .options import Options, create_options_from_dict
from .store import RowStore


class Buffer:
    """表格缓冲区

    渲染是对当前状态的只读操作，可以反复调用，
    每次都反映到目前为止添加的所有行。非线程安全。
    """

    def __init__(self, options: Optional[Options] = None):
        """初始化表格

        Args:
            options: 表格配置，None 表示全部使用默认值
        """
        self.options = options or Options()
        self._store = RowStore(self.options)
        self._engine = LayoutEngine(self._store)
        logger.debug(
            f"创建表格: min_width={self.options.min_width}, "
            f"padding={self.options.padding}, "
            f"pad_char={self.options.pad_char!r}, "
            f"align_right={self.options.align_right}"
        )

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Buffer":
        """根据配置文件的 table 段创建表格

        Args:
            config: 配置实例，None 则使用全局配置

        Returns:
            Buffer 实例
        """
        config = config or get_config()
        return cls(create_options_from_dict(config.table_section()))

    def add_row(self, *values: Any) -> None:
        """添加一行

        每个值按默认文本格式转换；用 Right()/Left() 包装可覆盖该单元格的对齐方式。
        """
        self._store.add_row(*values)

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """批量添加多行"""
        self._store.add_rows(rows)

    def write_to(self, sink) -> int:
        """将缓存的行作为文本表格写出

        Args:
            sink: 任何带 write(bytes) 方法的对象

        Returns:
            写出的总字节数

        Raises:
            WriteError: sink 写出失败，written 属性为已写出的字节数
        """
        return self._engine.write_to(sink)

    def render(self) -> str:
        """渲染为字符串"""
        out = io.BytesIO()
        self.write_to(out)
        return out.getvalue().decode('utf-8', errors='surrogateescape')

    def __len__(self) -> int:
        return len(self._store)

    def __str__(self) -> str:
        return self.render()


def new(options: Optional[Options] = None) -> Buffer:
    """创建表格缓冲区"""
    return Buffer(options)
