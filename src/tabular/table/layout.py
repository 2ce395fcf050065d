"""表格排版引擎

两遍扫描：第一遍计算每列宽度，第二遍逐行拼接并写出。
列宽必须看完所有行才能确定，因此无法边添加边输出。

与 tab-stop 式排版的区别：
- 填充只插在单元格之间，不在每个单元格之后
- 最小宽度不计入列间填充
- 每行最后一个单元格之后不输出任何填充
"""

from typing import List

from loguru import logger

from .store import RowStore


class WriteError(RuntimeError):
    """写出失败

    written 为失败前已成功写出的字节数，原始异常见 __cause__。
    """

    def __init__(self, written: int, message: str = "写出表格失败"):
        super().__init__(f"{message}（已写出 {written} 字节）")
        self.written = written


class LayoutEngine:
    """表格排版引擎"""

    def __init__(self, store: RowStore):
        """初始化排版引擎

        Args:
            store: 行存储
        """
        self.store = store
        self.options = store.options

    def column_widths(self) -> List[int]:
        """计算每列宽度

        第 j 列宽度为所有含第 j 个单元格的行中该单元格显示宽度的最大值，
        再提升到不低于 min_width。短行不参与其后各列的计算。

        Returns:
            各列宽度
        """
        widths: List[int] = []
        for row in self.store.rows:
            for i, c in enumerate(row):
                if i < len(widths):
                    if c.width > widths[i]:
                        widths[i] = c.width
                else:
                    widths.append(c.width)
        return [max(n, self.options.min_width) for n in widths]

    def pad_buffer(self, widths: List[int]) -> bytes:
        """构造可复用的填充缓冲区

        长度需覆盖任意一处最长的填充：对齐填充最多一整列宽，
        列间填充恰为 padding 个字符。

        Returns:
            由 pad_char 组成的字节串，按字符数切片使用
        """
        max_pad = max(widths, default=0)
        if self.options.padding > max_pad:
            max_pad = self.options.padding
        return (self.options.pad_char * max_pad).encode('utf-8')

    def lines(self):
        """逐行生成排版后的字节串（含换行符）"""
        widths = self.column_widths()
        pad_buf = self.pad_buffer(widths)
        # pad_char 可能是多字节字符，切片按字节计
        unit = len(self.options.pad_char.encode('utf-8'))
        gap = pad_buf[:self.options.padding * unit]

        for row in self.store.rows:
            line = bytearray()
            last = len(row) - 1
            for j, (c, data) in enumerate(self.store.cells(row)):
                if j > 0:
                    line += gap
                fill = pad_buf[:(widths[j] - c.width) * unit]
                if c.right:
                    line += fill
                line += data
                if not c.right and j < last:
                    line += fill
            line += b'\n'
            yield bytes(line)

    def write_to(self, sink) -> int:
        """将表格写出到 sink

        每排好一行立即写出。任一次写出失败即中止，不重试也不回滚。

        Args:
            sink: 任何带 write(bytes) 方法的对象

        Returns:
            写出的总字节数

        Raises:
            WriteError: sink 写出失败或写出不完整
        """
        written = 0
        for line in self.lines():
            try:
                n = sink.write(line)
            except Exception as e:
                logger.warning(f"写出表格失败: {e}，已写出 {written} 字节")
                raise WriteError(written) from e
            if n is None:
                n = len(line)
            written += n
            if n < len(line):
                logger.warning(f"写出不完整: {n}/{len(line)} 字节，已写出 {written} 字节")
                raise WriteError(written, "写出不完整")
        logger.debug(f"表格写出完成: {len(self.store)} 行, {written} 字节")
        return written
