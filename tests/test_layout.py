"""测试排版引擎：列宽、填充缓冲区与写出失败"""

import io

import pytest

from src.tabular.table import Buffer, LayoutEngine, Options, Right, RowStore, WriteError


def make_engine(options, rows):
    store = RowStore(options)
    store.add_rows(rows)
    return LayoutEngine(store)


class TestColumnWidths:
    """测试列宽计算"""

    def test_max_per_column(self):
        """测试每列取最大显示宽度"""
        engine = make_engine(Options(), [("a", "bbb"), ("cc", "d")])
        assert engine.column_widths() == [2, 3]

    def test_min_width_floor(self):
        """测试最小列宽"""
        engine = make_engine(Options(min_width=4), [("a", "bbbbbb")])
        assert engine.column_widths() == [4, 6]

    def test_ragged(self):
        """测试长行定义额外的列"""
        engine = make_engine(Options(), [("a",), ("b", "cc", "ddd"), ()])
        assert engine.column_widths() == [1, 2, 3]

    def test_display_width_not_bytes(self):
        """测试按显示宽度而不是字节长度计算"""
        engine = make_engine(Options(), [("中文", "\x1b[31mx\x1b[0m")])
        assert engine.column_widths() == [4, 1]

    def test_widths_follow_new_rows(self):
        """测试列宽在渲染时按全部行计算"""
        store = RowStore(Options())
        engine = LayoutEngine(store)
        store.add_row("a")
        assert engine.column_widths() == [1]
        store.add_row("abcdef")
        assert engine.column_widths() == [6]


class TestPadBuffer:
    """测试填充缓冲区"""

    def test_covers_widest_column(self):
        """测试长度覆盖最宽的列"""
        engine = make_engine(Options(padding=2, pad_char='.'), [])
        assert engine.pad_buffer([3, 5]) == b"....."

    def test_covers_padding(self):
        """测试长度覆盖列间填充"""
        engine = make_engine(Options(padding=7, pad_char='-'), [])
        assert engine.pad_buffer([3, 5]) == b"-------"

    def test_empty(self):
        """测试无列时为空"""
        engine = make_engine(Options(), [])
        assert engine.pad_buffer([]) == b""


class TestStore:
    """测试行存储"""

    def test_shared_arena(self):
        """测试单元格文本连续存放在同一缓冲区中"""
        store = RowStore(Options())
        store.add_row("ab", Right("é"), 10)
        store.add_row("中")
        assert bytes(store.buf) == "abé10中".encode('utf-8')
        first = store.rows[0]
        n = len("é".encode('utf-8'))
        assert [(c.offset, c.nbytes) for c in first] == [(0, 2), (2, n), (2 + n, 2)]
        assert [c.right for c in first] == [False, True, False]

    def test_width_and_bytes_independent(self):
        """测试字节长度与显示宽度分别记录"""
        store = RowStore(Options())
        store.add_row("\x1b[32m中\x1b[0m")
        c = store.rows[0][0]
        assert c.width == 2
        assert c.nbytes == len("\x1b[32m中\x1b[0m".encode('utf-8'))
        assert store.cell_bytes(c) == "\x1b[32m中\x1b[0m".encode('utf-8')

    def test_default_alignment(self):
        """测试默认对齐取自配置"""
        store = RowStore(Options(align_right=True))
        store.add_row("a")
        assert store.rows[0][0].right is True


class ShortSink:
    """每次只接受部分字节的 sink"""

    def write(self, data):
        return len(data) - 1


class NoneSink:
    """write 不返回字节数的 sink"""

    def __init__(self):
        self.data = b""

    def write(self, data):
        self.data += data


class TestWriteTo:
    """测试写出"""

    def test_returns_byte_count(self):
        """测试返回写出的字节数"""
        b = Buffer(Options(padding=1))
        b.add_row("中", "x")
        out = io.BytesIO()
        assert b.write_to(out) == len("中 x\n".encode('utf-8'))

    def test_streams_row_by_row(self):
        """测试逐行写出"""
        b = Buffer(Options(padding=1))
        b.add_row("a", "b")
        b.add_row("c", "d")
        sink = NoneSink()
        chunks = []
        sink.write = lambda data: chunks.append(bytes(data))
        b.write_to(sink)
        assert chunks == [b"a b\n", b"c d\n"]

    def test_sink_failure(self, failing_sink):
        """测试写出失败时中止并报告已写出字节数"""
        b = Buffer(Options(padding=1))
        b.add_row("a", "b")
        b.add_row("c", "d")
        b.add_row("e", "f")
        with pytest.raises(WriteError) as exc_info:
            b.write_to(failing_sink)
        assert exc_info.value.written == 4
        assert isinstance(exc_info.value.__cause__, OSError)
        assert failing_sink.chunks == [b"a b\n"]

    def test_failure_on_first_row(self, failing_sink):
        """测试首行即失败"""
        failing_sink.fail_after = 0
        b = Buffer()
        b.add_row("x")
        with pytest.raises(WriteError) as exc_info:
            b.write_to(failing_sink)
        assert exc_info.value.written == 0

    def test_short_write(self):
        """测试写出不完整视为失败"""
        b = Buffer()
        b.add_row("abc")
        b.add_row("def")
        with pytest.raises(WriteError) as exc_info:
            b.write_to(ShortSink())
        assert exc_info.value.written == 3

    def test_sink_without_count(self):
        """测试 write 返回 None 的 sink"""
        b = Buffer()
        b.add_row("abc")
        sink = NoneSink()
        assert b.write_to(sink) == 4
        assert sink.data == b"abc\n"

    def test_render_after_failure(self, failing_sink):
        """测试失败不影响已缓存的行"""
        b = Buffer()
        b.add_row("a")
        b.add_row("b")
        with pytest.raises(WriteError):
            b.write_to(failing_sink)
        b.add_row("c")
        assert b.render() == "a\nb\nc\n"
