"""Pytest配置文件"""

import sys
from pathlib import Path

# 添加src目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def mock_config():
    """提供模拟配置"""
    from src.tabular.common.config import Config

    config = Config()
    config.set("table.min_width", 3)
    config.set("table.padding", 2)
    config.set("table.pad_char", ".")
    config.set("table.align_right", False)

    return config


@pytest.fixture
def dot_buffer():
    """padding=2、以点号填充的表格"""
    from src.tabular.table import Buffer, Options

    return Buffer(Options(padding=2, pad_char='.'))


class FailingSink:
    """写入若干次后抛出异常的 sink"""

    def __init__(self, fail_after: int = 1):
        self.fail_after = fail_after
        self.chunks = []

    def write(self, data: bytes) -> int:
        if len(self.chunks) >= self.fail_after:
            raise OSError("磁盘已满")
        self.chunks.append(bytes(data))
        return len(data)


@pytest.fixture
def failing_sink():
    """第二次写入时失败的 sink"""
    return FailingSink(fail_after=1)
