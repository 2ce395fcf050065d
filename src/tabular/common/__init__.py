"""Common模块初始化"""

from .config import Config, get_config, init_config
from .fmt import format_value
from .logger import setup_logger
from .width import display_width, strip_escapes

__all__ = [
    "Config",
    "get_config",
    "init_config",
    "format_value",
    "setup_logger",
    "display_width",
    "strip_escapes",
]
