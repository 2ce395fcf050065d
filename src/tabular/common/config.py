"""配置管理模块"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

# 默认配置文件：<项目根目录>/configs/base.yaml
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "configs" / "base.yaml"


class Config:
    """配置管理类

    支持从YAML文件加载配置，并支持环境变量覆盖
    """

    def __init__(self, config_path: Optional[str] = None):
        """初始化配置

        Args:
            config_path: 配置文件路径，如不提供则使用默认base.yaml
        """
        self._config: Dict[str, Any] = {}

        # 加载环境变量
        load_dotenv()

        # 加载配置文件
        if config_path:
            self.load_config(config_path)
        elif DEFAULT_CONFIG_PATH.exists():
            self.load_config(str(DEFAULT_CONFIG_PATH))

    def load_config(self, config_path: str) -> None:
        """加载YAML配置文件

        Args:
            config_path: 配置文件路径
        """
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            self._config.update(config or {})

    def merge_config(self, config_path: str) -> None:
        """合并另一个配置文件（覆盖已有配置）

        Args:
            config_path: 配置文件路径
        """
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            self._deep_update(self._config, config or {})

    def _deep_update(self, base: Dict, update: Dict) -> None:
        """深度更新字典

        Args:
            base: 基础字典
            update: 更新字典
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_update(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置项，支持点号分隔的嵌套键

        Args:
            key: 配置键，支持 'table.padding' 格式
            default: 默认值

        Returns:
            配置值
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """设置配置项

        Args:
            key: 配置键，支持 'table.padding' 格式
            value: 配置值
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """获取环境变量

        Args:
            key: 环境变量名
            default: 默认值

        Returns:
            环境变量值
        """
        return os.getenv(key, default)

    def table_section(self) -> Dict[str, Any]:
        """返回表格配置（table 段），并应用 TABULAR_* 环境变量覆盖

        Returns:
            可直接传给 create_options_from_dict 的字典
        """
        section = dict(self.get('table', {}) or {})
        overrides = {
            'min_width': self.get_env('TABULAR_MIN_WIDTH'),
            'padding': self.get_env('TABULAR_PADDING'),
            'pad_char': self.get_env('TABULAR_PAD_CHAR'),
            'align_right': self.get_env('TABULAR_ALIGN_RIGHT'),
        }
        for key, value in overrides.items():
            if value is not None:
                section[key] = value
        return section


# 全局配置实例
_global_config: Optional[Config] = None


def get_config() -> Config:
    """获取全局配置实例"""
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def init_config(config_path: str) -> Config:
    """初始化全局配置

    Args:
        config_path: 配置文件路径

    Returns:
        配置实例
    """
    global _global_config
    _global_config = Config(config_path)
    return _global_config
