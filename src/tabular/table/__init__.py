"""表格模块"""

from .align import Alignment, Left, Right, resolve_alignment
from .buffer import Buffer, new
from .layout import LayoutEngine, WriteError
from .options import Options, create_options_from_dict
from .store import Cell, RowStore

__all__ = [
    'Alignment',
    'Left',
    'Right',
    'resolve_alignment',
    'Buffer',
    'new',
    'LayoutEngine',
    'WriteError',
    'Options',
    'create_options_from_dict',
    'Cell',
    'RowStore'
]
