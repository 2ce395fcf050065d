"""值格式化模块

把任意类型的值转换为表格单元格中显示的文本。格式化是全函数：
任何值都会得到某种文本表示，不会抛出异常。
"""

import math
from decimal import Decimal
from functools import singledispatch

# 浮点数十进制指数小于 -4 或不小于该值时改用科学计数法
FLOAT_EXP_LIMIT = 6


@singledispatch
def format_value(value) -> str:
    """将值转换为默认的可读文本

    未单独注册的类型使用 str()；若 __str__ 出错则退回 repr()，
    两者都出错时输出 <类型名>。

    Args:
        value: 任意值

    Returns:
        文本表示
    """
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"


@format_value.register(str)
def _(value: str) -> str:
    return value


@format_value.register(bytes)
@format_value.register(bytearray)
def _(value) -> str:
    return bytes(value).decode('utf-8', errors='replace')


@format_value.register(type(None))
def _(value) -> str:
    return '<nil>'


@format_value.register(bool)
def _(value: bool) -> str:
    return 'true' if value else 'false'


@format_value.register(int)
def _(value: int) -> str:
    return str(value)


@format_value.register(float)
def _(value: float) -> str:
    """浮点数：最短可还原的有效数字

    十进制指数在 [-4, 6) 内用定点表示（去掉末尾的 .0），
    否则用科学计数法，指数至少两位，如 1e+06、1.5e-07。
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    if value == 0:
        return '-0' if math.copysign(1.0, value) < 0 else '0'

    d = Decimal(repr(value)).normalize()
    sign, digits, exponent = d.as_tuple()
    exp = len(digits) + exponent - 1
    if -4 <= exp < FLOAT_EXP_LIMIT:
        return format(d, 'f')

    mantissa = ''.join(str(x) for x in digits)
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"
    return f"{'-' if sign else ''}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
