"""utils/formatting.py"""
import numpy as np

from config.config import ENGINE_CONFIG


def format_operand(value, decimals=None):
    """变量代入用：float32值，固定小数位"""
    if decimals is None:
        decimals = ENGINE_CONFIG["substitution_decimals"]
    return f"{float(np.float32(value)):.{decimals}f}"


def format_result(value):
    """展示用：float32最短往返表示，不用科学计数法，整数不带小数点"""
    return np.format_float_positional(np.float32(value), trim='-')
