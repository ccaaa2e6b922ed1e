"""工具模块"""
from .formatting import format_operand, format_result

__all__ = ['format_operand', 'format_result']
