"""解释器模块 - 变量表和逐行求值"""
from .store import VariableStore
from .evaluator import LineEvaluator

__all__ = ['VariableStore', 'LineEvaluator']
