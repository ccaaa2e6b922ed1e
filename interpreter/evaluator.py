import logging
from collections import OrderedDict
from typing import List, Optional

import numpy as np

from config.config import ENGINE_CONFIG
from core import (
    ExpressionValidator, InfixConverter, InvalidIdentifierError, MalformedWordError,
    RPNEvaluator, Token, format_postfix, is_identifier, is_number, is_parenthesis,
    is_sign, split_words, tokenize
)
from interpreter.store import VariableStore
from utils.formatting import format_operand

logger = logging.getLogger(__name__)


class LineEvaluator:
    """逐行解释：区分赋值/表达式，代入变量后交给RPN评估器"""

    def __init__(self, store: Optional[VariableStore] = None, cache_size=None):
        self.store = store if store is not None else VariableStore()
        self.rpn_evaluator = RPNEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存（键为代入后的表达式）
        if cache_size is None:
            cache_size = ENGINE_CONFIG["postfix_cache_size"]
        self.cache_size = cache_size
        self._postfix_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._postfix_cache) > self.cache_size:
            self._postfix_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._postfix_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @staticmethod
    def is_assignment(line: str) -> bool:
        # 恰好一个 '=' 才是赋值；两个及以上按表达式处理，随后校验失败
        return line.count('=') == 1

    def evaluate_line(self, line: str) -> Optional[np.float32]:
        """
        Args:
            line: 去掉首尾空白的一行输入（非命令）
        Returns:
            表达式的 float32 结果；赋值返回 None
        """
        line = line.strip()
        if self.is_assignment(line):
            self.read_assignment(line)
            return None
        return self.calculate(self.substitute(line))

    def read_assignment(self, line: str):
        name, expression = line.split('=')
        name = name.strip()
        if not is_identifier(name):
            logger.debug(f"Rejected assignment target: {name!r}")
            raise InvalidIdentifierError()

        result = self.calculate(self.substitute(expression.strip()))
        # 只有求值成功才写入变量表
        self.store.set(name, result)

    def substitute(self, expression: str) -> str:
        """按单词把变量名替换为3位小数的值；数字、操作符串、括号原样保留"""
        words = []
        for word in split_words(expression):
            if is_identifier(word):
                words.append(format_operand(self.store.get(word)))
            elif is_number(word) or is_sign(word) or is_parenthesis(word) or '=' in word:
                # 含 '=' 的单词留给校验器报 Invalid expression
                words.append(word)
            else:
                logger.debug(f"Rejected word: {word!r}")
                raise MalformedWordError(word)
        return ' '.join(words)

    def calculate(self, expression: str) -> np.float32:
        """校验 -> 中缀转后缀 -> 求值（表达式中不应再含变量）"""
        postfix = self._postfix_cache.get(expression)
        if postfix is not None:
            self._postfix_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
        else:
            self._cache_misses += 1
            postfix = self._convert(expression)
            self._postfix_cache[expression] = postfix
            self._manage_cache()

        return self.rpn_evaluator.evaluate(postfix)

    def _convert(self, expression: str) -> List[Token]:
        tokens = tokenize(expression)
        ExpressionValidator.validate(tokens)
        postfix = InfixConverter.convert(tokens)
        logger.debug(f"Postfix: {format_postfix(postfix)}")
        return postfix

    @property
    def cache_stats(self):
        return {"hits": self._cache_hits, "misses": self._cache_misses, "size": len(self._postfix_cache)}
