"""core/stack.py - 中缀转换和后缀求值共用的栈"""
from core.errors import EmptyStackError


class Stack:
    """后进先出栈，栈顶为最近压入的元素"""

    def __init__(self):
        self.storage = []

    def push(self, value):
        self.storage.append(value)

    def pop(self):
        if not self.storage:
            raise EmptyStackError()
        return self.storage.pop()

    def peek(self):
        if not self.storage:
            raise EmptyStackError()
        return self.storage[-1]

    def is_empty(self):
        return not self.storage

    def has_parenthesis(self):
        """栈中是否残留括号（转换结束时检查用）"""
        return any(getattr(item, 'is_parenthesis', False) for item in self.storage)

    def __len__(self):
        return len(self.storage)
