"""core/errors.py - 计算器异常体系"""


class CalculatorError(ValueError):
    """所有计算错误的基类，str(e) 即为展示给用户的消息"""
    message = "Calculation error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidIdentifierError(CalculatorError):
    """赋值目标不是纯拉丁字母标识符"""
    message = "Invalid identifier"


class MalformedWordError(InvalidIdentifierError):
    """表达式中既不是数字、操作符、括号也不是变量名的单词"""

    def __init__(self, word):
        self.word = word
        super().__init__(f"Invalid Identifier: {word}")


class UnknownVariableError(CalculatorError):
    message = "Unknown variable"

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown variable: {name}")


class InvalidExpressionError(CalculatorError):
    """相邻关系非法、括号不匹配、或操作符串无法合并"""
    message = "Invalid expression"


class InvalidOperandError(CalculatorError):
    message = "invalid operand"


class InvalidPostfixError(CalculatorError):
    """后缀表达式操作数不足或结果栈不为1"""
    message = "invalid postfix expression"


class EmptyStackError(CalculatorError):
    message = "Stack is empty"


class DivisionByZeroError(CalculatorError):
    message = "Division by zero"


class ArithmeticOverflowError(CalculatorError):
    """float32 结果溢出为 inf/nan"""
    message = "Arithmetic overflow"
