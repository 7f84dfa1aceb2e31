"""core/errors.py - 表达式求值的错误类型"""


class EvaluationError(Exception):
    """所有求值错误的基类，携带可读的错误信息"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class LexError(EvaluationError):
    """词法错误：非法字符或未知标识符"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at position {self.position}"


class ParseError(EvaluationError):
    """语法错误：括号不匹配等"""


class EvalError(EvaluationError):
    """求值错误：栈下溢、除零、函数定义域错误"""


class NonFiniteResult(EvaluationError):
    """结果为inf或NaN"""
