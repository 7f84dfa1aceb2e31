"""core/operators.py"""
import numpy as np

from core.errors import EvalError


class Operators:
    """所有操作符和函数的静态方法集合（float64标量运算）"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return float(np.add(operand1, operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return float(np.subtract(operand1, operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return float(np.multiply(operand1, operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数为0直接报错"""
        if operand2 == 0:
            raise EvalError("division by zero")
        return float(np.divide(operand1, operand2))

    @staticmethod
    def mod(operand1, operand2):
        """截断取余: a - trunc(a/b)*b，符号跟随被除数"""
        return float(np.fmod(operand1, operand2))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算，溢出得到inf，由最终的有限性检查处理"""
        return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元函数====================
    @staticmethod
    def sin(operand):
        return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        return float(np.cos(operand))

    @staticmethod
    def tan(operand):
        return float(np.tan(operand))

    @staticmethod
    def sqrt(operand):
        if operand < 0:
            raise EvalError("invalid sqrt")
        return float(np.sqrt(operand))

    @staticmethod
    def ln(operand):
        """自然对数，定义域 x > 0"""
        if operand <= 0:
            raise EvalError("invalid ln")
        return float(np.log(operand))

    @staticmethod
    def log10(operand):
        if operand <= 0:
            raise EvalError("invalid log")
        return float(np.log10(operand))


# 符号/函数名 -> 实现
BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    '^': Operators.pow,
}

UNARY_FUNCTIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'sqrt': Operators.sqrt,
    'ln': Operators.ln,
    'log10': Operators.log10,
}
