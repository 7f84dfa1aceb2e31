"""core/token_system.py"""
import math
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Union


class TokenType(Enum):
    NUMBER = "number"  # 数值（含常数PI）
    OPERATOR = "operator"  # 二元操作符
    FUNCTION = "function"  # 一元函数
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    COMMA = "comma"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token(NamedTuple):
    """不可变Token：type + value（数值、符号或函数名）"""
    type: TokenType
    value: Union[float, str]

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


class OperatorInfo(NamedTuple):
    precedence: int
    associativity: Associativity


# 操作符定义：优先级 ^ > * / % > + -
OPERATOR_DEFINITIONS = MappingProxyType({
    '+': OperatorInfo(1, Associativity.LEFT),
    '-': OperatorInfo(1, Associativity.LEFT),
    '*': OperatorInfo(2, Associativity.LEFT),
    '/': OperatorInfo(2, Associativity.LEFT),
    '%': OperatorInfo(2, Associativity.LEFT),
    '^': OperatorInfo(3, Associativity.RIGHT),  # 右结合：2^3^2 = 2^(3^2)
})

FUNCTION_NAMES = frozenset({'sin', 'cos', 'tan', 'sqrt', 'ln', 'log10'})

# 常数在词法阶段直接展开为数值Token
CONSTANT_DEFINITIONS = MappingProxyType({
    'pi': math.pi,
})

# RPN序列中只允许出现的Token类型（括号和逗号在解析时被消解）
RPN_TOKEN_TYPES = frozenset({TokenType.NUMBER, TokenType.OPERATOR, TokenType.FUNCTION})

LEFT_PAREN = Token(TokenType.LEFT_PAREN, '(')
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ')')
COMMA = Token(TokenType.COMMA, ',')


def number_token(value):
    return Token(TokenType.NUMBER, float(value))


def operator_token(symbol):
    if symbol not in OPERATOR_DEFINITIONS:
        raise ValueError(f"Unknown operator: {symbol}")
    return Token(TokenType.OPERATOR, symbol)


def function_token(name):
    if name not in FUNCTION_NAMES:
        raise ValueError(f"Unknown function: {name}")
    return Token(TokenType.FUNCTION, name)


def format_rpn(tokens):
    """RPN序列转为可读字符串，用于日志"""
    parts = []
    for token in tokens:
        if token.type == TokenType.NUMBER:
            parts.append(repr(token.value))
        else:
            parts.append(str(token.value))
    return ' '.join(parts)
