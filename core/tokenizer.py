"""core/tokenizer.py - 把计算器输入字符串切分为Token序列"""
import logging
import string

from core.errors import LexError
from core.token_system import (
    TokenType, OPERATOR_DEFINITIONS, FUNCTION_NAMES, CONSTANT_DEFINITIONS,
    LEFT_PAREN, RIGHT_PAREN, COMMA, number_token, operator_token, function_token
)

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = LETTERS | DIGITS
STRUCTURAL = {'(': LEFT_PAREN, ')': RIGHT_PAREN, ',': COMMA}

# 前一个Token属于这些类型时，'-' 视为负数字面量的开头
_UNARY_CONTEXT = frozenset({TokenType.LEFT_PAREN, TokenType.COMMA, TokenType.OPERATOR})


class Tokenizer:
    """词法分析器（无状态，全部为静态方法）"""

    @staticmethod
    def tokenize(text):
        """
        从左到右扫描输入
        Args:
            text: 原始表达式字符串（ASCII规范形式）
        Returns:
            Token元组
        Raises:
            LexError: 非法字符、未知标识符或数字格式错误
        """
        if not isinstance(text, str):
            raise LexError("expression must be a string")

        tokens = []
        i = 0
        n = len(text)

        while i < n:
            ch = text[i]

            if ch.isspace():
                i += 1
                continue

            if ch in STRUCTURAL:
                tokens.append(STRUCTURAL[ch])
                i += 1
                continue

            if ch == '-' and Tokenizer._is_unary_position(tokens) and Tokenizer._starts_number(text, i + 1):
                end = Tokenizer._scan_number(text, i + 1)
                tokens.append(Tokenizer._make_number(text, i, end))
                i = end
                continue

            if ch in OPERATOR_DEFINITIONS:
                tokens.append(operator_token(ch))
                i += 1
                continue

            if Tokenizer._starts_number(text, i):
                end = Tokenizer._scan_number(text, i)
                tokens.append(Tokenizer._make_number(text, i, end))
                i = end
                continue

            if ch in LETTERS:
                end = i + 1
                while end < n and text[end] in IDENTIFIER_CHARS:
                    end += 1
                tokens.append(Tokenizer._resolve_identifier(text[i:end].lower(), i))
                i = end
                continue

            raise LexError("unexpected character", position=i)

        logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
        return tuple(tokens)

    @staticmethod
    def _is_unary_position(tokens):
        return not tokens or tokens[-1].type in _UNARY_CONTEXT

    @staticmethod
    def _starts_number(text, i):
        """数字，或 '.' 后紧跟数字"""
        if i >= len(text):
            return False
        if text[i] in DIGITS:
            return True
        return text[i] == '.' and i + 1 < len(text) and text[i + 1] in DIGITS

    @staticmethod
    def _scan_number(text, i):
        """返回数字和小数点组成的最长连续片段的结束位置"""
        while i < len(text) and (text[i] in DIGITS or text[i] == '.'):
            i += 1
        return i

    @staticmethod
    def _make_number(text, start, end):
        literal = text[start:end]
        if literal.count('.') > 1:
            raise LexError("malformed number", position=start)
        return number_token(literal)

    @staticmethod
    def _resolve_identifier(name, position):
        if name in CONSTANT_DEFINITIONS:
            return number_token(CONSTANT_DEFINITIONS[name])
        if name in FUNCTION_NAMES:
            return function_token(name)
        raise LexError("unknown identifier", position=position)


def tokenize(text):
    return Tokenizer.tokenize(text)
