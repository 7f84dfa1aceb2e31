"""core/parser.py - Shunting-yard：中缀Token序列转RPN"""
import logging

from core.errors import ParseError
from core.token_system import TokenType, Associativity, OPERATOR_DEFINITIONS, format_rpn

logger = logging.getLogger(__name__)


class ShuntingYardParser:
    """中缀 -> 逆波兰转换"""

    @staticmethod
    def _should_pop(top, incoming):
        """栈顶操作符是否应先于新操作符输出"""
        if top.type != TokenType.OPERATOR:
            return False
        top_info = OPERATOR_DEFINITIONS[top.value]
        new_info = OPERATOR_DEFINITIONS[incoming.value]
        if top_info.precedence > new_info.precedence:
            return True
        return (top_info.precedence == new_info.precedence
                and new_info.associativity == Associativity.LEFT)

    @staticmethod
    def to_rpn(tokens):
        """
        单遍扫描，输出序列 + 待处理栈
        Args:
            tokens: tokenize() 的输出
        Returns:
            只含 NUMBER / OPERATOR / FUNCTION 的Token元组
        Raises:
            ParseError: 括号不匹配或出现未知Token
        """
        output = []
        stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(token)

            elif token.type == TokenType.FUNCTION:
                # 等待参数的右括号
                stack.append(token)

            elif token.type == TokenType.OPERATOR:
                while stack and ShuntingYardParser._should_pop(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)

            elif token.type == TokenType.LEFT_PAREN:
                stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise ParseError("mismatched parentheses")
                stack.pop()
                # 函数绑定到刚闭合的参数
                if stack and stack[-1].type == TokenType.FUNCTION:
                    output.append(stack.pop())

            elif token.type == TokenType.COMMA:
                # 只支持单参数函数，逗号不参与分组
                continue

            else:
                raise ParseError(f"unexpected token: {token!r}")

        while stack:
            top = stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise ParseError("mismatched parentheses")
            output.append(top)

        logger.debug(f"RPN: {format_rpn(output)}")
        return tuple(output)


def to_rpn(tokens):
    return ShuntingYardParser.to_rpn(tokens)
