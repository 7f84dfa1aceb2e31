"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.errors import EvalError
from core.token_system import TokenType
from core.operators import BINARY_OPERATORS, UNARY_FUNCTIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        单遍扫描RPN序列，使用操作数栈
        Args:
            token_sequence: to_rpn() 的输出
        Returns:
            float结果（可能为inf/NaN，由调用方做有限性检查）
        Raises:
            EvalError: 栈下溢、除零、函数参数越界
        """
        stack = []

        # 溢出/无效运算只产生inf/NaN，不打印numpy警告
        with np.errstate(all='ignore'):
            for token in token_sequence:
                if token.type == TokenType.NUMBER:
                    stack.append(token.value)

                elif token.type == TokenType.OPERATOR:
                    if len(stack) < 2:
                        logger.debug(f"Insufficient operands for {token.value}")
                        raise EvalError("invalid expression")
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(BINARY_OPERATORS[token.value](operand1, operand2))

                elif token.type == TokenType.FUNCTION:
                    if not stack:
                        logger.debug(f"Missing argument for {token.value}")
                        raise EvalError("invalid function argument")
                    operand = stack.pop()
                    stack.append(UNARY_FUNCTIONS[token.value](operand))

                else:
                    # 括号和逗号不应出现在RPN中
                    logger.debug(f"Unexpected token in RPN: {token!r}")
                    raise EvalError("invalid expression")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("invalid expression")
        return stack[0]


def eval_rpn(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
