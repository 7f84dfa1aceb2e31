"""core/pipeline.py - 对外入口：tokenize -> to_rpn -> eval_rpn"""
import math
import logging

from core.errors import NonFiniteResult
from core.tokenizer import tokenize
from core.parser import to_rpn
from core.rpn_evaluator import eval_rpn

logger = logging.getLogger(__name__)


def evaluate(raw):
    """
    安全地计算计算器表达式，不调用任何代码解释器
    Args:
        raw: 规范ASCII形式的表达式（'*', '/', 'PI'）
    Returns:
        有限的float结果
    Raises:
        EvaluationError 的子类（LexError / ParseError / EvalError / NonFiniteResult）
    """
    result = eval_rpn(to_rpn(tokenize(raw)))
    if not math.isfinite(result):
        logger.debug(f"Non-finite result for {raw!r}: {result}")
        raise NonFiniteResult("result is not finite")
    return result
